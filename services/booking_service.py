"""
services/booking_service.py
---------------------------
Booking rooms and a customer's booking history.
"""

from datetime import date

from psycopg2 import errors

import config
from db.executor import StatementExecutor
from models.booking import Booking
from models.result import ResultTable
from repositories.booking_repo import BookingRepository
from repositories.room_repo import RoomRepository
from services.exceptions import RoomNotFound, RoomUnavailable
from utils.logger import get_logger

logger = get_logger(__name__)


class BookingService:
    """
    Handles room bookings.

    Workflow of a booking:
        1. The shell asks for a room until `room_exists` holds.
        2. The shell asks for a date until `is_booked` is False.
        3. `book_room` checks both again and inserts.
    The UNIQUE (hotelID, roomNumber, bookingDate) constraint catches a
    booking that slips in between the check and the insert.
    """

    def __init__(self, executor: StatementExecutor, recent_limit: int = config.RECENT_LIMIT):
        self.repo = BookingRepository(executor)
        self.rooms = RoomRepository(executor)
        self.recent_limit = recent_limit

    def room_exists(self, hotel_id: int, room_number: int) -> bool:
        return self.rooms.exists(hotel_id, room_number)

    def is_booked(self, hotel_id: int, room_number: int, booking_date: date) -> bool:
        return self.repo.is_booked(hotel_id, room_number, booking_date)

    def book_room(self, customer_id: int, hotel_id: int,
                  room_number: int, booking_date: date) -> Booking:
        """
        Book a room for one day.

        Returns:
            The saved Booking with its generated bookingID.

        Raises:
            RoomNotFound: The room does not exist.
            RoomUnavailable: The room is already booked that day.
        """
        if not self.room_exists(hotel_id, room_number):
            raise RoomNotFound(hotel_id, room_number)
        if self.is_booked(hotel_id, room_number, booking_date):
            raise RoomUnavailable(hotel_id, room_number, booking_date)

        try:
            return self.repo.add(Booking(
                customer_id=customer_id,
                hotel_id=hotel_id,
                room_number=room_number,
                booking_date=booking_date,
            ))
        except errors.UniqueViolation as e:
            logger.warning(f"Lost booking race for room {room_number} of hotel {hotel_id}: {e}")
            raise RoomUnavailable(hotel_id, room_number, booking_date) from e

    def recent_bookings(self, customer_id: int) -> ResultTable:
        """The customer's most recent bookings, newest first."""
        return self.repo.recent_for_customer(customer_id, self.recent_limit)
