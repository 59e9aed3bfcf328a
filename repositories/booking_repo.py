"""
repositories/booking_repo.py
-----------------------------
Data access layer for room bookings.
All SQL queries related to the `RoomBookings` table live here.
"""

from datetime import date

import psycopg2

from db.executor import StatementExecutor
from models.booking import Booking
from models.result import ResultTable
from utils.logger import get_logger

logger = get_logger(__name__)


class BookingRepository:
    """Repository for the RoomBookings table."""

    def __init__(self, executor: StatementExecutor):
        self.executor = executor

    # ── CREATE ────────────────────────────────────────────

    def add(self, booking: Booking) -> Booking:
        """
        Insert a new booking.

        Args:
            booking: The Booking to persist.

        Returns:
            The same Booking with its `id` populated from the sequence.

        Raises:
            psycopg2.errors.UniqueViolation: If the room is already booked that day.
        """
        sql = """
            INSERT INTO RoomBookings (customerID, hotelID, roomNumber, bookingDate)
            VALUES (%s, %s, %s, %s)
            RETURNING bookingID;
        """
        try:
            row = self.executor.execute_returning(sql, (
                booking.customer_id, booking.hotel_id,
                booking.room_number, booking.booking_date,
            ))
            booking.id = int(row[0])
            logger.info(f"Added booking #{booking.id} for customer {booking.customer_id}")
            return booking
        except psycopg2.Error as e:
            logger.error(f"Failed to add booking: {e}")
            raise

    # ── READ ──────────────────────────────────────────────

    def is_booked(self, hotel_id: int, room_number: int, booking_date: date) -> bool:
        """True if the room already has a booking on that date."""
        sql = """
            SELECT bookingID FROM RoomBookings
            WHERE hotelID = %s AND roomNumber = %s AND bookingDate = %s;
        """
        return self.executor.query_count(sql, (hotel_id, room_number, booking_date)) > 0

    def recent_for_customer(self, customer_id: int, limit: int) -> ResultTable:
        """
        A customer's latest bookings with the room's current price.

        Returns:
            Columns: hotelID, roomNumber, price, bookingDate; newest first.
        """
        sql = """
            SELECT RB.hotelID, RB.roomNumber, R.price, RB.bookingDate
            FROM RoomBookings RB
            JOIN Rooms R ON R.hotelID = RB.hotelID AND R.roomNumber = RB.roomNumber
            WHERE RB.customerID = %s
            ORDER BY RB.bookingDate DESC, RB.bookingID DESC
            LIMIT %s;
        """
        return self.executor.query_table(sql, (customer_id, limit))

    def for_hotel(self, hotel_id: int) -> ResultTable:
        """Every booking ever made at one hotel, oldest first."""
        sql = """
            SELECT bookingID, customerID, hotelID, roomNumber, bookingDate
            FROM RoomBookings
            WHERE hotelID = %s
            ORDER BY bookingDate, bookingID;
        """
        return self.executor.query_table(sql, (hotel_id,))

    def top_customers(self, hotel_id: int, limit: int) -> ResultTable:
        """
        Customers with the most bookings at one hotel.

        Returns:
            Columns: customerID, bookings; highest count first.
        """
        sql = """
            SELECT customerID, COUNT(*) AS bookings
            FROM RoomBookings
            WHERE hotelID = %s
            GROUP BY customerID
            ORDER BY bookings DESC, customerID
            LIMIT %s;
        """
        return self.executor.query_table(sql, (hotel_id, limit))
