"""
services/manager_service.py
---------------------------
Operations used by hotel managers: changing rooms and reviewing activity.
"""

import math

import config
from db.executor import StatementExecutor
from models.result import ResultTable
from models.room_update import RoomUpdate
from repositories.booking_repo import BookingRepository
from repositories.hotel_repo import HotelRepository
from repositories.room_repo import RoomRepository
from repositories.update_log_repo import UpdateLogRepository
from services.exceptions import NotHotelManager, RoomNotFound
from utils.logger import get_logger

logger = get_logger(__name__)


class ManagerService:
    """Room maintenance and hotel reports for managers."""

    def __init__(self, executor: StatementExecutor,
                 recent_limit: int = config.RECENT_LIMIT,
                 regulars_limit: int = config.REGULAR_CUSTOMERS_LIMIT):
        self.hotels = HotelRepository(executor)
        self.rooms = RoomRepository(executor)
        self.bookings = BookingRepository(executor)
        self.update_log = UpdateLogRepository(executor)
        self.recent_limit = recent_limit
        self.regulars_limit = regulars_limit

    def update_room_info(self, manager_id: int, hotel_id: int, room_number: int,
                         price: float, image_url: str) -> RoomUpdate:
        """
        Change a room's price and image, then record the change in RoomUpdatesLog.

        The three statements (ownership check, update, log insert) are
        autocommitted one by one.

        Returns:
            The RoomUpdatesLog entry that was written.

        Raises:
            ValueError: Negative, infinite or NaN price.
            NotHotelManager: `manager_id` does not manage `hotel_id`.
            RoomNotFound: No such room in that hotel.
        """
        if not math.isfinite(price) or price < 0:
            raise ValueError("Price must be a finite, non-negative number.")
        if not self.hotels.is_managed_by(hotel_id, manager_id):
            logger.warning(f"User {manager_id} tried to update hotel {hotel_id} without managing it")
            raise NotHotelManager(manager_id, hotel_id)
        if not self.rooms.update_price_and_image(hotel_id, room_number, price, image_url):
            raise RoomNotFound(hotel_id, room_number)
        return self.update_log.add(RoomUpdate(
            manager_id=manager_id, hotel_id=hotel_id, room_number=room_number,
        ))

    def recent_updates(self, manager_id: int) -> ResultTable:
        return self.update_log.recent_for_manager(manager_id, self.recent_limit)

    def booking_history(self, hotel_id: int) -> ResultTable:
        return self.bookings.for_hotel(hotel_id)

    def regular_customers(self, hotel_id: int) -> ResultTable:
        """Customers with the most bookings at the hotel, most frequent first."""
        return self.bookings.top_customers(hotel_id, self.regulars_limit)
