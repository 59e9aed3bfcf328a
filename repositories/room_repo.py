"""
repositories/room_repo.py
--------------------------
Data access layer for individual rooms.
"""

import psycopg2

from db.executor import StatementExecutor
from utils.logger import get_logger

logger = get_logger(__name__)


class RoomRepository:
    """Repository for the Rooms table."""

    def __init__(self, executor: StatementExecutor):
        self.executor = executor

    def exists(self, hotel_id: int, room_number: int) -> bool:
        sql = "SELECT roomNumber FROM Rooms WHERE hotelID = %s AND roomNumber = %s;"
        return self.executor.query_count(sql, (hotel_id, room_number)) > 0

    def update_price_and_image(self, hotel_id: int, room_number: int,
                               price: float, image_url: str) -> bool:
        """
        Set a room's price and image URL.

        Returns:
            True if the room exists and was updated, False otherwise.
        """
        sql = """
            UPDATE Rooms
            SET price = %s, imageURL = %s
            WHERE hotelID = %s AND roomNumber = %s;
        """
        try:
            updated = self.executor.execute(sql, (price, image_url, hotel_id, room_number)) > 0
            if updated:
                logger.info(f"Updated room {room_number} of hotel {hotel_id}")
            return updated
        except psycopg2.Error as e:
            logger.error(f"Failed to update room {room_number} of hotel {hotel_id}: {e}")
            raise
