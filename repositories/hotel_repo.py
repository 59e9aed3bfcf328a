"""
repositories/hotel_repo.py
---------------------------
Data access layer for hotels and their rooms.
"""

from db.executor import StatementExecutor
from models.result import ResultTable
from utils.logger import get_logger

logger = get_logger(__name__)


class HotelRepository:
    """Read-only queries on the Hotel and Rooms tables."""

    def __init__(self, executor: StatementExecutor):
        self.executor = executor

    def find_within(self, latitude: float, longitude: float, radius: float) -> ResultTable:
        """
        Hotels strictly closer than `radius` to the given point, measured by
        the server-side ``calculate_distance`` function.

        Returns:
            Columns: hotelName, latitude, longitude.
        """
        sql = """
            SELECT hotelName, latitude, longitude
            FROM Hotel
            WHERE calculate_distance(%s, %s, latitude, longitude) < %s
            ORDER BY hotelID;
        """
        return self.executor.query_table(sql, (latitude, longitude, radius))

    def rooms(self, hotel_id: int) -> ResultTable:
        """
        All rooms of one hotel.

        Returns:
            Columns: hotelName, roomNumber, price, imageURL.
        """
        sql = """
            SELECT H.hotelName, R.roomNumber, R.price, R.imageURL
            FROM Hotel H
            JOIN Rooms R ON R.hotelID = H.hotelID
            WHERE R.hotelID = %s
            ORDER BY R.roomNumber;
        """
        return self.executor.query_table(sql, (hotel_id,))

    def is_managed_by(self, hotel_id: int, manager_id: int) -> bool:
        """True if `manager_id` is the hotel's managerUserID."""
        sql = "SELECT hotelID FROM Hotel WHERE hotelID = %s AND managerUserID = %s;"
        return self.executor.query_count(sql, (hotel_id, manager_id)) > 0
