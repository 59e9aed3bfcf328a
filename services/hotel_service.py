"""
services/hotel_service.py
-------------------------
Browsing hotels and rooms.
"""

import config
from db.executor import StatementExecutor
from models.result import ResultTable
from repositories.hotel_repo import HotelRepository


class HotelService:
    """Read-only hotel and room listings."""

    def __init__(self, executor: StatementExecutor, radius: float = config.SEARCH_RADIUS):
        self.repo = HotelRepository(executor)
        self.radius = radius

    def hotels_near(self, latitude: float, longitude: float) -> ResultTable:
        """Hotels whose Euclidean distance to the point is strictly below the radius."""
        return self.repo.find_within(latitude, longitude, self.radius)

    def rooms_of(self, hotel_id: int) -> ResultTable:
        return self.repo.rooms(hotel_id)
