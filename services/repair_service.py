"""
services/repair_service.py
--------------------------
Room repair requests sent to maintenance companies.
"""

from datetime import date

from db.executor import StatementExecutor
from models.repair import RoomRepair
from models.result import ResultTable
from repositories.repair_repo import RepairRepository


class RepairService:
    """Files repair requests and lists a hotel's repair history."""

    def __init__(self, executor: StatementExecutor):
        self.repo = RepairRepository(executor)

    def place_request(self, hotel_id: int, room_number: int,
                      company_id: int, repair_date: date) -> RoomRepair:
        """Record a repair request. Returns it with its generated repairID."""
        return self.repo.add(RoomRepair(
            company_id=company_id,
            hotel_id=hotel_id,
            room_number=room_number,
            repair_date=repair_date,
        ))

    def repair_history(self, hotel_id: int) -> ResultTable:
        return self.repo.for_hotel(hotel_id)
