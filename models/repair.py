"""
models/repair.py
----------------
Domain model for room repair requests.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass
class RoomRepair:
    """
    A maintenance request sent to a company for one room.

    Attributes:
        company_id: Maintenance company doing the repair.
        hotel_id: Hotel the room belongs to.
        room_number: Room to repair.
        repair_date: Requested repair day.
        id: Generated repairID (None for new records).
    """
    company_id: int
    hotel_id: int
    room_number: int
    repair_date: date
    id: Optional[int] = None

    def __str__(self) -> str:
        return f"Repair #{self.id}: hotel {self.hotel_id}, room {self.room_number} by company {self.company_id} on {self.repair_date}"
