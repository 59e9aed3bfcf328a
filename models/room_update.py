"""
models/room_update.py
---------------------
Domain model for the room update audit log.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class RoomUpdate:
    """
    One RoomUpdatesLog entry written after a manager changes a room.

    Attributes:
        manager_id: userID of the manager who made the change.
        hotel_id: Hotel the room belongs to.
        room_number: Room that was changed.
        update_number: Generated sequence number (None for new records).
        update_date: Server timestamp of the change.
    """
    manager_id: int
    hotel_id: int
    room_number: int
    update_number: Optional[int] = None
    update_date: Optional[datetime] = None

    def __str__(self) -> str:
        return f"Update #{self.update_number}: hotel {self.hotel_id}, room {self.room_number} by manager {self.manager_id}"
