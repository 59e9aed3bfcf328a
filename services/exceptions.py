"""
services/exceptions.py
----------------------
Domain errors raised by the services. The shell reports them and carries on.
"""

from datetime import date
from typing import Optional


class HotelDeskError(Exception):
    """Base class for recoverable domain errors."""


class RoomNotFound(HotelDeskError):
    """Thrown when (hotelID, roomNumber) does not name an existing room"""

    def __init__(self, hotel_id: int, room_number: int) -> None:
        super().__init__(f"Room {room_number} does not exist in hotel {hotel_id}.")
        self.hotel_id = hotel_id
        self.room_number = room_number


class RoomUnavailable(HotelDeskError):
    """Thrown when the room already has a booking on the requested date"""

    def __init__(
            self,
            hotel_id: int,
            room_number: int,
            booking_date: Optional[date] = None
    ) -> None:
        when = f" on {booking_date}" if booking_date else ""
        super().__init__(f"Room {room_number} of hotel {hotel_id} isn't available{when}.")
        self.hotel_id = hotel_id
        self.room_number = room_number
        self.booking_date = booking_date


class NotHotelManager(HotelDeskError):
    """Thrown when a user tries to change a hotel they do not manage"""

    def __init__(self, manager_id: int, hotel_id: int) -> None:
        super().__init__(f"User {manager_id} is not the manager of hotel {hotel_id}.")
        self.manager_id = manager_id
        self.hotel_id = hotel_id
