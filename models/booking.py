"""
models/booking.py
-----------------
Domain model for room bookings.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass
class Booking:
    """
    Represents one room booked by a customer for one day.

    Attributes:
        customer_id: userID of the customer.
        hotel_id: Hotel the room belongs to.
        room_number: Room number within the hotel.
        booking_date: Day the room is booked for.
        id: Generated bookingID (None for new records).
    """
    customer_id: int
    hotel_id: int
    room_number: int
    booking_date: date
    id: Optional[int] = None

    def __str__(self) -> str:
        return f"Booking #{self.id}: hotel {self.hotel_id}, room {self.room_number} on {self.booking_date}"
