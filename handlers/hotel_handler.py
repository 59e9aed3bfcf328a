"""
handlers/hotel_handler.py
-------------------------
Hotel and room listings.
"""

from db.session import Session
from handlers.console import Console
from services.hotel_service import HotelService


def view_hotels_command(session: Session, console: Console) -> None:
    """List hotels near the user's current position."""
    latitude = console.ask_float("Please enter your current latitude")
    longitude = console.ask_float("Please enter your current longitude")
    service = HotelService(session.executor)
    hotels = service.hotels_near(latitude, longitude)
    console.show_table(hotels, empty_message=None)
    console.say(f"Hotels within {service.radius:g} units of current location: {len(hotels)}")


def view_rooms_command(session: Session, console: Console) -> None:
    hotel_id = console.ask_int("Please enter the hotelID")
    rooms = HotelService(session.executor).rooms_of(hotel_id)
    console.show_table(rooms, empty_message=None)
    console.say(f"Number of rooms in the hotel: {len(rooms)}")
