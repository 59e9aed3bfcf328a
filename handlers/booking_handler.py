"""
handlers/booking_handler.py
---------------------------
Booking a room and a customer's recent bookings.
"""

from db.session import Session
from handlers.console import Console
from services.booking_service import BookingService


def book_room_command(session: Session, console: Console) -> None:
    """
    Book a room for one day.

    The room number is asked again until it names a room of the hotel,
    and the date until the room is free on it.
    """
    service = BookingService(session.executor)
    customer_id = console.ask_int("Please enter userID", default=session.user_id)
    hotel_id = console.ask_int("Please enter the hotelID")

    room_number = console.ask_int("Please enter the room number")
    while not service.room_exists(hotel_id, room_number):
        console.say(f"Invalid room number! Hotel {hotel_id} has no room {room_number}.")
        room_number = console.ask_int("Enter a new room number")

    booking_date = console.ask_date("Please enter the booking date in YYYY-MM-DD format")
    while service.is_booked(hotel_id, room_number, booking_date):
        console.say(f"Room {room_number} is already booked on {booking_date}.")
        booking_date = console.ask_date("Enter another date in YYYY-MM-DD format")

    booking = service.book_room(customer_id, hotel_id, room_number, booking_date)
    console.say(f"Successfully booked room! Booking ID = {booking.id}")


def recent_bookings_command(session: Session, console: Console) -> None:
    customer_id = console.ask_int("Please enter Customer userID", default=session.user_id)
    bookings = BookingService(session.executor).recent_bookings(customer_id)
    console.show_table(bookings)
