"""
handlers/manager_handler.py
---------------------------
Commands reserved for hotel managers.
"""

from db.session import Session
from handlers.console import Console
from security.auth import manager_only
from services.manager_service import ManagerService
from utils.logger import get_logger

logger = get_logger(__name__)


@manager_only
def update_room_command(session: Session, console: Console) -> None:
    """Change a room's price and image URL as the logged-in manager."""
    manager_id = console.ask_int("Please enter the Manager userID", default=session.user_id)
    if manager_id != session.user_id:
        logger.warning(f"User {session.user_id} tried to update rooms as manager {manager_id}")
        console.say("You can only update rooms under your own manager ID.")
        return
    hotel_id = console.ask_int("Please enter the hotelID")
    room_number = console.ask_int("Please enter the room number")
    price = console.ask_float("Please enter the new price of the room")
    image_url = console.ask("Please enter the new image url of the room").strip()
    update = ManagerService(session.executor).update_room_info(
        session.user_id, hotel_id, room_number, price, image_url
    )
    console.say(f"Room info updated (update #{update.update_number}).")


@manager_only
def recent_updates_command(session: Session, console: Console) -> None:
    manager_id = console.ask_int("Please enter your Manager ID", default=session.user_id)
    console.show_table(ManagerService(session.executor).recent_updates(manager_id))


@manager_only
def booking_history_command(session: Session, console: Console) -> None:
    hotel_id = console.ask_int("Please enter the hotelID of the hotel you manage")
    console.show_table(ManagerService(session.executor).booking_history(hotel_id))


@manager_only
def regular_customers_command(session: Session, console: Console) -> None:
    hotel_id = console.ask_int("Please enter the hotelID of the hotel you manage")
    console.show_table(ManagerService(session.executor).regular_customers(hotel_id))
