"""
handlers/menu.py
----------------
Menu dispatch tables and the interactive loop.

Each menu maps a command key to a Command; a handler is any callable
taking ``(session, console)``. A Command without a handler leaves its menu.
"""

from dataclasses import dataclass
from typing import Callable, Optional

import psycopg2

from db.session import Session
from handlers.account_handler import create_user_command, log_in_command, log_out_command
from handlers.booking_handler import book_room_command, recent_bookings_command
from handlers.console import Console
from handlers.hotel_handler import view_hotels_command, view_rooms_command
from handlers.manager_handler import (
    booking_history_command,
    recent_updates_command,
    regular_customers_command,
    update_room_command,
)
from handlers.repair_handler import place_repair_command, repair_history_command
from services.exceptions import HotelDeskError
from utils.logger import get_logger

logger = get_logger(__name__)

Handler = Callable[[Session, Console], None]


@dataclass(frozen=True)
class Command:
    key: str
    label: str
    handler: Optional[Handler] = None


def _menu(*commands: Command) -> dict[str, Command]:
    return {c.key: c for c in commands}


MAIN_MENU = _menu(
    Command("1", "Create user", create_user_command),
    Command("2", "Log in", log_in_command),
    Command("9", "< EXIT"),
)

USER_MENU = _menu(
    Command("1", "View Hotels within 30 units", view_hotels_command),
    Command("2", "View Rooms", view_rooms_command),
    Command("3", "Book a Room", book_room_command),
    Command("4", "View recent booking history", recent_bookings_command),
    Command("5", "Update Room Information", update_room_command),
    Command("6", "View 5 recent Room Updates Info", recent_updates_command),
    Command("7", "View booking history of the hotel", booking_history_command),
    Command("8", "View 5 regular Customers", regular_customers_command),
    Command("9", "Place room repair Request to a company", place_repair_command),
    Command("10", "View room repair Requests history", repair_history_command),
    Command("20", "Log out", log_out_command),
)


def render(console: Console, menu: dict[str, Command]) -> None:
    console.say("MAIN MENU")
    console.say("---------")
    for command in menu.values():
        console.say(f"{command.key}. {command.label}")


def choose(console: Console, menu: dict[str, Command]) -> Optional[Command]:
    """Show the menu and read a numeric choice. Returns None for an unknown key."""
    render(console, menu)
    choice = console.ask_int("Please make your choice")
    return menu.get(str(choice))


def dispatch(command: Command, session: Session, console: Console) -> None:
    """
    Run one command. Database, parse and domain errors are reported and
    swallowed so the shell keeps going; end of input is not.
    """
    try:
        command.handler(session, console)
    except HotelDeskError as e:
        logger.info(f"Command {command.label!r} refused: {e}")
        console.say(f"Sorry, {e}")
    except psycopg2.Error as e:
        logger.error(f"Database error in {command.label!r}: {e}")
        console.say(f"Database error: {str(e).strip()}")
    except ValueError as e:
        logger.error(f"Invalid value in {command.label!r}: {e}")
        console.say(f"Invalid value: {e}")


def run_user_menu(session: Session, console: Console) -> None:
    """Loop over the user menu until the session logs out."""
    while session.is_logged_in:
        command = choose(console, USER_MENU)
        if command is None:
            console.say("Unrecognized choice!")
            continue
        dispatch(command, session, console)


def run(session: Session, console: Console) -> None:
    """
    Main loop. Returns when the exit option is chosen.

    Raises:
        EOFError: Input ended.
    """
    while True:
        command = choose(console, MAIN_MENU)
        if command is None:
            console.say("Unrecognized choice!")
            continue
        if command.handler is None:
            return
        dispatch(command, session, console)
        run_user_menu(session, console)
