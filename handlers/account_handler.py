"""
handlers/account_handler.py
---------------------------
Main menu commands: create an account, log in, log out.
"""

from db.session import Session
from handlers.console import Console
from services.user_service import UserService
from utils.logger import get_logger

logger = get_logger(__name__)


def create_user_command(session: Session, console: Console) -> None:
    """Register a new customer and show the generated userID."""
    name = console.ask("Enter name")
    password = console.ask("Enter password")
    user = UserService(session.executor).create_user(name, password)
    console.say(f"User successfully created with userID = {user.id}")


def log_in_command(session: Session, console: Console) -> None:
    """Check credentials and, on success, attach the user to the session."""
    user_id = console.ask_int("Enter userID")
    password = console.ask("Enter password")
    user = UserService(session.executor).log_in(user_id, password)
    if user is None:
        console.say("Invalid userID or password.")
        return
    session.login(user.id, user.user_type)
    console.say(f"Welcome, {user.name}!")


def log_out_command(session: Session, console: Console) -> None:
    session.logout()
    console.say("Logged out.")
