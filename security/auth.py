"""
security/auth.py
-----------------
Authorization guard for shell commands.
Blocks manager commands for users who are not managers.
"""

from functools import wraps
from typing import Callable

from utils.logger import get_logger

logger = get_logger(__name__)


def manager_only(func: Callable):
    """
    Decorator that restricts a command handler to logged-in managers and admins.

    Usage:
        @manager_only
        def my_handler(session, console):
            ...

    Behavior:
        - Nobody logged in, or a customer: the handler does not run,
          the user is told why and the attempt is logged.
        - Hotel ownership is checked separately by the services that need it.
    """
    @wraps(func)
    def wrapper(session, console, *args, **kwargs):
        if not session.is_manager:
            logger.warning(
                f"Refused {func.__name__} for user_id={session.user_id}, "
                f"user_type={session.user_type}"
            )
            console.say("This option is only available to hotel managers.")
            return None
        return func(session, console, *args, **kwargs)

    return wrapper
