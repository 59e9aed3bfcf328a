"""
services/user_service.py
------------------------
Account creation and log in.
"""

from typing import Optional

import config
from db.executor import StatementExecutor
from models.user import User
from repositories.user_repo import UserRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class UserService:
    """Creates customer accounts and checks credentials."""

    def __init__(self, executor: StatementExecutor):
        self.repo = UserRepository(executor)

    def create_user(self, name: str, password: str) -> User:
        """
        Register a new customer. Self-service accounts are always customers;
        managers are seeded by the hotel operator.

        Returns:
            The saved User with its generated userID.
        """
        name = name.strip()
        if not name:
            raise ValueError("Name must not be empty.")
        if not password:
            raise ValueError("Password must not be empty.")
        return self.repo.add(User(name=name, password=password, user_type=config.DEFAULT_USER_TYPE))

    def log_in(self, user_id: int, password: str) -> Optional[User]:
        """Return the user iff both userID and password match exactly, else None."""
        user = self.repo.find_by_credentials(user_id, password)
        if user is None:
            logger.warning(f"Failed log in attempt for userID {user_id}")
        return user
