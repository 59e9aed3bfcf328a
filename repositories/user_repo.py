"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
"""

from typing import Optional

import psycopg2

from db.executor import StatementExecutor
from models.user import User
from utils.logger import get_logger

logger = get_logger(__name__)


class UserRepository:
    """Repository for the Users table."""

    def __init__(self, executor: StatementExecutor):
        self.executor = executor

    def add(self, user: User) -> User:
        """
        Insert a new user. The userID comes back from the sequence in the
        same statement, so concurrent inserts cannot observe each other's ID.

        Args:
            user: The User to persist.

        Returns:
            The same User with its `id` populated.
        """
        sql = """
            INSERT INTO Users (name, password, userType)
            VALUES (%s, %s, %s)
            RETURNING userID;
        """
        try:
            row = self.executor.execute_returning(sql, (user.name, user.password, user.user_type))
            user.id = int(row[0])
            logger.info(f"Created user #{user.id} ({user.user_type})")
            return user
        except psycopg2.Error as e:
            logger.error(f"Failed to create user {user.name!r}: {e}")
            raise

    def find_by_credentials(self, user_id: int, password: str) -> Optional[User]:
        """
        Fetch the user whose ID and password both match exactly.

        Returns:
            User or None.
        """
        sql = """
            SELECT userID, name, password, userType
            FROM Users
            WHERE userID = %s AND password = %s;
        """
        rows = self.executor.query(sql, (user_id, password))
        if not rows:
            return None
        r = rows[0]
        return User(id=int(r[0]), name=r[1], password=r[2], user_type=r[3])
