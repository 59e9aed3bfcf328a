"""
db/session.py
-------------
Per-process session: the connection, its statement executor, and the
identity of whoever is logged in. Passed explicitly to every command.
"""

from dataclasses import dataclass
from typing import Optional

import config
from db.connection import close_connection, connect
from db.executor import StatementExecutor
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class Session:
    """
    Attributes:
        conn: The open psycopg2 connection (None once closed).
        executor: StatementExecutor bound to ``conn``.
        user_id: Logged-in user's ID, None when nobody is logged in.
        user_type: Logged-in user's type ('Customer', 'Manager', ...).
    """
    conn: object
    executor: StatementExecutor
    user_id: Optional[int] = None
    user_type: Optional[str] = None

    @classmethod
    def open(cls, host: str, port: int, dbname: str, user: str, password: str = "") -> "Session":
        """Connect and wrap the connection. Raises psycopg2.OperationalError."""
        conn = connect(host, port, dbname, user, password)
        return cls.from_connection(conn)

    @classmethod
    def from_connection(cls, conn) -> "Session":
        return cls(conn=conn, executor=StatementExecutor(conn))

    @property
    def is_logged_in(self) -> bool:
        return self.user_id is not None

    @property
    def is_manager(self) -> bool:
        return self.user_type in config.STAFF_USER_TYPES

    def login(self, user_id: int, user_type: Optional[str]) -> None:
        self.user_id = user_id
        self.user_type = user_type
        logger.info(f"User {user_id} ({user_type}) logged in.")

    def logout(self) -> None:
        if self.user_id is not None:
            logger.info(f"User {self.user_id} logged out.")
        self.user_id = None
        self.user_type = None

    def close(self) -> None:
        """Drop identity and close the connection. Idempotent."""
        self.logout()
        close_connection(self.conn)
        self.conn = None
