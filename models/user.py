"""
models/user.py
--------------
Domain model for hotel system users.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """
    Represents a row of the Users table.

    Attributes:
        name: Display name.
        password: Plaintext password, compared verbatim at log in.
        user_type: 'Customer', 'Manager' or 'Admin'.
        id: Generated userID (None for new records).
    """
    name: str
    password: str
    user_type: str = "Customer"
    id: Optional[int] = None

    def is_manager(self) -> bool:
        """Returns True if this user manages hotels."""
        return self.user_type == "Manager"

    def __str__(self) -> str:
        return f"#{self.id} {self.name} ({self.user_type})"
