"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


# ── PostgreSQL ────────────────────────────────────────────
DB_HOST: str = os.getenv("DB_HOST", "localhost")
DB_PORT: int = int(os.getenv("DB_PORT", "5432"))
DB_NAME: str = os.getenv("DB_NAME", "hotel")
DB_USER: str = os.getenv("DB_USER", "postgres")
DB_PASS: str = os.getenv("DB_PASS", "")

# ── Domain ────────────────────────────────────────────────
SEARCH_RADIUS: float = float(os.getenv("SEARCH_RADIUS", "30.0"))
RECENT_LIMIT: int = int(os.getenv("RECENT_LIMIT", "5"))
REGULAR_CUSTOMERS_LIMIT: int = int(os.getenv("REGULAR_CUSTOMERS_LIMIT", "5"))
DEFAULT_USER_TYPE: str = "Customer"
MANAGER_USER_TYPE: str = "Manager"
# User types allowed into the manager commands.
STAFF_USER_TYPES: tuple = (MANAGER_USER_TYPE, "Admin")

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING").upper()
LOG_FILE: str = os.getenv("LOG_FILE", "")
