"""
db/connection.py
----------------
Opens and closes the one PostgreSQL connection held for the process lifetime.
Statements are autocommitted; there is no pool.
"""

import psycopg2

from utils.logger import get_logger

logger = get_logger(__name__)


def connect(host: str, port: int, dbname: str, user: str, password: str = ""):
    """
    Open a database connection in autocommit mode.

    Args:
        host: Server hostname.
        port: Server port.
        dbname: Database name.
        user: Login role.
        password: Login password (may be empty for trust/peer auth).

    Returns:
        A psycopg2 connection object.

    Raises:
        psycopg2.OperationalError: If the database is unreachable.
    """
    try:
        conn = psycopg2.connect(
            host=host, port=port, dbname=dbname, user=user, password=password
        )
    except psycopg2.OperationalError as e:
        logger.error(f"Unable to connect to {dbname} at {host}:{port}: {e}")
        raise
    conn.autocommit = True
    logger.info(f"Connected to postgresql://{user}@{host}:{port}/{dbname}")
    return conn


def close_connection(conn) -> None:
    """Close the connection if it is open. Errors are ignored; safe to call twice."""
    if conn is None or conn.closed:
        return
    try:
        conn.close()
        logger.info("Database connection closed.")
    except psycopg2.Error as e:
        logger.warning(f"Ignoring error while closing connection: {e}")
