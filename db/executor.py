"""
db/executor.py
--------------
The only place SQL is sent to the server.

Every method opens a fresh cursor in a ``with`` block, so the cursor is
released before returning, also when the statement fails. Values are always
passed as bound parameters (``%s``), never formatted into the SQL text.
"""

import sys
from typing import Any, Optional, Sequence, TextIO

from models.result import ResultTable
from utils.logger import get_logger

logger = get_logger(__name__)


def _as_text(value: Any) -> Optional[str]:
    return None if value is None else str(value)


class StatementExecutor:
    """Runs statements against one connection and marshals the results."""

    def __init__(self, conn):
        self.conn = conn

    def execute(self, sql: str, params: Sequence = ()) -> int:
        """
        Run a mutating statement (INSERT/UPDATE/DELETE/CREATE/DROP).

        Returns:
            Number of rows affected as reported by the driver.
        """
        with self.conn.cursor() as cur:
            cur.execute(sql, params)
            return cur.rowcount

    def execute_returning(self, sql: str, params: Sequence = ()) -> Optional[tuple]:
        """
        Run an ``INSERT ... RETURNING`` statement.

        Returns:
            The first returned row with its raw driver values, or None.
        """
        with self.conn.cursor() as cur:
            cur.execute(sql, params)
            row = cur.fetchone()
            return tuple(row) if row else None

    def query(self, sql: str, params: Sequence = ()) -> list[list[Optional[str]]]:
        """Run a read statement and return its rows, values rendered as text."""
        with self.conn.cursor() as cur:
            cur.execute(sql, params)
            return [[_as_text(v) for v in row] for row in cur.fetchall()]

    def query_count(self, sql: str, params: Sequence = ()) -> int:
        """Run a read statement and return only the number of rows."""
        with self.conn.cursor() as cur:
            cur.execute(sql, params)
            return len(cur.fetchall())

    def query_table(self, sql: str, params: Sequence = ()) -> ResultTable:
        """Run a read statement and return rows together with column names."""
        with self.conn.cursor() as cur:
            cur.execute(sql, params)
            columns = [d[0] for d in cur.description] if cur.description else []
            rows = [[_as_text(v) for v in row] for row in cur.fetchall()]
        return ResultTable(columns=columns, rows=rows)

    def query_and_print(self, sql: str, params: Sequence = (), out: TextIO = None) -> int:
        """
        Run a read statement and dump it tab-separated.

        The header line is written only when at least one row comes back.

        Returns:
            Number of rows printed.
        """
        table = self.query_table(sql, params)
        stream = out or sys.stdout
        for line in table.to_lines():
            stream.write(line + "\n")
        return len(table)
