"""
repositories/update_log_repo.py
--------------------------------
Data access layer for the RoomUpdatesLog audit trail.
"""

import psycopg2

from db.executor import StatementExecutor
from models.result import ResultTable
from models.room_update import RoomUpdate
from utils.logger import get_logger

logger = get_logger(__name__)


class UpdateLogRepository:
    """Append-only repository for RoomUpdatesLog."""

    def __init__(self, executor: StatementExecutor):
        self.executor = executor

    def add(self, update: RoomUpdate) -> RoomUpdate:
        """
        Append a log entry stamped with the server's current time.

        Returns:
            The same RoomUpdate with `update_number` and `update_date` populated.
        """
        sql = """
            INSERT INTO RoomUpdatesLog (managerID, hotelID, roomNumber, updateDate)
            VALUES (%s, %s, %s, CURRENT_TIMESTAMP)
            RETURNING updateNumber, updateDate;
        """
        try:
            row = self.executor.execute_returning(sql, (
                update.manager_id, update.hotel_id, update.room_number,
            ))
            update.update_number = int(row[0])
            update.update_date = row[1]
            logger.info(f"Logged room update #{update.update_number} by manager {update.manager_id}")
            return update
        except psycopg2.Error as e:
            logger.error(f"Failed to log room update: {e}")
            raise

    def recent_for_manager(self, manager_id: int, limit: int) -> ResultTable:
        """Latest log entries written by one manager, newest first."""
        sql = """
            SELECT updateNumber, managerID, hotelID, roomNumber, updateDate
            FROM RoomUpdatesLog
            WHERE managerID = %s
            ORDER BY updateNumber DESC
            LIMIT %s;
        """
        return self.executor.query_table(sql, (manager_id, limit))
