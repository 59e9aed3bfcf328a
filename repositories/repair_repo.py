"""
repositories/repair_repo.py
----------------------------
Data access layer for room repair requests.
"""

import psycopg2

from db.executor import StatementExecutor
from models.repair import RoomRepair
from models.result import ResultTable
from utils.logger import get_logger

logger = get_logger(__name__)


class RepairRepository:
    """Repository for the RoomRepairs table."""

    def __init__(self, executor: StatementExecutor):
        self.executor = executor

    def add(self, repair: RoomRepair) -> RoomRepair:
        """
        Insert a repair request.

        Returns:
            The same RoomRepair with its `id` populated.
        """
        sql = """
            INSERT INTO RoomRepairs (companyID, hotelID, roomNumber, repairDate)
            VALUES (%s, %s, %s, %s)
            RETURNING repairID;
        """
        try:
            row = self.executor.execute_returning(sql, (
                repair.company_id, repair.hotel_id,
                repair.room_number, repair.repair_date,
            ))
            repair.id = int(row[0])
            logger.info(f"Added repair request #{repair.id} for hotel {repair.hotel_id}")
            return repair
        except psycopg2.Error as e:
            logger.error(f"Failed to add repair request: {e}")
            raise

    def for_hotel(self, hotel_id: int) -> ResultTable:
        sql = """
            SELECT repairID, companyID, hotelID, roomNumber, repairDate
            FROM RoomRepairs
            WHERE hotelID = %s
            ORDER BY repairDate, repairID;
        """
        return self.executor.query_table(sql, (hotel_id,))
