from __future__ import annotations

import logging
from typing import Sequence

from ..core.constants import PROVIDER_BATCH_LIMIT
from ..core.exceptions import QuotaError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, dump_json
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection, *, max_batch: int = PROVIDER_BATCH_LIMIT):
        self._conn_factory = conn_factory
        self._max_batch = int(max_batch)

    def commit_group(self, records: Sequence[AttendanceRecord]) -> None:
        if len(records) > self._max_batch:
            raise QuotaError(f"Write group of {len(records)} exceeds the {self._max_batch}-write limit")
        if not records:
            return

        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                """
                INSERT INTO attendance_records(record_date, student_id, dept, doc)
                VALUES(%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE dept=VALUES(dept), doc=VALUES(doc)
                """,
                [
                    (r.key.record_date, r.key.student_id, r.dept, dump_json(r.to_document()))
                    for r in records
                ],
            )
        logger.info("Committed %d attendance records", len(records))
