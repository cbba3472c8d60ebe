from __future__ import annotations

from typing import Any, Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, load_json
from .repository import ScheduleRepository


class MySQLScheduleRepository(ScheduleRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_timetable(self, dept: str) -> Optional[dict[str, Any]]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT doc FROM timetables WHERE dept=%s", (dept,))
            r = fetchone(cur)
            if not r:
                return None
            doc = load_json(r["doc"])
            return doc if isinstance(doc, dict) else {}
