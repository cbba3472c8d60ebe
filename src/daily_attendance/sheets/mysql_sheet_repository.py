from __future__ import annotations

from typing import Optional, Sequence

from ..core.exceptions import ConnectivityError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import SheetKey, SheetMetadata
from .repository import SheetRepository

_COLUMNS = "dept, sheet_date, storage_path, signed_url, created_at"


def _to_metadata(r: dict) -> SheetMetadata:
    return SheetMetadata(
        key=SheetKey(dept=r["dept"], sheet_date=r["sheet_date"]),
        storage_path=r["storage_path"],
        signed_url=r["signed_url"],
        created_at=r["created_at"],
    )


class MySQLSheetRepository(SheetRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def upsert(self, key: SheetKey, *, storage_path: str, signed_url: str) -> SheetMetadata:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_sheets(dept, sheet_date, storage_path, signed_url, created_at)
                VALUES(%s,%s,%s,%s,CURRENT_TIMESTAMP)
                ON DUPLICATE KEY UPDATE
                    storage_path=VALUES(storage_path),
                    signed_url=VALUES(signed_url),
                    created_at=CURRENT_TIMESTAMP
                """,
                (key.dept, key.sheet_date, storage_path, signed_url),
            )
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance_sheets WHERE dept=%s AND sheet_date=%s",
                (key.dept, key.sheet_date),
            )
            r = fetchone(cur)
            if not r:
                raise ConnectivityError(f"Sheet metadata {key} was not readable after upsert")
            return _to_metadata(r)

    def get(self, key: SheetKey) -> Optional[SheetMetadata]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance_sheets WHERE dept=%s AND sheet_date=%s",
                (key.dept, key.sheet_date),
            )
            r = fetchone(cur)
            return _to_metadata(r) if r else None

    def list_recent(self, dept: str, *, limit: int) -> Sequence[SheetMetadata]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_sheets
                WHERE dept=%s
                ORDER BY sheet_date DESC
                LIMIT %s
                """,
                (dept, int(limit)),
            )
            return [_to_metadata(r) for r in fetchall(cur)]
