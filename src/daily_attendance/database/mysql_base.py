from __future__ import annotations

import json
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector

from ..core.exceptions import ConnectivityError
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield ``(conn, cursor)`` inside one transaction.

    Commits on clean exit, rolls back otherwise. Driver errors surface as
    ``ConnectivityError`` with the driver errno preserved.
    """

    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as exc:
        raise ConnectivityError(f"Cannot connect to database: {exc}", errno=exc.errno) from exc

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as exc:
        conn.rollback()
        raise ConnectivityError(f"Database error: {exc}", errno=exc.errno) from exc
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def load_json(value: Any) -> Any:
    """Decode a JSON column across connector implementations.

    mysql-connector can return JSON as str, bytes/bytearray, or already decoded.
    """

    if value is None:
        return None
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8")
    if isinstance(value, str):
        return json.loads(value)
    return value


def dump_json(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False)
