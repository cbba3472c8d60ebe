from __future__ import annotations

from typing import Sequence

from mysql.connector import errorcode

from ..core.exceptions import ConnectivityError, OrderingUnavailableError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, load_json
from .model import Student
from .repository import StudentRepository


def _to_student(r: dict) -> Student:
    doc = load_json(r["doc"])
    return Student(student_id=str(r["student_id"]), data=doc if isinstance(doc, dict) else {})


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_ordered_by_roll(self) -> Sequence[Student]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("SELECT student_id, doc FROM students ORDER BY roll_no ASC")
                return [_to_student(r) for r in fetchall(cur)]
        except ConnectivityError as exc:
            # Older deployments have no roll_no column.
            if exc.errno == errorcode.ER_BAD_FIELD_ERROR:
                raise OrderingUnavailableError("students.roll_no is not available") from exc
            raise

    def list_all(self) -> Sequence[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT student_id, doc FROM students")
            return [_to_student(r) for r in fetchall(cur)]
