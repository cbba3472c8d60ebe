from __future__ import annotations

from datetime import date

import mysql.connector
import pytest
from mysql.connector import errorcode

from daily_attendance.attendance.materializer import materialize_record
from daily_attendance.attendance.mysql_attendance_repository import MySQLAttendanceRepository
from daily_attendance.core.exceptions import ConnectivityError, OrderingUnavailableError, QuotaError
from daily_attendance.schedules.model import Period, Schedule
from daily_attendance.students.model import Student
from daily_attendance.students.mysql_student_repository import MySQLStudentRepository


class FakeCursor:
    def __init__(self, conn):
        self._conn = conn
        self._rows = []

    def execute(self, sql, params=None):
        self._conn.statements.append(" ".join(sql.split()))
        error = self._conn.errors.pop(0) if self._conn.errors else None
        if error:
            raise error
        self._rows = list(self._conn.rows)

    def executemany(self, sql, seq):
        self._conn.statements.append(" ".join(sql.split()))
        self._conn.batches.append(list(seq))

    def fetchall(self):
        return self._rows

    def fetchone(self):
        return self._rows[0] if self._rows else None

    def close(self):
        pass


class FakeConnection:
    def __init__(self, *, rows=(), errors=()):
        self.rows = list(rows)
        self.errors = list(errors)
        self.statements: list[str] = []
        self.batches: list[list[tuple]] = []
        self.commits = 0
        self.rollbacks = 0

    def cursor(self, dictionary=True):
        return FakeCursor(self)

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1

    def close(self):
        pass


class FakeConnFactory:
    def __init__(self, conn: FakeConnection):
        self.conn = conn

    def connect(self):
        return self.conn


SCHEDULE = Schedule("ECA", "Monday", (Period("P1", "09:00", "10:00"),))


def _records(n: int):
    return [
        materialize_record(SCHEDULE, Student(f"s{i}", {}), record_date=date(2026, 10, 19), dept="ECA")
        for i in range(n)
    ]


def test_commit_group_upserts_in_one_transaction():
    conn = FakeConnection()
    repo = MySQLAttendanceRepository(FakeConnFactory(conn))

    repo.commit_group(_records(3))

    assert len(conn.batches) == 1
    assert [row[1] for row in conn.batches[0]] == ["s0", "s1", "s2"]
    assert "ON DUPLICATE KEY UPDATE" in conn.statements[0]
    assert conn.commits == 1


def test_commit_group_above_provider_limit_raises_quota_error():
    conn = FakeConnection()
    repo = MySQLAttendanceRepository(FakeConnFactory(conn), max_batch=500)

    with pytest.raises(QuotaError):
        repo.commit_group(_records(501))
    assert conn.statements == []


def test_missing_roll_column_becomes_ordering_unavailable():
    error = mysql.connector.errors.ProgrammingError(msg="Unknown column 'roll_no'", errno=errorcode.ER_BAD_FIELD_ERROR)
    conn = FakeConnection(errors=[error])
    repo = MySQLStudentRepository(FakeConnFactory(conn))

    with pytest.raises(OrderingUnavailableError):
        repo.list_ordered_by_roll()
    assert conn.rollbacks == 1


def test_other_driver_errors_stay_connectivity_errors():
    error = mysql.connector.errors.OperationalError(msg="Lost connection", errno=errorcode.CR_SERVER_LOST)
    conn = FakeConnection(errors=[error])
    repo = MySQLStudentRepository(FakeConnFactory(conn))

    with pytest.raises(ConnectivityError) as info:
        repo.list_ordered_by_roll()
    assert not isinstance(info.value, OrderingUnavailableError)
    assert info.value.errno == errorcode.CR_SERVER_LOST


def test_students_decode_json_documents():
    conn = FakeConnection(rows=[{"student_id": "s1", "doc": '{"rollNo": "1", "name": "Asha"}'}])
    repo = MySQLStudentRepository(FakeConnFactory(conn))

    students = repo.list_all()

    assert students == [Student("s1", {"rollNo": "1", "name": "Asha"})]
