from __future__ import annotations

from daily_attendance.schedules.mysql_schedule_repository import MySQLScheduleRepository


class FakeCursor:
    def __init__(self, rows):
        self._rows = rows
        self.params = None

    def execute(self, sql, params=None):
        self.params = params

    def fetchone(self):
        return self._rows[0] if self._rows else None

    def close(self):
        pass


class FakeConnection:
    def __init__(self, rows=()):
        self.last_cursor = FakeCursor(list(rows))

    def cursor(self, dictionary=True):
        return self.last_cursor

    def commit(self):
        pass

    def rollback(self):
        pass

    def close(self):
        pass


class FakeConnFactory:
    def __init__(self, conn: FakeConnection):
        self.conn = conn

    def connect(self):
        return self.conn


def _repo(*rows):
    conn = FakeConnection(rows)
    return MySQLScheduleRepository(FakeConnFactory(conn)), conn


def test_missing_department_returns_none():
    repo, conn = _repo()

    assert repo.get_timetable("ECA") is None
    assert conn.last_cursor.params == ("ECA",)


def test_json_text_document_is_decoded():
    repo, _ = _repo({"doc": '{"Monday": [{"subject": "Math", "start": "09:00", "end": "10:00"}]}'})

    assert repo.get_timetable("ECA") == {
        "Monday": [{"subject": "Math", "start": "09:00", "end": "10:00"}]
    }


def test_bytes_document_is_decoded():
    repo, _ = _repo({"doc": b'{"Tuesday": []}'})

    assert repo.get_timetable("ECA") == {"Tuesday": []}


def test_non_object_document_becomes_empty_timetable():
    repo, _ = _repo({"doc": "[1, 2]"})

    assert repo.get_timetable("ECA") == {}
