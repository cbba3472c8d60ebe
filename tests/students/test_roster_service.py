from __future__ import annotations

import pytest

from daily_attendance.core.exceptions import ConnectivityError, OrderingUnavailableError
from daily_attendance.students.model import Student
from daily_attendance.students.service import RosterService


class FakeStudents:
    def __init__(self, students, *, ordered_error: Exception | None = None):
        self._students = list(students)
        self._ordered_error = ordered_error
        self.calls: list[str] = []

    def list_ordered_by_roll(self):
        self.calls.append("ordered")
        if self._ordered_error:
            raise self._ordered_error
        return sorted(self._students, key=lambda s: s.data.get("rollNo", ""))

    def list_all(self):
        self.calls.append("all")
        return list(self._students)


STUDENTS = [
    Student("s2", {"rollNo": "2", "name": "Bimal"}),
    Student("s1", {"rollNo": "1", "name": "Asha"}),
]


def test_load_uses_roll_order():
    repo = FakeStudents(STUDENTS)

    students = RosterService(repo).load()

    assert [s.student_id for s in students] == ["s1", "s2"]
    assert repo.calls == ["ordered"]


def test_load_falls_back_to_storage_order_when_ordering_unavailable():
    repo = FakeStudents(STUDENTS, ordered_error=OrderingUnavailableError("no roll_no"))

    students = RosterService(repo).load()

    assert [s.student_id for s in students] == ["s2", "s1"]
    assert repo.calls == ["ordered", "all"]


def test_other_failures_are_not_masked():
    repo = FakeStudents(STUDENTS, ordered_error=ConnectivityError("connection refused"))

    with pytest.raises(ConnectivityError):
        RosterService(repo).load()
    assert repo.calls == ["ordered"]


def test_empty_roster_is_valid():
    assert RosterService(FakeStudents([])).load() == []
