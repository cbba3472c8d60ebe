"""Pure builders for one student's record and report row."""

from __future__ import annotations

from datetime import date

from ..common.fields import NAME_FIELDS, ROLL_FIELDS, first_present
from ..core.enums import PeriodStatus
from ..schedules.model import Schedule
from ..students.model import Student
from .model import AttendanceKey, AttendanceRecord, ReportRow


def materialize_record(schedule: Schedule, student: Student, *, record_date: date, dept: str) -> AttendanceRecord:
    return AttendanceRecord(
        key=AttendanceKey(record_date=record_date, student_id=student.student_id),
        dept=dept,
        statuses=tuple(PeriodStatus.ABSENT for _ in schedule.periods),
    )


def build_report_row(schedule: Schedule, student: Student) -> ReportRow:
    return ReportRow(
        roll=first_present(student.data, ROLL_FIELDS),
        name=first_present(student.data, NAME_FIELDS),
        cells=tuple(PeriodStatus.ABSENT.value for _ in schedule.periods),
    )
