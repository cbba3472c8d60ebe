from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any

from ..core.enums import PeriodStatus


@dataclass(frozen=True)
class AttendanceKey:
    """Identity of a daily record: one per (date, student).

    Stored as a composite key so re-running a day overwrites instead of
    duplicating.
    """

    record_date: date
    student_id: str

    def __str__(self) -> str:
        return f"{self.record_date.strftime('%Y-%m-%d')}_{self.student_id}"


@dataclass(frozen=True)
class AttendanceRecord:
    """One student's period slots for one day."""

    key: AttendanceKey
    dept: str
    statuses: tuple[PeriodStatus, ...]

    def to_document(self) -> dict[str, Any]:
        doc: dict[str, Any] = {
            "date": self.key.record_date.strftime("%Y-%m-%d"),
            "dept": self.dept,
            "studentId": self.key.student_id,
        }
        for i, status in enumerate(self.statuses, start=1):
            doc[f"period{i}"] = status.value
        return doc


@dataclass(frozen=True)
class ReportRow:
    """Read-model for the exported sheet (not persisted)."""

    roll: str
    name: str
    cells: tuple[str, ...]

    def as_list(self) -> list[str]:
        return [self.roll, self.name, *self.cells]
