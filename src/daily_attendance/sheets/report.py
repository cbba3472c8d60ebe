from __future__ import annotations

from ..attendance.model import ReportRow
from ..schedules.model import Schedule
from .model import Report


class ReportBuilder:
    """Collect report rows in roster order under a per-period header."""

    def __init__(self, schedule: Schedule):
        self._header = ("Roll", "Name", *(p.label for p in schedule.periods))
        self._rows: list[ReportRow] = []

    @property
    def header(self) -> tuple[str, ...]:
        return self._header

    def add(self, row: ReportRow) -> None:
        if len(row.cells) != len(self._header) - 2:
            raise ValueError(f"Row has {len(row.cells)} period cells, expected {len(self._header) - 2}")
        self._rows.append(row)

    def build(self) -> Report:
        return Report(header=self._header, rows=tuple(self._rows))
