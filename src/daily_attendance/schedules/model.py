from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Period:
    subject: str
    start: str
    end: str

    @property
    def label(self) -> str:
        return f"{self.subject} ({self.start}-{self.end})"


@dataclass(frozen=True)
class Schedule:
    """Ordered periods a department runs on one weekday."""

    dept: str
    weekday: str
    periods: tuple[Period, ...]
