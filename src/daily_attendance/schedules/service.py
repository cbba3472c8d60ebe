from __future__ import annotations

import logging
from typing import Any

from ..common.fields import SUBJECT_FIELDS, first_present
from ..core.exceptions import ConfigurationError
from .model import Period, Schedule
from .repository import ScheduleRepository

logger = logging.getLogger(__name__)


def _to_period(entry: Any, *, index: int, dept: str, weekday: str) -> Period:
    if not isinstance(entry, dict):
        raise ConfigurationError(f"Timetable entry {index} for {weekday} in dept {dept} is not an object")
    return Period(
        subject=first_present(entry, SUBJECT_FIELDS, default="SUB"),
        start=str(entry.get("start", "")),
        end=str(entry.get("end", "")),
    )


class ScheduleService:
    def __init__(self, schedules: ScheduleRepository):
        self._schedules = schedules

    def resolve(self, *, dept: str, weekday: str) -> Schedule:
        timetable = self._schedules.get_timetable(dept)
        if timetable is None:
            raise ConfigurationError(f'No timetable document for dept "{dept}"')

        entries = timetable.get(weekday)
        if not isinstance(entries, list) or not entries:
            raise ConfigurationError(f"No timetable entries for {weekday} in dept {dept}")

        periods = tuple(
            _to_period(entry, index=i, dept=dept, weekday=weekday) for i, entry in enumerate(entries, start=1)
        )
        logger.info("Resolved %d periods for %s on %s", len(periods), dept, weekday)
        return Schedule(dept=dept, weekday=weekday, periods=periods)
