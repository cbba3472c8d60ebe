from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..core.constants import WEEKDAYS
from ..core.exceptions import ConfigurationError


@dataclass(frozen=True)
class RunDay:
    """The calendar day a run initializes, as seen in the configured time zone."""

    day: date
    weekday: str

    @property
    def iso(self) -> str:
        return self.day.strftime("%Y-%m-%d")

    @classmethod
    def for_date(cls, value: date) -> "RunDay":
        return cls(day=value, weekday=WEEKDAYS[value.weekday()])


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def get_zone(tz_name: str) -> ZoneInfo:
    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ConfigurationError(f"Unknown time zone {tz_name!r}") from exc


def now_utc() -> datetime:
    """Current aware UTC time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc)


def current_run_day(tz_name: str, *, now: Optional[datetime] = None) -> RunDay:
    local = (now or now_utc()).astimezone(get_zone(tz_name))
    return RunDay.for_date(local.date())
