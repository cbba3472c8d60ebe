from __future__ import annotations

from typing import Any, Optional, Protocol


class ScheduleRepository(Protocol):
    def get_timetable(self, dept: str) -> Optional[dict[str, Any]]:
        """Return the department's timetable document (weekday name -> periods).

        Returns None when the department has no timetable.
        """

        raise NotImplementedError
