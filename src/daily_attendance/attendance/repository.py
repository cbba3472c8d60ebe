from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def commit_group(self, records: Sequence[AttendanceRecord]) -> None:
        """Upsert one group of records atomically.

        Raises QuotaError when the group exceeds the store's batch limit.
        """

        raise NotImplementedError
