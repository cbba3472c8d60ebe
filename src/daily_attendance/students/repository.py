from __future__ import annotations

from typing import Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    def list_ordered_by_roll(self) -> Sequence[Student]:
        """All students ordered by roll designator.

        Raises OrderingUnavailableError when the backing table cannot order by roll.
        """

        raise NotImplementedError

    def list_all(self) -> Sequence[Student]:
        """All students in storage-native order."""

        raise NotImplementedError
