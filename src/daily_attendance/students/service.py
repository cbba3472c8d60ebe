from __future__ import annotations

import logging

from ..core.exceptions import OrderingUnavailableError
from .model import Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)


class RosterService:
    def __init__(self, students: StudentRepository):
        self._students = students

    def load(self) -> list[Student]:
        """Load the roster ordered by roll, falling back to storage order.

        Only a missing roll ordering triggers the fallback; any other failure
        propagates.
        """

        try:
            students = list(self._students.list_ordered_by_roll())
        except OrderingUnavailableError as exc:
            logger.warning("Roll ordering unavailable (%s); loading roster unordered", exc)
            students = list(self._students.list_all())

        logger.info("Students count: %d", len(students))
        return students
