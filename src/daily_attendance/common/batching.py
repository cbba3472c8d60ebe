"""Bounded-batch writing.

A write sink that groups items into fixed-size units and hands each unit to a
commit callback, flushing the final partial unit on demand.
"""

from __future__ import annotations

import logging
from typing import Callable, Generic, Iterable, Sequence, TypeVar

from ..core.constants import BATCH_LIMIT

T = TypeVar("T")

logger = logging.getLogger(__name__)


class BoundedBatchWriter(Generic[T]):
    """Accumulate items and commit them in groups of at most ``limit``.

    Groups are committed strictly in the order items were added. There is no
    atomicity across groups: if a commit raises, earlier groups stay committed
    and the failing group is left pending.
    """

    def __init__(self, commit: Callable[[Sequence[T]], None], *, limit: int = BATCH_LIMIT):
        if int(limit) <= 0:
            raise ValueError("limit must be positive")
        self._commit = commit
        self._limit = int(limit)
        self._pending: list[T] = []
        self.groups_committed = 0
        self.items_written = 0

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def pending(self) -> int:
        return len(self._pending)

    def add(self, item: T) -> None:
        self._pending.append(item)
        if len(self._pending) >= self._limit:
            self.flush()

    def flush(self) -> None:
        if not self._pending:
            return
        group = self._pending
        self._commit(group)
        self._pending = []
        self.groups_committed += 1
        self.items_written += len(group)
        logger.debug("Committed group %d (%d items)", self.groups_committed, len(group))

    def write_all(self, items: Iterable[T]) -> int:
        for item in items:
            self.add(item)
        self.flush()
        return self.items_written

    def __enter__(self) -> "BoundedBatchWriter[T]":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.flush()
