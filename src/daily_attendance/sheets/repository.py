from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import SheetKey, SheetMetadata


class SheetRepository(Protocol):
    def upsert(self, key: SheetKey, *, storage_path: str, signed_url: str) -> SheetMetadata:
        """Replace the metadata row for ``key`` with a fresh server timestamp."""

        raise NotImplementedError

    def get(self, key: SheetKey) -> Optional[SheetMetadata]:
        raise NotImplementedError

    def list_recent(self, dept: str, *, limit: int) -> Sequence[SheetMetadata]:
        raise NotImplementedError
