from __future__ import annotations

from datetime import timedelta
from pathlib import Path
from typing import Protocol


class BlobStore(Protocol):
    def upload(self, *, local_path: Path, destination: str, content_type: str) -> None:
        """Upload a local file, replacing any blob already at ``destination``."""

        raise NotImplementedError

    def signed_url(self, path: str, *, expires_in: timedelta) -> str:
        """Mint a read-only URL for ``path`` valid for ``expires_in``."""

        raise NotImplementedError
