from __future__ import annotations

import logging
import tempfile
from datetime import datetime, timedelta
from pathlib import Path
from typing import Callable, Optional

import pandas as pd
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE

from ..common.datetime_utils import now_utc
from ..core.constants import DEFAULT_SIGNED_URL_EXPIRE_DAYS, SHEET_NAME, XLSX_CONTENT_TYPE
from ..core.exceptions import ConfigurationError
from ..storage.blob_store import BlobStore
from .model import PublishedArtifact, Report, SheetKey

logger = logging.getLogger(__name__)


def _cell_text(value: str) -> str:
    return ILLEGAL_CHARACTERS_RE.sub("", str(value))


def write_workbook(report: Report, path: Path) -> Path:
    """Serialize the report to an .xlsx file with a single sheet.

    Every value is stored as a text cell: characters worksheets cannot hold are
    dropped, and values starting with "=" stay literal text, never formulas.
    """

    df = pd.DataFrame(
        [[_cell_text(v) for v in r.as_list()] for r in report.rows],
        columns=[_cell_text(h) for h in report.header],
    )
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=SHEET_NAME)
        ws = writer.sheets[SHEET_NAME]
        for row in ws.iter_rows():
            for cell in row:
                if cell.data_type == "f":
                    cell.data_type = "s"
    return path


class ArtifactPublisher:
    """Write the report workbook, upload it and mint a time-limited read link.

    Any failure is fatal to the run; scratch files are left in place.
    """

    def __init__(
        self,
        blobs: BlobStore,
        *,
        expire_days: int = DEFAULT_SIGNED_URL_EXPIRE_DAYS,
        scratch_dir: Optional[str | Path] = None,
        clock: Callable[[], datetime] = now_utc,
    ):
        if int(expire_days) <= 0:
            raise ConfigurationError("Signed URL expiry must be at least one day")
        self._blobs = blobs
        self._expire_days = int(expire_days)
        self._scratch_dir = Path(scratch_dir) if scratch_dir else Path(tempfile.gettempdir())
        self._clock = clock

    @property
    def expire_days(self) -> int:
        return self._expire_days

    def publish(self, report: Report, key: SheetKey) -> PublishedArtifact:
        self._scratch_dir.mkdir(parents=True, exist_ok=True)
        local_path = write_workbook(report, self._scratch_dir / key.scratch_name)

        destination = key.storage_path
        self._blobs.upload(local_path=local_path, destination=destination, content_type=XLSX_CONTENT_TYPE)

        expires_in = timedelta(days=self._expire_days)
        expires_at = self._clock() + expires_in
        signed_url = self._blobs.signed_url(destination, expires_in=expires_in)
        logger.info("Signed URL for %s expires at %s", destination, expires_at.isoformat())

        return PublishedArtifact(storage_path=destination, signed_url=signed_url, expires_at=expires_at)
