from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from ..attendance.model import ReportRow
from ..core.constants import SHEETS_PREFIX


@dataclass(frozen=True)
class SheetKey:
    dept: str
    sheet_date: date

    def __str__(self) -> str:
        return f"{self.dept}_{self.sheet_date.strftime('%Y-%m-%d')}"

    @property
    def storage_path(self) -> str:
        return f"{SHEETS_PREFIX}/{self}.xlsx"

    @property
    def scratch_name(self) -> str:
        return f"attendance_{self}.xlsx"


@dataclass(frozen=True)
class Report:
    header: tuple[str, ...]
    rows: tuple[ReportRow, ...]

    def as_table(self) -> list[list[str]]:
        return [list(self.header), *(r.as_list() for r in self.rows)]


@dataclass(frozen=True)
class PublishedArtifact:
    storage_path: str
    signed_url: str
    expires_at: datetime


@dataclass(frozen=True)
class SheetMetadata:
    key: SheetKey
    storage_path: str
    signed_url: str
    created_at: datetime

    def to_dict(self) -> dict:
        return {
            "date": self.key.sheet_date.strftime("%Y-%m-%d"),
            "dept": self.key.dept,
            "storagePath": self.storage_path,
            "signedUrl": self.signed_url,
            "createdAt": self.created_at.isoformat(),
        }
