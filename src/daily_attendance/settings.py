from __future__ import annotations

from dataclasses import dataclass, replace
from types import ModuleType
from typing import Any, Optional

from .common.datetime_utils import get_zone
from .core.constants import (
    DEFAULT_DEPT,
    DEFAULT_SIGNED_URL_EXPIRE_DAYS,
    DEFAULT_STORAGE_BUCKET,
    DEFAULT_TIMEZONE,
)
from .core.exceptions import ConfigurationError


@dataclass(frozen=True)
class RunSettings:
    """Validated options for one daily run."""

    db_config: dict
    dept: str = DEFAULT_DEPT
    timezone: str = DEFAULT_TIMEZONE
    expire_days: int = DEFAULT_SIGNED_URL_EXPIRE_DAYS
    supabase_url: str = ""
    supabase_service_key: str = ""
    bucket: str = DEFAULT_STORAGE_BUCKET
    scratch_dir: Optional[str] = None

    @classmethod
    def from_settings(cls, settings: ModuleType, **overrides: Any) -> "RunSettings":
        """Read a config module and apply non-None overrides (e.g. CLI flags)."""

        base = cls(
            db_config=dict(getattr(settings, "DB_CONFIG")),
            dept=getattr(settings, "DEPT", DEFAULT_DEPT),
            timezone=getattr(settings, "TZ", DEFAULT_TIMEZONE),
            expire_days=getattr(settings, "SIGNED_URL_EXPIRE_DAYS", DEFAULT_SIGNED_URL_EXPIRE_DAYS),
            supabase_url=getattr(settings, "SUPABASE_URL", ""),
            supabase_service_key=getattr(settings, "SUPABASE_SERVICE_KEY", ""),
            bucket=getattr(settings, "STORAGE_BUCKET", DEFAULT_STORAGE_BUCKET),
            scratch_dir=getattr(settings, "SCRATCH_DIR", None),
        )
        applied = replace(base, **{k: v for k, v in overrides.items() if v is not None})
        return applied.validated()

    def validated(self) -> "RunSettings":
        dept = (self.dept or "").strip()
        if not dept:
            raise ConfigurationError("Department code must not be empty")

        get_zone(self.timezone)

        try:
            expire_days = int(self.expire_days)
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"Invalid signed URL expiry: {self.expire_days!r}") from exc
        if expire_days <= 0:
            raise ConfigurationError("Signed URL expiry must be at least one day")

        return replace(self, dept=dept, expire_days=expire_days)
