from __future__ import annotations

from enum import Enum


class PeriodStatus(str, Enum):
    """Status stored in each period slot of an attendance record."""

    ABSENT = "Absent"
    PRESENT = "Present"


class RunStage(str, Enum):
    """Stages of one daily run, in execution order."""

    INIT = "INIT"
    SCHEDULE_RESOLVED = "SCHEDULE_RESOLVED"
    ROSTER_LOADED = "ROSTER_LOADED"
    RECORDS_COMMITTED = "RECORDS_COMMITTED"
    REPORT_BUILT = "REPORT_BUILT"
    ARTIFACT_PUBLISHED = "ARTIFACT_PUBLISHED"
    METADATA_RECORDED = "METADATA_RECORDED"
    DONE = "DONE"
    FAILED = "FAILED"
