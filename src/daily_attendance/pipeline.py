"""Daily run: schedule -> roster -> records + report -> artifact -> metadata.

Stages run strictly in order and any failure aborts the run. There is no
resume; a rerun starts over and converges because every write is keyed by
(date, student) or (dept, date).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .attendance.materializer import build_report_row, materialize_record
from .attendance.repository import AttendanceRepository
from .common.batching import BoundedBatchWriter
from .common.datetime_utils import RunDay
from .core.constants import BATCH_LIMIT
from .core.enums import RunStage
from .schedules.service import ScheduleService
from .sheets.model import PublishedArtifact, SheetKey, SheetMetadata
from .sheets.publisher import ArtifactPublisher
from .sheets.report import ReportBuilder
from .sheets.repository import SheetRepository
from .students.service import RosterService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunResult:
    day: RunDay
    dept: str
    student_count: int
    groups_committed: int
    artifact: PublishedArtifact
    metadata: SheetMetadata


class DailyAttendancePipeline:
    def __init__(
        self,
        schedules: ScheduleService,
        roster: RosterService,
        attendance: AttendanceRepository,
        publisher: ArtifactPublisher,
        sheets: SheetRepository,
        *,
        dept: str,
        batch_limit: int = BATCH_LIMIT,
    ):
        self._schedules = schedules
        self._roster = roster
        self._attendance = attendance
        self._publisher = publisher
        self._sheets = sheets
        self._dept = dept
        self._batch_limit = int(batch_limit)

        self.stage = RunStage.INIT
        self.failure_reason: Optional[str] = None

    @property
    def dept(self) -> str:
        return self._dept

    def _advance(self, stage: RunStage) -> None:
        self.stage = stage
        logger.info("Stage: %s", stage.value)

    def run(self, day: RunDay) -> RunResult:
        self.stage = RunStage.INIT
        self.failure_reason = None
        logger.info("Creating attendance for %s %s dept %s", day.iso, day.weekday, self._dept)

        try:
            return self._run(day)
        except Exception as exc:
            failed_at = self.stage
            self.stage = RunStage.FAILED
            self.failure_reason = f"{type(exc).__name__}: {exc}"
            logger.error("Run failed after %s: %s", failed_at.value, self.failure_reason)
            raise

    def _run(self, day: RunDay) -> RunResult:
        schedule = self._schedules.resolve(dept=self._dept, weekday=day.weekday)
        self._advance(RunStage.SCHEDULE_RESOLVED)

        students = self._roster.load()
        self._advance(RunStage.ROSTER_LOADED)

        report = ReportBuilder(schedule)
        writer = BoundedBatchWriter(self._attendance.commit_group, limit=self._batch_limit)
        for student in students:
            writer.add(materialize_record(schedule, student, record_date=day.day, dept=self._dept))
            report.add(build_report_row(schedule, student))
        writer.flush()
        logger.info("Committed %d records in %d groups", writer.items_written, writer.groups_committed)
        self._advance(RunStage.RECORDS_COMMITTED)

        built = report.build()
        self._advance(RunStage.REPORT_BUILT)

        key = SheetKey(dept=self._dept, sheet_date=day.day)
        artifact = self._publisher.publish(built, key)
        self._advance(RunStage.ARTIFACT_PUBLISHED)

        metadata = self._sheets.upsert(key, storage_path=artifact.storage_path, signed_url=artifact.signed_url)
        self._advance(RunStage.METADATA_RECORDED)

        self._advance(RunStage.DONE)
        logger.info(
            "Done. Signed URL (expires in %d days): %s",
            self._publisher.expire_days,
            artifact.signed_url,
        )
        return RunResult(
            day=day,
            dept=self._dept,
            student_count=len(students),
            groups_committed=writer.groups_committed,
            artifact=artifact,
            metadata=metadata,
        )
