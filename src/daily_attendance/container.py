from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .database.connection import DBConfig, DatabaseConnection
from .pipeline import DailyAttendancePipeline
from .schedules.mysql_schedule_repository import MySQLScheduleRepository
from .schedules.service import ScheduleService
from .settings import RunSettings
from .sheets.mysql_sheet_repository import MySQLSheetRepository
from .sheets.publisher import ArtifactPublisher
from .storage.supabase_blob_store import SupabaseBlobStore, create_supabase_client
from .students.mysql_student_repository import MySQLStudentRepository
from .students.service import RosterService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    schedules_repo: MySQLScheduleRepository
    students_repo: MySQLStudentRepository
    attendance_repo: MySQLAttendanceRepository
    sheets_repo: MySQLSheetRepository

    schedule_service: ScheduleService
    roster_service: RosterService


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    schedules_repo = MySQLScheduleRepository(conn)
    students_repo = MySQLStudentRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)
    sheets_repo = MySQLSheetRepository(conn)

    return Container(
        conn=conn,
        schedules_repo=schedules_repo,
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        sheets_repo=sheets_repo,
        schedule_service=ScheduleService(schedules_repo),
        roster_service=RosterService(students_repo),
    )


def build_pipeline(container: Container, settings: RunSettings) -> DailyAttendancePipeline:
    """Wire the daily pipeline; the blob store is only needed here."""

    client = create_supabase_client(settings.supabase_url, settings.supabase_service_key)
    publisher = ArtifactPublisher(
        SupabaseBlobStore(client, settings.bucket),
        expire_days=settings.expire_days,
        scratch_dir=settings.scratch_dir,
    )
    return DailyAttendancePipeline(
        container.schedule_service,
        container.roster_service,
        container.attendance_repo,
        publisher,
        container.sheets_repo,
        dept=settings.dept,
    )
