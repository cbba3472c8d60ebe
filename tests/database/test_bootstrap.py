from __future__ import annotations

from pathlib import Path

from daily_attendance.database.bootstrap import _iter_sql_statements, _strip_create_db_and_use

REPO_ROOT = Path(__file__).resolve().parents[2]


def test_splitter_ignores_semicolons_inside_quotes():
    sql = "INSERT INTO t VALUES ('a;b');\nINSERT INTO t VALUES (\"c;d\");"

    assert list(_iter_sql_statements(sql)) == [
        "INSERT INTO t VALUES ('a;b')",
        'INSERT INTO t VALUES ("c;d")',
    ]


def test_schema_defines_every_table():
    sql = _strip_create_db_and_use((REPO_ROOT / "database" / "schema.sql").read_text(encoding="utf-8"))
    statements = list(_iter_sql_statements(sql))

    assert not any(s.upper().startswith(("CREATE DATABASE", "USE ")) for s in statements)
    joined = "\n".join(statements)
    for table in ("timetables", "students", "attendance_records", "attendance_sheets"):
        assert f"CREATE TABLE IF NOT EXISTS {table}" in joined


def test_seed_splits_into_timetable_and_roster_statements():
    sql = (REPO_ROOT / "database" / "seed.sql").read_text(encoding="utf-8")

    statements = [s for s in _iter_sql_statements(sql) if "INSERT" in s]

    assert len(statements) == 2
