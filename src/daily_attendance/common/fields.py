"""Field lookup across inconsistently named upstream documents."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

ROLL_FIELDS = ("roll", "rollNo", "roll_no", "Roll")
NAME_FIELDS = ("name", "students_name", "studentsName")
SUBJECT_FIELDS = ("subject", "sub")


def first_present(data: Mapping[str, Any], candidates: Sequence[str], default: str = "") -> str:
    """Return the first non-empty value among ``candidates`` as a string."""

    for field in candidates:
        value = data.get(field)
        if value is None or value == "":
            continue
        return str(value)
    return default
