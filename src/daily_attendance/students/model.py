from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class Student:
    """Roster entry: document id plus the raw roster document.

    Note: The roster schema is owned upstream and field names vary, so the raw
    document is kept as-is and display fields are resolved on demand.
    """

    student_id: str
    data: Mapping[str, Any] = field(default_factory=dict)
