from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance status as stored in the database and sent over the API."""

    PRESENT = "Present"
    ABSENT = "Absent"

    @classmethod
    def values(cls) -> tuple[str, ...]:
        return tuple(member.value for member in cls)
