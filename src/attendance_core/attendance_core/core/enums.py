from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance status as stored by the persistence layer."""

    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    UNEXCUSED = "UNEXCUSED"
    LATE = "LATE"
    EXCUSED = "EXCUSED"

    @property
    def counts_as_attended(self) -> bool:
        return self in (AttendanceStatus.PRESENT, AttendanceStatus.LATE)
