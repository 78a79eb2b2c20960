from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRecordSource(Protocol):
    """Read side supplied by the persistence layer, already scoped to one student."""

    def get_records_for_student(self, student_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
