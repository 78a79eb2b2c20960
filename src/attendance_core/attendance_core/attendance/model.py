from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import DateLike
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class LessonMeta:
    """Lesson progress captured alongside an attendance mark."""

    surah: Optional[str] = None
    ayat_from: Optional[int] = None
    ayat_to: Optional[int] = None
    lesson_completed: bool = False


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one student's mark for one class session.

    ``date`` is either a calendar date or the session timestamp; timestamps are
    converted to the local zone before any day-based grouping.
    """

    status: AttendanceStatus
    date: DateLike
    lesson: Optional[LessonMeta] = None
    session_id: Optional[str] = None


@dataclass(frozen=True)
class WeekendTrendPoint:
    week_label: str
    rate: int
    total: int


@dataclass(frozen=True)
class SessionHistoryEntry:
    """Read-model for history tables (newest first)."""

    date: date
    status: AttendanceStatus
    lesson_completed: bool
    surah: Optional[str]
    ayat_from: Optional[int]
    ayat_to: Optional[int]
    session_id: Optional[str] = None


@dataclass(frozen=True)
class AttendanceSummary:
    total: int
    present: int
    late: int
    absent: int
    unexcused: int
    excused: int
    attendance_rate: float


@dataclass(frozen=True)
class HistoryPage:
    entries: tuple[SessionHistoryEntry, ...]
    has_more: bool
    total: int
