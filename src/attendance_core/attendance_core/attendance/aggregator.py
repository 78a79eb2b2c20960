"""Pure aggregation over a student's attendance rows.

Every function recomputes from the sequence it is given and returns immutable
values; nothing here keeps state between calls.
"""

from __future__ import annotations

import math
from collections import Counter
from datetime import date, timedelta, tzinfo
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import local_day, month_start, previous_month_start, short_month_day, weekend_saturday
from ..common.validators import require_non_negative
from ..core.enums import AttendanceStatus
from .model import AttendanceRecord, AttendanceSummary, HistoryPage, SessionHistoryEntry, WeekendTrendPoint


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round half up (for the non-negative rates used here)."""
    factor = 10**ndigits
    return math.floor(value * factor + 0.5) / factor


def newest_first(records: Iterable[AttendanceRecord], tz: Optional[tzinfo] = None) -> list[AttendanceRecord]:
    # sorted() is stable with reverse=True, so same-day rows keep input order.
    return sorted(records, key=lambda r: local_day(r.date, tz), reverse=True)


def compute_streak(records: Iterable[AttendanceRecord], *, tz: Optional[tzinfo] = None) -> int:
    """Consecutive attended sessions counting back from the most recent one.

    PRESENT and LATE extend the streak, EXCUSED is skipped over, and ABSENT or
    UNEXCUSED ends it.
    """
    streak = 0
    for record in newest_first(records, tz):
        if record.status.counts_as_attended:
            streak += 1
        elif record.status == AttendanceStatus.EXCUSED:
            continue
        else:
            break
    return streak


def group_by_weekend(records: Iterable[AttendanceRecord], *, tz: Optional[tzinfo] = None) -> tuple[WeekendTrendPoint, ...]:
    """Attendance rate per Saturday/Sunday weekend, oldest weekend first.

    Weekday rows are ignored.
    """
    buckets: dict[date, tuple[int, int]] = {}
    for record in records:
        saturday = weekend_saturday(local_day(record.date, tz))
        if saturday is None:
            continue
        total, present = buckets.get(saturday, (0, 0))
        buckets[saturday] = (total + 1, present + int(record.status.counts_as_attended))

    return tuple(
        WeekendTrendPoint(
            week_label=short_month_day(saturday),
            rate=int(round_half_up(present / total * 100)) if total else 0,
            total=total,
        )
        for saturday, (total, present) in sorted(buckets.items())
    )


def session_history(records: Iterable[AttendanceRecord], *, tz: Optional[tzinfo] = None) -> tuple[SessionHistoryEntry, ...]:
    return tuple(_to_history_entry(r, tz) for r in newest_first(records, tz))


def paginate_history(
    records: Sequence[AttendanceRecord],
    *,
    offset: int = 0,
    limit: int = 20,
    tz: Optional[tzinfo] = None,
) -> HistoryPage:
    offset = require_non_negative(offset, "offset")
    limit = require_non_negative(limit, "limit")
    history = session_history(records, tz=tz)
    return HistoryPage(
        entries=history[offset : offset + limit],
        has_more=len(history) > offset + limit,
        total=len(history),
    )


def summarize_statuses(records: Iterable[AttendanceRecord]) -> AttendanceSummary:
    counts = Counter(r.status for r in records)
    total = sum(counts.values())
    present = counts[AttendanceStatus.PRESENT]
    late = counts[AttendanceStatus.LATE]
    rate = round_half_up((present + late) / total * 100, 1) if total else 0.0
    return AttendanceSummary(
        total=total,
        present=present,
        late=late,
        absent=counts[AttendanceStatus.ABSENT],
        unexcused=counts[AttendanceStatus.UNEXCUSED],
        excused=counts[AttendanceStatus.EXCUSED],
        attendance_rate=rate,
    )


def monthly_rate_change(
    records: Iterable[AttendanceRecord],
    *,
    today: date,
    tz: Optional[tzinfo] = None,
) -> Optional[float]:
    """Current month's attendance rate minus last month's, or None without last-month data."""
    current_start = month_start(today)
    prev_start = previous_month_start(today)

    current: list[AttendanceRecord] = []
    previous: list[AttendanceRecord] = []
    for record in records:
        day = local_day(record.date, tz)
        if day >= current_start:
            current.append(record)
        elif day >= prev_start:
            previous.append(record)

    prev_summary = summarize_statuses(previous)
    if prev_summary.total == 0:
        return None
    diff = summarize_statuses(current).attendance_rate - prev_summary.attendance_rate
    return math.copysign(round_half_up(abs(diff), 1), diff)


def recent_weeks(
    records: Iterable[AttendanceRecord],
    *,
    today: date,
    weeks_back: int = 12,
    tz: Optional[tzinfo] = None,
) -> tuple[AttendanceRecord, ...]:
    since = today - timedelta(weeks=require_non_negative(weeks_back, "weeks_back"))
    return tuple(r for r in records if local_day(r.date, tz) >= since)


def _to_history_entry(record: AttendanceRecord, tz: Optional[tzinfo]) -> SessionHistoryEntry:
    lesson = record.lesson
    return SessionHistoryEntry(
        date=local_day(record.date, tz),
        status=record.status,
        lesson_completed=bool(lesson and lesson.lesson_completed),
        surah=lesson.surah if lesson else None,
        ayat_from=lesson.ayat_from if lesson else None,
        ayat_to=lesson.ayat_to if lesson else None,
        session_id=record.session_id,
    )
