from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, tzinfo
from typing import Optional

from ..common.datetime_utils import local_day, now_utc
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_HISTORY_LIMIT, DEFAULT_TREND_WEEKS
from .aggregator import (
    compute_streak,
    group_by_weekend,
    monthly_rate_change,
    paginate_history,
    recent_weeks,
    summarize_statuses,
)
from .model import AttendanceSummary, HistoryPage, WeekendTrendPoint
from .repository import AttendanceRecordSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StudentInsights:
    student_id: str
    streak: int
    summary: AttendanceSummary
    weekly_trend: tuple[WeekendTrendPoint, ...]
    monthly_change: Optional[float]
    history: HistoryPage


class StudentInsightsService:
    """Use case: build a student's attendance report from their stored marks."""

    def __init__(
        self,
        records: AttendanceRecordSource,
        *,
        tz: Optional[tzinfo] = None,
        trend_weeks: int = DEFAULT_TREND_WEEKS,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
    ):
        self._records = records
        self._tz = tz
        self._trend_weeks = int(trend_weeks)
        self._history_limit = int(history_limit)

    def build(self, student_id: str, *, today: Optional[date] = None) -> StudentInsights:
        student_id = require_non_empty(student_id, "student_id")
        today = today or local_day(now_utc(), self._tz)

        rows = tuple(self._records.get_records_for_student(student_id))
        logger.debug("Building insights for student %s from %d records", student_id, len(rows))

        return StudentInsights(
            student_id=student_id,
            streak=compute_streak(rows, tz=self._tz),
            summary=summarize_statuses(rows),
            weekly_trend=group_by_weekend(
                recent_weeks(rows, today=today, weeks_back=self._trend_weeks, tz=self._tz),
                tz=self._tz,
            ),
            monthly_change=monthly_rate_change(rows, today=today, tz=self._tz),
            history=paginate_history(rows, limit=self._history_limit, tz=self._tz),
        )

    def history_page(self, student_id: str, *, offset: int = 0, limit: Optional[int] = None) -> HistoryPage:
        rows = self._records.get_records_for_student(require_non_empty(student_id, "student_id"))
        return paginate_history(rows, offset=offset, limit=self._history_limit if limit is None else limit, tz=self._tz)
