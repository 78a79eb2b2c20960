from __future__ import annotations

from datetime import date, timedelta

import pytest

from src.attendance_core.attendance_core.attendance.model import AttendanceRecord
from src.attendance_core.attendance_core.attendance.service import StudentInsightsService
from src.attendance_core.attendance_core.core.enums import AttendanceStatus
from src.attendance_core.attendance_core.core.exceptions import ValidationError


class FakeRecordSource:
    def __init__(self, rows):
        self._rows = rows
        self.calls = []

    def get_records_for_student(self, student_id):
        self.calls.append(student_id)
        return self._rows


def _weekly(start: date, statuses):
    return [AttendanceRecord(status=s, date=start + timedelta(weeks=i)) for i, s in enumerate(statuses)]


def test_build_combines_all_views():
    rows = _weekly(
        date(2026, 1, 3),
        [AttendanceStatus.PRESENT, AttendanceStatus.ABSENT, AttendanceStatus.LATE, AttendanceStatus.PRESENT],
    )
    source = FakeRecordSource(rows)
    svc = StudentInsightsService(source, history_limit=2)

    insights = svc.build("student-1", today=date(2026, 1, 31))

    assert source.calls == ["student-1"]
    assert insights.streak == 2
    assert insights.summary.total == 4
    assert insights.summary.attendance_rate == 75.0
    assert [p.week_label for p in insights.weekly_trend] == ["Jan 3", "Jan 10", "Jan 17", "Jan 24"]
    assert insights.monthly_change is None
    assert insights.history.total == 4
    assert insights.history.has_more is True
    assert insights.history.entries[0].date == date(2026, 1, 24)


def test_trend_limited_to_recent_weeks():
    rows = _weekly(date(2025, 6, 7), [AttendanceStatus.PRESENT] * 40)
    svc = StudentInsightsService(FakeRecordSource(rows), trend_weeks=4)

    insights = svc.build("student-1", today=date(2026, 3, 7))

    assert len(insights.weekly_trend) == 5
    assert insights.streak == 40


def test_empty_records_give_neutral_values():
    insights = StudentInsightsService(FakeRecordSource([])).build("student-1", today=date(2026, 1, 31))

    assert insights.streak == 0
    assert insights.weekly_trend == ()
    assert insights.summary.attendance_rate == 0.0
    assert insights.history.entries == ()


def test_history_page_uses_offset():
    rows = _weekly(date(2026, 1, 3), [AttendanceStatus.PRESENT] * 3)
    svc = StudentInsightsService(FakeRecordSource(rows))

    page = svc.history_page("student-1", offset=2, limit=5)

    assert [e.date for e in page.entries] == [date(2026, 1, 3)]
    assert page.has_more is False


def test_blank_student_id_rejected():
    with pytest.raises(ValidationError):
        StudentInsightsService(FakeRecordSource([])).build(" ")
