from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional
from zoneinfo import ZoneInfo

from .admin.service import AdminSessionSigner
from .attendance.repository import AttendanceRecordSource
from .attendance.service import StudentInsightsService
from .checkin.service import CheckInTokenService
from .common.datetime_utils import load_timezone
from .core.constants import DEFAULT_TIMEZONE


@dataclass(frozen=True)
class Container:
    timezone: ZoneInfo

    checkin_tokens: CheckInTokenService
    admin_sessions: AdminSessionSigner
    insights_service: Optional[StudentInsightsService]


def build_container(settings: Any, *, attendance_records: Optional[AttendanceRecordSource] = None) -> Container:
    """Wire services from a settings module (or any object with the same attributes).

    Secrets are validated here, once, so a misconfigured deployment fails at
    startup instead of on the first check-in.
    """
    tz = load_timezone(getattr(settings, "LOCAL_TIMEZONE", DEFAULT_TIMEZONE))

    checkin_tokens = CheckInTokenService(getattr(settings, "CHECKIN_TOKEN_SECRET", None))
    admin_sessions = AdminSessionSigner(getattr(settings, "ADMIN_SESSION_SECRET", None))
    insights_service = StudentInsightsService(attendance_records, tz=tz) if attendance_records is not None else None

    return Container(
        timezone=tz,
        checkin_tokens=checkin_tokens,
        admin_sessions=admin_sessions,
        insights_service=insights_service,
    )
