from __future__ import annotations

from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..core.exceptions import ConfigurationError

DateLike = Union[date, datetime]

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
SATURDAY = 5
SUNDAY = 6


def now_utc() -> datetime:
    """Current time as an aware UTC datetime.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc)


def load_timezone(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ConfigurationError(f"Unknown time zone: {name!r}") from exc


def ensure_aware(value: datetime) -> datetime:
    """Naive datetimes are taken to be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def to_epoch_millis(value: datetime) -> int:
    return (ensure_aware(value) - EPOCH) // timedelta(milliseconds=1)


def from_epoch_millis(value: int) -> datetime:
    return EPOCH + timedelta(milliseconds=value)


def local_day(value: DateLike, tz: Optional[tzinfo] = None) -> date:
    """Calendar day of ``value`` as seen in ``tz``.

    Plain dates are already calendar days and pass through. Aware datetimes are
    converted to ``tz`` when one is given; naive datetimes keep their own day.
    """
    if isinstance(value, datetime):
        if tz is not None and value.tzinfo is not None:
            return value.astimezone(tz).date()
        return value.date()
    return value


def weekend_saturday(day: date) -> Optional[date]:
    """Saturday that anchors the weekend containing ``day``, or None on weekdays."""
    weekday = day.weekday()
    if weekday == SATURDAY:
        return day
    if weekday == SUNDAY:
        return day - timedelta(days=1)
    return None


def short_month_day(day: date) -> str:
    """Format like ``Jan 4``."""
    return f"{day.strftime('%b')} {day.day}"


def month_start(day: date) -> date:
    return day.replace(day=1)


def previous_month_start(day: date) -> date:
    return (month_start(day) - timedelta(days=1)).replace(day=1)
