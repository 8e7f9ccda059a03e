from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Iterator

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_hhmm(value: str) -> time:
    """Parse a HH:mm shift boundary such as '08:30'."""
    try:
        return datetime.strptime(value.strip(), "%H:%M").time()
    except (AttributeError, ValueError):
        raise ValidationError(f"Giờ không hợp lệ (HH:MM): {value!r}")


def at_time(day: date, t: time) -> datetime:
    return datetime.combine(day, t.replace(second=0, microsecond=0))


def whole_minutes(later: datetime, earlier: datetime) -> int:
    """Full minutes between two instants, truncated toward zero."""
    return int((later - earlier).total_seconds() / 60)


def month_key(day: date) -> str:
    return day.strftime("%Y-%m")


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every date in [start, end], ascending."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def js_weekday(day: date) -> int:
    """Weekday index with 0 = Sunday ... 6 = Saturday."""
    return (day.weekday() + 1) % 7


def is_weekend(day: date) -> bool:
    return day.weekday() >= 5
