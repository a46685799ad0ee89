from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def as_date(value: date | datetime) -> date:
    """Truncate a datetime to its calendar day (dates pass through)."""
    if isinstance(value, datetime):
        return value.date()
    return value


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """Half-open range [first day of month, first day of next month)."""
    first = date(year, month, 1)
    return first, first + timedelta(days=days_in_month(year, month))
