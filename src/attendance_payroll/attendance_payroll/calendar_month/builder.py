from __future__ import annotations

from datetime import date, timedelta

from ..common.datetime_utils import days_in_month
from .model import CalendarDay


def build_month(year: int, month: int) -> list[CalendarDay]:
    """Every day of ``year``/``month`` in order, first to last inclusive.

    Out-of-range months or years are the caller's problem; ``date`` raises.
    """
    first = date(year, month, 1)
    days = []
    for offset in range(days_in_month(year, month)):
        d = first + timedelta(days=offset)
        days.append(CalendarDay(date=d, weekday=d.isoweekday()))
    return days
