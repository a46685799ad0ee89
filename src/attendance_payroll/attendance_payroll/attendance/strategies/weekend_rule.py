from __future__ import annotations

from ...calendar_month.model import CalendarDay
from ...core.constants import WEEKEND_DAYS
from .base import RestDayRule


class FixedWeekendRule(RestDayRule):
    """Saturday and Sunday (ISO weekday 6 and 7) are rest days."""

    def is_rest_day(self, day: CalendarDay) -> bool:
        return day.weekday in WEEKEND_DAYS
