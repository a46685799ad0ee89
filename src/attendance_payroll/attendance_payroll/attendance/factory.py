from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..calendar_month.model import CalendarDay
from ..core.enums import DayStatus
from .model import ClockEvent
from .strategies.base import RestDayRule
from .strategies.weekend_rule import FixedWeekendRule


@dataclass
class DayStatusFactory:
    """Decide the status of one day.

    Precedence: rest day > future > present/absent. A rest day in the future
    stays WEEKEND, and an event on a rest day does not make it PRESENT.
    Presence only needs an event to exist; either timestamp may be missing.
    """

    rest_day_rule: RestDayRule = field(default_factory=FixedWeekendRule)

    def classify(self, day: CalendarDay, event: Optional[ClockEvent], *, today: date) -> DayStatus:
        if self.rest_day_rule.is_rest_day(day):
            return DayStatus.WEEKEND
        if day.date > today:
            return DayStatus.FUTURE
        if event is not None:
            return DayStatus.PRESENT
        return DayStatus.ABSENT
