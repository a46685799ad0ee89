from __future__ import annotations

from abc import ABC, abstractmethod

from ...calendar_month.model import CalendarDay


class RestDayRule(ABC):
    """Strategy Pattern: decide which calendar days are not working days."""

    @abstractmethod
    def is_rest_day(self, day: CalendarDay) -> bool:
        raise NotImplementedError
