from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Sequence

from ..calendar_month.model import CalendarDay
from ..common.datetime_utils import as_date
from .factory import DayStatusFactory
from .model import ClockEvent, DayRecord


def reconcile(
    days: Sequence[CalendarDay],
    events: Iterable[ClockEvent],
    *,
    today: date,
    factory: Optional[DayStatusFactory] = None,
) -> list[DayRecord]:
    """Merge clock events into the month calendar, one DayRecord per day.

    Events are matched by calendar day only; events outside ``days`` are ignored.
    """
    factory = factory or DayStatusFactory()
    by_date: dict[date, ClockEvent] = {as_date(e.schedule_date): e for e in events}

    records: list[DayRecord] = []
    for day in days:
        event = by_date.get(day.date)
        records.append(
            DayRecord(
                date=day.date,
                weekday=day.weekday,
                clock_in=event.clock_in_at if event else None,
                clock_out=event.clock_out_at if event else None,
                status=factory.classify(day, event, today=today),
            )
        )
    return records
