from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import DayStatus


@dataclass(frozen=True)
class ClockEvent:
    """Stored clock-in/out timestamps of one employee for one calendar day."""

    employee_id: int
    schedule_date: date
    clock_in_at: Optional[datetime] = None
    clock_out_at: Optional[datetime] = None
    note: Optional[str] = None


@dataclass(frozen=True)
class DayRecord:
    """Read-model: one calendar day merged with its clock event, if any."""

    date: date
    weekday: int
    clock_in: Optional[datetime]
    clock_out: Optional[datetime]
    status: DayStatus

    @property
    def has_clock_in(self) -> bool:
        return self.clock_in is not None

    @property
    def has_clock_out(self) -> bool:
        return self.clock_out is not None
