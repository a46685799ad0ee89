from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from .model import ClockEvent


class ClockEventRepository(Protocol):
    def find_in_range(self, employee_id: int, start_date: date, end_date: date) -> Sequence[ClockEvent]:
        """Events with ``start_date <= schedule_date < end_date``."""

        raise NotImplementedError

    def get_for_employee_and_date(self, employee_id: int, schedule_date: date) -> Optional[ClockEvent]:
        raise NotImplementedError

    def upsert_event(
        self,
        *,
        employee_id: int,
        schedule_date: date,
        clock_in_at: Optional[datetime] = None,
        clock_out_at: Optional[datetime] = None,
    ) -> None:
        """Insert-or-update keyed by (employee_id, schedule_date).

        Only the timestamps that are given are written; the others keep their
        stored value (or stay NULL on insert).
        """

        raise NotImplementedError
