from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional

from ..calendar_month.builder import build_month
from ..common.datetime_utils import month_bounds, now_local
from ..core.exceptions import NotFoundError
from ..employees.repository import EmployeeRepository
from .factory import DayStatusFactory
from .model import ClockEvent, DayRecord
from .reconciler import reconcile
from .repository import ClockEventRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(
        self,
        clock_events: ClockEventRepository,
        employees: EmployeeRepository,
        *,
        status_factory: DayStatusFactory | None = None,
    ):
        self._clock_events = clock_events
        self._employees = employees
        self._factory = status_factory or DayStatusFactory()

    def _require_employee(self, employee_id: int) -> None:
        if not self._employees.get_by_id(employee_id):
            raise NotFoundError(f"Employee {employee_id} not found")

    def clock_in(self, employee_id: int, *, now: datetime | None = None) -> ClockEvent:
        """Stamp today's clock-in. Repeated calls the same day overwrite it."""
        now = now or now_local()
        self._require_employee(employee_id)

        self._clock_events.upsert_event(employee_id=employee_id, schedule_date=now.date(), clock_in_at=now)
        logger.info("Employee %s clocked in at %s", employee_id, now.isoformat())
        return self._today_event(employee_id, now.date())

    def clock_out(self, employee_id: int, *, now: datetime | None = None) -> ClockEvent:
        """Stamp today's clock-out. No clock-in is required beforehand."""
        now = now or now_local()
        self._require_employee(employee_id)

        self._clock_events.upsert_event(employee_id=employee_id, schedule_date=now.date(), clock_out_at=now)
        logger.info("Employee %s clocked out at %s", employee_id, now.isoformat())
        return self._today_event(employee_id, now.date())

    def _today_event(self, employee_id: int, today: date) -> ClockEvent:
        event = self._clock_events.get_for_employee_and_date(employee_id, today)
        if event is None:
            # Store accepted the write but cannot read it back.
            raise RuntimeError(f"Clock event for employee {employee_id} on {today} missing after upsert")
        return event

    def monthly_log(
        self,
        employee_id: int,
        year: int,
        month: int,
        *,
        today: Optional[date] = None,
    ) -> list[DayRecord]:
        """One DayRecord per day of the month, classified as of ``today``."""
        today = today or now_local().date()
        start, end = month_bounds(year, month)
        events = self._clock_events.find_in_range(employee_id, start, end)
        logger.debug("Employee %s: %d clock events in [%s, %s)", employee_id, len(events), start, end)
        return reconcile(build_month(year, month), events, today=today, factory=self._factory)
