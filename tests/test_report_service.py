from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

import pytest

from src.attendance_payroll.attendance_payroll.attendance.factory import DayStatusFactory
from src.attendance_payroll.attendance_payroll.attendance.model import ClockEvent
from src.attendance_payroll.attendance_payroll.attendance.service import AttendanceService
from src.attendance_payroll.attendance_payroll.attendance.strategies.base import RestDayRule
from src.attendance_payroll.attendance_payroll.calendar_month.model import CalendarDay
from src.attendance_payroll.attendance_payroll.core.enums import DayStatus
from src.attendance_payroll.attendance_payroll.core.exceptions import NotFoundError
from src.attendance_payroll.attendance_payroll.employees.model import Employee
from src.attendance_payroll.attendance_payroll.payroll.currency import CurrencyFormatter
from src.attendance_payroll.attendance_payroll.payroll.service import PayrollReportService


@dataclass
class InMemoryEmployees:
    employees_by_id: dict[int, Employee]

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self.employees_by_id.get(employee_id)

    def list_all(self):
        return [self.employees_by_id[k] for k in sorted(self.employees_by_id)]


class FakeClockEvents:
    def __init__(self, events):
        self._events = events

    def find_in_range(self, employee_id: int, start_date: date, end_date: date):
        return [e for e in self._events if e.employee_id == employee_id and start_date <= e.schedule_date < end_date]


class SundayOnly(RestDayRule):
    def is_rest_day(self, day: CalendarDay) -> bool:
        return day.weekday == 7


def _event(employee_id: int, d: date) -> ClockEvent:
    return ClockEvent(employee_id, d, datetime(d.year, d.month, d.day, 8, 0), datetime(d.year, d.month, d.day, 17, 0))


EMPLOYEES = {
    1: Employee(1, "Budi", "budi@example.com", Decimal("3000000")),
    2: Employee(2, "Sari", "sari@example.com", Decimal("4500000")),
}


def _service(events, *, status_factory=None):
    employees = InMemoryEmployees(EMPLOYEES)
    attendance = AttendanceService(FakeClockEvents(events), employees, status_factory=status_factory)
    return PayrollReportService(attendance, employees, formatter=CurrencyFormatter(locale="en_US", currency="USD"))


def test_thirty_day_month_with_four_rest_days_and_twenty_present():
    # September 2025 has four Sundays (7, 14, 21, 28); 26 working days remain.
    working = [date(2025, 9, d) for d in range(1, 31) if date(2025, 9, d).isoweekday() != 7]
    events = [_event(1, d) for d in working[:20]]
    svc = _service(events, status_factory=DayStatusFactory(rest_day_rule=SundayOnly()))

    report = svc.monthly_report(1, 2025, 9, today=date(2025, 10, 1))

    assert report.summary.counts.eligible == 26
    assert report.summary.counts.present == 20
    assert report.summary.rate == 77
    assert report.summary.salary == Decimal("2310000.00")
    assert report.summary.salary_display == "$2,310,000.00"
    assert report.summary.rate_display == "77%"


def test_in_progress_month_excludes_future_days():
    worked = [date(2025, 9, d) for d in (1, 2, 3, 4, 5, 8, 9, 10, 11, 12, 15)]
    svc = _service([_event(1, d) for d in worked])

    report = svc.monthly_report(1, 2025, 9, today=date(2025, 9, 15))

    assert report.summary.counts.future == 11
    assert report.summary.counts.eligible == 11
    assert report.summary.rate == 100
    assert report.summary.salary == Decimal("3000000")


def test_future_month_has_zero_rate_and_zero_salary():
    svc = _service([])

    report = svc.monthly_report(1, 2030, 1, today=date(2025, 9, 15))

    assert all(d.status in (DayStatus.FUTURE, DayStatus.WEEKEND) for d in report.days)
    assert report.summary.rate == 0
    assert report.summary.salary == Decimal("0")
    assert report.summary.salary_display == "$0.00"


def test_clock_in_only_day_contributes_to_present():
    d = date(2025, 9, 1)
    svc = _service([ClockEvent(1, d, datetime(2025, 9, 1, 8, 0), None)])

    report = svc.monthly_report(1, 2025, 9, today=date(2025, 9, 1))

    assert report.days[0].status == DayStatus.PRESENT
    assert report.summary.rate == 100


def test_summarize_twice_is_identical():
    svc = _service([_event(1, date(2025, 9, d)) for d in (1, 2, 3)])
    report = svc.monthly_report(1, 2025, 9, today=date(2025, 9, 30))

    first = svc.summarize(report.days, Decimal("3000000"))
    second = svc.summarize(report.days, Decimal("3000000"))

    assert first == second == report.summary


def test_unknown_employee_raises_not_found():
    with pytest.raises(NotFoundError):
        _service([]).monthly_report(42, 2025, 9, today=date(2025, 9, 30))


def test_employees_overview_lists_every_employee():
    events = [_event(1, date(2025, 9, d)) for d in (1, 2, 3, 4, 5)]
    svc = _service(events)

    rows = svc.employees_overview(2025, 9, today=date(2025, 9, 5))

    assert [r["idx"] for r in rows] == [1, 2]
    assert rows[0]["salary"] == "$3,000,000.00"
    assert rows[0]["total_attendance"] == "100%"
    assert rows[0]["total_salary"] == "$3,000,000.00"
    assert rows[1]["total_attendance"] == "0%"
    assert rows[1]["total_salary"] == "$0.00"
