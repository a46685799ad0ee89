from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..attendance.model import DayRecord
from ..attendance.service import AttendanceService
from ..common.datetime_utils import now_local
from ..core.exceptions import NotFoundError
from ..employees.repository import EmployeeRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator, count_statuses
from .currency import CurrencyFormatter
from .model import AttendanceSummary, MonthlyAttendanceReport

logger = logging.getLogger(__name__)


class PayrollReportService:
    def __init__(
        self,
        attendance: AttendanceService,
        employees: EmployeeRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
        formatter: Optional[CurrencyFormatter] = None,
    ):
        self._attendance = attendance
        self._employees = employees
        self._calculator = calculator or StandardPayrollCalculator()
        self._formatter = formatter or CurrencyFormatter()

    def summarize(self, records: Sequence[DayRecord], base_salary: Decimal) -> AttendanceSummary:
        rate = self._calculator.attendance_rate(records)
        salary = self._calculator.prorate(base_salary, rate)
        return AttendanceSummary(
            rate=rate,
            salary=salary,
            salary_display=self._formatter.format(salary),
            counts=count_statuses(records),
        )

    def monthly_report(
        self,
        employee_id: int,
        year: int,
        month: int,
        *,
        today: Optional[date] = None,
    ) -> MonthlyAttendanceReport:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")

        days = self._attendance.monthly_log(employee_id, year, month, today=today)
        summary = self.summarize(days, employee.base_salary)
        logger.debug(
            "Employee %s %04d-%02d: rate=%s%% salary=%s", employee_id, year, month, summary.rate, summary.salary
        )
        return MonthlyAttendanceReport(employee=employee, year=year, month=month, days=days, summary=summary)

    def employees_overview(self, year: int, month: int, *, today: Optional[date] = None) -> list[dict]:
        """Rate and prorated salary of every employee for one month."""
        today = today or now_local().date()

        rows: list[dict] = []
        for idx, employee in enumerate(self._employees.list_all(), start=1):
            days = self._attendance.monthly_log(employee.employee_id, year, month, today=today)
            summary = self.summarize(days, employee.base_salary)
            rows.append(
                {
                    "idx": idx,
                    "employee_id": employee.employee_id,
                    "full_name": employee.full_name,
                    "email": employee.email,
                    "is_active": employee.is_active,
                    "salary": self._formatter.format(employee.base_salary),
                    "total_attendance": summary.rate_display,
                    "total_salary": summary.salary_display,
                }
            )
        return rows
