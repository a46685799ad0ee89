from __future__ import annotations

from dataclasses import dataclass

from .attendance.factory import DayStatusFactory
from .attendance.mysql_clock_event_repository import MySQLClockEventRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_SALARY_CURRENCY, DEFAULT_SALARY_LOCALE
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .payroll.calculator.standard_calculator import StandardPayrollCalculator
from .payroll.currency import CurrencyFormatter
from .payroll.service import PayrollReportService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    employees_repo: MySQLEmployeeRepository
    clock_events_repo: MySQLClockEventRepository

    attendance_service: AttendanceService
    payroll_report_service: PayrollReportService


def build_container(
    *,
    db_config: dict,
    salary_locale: str = DEFAULT_SALARY_LOCALE,
    salary_currency: str = DEFAULT_SALARY_CURRENCY,
) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    employees_repo = MySQLEmployeeRepository(conn)
    clock_events_repo = MySQLClockEventRepository(conn)

    attendance_service = AttendanceService(
        clock_events_repo,
        employees_repo,
        status_factory=DayStatusFactory(),
    )
    payroll_report_service = PayrollReportService(
        attendance_service,
        employees_repo,
        calculator=StandardPayrollCalculator(),
        formatter=CurrencyFormatter(locale=salary_locale, currency=salary_currency),
    )

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        clock_events_repo=clock_events_repo,
        attendance_service=attendance_service,
        payroll_report_service=payroll_report_service,
    )
