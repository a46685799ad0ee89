"""Example: monthly attendance & prorated salary without Flask.

Controllers are a thin layer; the rules live in the services.
"""

import importlib
import sys

from config import get_settings_module

from src.attendance_payroll.attendance_payroll.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        db_config=settings.DB_CONFIG,
        salary_locale=settings.SALARY_LOCALE,
        salary_currency=settings.SALARY_CURRENCY,
    )
    year, month = int(sys.argv[1]), int(sys.argv[2])
    report = container.payroll_report_service.monthly_report(employee_id=1, year=year, month=month)
    for day in report.days:
        print(day.date.isoformat(), day.status.value)
    print(report.summary.rate_display, report.summary.salary_display)


if __name__ == "__main__":
    main()
