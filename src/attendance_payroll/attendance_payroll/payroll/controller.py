from __future__ import annotations

from flask import Flask, jsonify, request

from ..attendance.model import DayRecord
from ..common.datetime_utils import now_local
from ..common.validators import require_year_month
from ..core.exceptions import NotFoundError, ValidationError
from .model import MonthlyAttendanceReport


def _selected_month() -> tuple[int, int]:
    year = request.args.get("year")
    month = request.args.get("month")
    if year and month:
        return require_year_month(year, month)
    today = now_local().date()
    return today.year, today.month


def day_to_json(day: DayRecord) -> dict:
    return {
        "date": day.date.isoformat(),
        "day": day.date.day,
        "weekday": day.weekday,
        "clock_in": day.clock_in.strftime("%H:%M:%S") if day.clock_in else None,
        "clock_out": day.clock_out.strftime("%H:%M:%S") if day.clock_out else None,
        "status": day.status.value,
    }


def report_to_json(report: MonthlyAttendanceReport) -> dict:
    s = report.summary
    return {
        "employee": {
            "employee_id": report.employee.employee_id,
            "full_name": report.employee.full_name,
            "email": report.employee.email,
        },
        "schedule": {"year": report.year, "month": report.month},
        "logs": [day_to_json(d) for d in report.days],
        "total_attendance": s.rate_display,
        "total_salary": s.salary_display,
        "counts": {
            "present": s.counts.present,
            "absent": s.counts.absent,
            "weekend": s.counts.weekend,
            "future": s.counts.future,
        },
    }


def register(app: Flask, container) -> None:
    @app.route("/employees", methods=["GET"], endpoint="employees_overview")
    def employees_overview():
        try:
            year, month = _selected_month()
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        rows = container.payroll_report_service.employees_overview(year, month)
        return jsonify({"year": year, "month": month, "employees": rows})

    @app.route("/employees/<int:employee_id>/attendance", methods=["GET"], endpoint="employee_attendance")
    def employee_attendance(employee_id: int):
        try:
            year, month = _selected_month()
            report = container.payroll_report_service.monthly_report(employee_id, year, month)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        return jsonify(report_to_json(report))
