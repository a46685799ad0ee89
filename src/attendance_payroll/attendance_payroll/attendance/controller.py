from __future__ import annotations

from flask import Flask, jsonify

from ..core.exceptions import NotFoundError
from .model import ClockEvent


def _fmt_time(value) -> str | None:
    return value.strftime("%H:%M:%S") if value else None


def event_to_json(event: ClockEvent) -> dict:
    return {
        "employee_id": event.employee_id,
        "schedule_date": event.schedule_date.isoformat(),
        "clock_in": _fmt_time(event.clock_in_at),
        "clock_out": _fmt_time(event.clock_out_at),
    }


def register(app: Flask, container) -> None:
    @app.route("/employees/<int:employee_id>/clock-in", methods=["POST"], endpoint="clock_in")
    def clock_in(employee_id: int):
        try:
            event = container.attendance_service.clock_in(employee_id)
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        return jsonify({"success": True, "message": "Success clock in.", "event": event_to_json(event)})

    @app.route("/employees/<int:employee_id>/clock-out", methods=["POST"], endpoint="clock_out")
    def clock_out(employee_id: int):
        try:
            event = container.attendance_service.clock_out(employee_id)
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        return jsonify({"success": True, "message": "Success clock out.", "event": event_to_json(event)})
