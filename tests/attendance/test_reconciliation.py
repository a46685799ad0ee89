from datetime import date, datetime

from src.attendance_payroll.attendance_payroll.attendance.model import ClockEvent
from src.attendance_payroll.attendance_payroll.attendance.reconciler import reconcile
from src.attendance_payroll.attendance_payroll.calendar_month.builder import build_month
from src.attendance_payroll.attendance_payroll.core.enums import DayStatus


def test_one_record_per_calendar_day_in_order():
    records = reconcile(build_month(2025, 9), [], today=date(2025, 10, 1))

    assert [r.date for r in records] == [date(2025, 9, d) for d in range(1, 31)]


def test_events_merge_by_calendar_day():
    events = [
        ClockEvent(1, date(2025, 9, 2), datetime(2025, 9, 2, 8, 1), datetime(2025, 9, 2, 17, 5)),
        ClockEvent(1, date(2025, 9, 3), datetime(2025, 9, 3, 8, 30), None),
    ]

    records = {r.date: r for r in reconcile(build_month(2025, 9), events, today=date(2025, 10, 1))}

    assert records[date(2025, 9, 2)].status == DayStatus.PRESENT
    assert records[date(2025, 9, 2)].clock_in == datetime(2025, 9, 2, 8, 1)
    assert records[date(2025, 9, 2)].clock_out == datetime(2025, 9, 2, 17, 5)
    assert records[date(2025, 9, 3)].status == DayStatus.PRESENT
    assert records[date(2025, 9, 3)].has_clock_in
    assert not records[date(2025, 9, 3)].has_clock_out
    assert records[date(2025, 9, 4)].status == DayStatus.ABSENT
    assert records[date(2025, 9, 4)].clock_in is None


def test_schedule_date_given_as_datetime_matches_its_day():
    events = [ClockEvent(1, datetime(2025, 9, 30, 0, 0), datetime(2025, 9, 30, 9, 0), None)]

    records = reconcile(build_month(2025, 9), events, today=date(2025, 10, 1))

    assert records[-1].date == date(2025, 9, 30)
    assert records[-1].status == DayStatus.PRESENT


def test_weekend_keeps_clock_fields_but_stays_weekend():
    saturday = date(2025, 9, 6)
    events = [ClockEvent(1, saturday, datetime(2025, 9, 6, 9, 0), datetime(2025, 9, 6, 12, 0))]

    records = {r.date: r for r in reconcile(build_month(2025, 9), events, today=date(2025, 10, 1))}

    assert records[saturday].status == DayStatus.WEEKEND
    assert records[saturday].clock_in == datetime(2025, 9, 6, 9, 0)
    assert records[saturday].clock_out == datetime(2025, 9, 6, 12, 0)


def test_events_outside_month_are_ignored():
    events = [
        ClockEvent(1, date(2025, 8, 29), datetime(2025, 8, 29, 8, 0), None),
        ClockEvent(1, date(2025, 10, 1), datetime(2025, 10, 1, 8, 0), None),
    ]

    records = reconcile(build_month(2025, 9), events, today=date(2025, 10, 2))

    assert len(records) == 30
    assert all(r.status in (DayStatus.ABSENT, DayStatus.WEEKEND) for r in records)


def test_in_progress_month_marks_remaining_working_days_future():
    records = reconcile(build_month(2025, 9), [], today=date(2025, 9, 15))
    by_status: dict[DayStatus, list[int]] = {}
    for r in records:
        by_status.setdefault(r.status, []).append(r.date.day)

    assert by_status[DayStatus.FUTURE] == [16, 17, 18, 19, 22, 23, 24, 25, 26, 29, 30]
    assert by_status[DayStatus.ABSENT] == [1, 2, 3, 4, 5, 8, 9, 10, 11, 12, 15]
    assert by_status[DayStatus.WEEKEND] == [6, 7, 13, 14, 20, 21, 27, 28]
