from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import as_date
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import ClockEvent
from .repository import ClockEventRepository


def _to_event(r: dict) -> ClockEvent:
    return ClockEvent(
        employee_id=int(r["employee_id"]),
        schedule_date=as_date(r["schedule_date"]),
        clock_in_at=r.get("clock_in_at"),
        clock_out_at=r.get("clock_out_at"),
        note=r.get("note"),
    )


class MySQLClockEventRepository(ClockEventRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_in_range(self, employee_id: int, start_date: date, end_date: date) -> Sequence[ClockEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, schedule_date, clock_in_at, clock_out_at, note
                FROM clock_events
                WHERE employee_id=%s AND schedule_date >= %s AND schedule_date < %s
                ORDER BY schedule_date ASC
                """,
                (employee_id, start_date, end_date),
            )
            return [_to_event(r) for r in fetchall(cur)]

    def get_for_employee_and_date(self, employee_id: int, schedule_date: date) -> Optional[ClockEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, schedule_date, clock_in_at, clock_out_at, note
                FROM clock_events
                WHERE employee_id=%s AND schedule_date=%s
                """,
                (employee_id, schedule_date),
            )
            r = fetchone(cur)
            if not r:
                return None
            return _to_event(r)

    def upsert_event(
        self,
        *,
        employee_id: int,
        schedule_date: date,
        clock_in_at: Optional[datetime] = None,
        clock_out_at: Optional[datetime] = None,
    ) -> None:
        # One atomic write on UNIQUE(employee_id, schedule_date).
        # COALESCE keeps the stored value of whichever timestamp was not given.
        # Row alias syntax needs MySQL 8.0.19+.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO clock_events(employee_id, schedule_date, clock_in_at, clock_out_at)
                VALUES(%s,%s,%s,%s) AS new
                ON DUPLICATE KEY UPDATE
                    clock_in_at = COALESCE(new.clock_in_at, clock_events.clock_in_at),
                    clock_out_at = COALESCE(new.clock_out_at, clock_events.clock_out_at)
                """,
                (employee_id, schedule_date, clock_in_at, clock_out_at),
            )
