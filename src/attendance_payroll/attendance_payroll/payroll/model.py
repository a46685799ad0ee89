from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ..attendance.model import DayRecord
from ..employees.model import Employee


@dataclass(frozen=True)
class AttendanceCounts:
    present: int = 0
    absent: int = 0
    weekend: int = 0
    future: int = 0

    @property
    def eligible(self) -> int:
        return self.present + self.absent


@dataclass(frozen=True)
class AttendanceSummary:
    """Fold of one month of DayRecords for one employee."""

    rate: int
    salary: Decimal
    salary_display: str
    counts: AttendanceCounts

    @property
    def rate_display(self) -> str:
        return f"{self.rate}%"


@dataclass(frozen=True)
class MonthlyAttendanceReport:
    employee: Employee
    year: int
    month: int
    days: list[DayRecord]
    summary: AttendanceSummary
