from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

from ...attendance.model import DayRecord
from ...core.constants import PERCENT, SALARY_QUANTUM
from ...core.enums import DayStatus
from ..model import AttendanceCounts
from .base import PayrollCalculator


def count_statuses(records: Sequence[DayRecord]) -> AttendanceCounts:
    present = absent = weekend = future = 0
    for r in records:
        if r.status == DayStatus.PRESENT:
            present += 1
        elif r.status == DayStatus.ABSENT:
            absent += 1
        elif r.status == DayStatus.WEEKEND:
            weekend += 1
        elif r.status == DayStatus.FUTURE:
            future += 1
    return AttendanceCounts(present=present, absent=absent, weekend=weekend, future=future)


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: rate = present / (present + absent), salary = base * rate.

    A month with no eligible day yet has rate 0. Rounding is half-up, the
    salary is rounded to cents only after the multiplication.
    """

    def attendance_rate(self, records: Sequence[DayRecord]) -> int:
        counts = count_statuses(records)
        if counts.eligible == 0:
            return 0
        ratio = Decimal(counts.present * PERCENT) / Decimal(counts.eligible)
        return int(ratio.quantize(Decimal(1), rounding=ROUND_HALF_UP))

    def prorate(self, base_salary: Decimal, rate: int) -> Decimal:
        amount = Decimal(str(base_salary)) * Decimal(int(rate)) / Decimal(PERCENT)
        return amount.quantize(SALARY_QUANTUM, rounding=ROUND_HALF_UP)
