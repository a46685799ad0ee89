from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Sequence

from ...attendance.model import DayRecord


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def attendance_rate(self, records: Sequence[DayRecord]) -> int:
        """Whole-number percentage in [0, 100]."""
        raise NotImplementedError

    @abstractmethod
    def prorate(self, base_salary: Decimal, rate: int) -> Decimal:
        raise NotImplementedError
