from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Employee:
    """Employee profile: only what payroll needs.

    ``base_salary`` is the monthly amount before proration, in the configured currency.
    """

    employee_id: int
    full_name: str
    email: str
    base_salary: Decimal
    is_active: bool = True
