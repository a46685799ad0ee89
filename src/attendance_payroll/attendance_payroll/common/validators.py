from __future__ import annotations

from typing import Optional

from ..core.exceptions import ValidationError


def require_int(value: Optional[str], field_name: str) -> int:
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer")


def require_year_month(year: Optional[str], month: Optional[str]) -> tuple[int, int]:
    """Validate a ``?year=&month=`` pair coming from the transport layer."""
    y = require_int(year, "year")
    m = require_int(month, "month")
    if y <= 0:
        raise ValidationError("year must be positive")
    if not 1 <= m <= 12:
        raise ValidationError("month must be between 1 and 12")
    return y, m
