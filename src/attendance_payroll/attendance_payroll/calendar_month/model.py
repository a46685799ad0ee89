from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class CalendarDay:
    """One day of a target month, annotated with its ISO weekday (1=Mon..7=Sun)."""

    date: date
    weekday: int
