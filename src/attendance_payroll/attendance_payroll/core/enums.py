from __future__ import annotations

from enum import Enum


class DayStatus(str, Enum):
    """Classification of one calendar day in a monthly attendance log."""

    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    WEEKEND = "WEEKEND"
    FUTURE = "FUTURE"

    # A working day in the past with no clock event ("no remarks").
    UNMARKED = "ABSENT"
