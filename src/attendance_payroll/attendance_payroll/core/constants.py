"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

# ISO weekday numbers (1=Monday ... 7=Sunday)
WEEKEND_DAYS = frozenset({6, 7})

PERCENT = 100
SALARY_QUANTUM = Decimal("0.01")

DEFAULT_SALARY_LOCALE = "id_ID"
DEFAULT_SALARY_CURRENCY = "IDR"
