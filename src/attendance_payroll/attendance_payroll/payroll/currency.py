from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from babel.numbers import format_currency

from ..core.constants import DEFAULT_SALARY_CURRENCY, DEFAULT_SALARY_LOCALE


@dataclass(frozen=True)
class CurrencyFormatter:
    """Render money with the locale's symbol, grouping and decimal separator."""

    locale: str = DEFAULT_SALARY_LOCALE
    currency: str = DEFAULT_SALARY_CURRENCY

    def format(self, amount: Decimal) -> str:
        return format_currency(Decimal(str(amount)), self.currency, locale=self.locale)
