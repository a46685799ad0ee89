from decimal import Decimal

from src.attendance_payroll.attendance_payroll.payroll.currency import CurrencyFormatter


def test_format_usd_en_us():
    assert CurrencyFormatter(locale="en_US", currency="USD").format(Decimal("2310000")) == "$2,310,000.00"


def test_format_idr_uses_indonesian_grouping():
    text = CurrencyFormatter(locale="id_ID", currency="IDR").format(Decimal("2310000"))

    assert "Rp" in text
    assert "2.310.000" in text


def test_format_zero():
    assert CurrencyFormatter(locale="en_US", currency="USD").format(Decimal("0")) == "$0.00"
