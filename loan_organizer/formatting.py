"""Display formatting for money, rates and dates."""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

CENT = Decimal("0.01")
DATE_FORMAT = "%m/%d/%Y"


def _as_decimal(value: Any) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


def format_currency(amount: Any) -> str:
    """Format as dollars with thousands separators (``"$1,234.56"``)."""
    value = _as_decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def format_percent(fraction: Any) -> str:
    """Format a fraction as a percentage (``0.0525`` -> ``"5.25%"``)."""
    value = (_as_decimal(fraction) * 100).quantize(CENT, rounding=ROUND_HALF_UP)
    return f"{value:.2f}%"


def format_date(value: date) -> str:
    """Format as ``MM/DD/YYYY``."""
    return value.strftime(DATE_FORMAT)
