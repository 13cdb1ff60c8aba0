"""Fixed-point helpers for money and exchange rates."""

from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Union

CENT = Decimal("0.01")
RATE_QUANTUM = Decimal("0.000001")
ZERO = Decimal("0.00")

# One minor unit
MONEY_TOLERANCE = CENT

# Largest amount a Numeric(18, 2) column holds
MAX_MONEY = Decimal("9999999999999999.99")


def to_decimal(value: Union[Decimal, int, float, str]) -> Decimal:
    """Coerce a number to Decimal without binary float artifacts."""
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except InvalidOperation as exc:
        raise ValueError(f"Not a number: {value!r}") from exc


def round_money(value: Decimal) -> Decimal:
    """Round to 2 decimal places, half away from zero."""
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def round_rate(value: Decimal) -> Decimal:
    """Round an exchange rate to 6 decimal places, half away from zero."""
    return to_decimal(value).quantize(RATE_QUANTUM, rounding=ROUND_HALF_UP)


def has_cent_precision(value: Decimal) -> bool:
    """True when the value carries no digits below one cent."""
    try:
        return value == value.quantize(CENT)
    except InvalidOperation:
        return False


def normalize_currency(code: str) -> str:
    """Strip and upper-case a currency code."""
    return (code or "").strip().upper()


def is_currency_code(code: str) -> bool:
    """Three-letter alphabetic ISO 4217 style code."""
    return len(code) == 3 and code.isalpha() and code.isascii()
