from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from typing import Any


_DECIMAL_PLACES = Decimal("0.01")
_THOUSANDS_SEPARATOR = "."
_DECIMAL_SEPARATOR = ","


def to_decimal(value: Any) -> Decimal:
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def quantize(value: Any) -> Decimal:
    # ROUND_HALF_UP on Decimal rounds ties away from zero
    return to_decimal(value).quantize(_DECIMAL_PLACES, rounding=ROUND_HALF_UP)


def split_amount(value: Any) -> tuple[int, int]:
    """Return ``(integer_part, cents)`` of ``value`` rounded to cents."""
    amount = abs(quantize(value))
    integer_part = int(amount)
    cents = int((amount - integer_part) * 100)
    return integer_part, cents


def format_money(value: Any) -> str:
    amount = quantize(value)
    sign = "-" if amount < 0 else ""
    integer_part, cents = split_amount(amount)
    grouped = f"{integer_part:,}".replace(",", _THOUSANDS_SEPARATOR)
    return f"{sign}{grouped}{_DECIMAL_SEPARATOR}{cents:02d}"
