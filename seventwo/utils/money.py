"""Money helpers shared by the ledger and settlement services.

Amounts travel as floats with two-decimal precision. Rounding is half-up on
the decimal representation so 0.005 becomes 0.01 rather than following the
binary float.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable

from seventwo.core.config import settings

CENT = Decimal("0.01")


def round_money(value: float) -> float:
    """Round an amount to cents."""
    return float(Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP))


def sum_money(values: Iterable[float]) -> float:
    """Sum raw amounts, rounding once after summation."""
    return round_money(sum(values, 0.0))


def is_zero(value: float) -> bool:
    return abs(value) < settings.MONEY_TOLERANCE


def format_money(value: float) -> str:
    """Format an amount for user-facing messages, e.g. ``$12.50``."""
    return f"{settings.CURRENCY_SYMBOL}{value:.2f}"
