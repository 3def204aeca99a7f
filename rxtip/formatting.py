"""
Display formatting for tip amounts and percentages.

All arithmetic is done on ``Decimal``. Values are rounded half-up to two
places and always show both decimals. Non-finite values render like
``printf("%.2f")`` would: ``inf``, ``-inf`` and ``nan``.
"""

from decimal import (
    ROUND_HALF_UP,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    localcontext,
)
from typing import Union

Numeric = Union[int, float, str, Decimal]

CENT = Decimal("0.01")
HUNDRED = Decimal("100")

AMOUNT_PREFIX = "Tip Amount: $"
PERCENT_SUFFIX = " %"


def to_decimal(value: Numeric) -> Decimal:
    """Convert a numeric value to Decimal."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def format_fixed(value: Numeric) -> str:
    """Format ``value`` with exactly two decimal places."""
    value = to_decimal(value)
    if value.is_nan():
        return "nan"
    if value.is_infinite():
        return "-inf" if value.is_signed() else "inf"

    with localcontext() as ctx:
        # quantize needs room for every integer digit plus the two decimals
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return str(value.quantize(CENT, rounding=ROUND_HALF_UP))


def format_tip_amount(tip_amount: Numeric) -> str:
    return AMOUNT_PREFIX + format_fixed(tip_amount)


def tip_percentage(tip_amount: Numeric, price_before_tip: Numeric) -> Decimal:
    """
    Return ``tip_amount`` as a percentage of ``price_before_tip``.

    A zero price does not raise: ``x / 0`` gives a signed ``Infinity`` and
    ``0 / 0`` gives ``NaN``.
    """
    with localcontext() as ctx:
        ctx.traps[DivisionByZero] = False
        ctx.traps[InvalidOperation] = False
        return to_decimal(tip_amount) / to_decimal(price_before_tip) * HUNDRED


def format_tip_percentage(tip_amount: Numeric, price_before_tip: Numeric) -> str:
    return format_fixed(tip_percentage(tip_amount, price_before_tip)) + PERCENT_SUFFIX
