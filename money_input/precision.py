from __future__ import annotations

from decimal import Decimal, localcontext
from typing import Optional

from .schema import DECIMAL_CONTEXT
from .utils import is_empty, to_decimal


def is_precision_valid(precision: Optional[int]) -> bool:
    """Rounding applies only for a non-negative integer precision."""
    return isinstance(precision, int) and not isinstance(precision, bool) and precision >= 0


def round_value(value: Decimal, precision: Optional[int]) -> Decimal:
    """Round half away from zero, 示例：(Decimal("41.999"), 2) -> Decimal("42.00").

    A disabled precision passes the value through unchanged.
    """
    if not is_precision_valid(precision):
        return value
    with localcontext(DECIMAL_CONTEXT) as ctx:
        # quantize needs room for every integer digit plus the fraction digits
        ctx.prec = max(ctx.prec, value.adjusted() + precision + 2)
        return value.quantize(Decimal(1).scaleb(-precision))


def format_value(value: object, precision: Optional[int]) -> str:
    """Render a value for display, 示例：(0, 2) -> "0.00", (None, 2) -> "".

    Non-numeric values come back as their plain string form.
    """
    if is_empty(value):
        return ""
    number = to_decimal(value)
    if number is None:
        return str(value)
    if not is_precision_valid(precision):
        return format(number, "f")
    return format(round_value(number, precision), "f")
