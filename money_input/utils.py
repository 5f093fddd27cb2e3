from __future__ import annotations

import math
import unicodedata
from decimal import Decimal, InvalidOperation
from typing import Optional

from .schema import ATTRIBUTE_INTEGER_PATTERN, ATTRIBUTE_NUMBER_PATTERN


def normalize_width(value: str | None) -> str:
    """NFKC-normalize typed text without trimming, 示例："１２．５" -> "12.5"."""
    if not value:
        return ""
    return unicodedata.normalize("NFKC", str(value))


def is_empty(value: object) -> bool:
    """Return True for the values a field treats as "nothing entered"."""
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, float):
        return math.isnan(value)
    if isinstance(value, Decimal):
        return value.is_nan()
    return False


def to_decimal(value: object) -> Optional[Decimal]:
    """Convert numbers and numeric strings to Decimal, 示例：0.01 -> Decimal("0.01").

    Returns None for anything that is not a finite number. Booleans are not numbers.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        return value if value.is_finite() else None
    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            return None
        return Decimal(str(value))
    if isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except (InvalidOperation, ValueError):
            return None
        return result if result.is_finite() else None
    return None


def parse_attribute_number(value: object) -> Optional[Decimal]:
    """Leniently read a numeric attribute, 示例："10px" -> Decimal("10"), "abc" -> None."""
    if value is None or isinstance(value, bool):
        return None
    if not isinstance(value, str):
        return to_decimal(value)
    match = ATTRIBUTE_NUMBER_PATTERN.match(value)
    if not match:
        return None
    return to_decimal(match.group(0))


def parse_attribute_integer(value: object) -> Optional[int]:
    """Read an integer prefix, 示例："2.7" -> 2, "-1" -> -1, "a" -> None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, (float, Decimal)):
        number = to_decimal(value)
        return int(number) if number is not None else None
    match = ATTRIBUTE_INTEGER_PATTERN.match(str(value))
    if not match:
        return None
    return int(match.group(0))
