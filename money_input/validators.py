from __future__ import annotations

from decimal import Decimal
from typing import Dict, Optional

from .models import Constraints, ModelValue, ValidityFlag


def min_valid(value: ModelValue, minimum: Optional[Decimal]) -> bool:
    """True when value is empty, the bound is unset, or value >= minimum."""
    if not isinstance(value, Decimal) or minimum is None:
        return True
    return value >= minimum


def max_valid(value: ModelValue, maximum: Optional[Decimal]) -> bool:
    """True when value is empty, the bound is unset, or value <= maximum."""
    if not isinstance(value, Decimal) or maximum is None:
        return True
    return value <= maximum


def validate(value: ModelValue, constraints: Constraints) -> Dict[ValidityFlag, bool]:
    """Range flags for value; the value itself is never touched."""
    flags = {ValidityFlag.MIN: min_valid(value, constraints.min)}
    if constraints.has_max:
        flags[ValidityFlag.MAX] = max_valid(value, constraints.max)
    else:
        flags[ValidityFlag.MAX] = True
    return flags
