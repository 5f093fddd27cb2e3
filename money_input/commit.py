from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
import logging
from typing import Optional

from .models import Constraints, FieldState
from .precision import format_value, is_precision_valid, round_value

logger = logging.getLogger(__name__)


@dataclass
class CommitResult:
    value: Decimal
    text: str


def commit_precision(state: FieldState, constraints: Constraints) -> Optional[CommitResult]:
    """Re-round the stored value and make its formatted text canonical.

    Fraction digits dropped here are gone for good; a later, larger precision
    only pads the rounded value with zeros.
    """
    if not state.has_number or not is_precision_valid(constraints.precision):
        return None
    value = round_value(state.model_value, constraints.precision)
    text = format_value(value, constraints.precision)
    state.model_value = value
    state.display_text = text
    state.last_valid_text = text
    logger.debug("committed %s at precision %s", text, constraints.precision)
    return CommitResult(value=value, text=text)
