"""Keystroke reconciliation.

Each raw text event is turned into a candidate value plus the new rollback
target. The stages are pure so they can be exercised on their own:

1. empty text clears the field;
2. ``sanitize`` widens full-width characters and expands a leading ``.``;
3. a leading ``-`` is rejected outright when negatives are not allowed, or
   kept as a pending sign (``-`` / ``-.``) with no value yet;
4. text matching the grammar is accepted, anything else rolls back to the
   last accepted text.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from .grammar import is_number, parse_number
from .models import Constraints
from .schema import PENDING_SIGN_TEXTS
from .utils import is_empty, normalize_width


@dataclass
class Reconciliation:
    value: Optional[Decimal]
    last_valid_text: str
    display_text: Optional[str] = None  # text to render back; None leaves the view alone
    rolled_back: bool = False
    rejected_sign: bool = False

    @property
    def pending_sign(self) -> bool:
        return self.value is None and self.last_valid_text.strip() in PENDING_SIGN_TEXTS


def sanitize(text: str) -> str:
    """示例：".5" -> "0.5", "．５" -> "0.5"."""
    text = normalize_width(text)
    if text.startswith("."):
        text = "0" + text
    return text


def value_of_text(text: str) -> Optional[Decimal]:
    """Numeric value of an accepted text; empty text and pending signs have none."""
    if not is_number(text):
        return None
    return parse_number(text)


def reconcile_text(raw: object, last_valid_text: str, constraints: Constraints) -> Reconciliation:
    if raw is None:
        raw = ""
    if is_empty(raw):
        return Reconciliation(value=None, last_valid_text="")

    text = sanitize(str(raw))

    stripped = text.strip()
    if stripped.startswith("-"):
        if not constraints.allows_negative:
            return Reconciliation(value=None, last_valid_text="", display_text="", rejected_sign=True)
        if stripped in PENDING_SIGN_TEXTS:
            return Reconciliation(value=None, last_valid_text=text)

    if is_number(text):
        return Reconciliation(value=parse_number(text), last_valid_text=text)

    return Reconciliation(
        value=value_of_text(last_valid_text),
        last_valid_text=last_valid_text,
        display_text=last_valid_text,
        rolled_back=True,
    )
