"""Recognition of complete signed decimal numbers."""

from __future__ import annotations

from decimal import Decimal

from .schema import NUMBER_PATTERN


def is_number(text: str) -> bool:
    """Return True when text is a complete decimal, 示例：" -12.5 " / "5." / ".5"."""
    if not text:
        return False
    return NUMBER_PATTERN.match(text) is not None


def parse_number(text: str) -> Decimal:
    """Parse text already accepted by is_number."""
    return Decimal(text.strip())
