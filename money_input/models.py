from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum, StrEnum
from typing import Any, Dict, Mapping, Optional, Union

from .schema import DEFAULT_MIN, DEFAULT_PRECISION, UPDATE_ON_DEFAULT
from .utils import parse_attribute_integer, parse_attribute_number


class ValidityFlag(StrEnum):
    NUMBER = "number"
    MIN = "min"
    MAX = "max"


class ModelState(Enum):
    """Sentinel stored when the host assigned a value that is not a number."""

    INVALID = "invalid"


ModelValue = Union[Decimal, None, ModelState]


@dataclass
class Constraints:
    """Bounds and rounding configuration of a single field."""

    min: Optional[Decimal] = Decimal(DEFAULT_MIN)  # None: attribute set to a non-numeric value
    max: Optional[Decimal] = None
    has_max: bool = False  # max validator installed only once a max attribute exists
    precision: Optional[int] = DEFAULT_PRECISION  # None or negative disables rounding

    @property
    def allows_negative(self) -> bool:
        return self.min is None or self.min < 0

    @classmethod
    def from_attributes(cls, attrs: Mapping[str, Any]) -> "Constraints":
        """Resolve directive attributes, 示例：{"min": "-10", "precision": "3"}.

        Absent attributes keep their defaults; present ones are parsed leniently
        and resolve to unset when they are not numeric.
        """
        constraints = cls()
        for name, value in attrs.items():
            constraints.apply(name, value)
        return constraints

    def apply(self, name: str, value: Any) -> bool:
        """Update one attribute; returns False for names this field does not observe."""
        if name == "min":
            # empty or still-unbound min falls back to the default bound
            if value is None or (isinstance(value, str) and not value.strip()):
                self.min = Decimal(DEFAULT_MIN)
            else:
                self.min = parse_attribute_number(value)
        elif name == "max":
            self.max = parse_attribute_number(value)
            self.has_max = True
        elif name == "precision":
            self.precision = parse_attribute_integer(value)
        else:
            return False
        return True


@dataclass
class FieldConfig:
    constraints: Constraints = field(default_factory=Constraints)
    update_on: str = UPDATE_ON_DEFAULT


@dataclass
class ValidityFlags:
    number: bool = True
    min: bool = True
    max: bool = True

    @property
    def valid(self) -> bool:
        return self.number and self.min and self.max

    def get(self, flag: ValidityFlag) -> bool:
        return getattr(self, flag.value)

    def set(self, flag: ValidityFlag, valid: bool) -> None:
        setattr(self, flag.value, valid)

    def to_dict(self) -> Dict[str, bool]:
        return {flag.value: self.get(flag) for flag in ValidityFlag}


@dataclass
class FieldState:
    """Mutable state owned by one field instance."""

    model_value: ModelValue = None
    display_text: str = ""
    last_valid_text: str = ""  # rollback target for rejected keystrokes
    pending_text: Optional[str] = None  # typed but not yet reconciled (update-on-blur)
    validity: ValidityFlags = field(default_factory=ValidityFlags)

    @property
    def has_number(self) -> bool:
        return isinstance(self.model_value, Decimal)
