"""Live reconciliation of typed text into a bounded, rounded decimal value."""

from .field import MoneyField
from .host import FieldHost, RecordingHost
from .models import Constraints, FieldConfig, ModelState, ValidityFlag

__all__ = [
    "MoneyField",
    "FieldHost",
    "RecordingHost",
    "Constraints",
    "FieldConfig",
    "ModelState",
    "ValidityFlag",
]
