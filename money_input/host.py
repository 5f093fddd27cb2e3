from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict

from .models import ModelValue, ValidityFlag


class FieldHost(ABC):
    """Whatever owns the widget and the bound value; receives a field's output."""

    @abstractmethod
    def set_display_text(self, text: str) -> None:
        """Overwrite the text shown in the widget."""
        raise NotImplementedError

    @abstractmethod
    def set_model_value(self, value: ModelValue) -> None:
        """Publish the canonical value to the bound model."""
        raise NotImplementedError

    @abstractmethod
    def set_validity(self, flag: ValidityFlag, valid: bool) -> None:
        raise NotImplementedError


class RecordingHost(FieldHost):
    """In-memory host keeping the last published state, used by replay and tests."""

    def __init__(self) -> None:
        self.display_text: str = ""
        self.model_value: ModelValue = None
        self.validity: Dict[ValidityFlag, bool] = {flag: True for flag in ValidityFlag}
        self.display_writes = 0  # 示例：rollback/commit each count as one write

    def set_display_text(self, text: str) -> None:
        self.display_text = text
        self.display_writes += 1

    def set_model_value(self, value: ModelValue) -> None:
        self.model_value = value

    def set_validity(self, flag: ValidityFlag, valid: bool) -> None:
        self.validity[flag] = valid

    @property
    def valid(self) -> bool:
        return all(self.validity.values())
