from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from .commit import commit_precision
from .host import FieldHost
from .models import Constraints, FieldConfig, FieldState, ModelState, ModelValue, ValidityFlag
from .precision import format_value, round_value
from .reconciler import reconcile_text
from .schema import UPDATE_ON_BLUR, UPDATE_ON_CHOICES, UPDATE_ON_DEFAULT
from .utils import is_empty, to_decimal
from .validators import validate

logger = logging.getLogger(__name__)


class MoneyField:
    """One money input: turns host events into model value, display text and validity.

    Keystrokes go through the reconciler, the range validators and rounding.
    Blur and precision changes go through the commit step, which rewrites the
    display with the canonical formatted value.
    """

    def __init__(
        self,
        host: FieldHost,
        constraints: Optional[Constraints] = None,
        update_on: str = UPDATE_ON_DEFAULT,
    ) -> None:
        if update_on not in UPDATE_ON_CHOICES:
            raise ValueError(f"unsupported update_on: {update_on!r}")
        self.host = host
        self.constraints = constraints or Constraints()
        self.update_on = update_on
        self.state = FieldState()

    @classmethod
    def from_config(cls, host: FieldHost, config: FieldConfig) -> "MoneyField":
        return cls(host, constraints=config.constraints, update_on=config.update_on)

    @property
    def model_value(self) -> ModelValue:
        return self.state.model_value

    @property
    def display_text(self) -> str:
        return self.state.display_text

    @property
    def valid(self) -> bool:
        return self.state.validity.valid

    def on_text_changed(self, raw: Optional[str]) -> None:
        """User edit; the host is already showing raw."""
        self.state.display_text = "" if raw is None else str(raw)
        if self.update_on == UPDATE_ON_BLUR:
            self.state.pending_text = self.state.display_text
            return
        self._apply_text(raw)

    def on_blur(self) -> None:
        if self.state.pending_text is not None:
            pending, self.state.pending_text = self.state.pending_text, None
            self._apply_text(pending)
        self._commit()

    def on_config_changed(self, changes: Mapping[str, Any]) -> None:
        """Resolved attribute values changed, 示例：{"precision": "1"}."""
        precision_changed = False
        for name, value in changes.items():
            if not self.constraints.apply(name, value):
                logger.debug("ignoring unknown attribute %r", name)
                continue
            logger.debug("attribute %s -> %r", name, value)
            precision_changed = precision_changed or name == "precision"
        if precision_changed:
            self._commit()
        else:
            self._publish_range_validity()

    def assign_model_value(self, value: object) -> None:
        """Programmatic assignment; displayed the same way a blur formats."""
        state = self.state
        state.pending_text = None
        if is_empty(value):
            state.model_value = None
            state.validity.number = True
        else:
            number = to_decimal(value)
            state.model_value = number if number is not None else ModelState.INVALID
            state.validity.number = number is not None
        state.display_text = format_value(value, self.constraints.precision)
        state.last_valid_text = state.display_text if state.validity.number else ""
        self.host.set_model_value(state.model_value)
        self.host.set_display_text(state.display_text)
        self.host.set_validity(ValidityFlag.NUMBER, state.validity.number)
        self._publish_range_validity()

    def _apply_text(self, raw: Optional[str]) -> None:
        state = self.state
        outcome = reconcile_text(raw, state.last_valid_text, self.constraints)
        if outcome.rejected_sign:
            logger.debug("negative sign rejected, min=%s", self.constraints.min)
        elif outcome.rolled_back:
            logger.debug("rolled back %r to %r", raw, outcome.last_valid_text)

        state.last_valid_text = outcome.last_valid_text
        if outcome.display_text is not None:
            state.display_text = outcome.display_text
            self.host.set_display_text(outcome.display_text)

        state.validity.number = True
        self.host.set_validity(ValidityFlag.NUMBER, True)
        flags = validate(outcome.value, self.constraints)
        value = outcome.value
        if value is not None:
            value = round_value(value, self.constraints.precision)
        state.model_value = value
        self.host.set_model_value(value)
        self._publish_flags(flags)

    def _commit(self) -> None:
        result = commit_precision(self.state, self.constraints)
        if result is not None:
            self.host.set_model_value(result.value)
            self.host.set_display_text(result.text)
        self._publish_range_validity()

    def _publish_range_validity(self) -> None:
        self._publish_flags(validate(self.state.model_value, self.constraints))

    def _publish_flags(self, flags: Mapping[ValidityFlag, bool]) -> None:
        for flag, valid in flags.items():
            self.state.validity.set(flag, valid)
            self.host.set_validity(flag, valid)
