from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd

from .field import MoneyField
from .host import RecordingHost
from .io_utils import load_event_frame, write_report
from .markup import field_config_from_markup
from .models import Constraints, FieldConfig, ModelState, ModelValue
from .schema import EVENT_ASSIGN, EVENT_BLUR, EVENT_CONFIG, EVENT_TEXT, REPORT_COLUMNS

logger = logging.getLogger(__name__)


@dataclass
class ReplayOptions:
    events_path: Path
    output_path: Optional[Path] = None
    markup: Optional[str] = None
    attributes: Dict[str, Optional[str]] = field(default_factory=dict)  # overrides markup
    update_on: Optional[str] = None

    def resolved_config(self) -> FieldConfig:
        if self.markup:
            config = field_config_from_markup(self.markup)
        else:
            config = FieldConfig(constraints=Constraints())
        for name, value in self.attributes.items():
            config.constraints.apply(name, value)
        if self.update_on:
            config.update_on = self.update_on
        return config


@dataclass
class ReplayResult:
    report: pd.DataFrame
    output_path: Optional[Path]
    events: int
    invalid_steps: int
    display_text: str
    model_value: ModelValue


def render_model(value: ModelValue) -> str:
    """示例：Decimal("42.00") -> "42.00", None -> "", INVALID -> "invalid"."""
    if value is None:
        return ""
    if isinstance(value, ModelState):
        return value.value
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


def apply_event(money_field: MoneyField, event: str, value: Any, attribute: str = "") -> None:
    if event == EVENT_TEXT:
        money_field.on_text_changed(value)
    elif event == EVENT_BLUR:
        money_field.on_blur()
    elif event == EVENT_CONFIG:
        if not attribute:
            raise ValueError("config event needs an attribute name")
        money_field.on_config_changed({attribute: value if value != "" else None})
    elif event == EVENT_ASSIGN:
        money_field.assign_model_value(value)
    else:
        raise ValueError(f"unknown field event: {event!r}")


def replay_frame(events: pd.DataFrame, config: FieldConfig) -> Tuple[pd.DataFrame, MoneyField]:
    """Feed each event row into one field and snapshot its state after every step."""
    host = RecordingHost()
    money_field = MoneyField.from_config(host, config)
    rows: List[Dict[str, Any]] = []
    for step, event in enumerate(events.itertuples(index=False), start=1):
        apply_event(money_field, event.event, event.value, event.attribute)
        state = money_field.state
        rows.append(
            {
                "step": step,
                "event": event.event,
                "attribute": event.attribute,
                "value": event.value,
                "display": state.display_text,
                "model": render_model(state.model_value),
                "last_valid": state.last_valid_text,
                "number": state.validity.number,
                "min": state.validity.min,
                "max": state.validity.max,
                "valid": state.validity.valid,
            }
        )
    return pd.DataFrame(rows, columns=REPORT_COLUMNS), money_field


def replay(options: ReplayOptions) -> ReplayResult:
    events = load_event_frame(options.events_path)
    config = options.resolved_config()
    logger.info(
        "replaying %d events (min=%s max=%s precision=%s update_on=%s)",
        len(events),
        config.constraints.min,
        config.constraints.max if config.constraints.has_max else "-",
        config.constraints.precision,
        config.update_on,
    )
    report, money_field = replay_frame(events, config)
    if options.output_path:
        write_report(report, options.output_path)
        logger.info("report written to %s", options.output_path)
    return ReplayResult(
        report=report,
        output_path=options.output_path,
        events=len(report),
        invalid_steps=int((~report["valid"].astype(bool)).sum()),
        display_text=money_field.display_text,
        model_value=money_field.model_value,
    )
