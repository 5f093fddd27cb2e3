from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Context

# Optional sign, then digits with an optional fraction, or a bare fraction.
NUMBER_PATTERN = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)\s*$")

# Leading-number parses used for attribute values, 示例："10px" -> "10"
ATTRIBUTE_NUMBER_PATTERN = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")
ATTRIBUTE_INTEGER_PATTERN = re.compile(r"^\s*[+-]?\d+")

DEFAULT_PRECISION = 2
DEFAULT_MIN = 0

# Rounding is half away from zero; prec leaves headroom for long typed input.
DECIMAL_CONTEXT = Context(prec=50, rounding=ROUND_HALF_UP)

PENDING_SIGN_TEXTS = ("-", "-.")

UPDATE_ON_DEFAULT = "default"
UPDATE_ON_BLUR = "blur"
UPDATE_ON_CHOICES = (UPDATE_ON_DEFAULT, UPDATE_ON_BLUR)

# Directive attribute names read from markup / config changes.
ATTRIBUTE_NAMES = ("min", "max", "precision")

# Replay event table
EVENT_TEXT = "text"
EVENT_BLUR = "blur"
EVENT_CONFIG = "config"
EVENT_ASSIGN = "assign"
EVENT_TYPES = (EVENT_TEXT, EVENT_BLUR, EVENT_CONFIG, EVENT_ASSIGN)

EVENT_COLUMNS: list[str] = ["event", "value", "attribute"]
REQUIRED_EVENT_COLUMNS: list[str] = ["event"]

REPORT_COLUMNS: list[str] = [
    "step",
    "event",
    "attribute",
    "value",
    "display",
    "model",
    "last_valid",
    "number",
    "min",
    "max",
    "valid",
]
