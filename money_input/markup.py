from __future__ import annotations

import re
from typing import Dict, Optional

from bs4 import BeautifulSoup, Tag

from .models import Constraints, FieldConfig
from .schema import ATTRIBUTE_NAMES, UPDATE_ON_BLUR, UPDATE_ON_DEFAULT

UPDATE_ON_PATTERN = re.compile(r"updateOn\s*:\s*['\"]([^'\"]*)['\"]")
INTERPOLATION_PATTERN = re.compile(r"\{\{.*?\}\}")


def _extract_field(html_content: str, css_selector: str = "[money]") -> Tag:
    soup = BeautifulSoup(html_content, "html.parser")
    selected_element = soup.select_one(css_selector)
    if not selected_element:
        raise ValueError(f"no element matches selector '{css_selector}'")
    return selected_element


def _resolve(value: str) -> Optional[str]:
    # An unresolved {{binding}} reads as an attribute whose value is still undefined.
    if INTERPOLATION_PATTERN.search(value):
        return None
    return value


def attributes_from_markup(html_content: str) -> Dict[str, Optional[str]]:
    """Read min/max/precision off the money field, 示例：'<input money min="-10">' -> {"min": "-10"}.

    Attributes missing from the element are missing from the result, so
    Constraints.from_attributes keeps its defaults for them.
    """
    element = _extract_field(html_content)
    attrs: Dict[str, Optional[str]] = {}
    for name in ATTRIBUTE_NAMES:
        if element.has_attr(name):
            attrs[name] = _resolve(str(element[name]))
    return attrs


def update_on_from_markup(html_content: str) -> str:
    """示例：ng-model-options="{updateOn: 'blur'}" -> "blur"."""
    element = _extract_field(html_content)
    options = element.get("ng-model-options")
    if not options:
        return UPDATE_ON_DEFAULT
    match = UPDATE_ON_PATTERN.search(str(options))
    if not match:
        return UPDATE_ON_DEFAULT
    events = match.group(1).split()
    if UPDATE_ON_BLUR in events and UPDATE_ON_DEFAULT not in events:
        return UPDATE_ON_BLUR
    return UPDATE_ON_DEFAULT


def field_config_from_markup(html_content: str) -> FieldConfig:
    return FieldConfig(
        constraints=Constraints.from_attributes(attributes_from_markup(html_content)),
        update_on=update_on_from_markup(html_content),
    )
