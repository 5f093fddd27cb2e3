from __future__ import annotations

from decimal import Decimal

import pytest

from money_input.markup import attributes_from_markup, field_config_from_markup, update_on_from_markup


def _form(attrs: str = "") -> str:
    return (
        '<form name="form">'
        f'  <input name="price" ng-model="model.price" money {attrs}>'
        "</form>"
    )


def test_defaults_when_no_optional_attributes() -> None:
    config = field_config_from_markup(_form())
    assert attributes_from_markup(_form()) == {}
    assert config.constraints.min == Decimal("0")
    assert config.constraints.has_max is False
    assert config.constraints.precision == 2
    assert config.update_on == "default"


def test_reads_min_max_and_precision() -> None:
    html = _form('min="-10" max="100" precision="3"')
    assert attributes_from_markup(html) == {"min": "-10", "max": "100", "precision": "3"}
    constraints = field_config_from_markup(html).constraints
    assert constraints.min == Decimal("-10")
    assert constraints.max == Decimal("100")
    assert constraints.has_max is True
    assert constraints.precision == 3


def test_unresolved_bindings_read_as_undefined() -> None:
    html = _form('min="{{min}}" max="{{max}}" precision="{{precision}}"')
    assert attributes_from_markup(html) == {"min": None, "max": None, "precision": None}
    constraints = field_config_from_markup(html).constraints
    assert constraints.min == Decimal("0")
    assert constraints.max is None
    assert constraints.has_max is True
    assert constraints.precision is None


@pytest.mark.parametrize(
    "options,expected",
    [
        ("{updateOn: 'blur'}", "blur"),
        ('{updateOn: "blur"}', "blur"),
        ("{updateOn: 'default blur'}", "default"),
        ("{debounce: 200}", "default"),
    ],
)
def test_update_on_from_model_options(options: str, expected: str) -> None:
    html = _form(f"ng-model-options=\"{options}\"" if '"' not in options else f"ng-model-options='{options}'")
    assert update_on_from_markup(html) == expected


def test_missing_money_element_raises() -> None:
    with pytest.raises(ValueError):
        attributes_from_markup('<input name="price" ng-model="model.price">')


def test_unresolved_min_still_rejects_negative_sign() -> None:
    config = field_config_from_markup(_form('min="{{min}}"'))
    assert config.constraints.allows_negative is False
