from __future__ import annotations

from decimal import Decimal

import pytest

from money_input.grammar import is_number, parse_number
from money_input.precision import format_value, is_precision_valid, round_value


@pytest.mark.parametrize(
    "precision,expected",
    [(0, True), (2, True), (-1, False), (None, False), (True, False)],
)
def test_is_precision_valid(precision: object, expected: bool) -> None:
    assert is_precision_valid(precision) is expected


@pytest.mark.parametrize(
    "value,precision,expected",
    [
        ("41.999", 2, "42"),
        ("2.555", 2, "2.56"),
        ("12.345", 2, "12.35"),
        ("42.01", 0, "42"),
        ("-2.5", 0, "-3"),
        ("2.5", 0, "3"),
        ("2.55555", 3, "2.556"),
    ],
)
def test_round_value_rounds_half_away_from_zero(value: str, precision: int, expected: str) -> None:
    assert round_value(Decimal(value), precision) == Decimal(expected)


@pytest.mark.parametrize("precision", [-1, None])
def test_round_value_passes_through_when_disabled(precision: int | None) -> None:
    assert round_value(Decimal("41.999"), precision) == Decimal("41.999")


def test_round_value_handles_long_values() -> None:
    value = Decimal("9" * 60 + ".125")
    assert round_value(value, 2) == Decimal("9" * 60 + ".13")


@pytest.mark.parametrize("value", ["0.005", "1.23456", "-7.777", "100"])
@pytest.mark.parametrize("precision", [0, 1, 2, 3])
def test_round_value_is_idempotent(value: str, precision: int) -> None:
    once = round_value(Decimal(value), precision)
    assert round_value(once, precision) == once


@pytest.mark.parametrize(
    "value,precision,expected",
    [
        (0, 2, "0.00"),
        (Decimal("0"), 0, "0"),
        (0.01, 2, "0.01"),
        (20, 2, "20.00"),
        (Decimal("12.345"), 2, "12.35"),
        (Decimal("2.6"), 3, "2.600"),
        (Decimal("3.33333"), None, "3.33333"),
        (Decimal("3.33333"), -1, "3.33333"),
        ("12.5", 2, "12.50"),
        (None, 2, ""),
        ("", 2, ""),
        (float("nan"), 2, ""),
        ("abc", 2, "abc"),
    ],
)
def test_format_value(value: object, precision: int | None, expected: str) -> None:
    assert format_value(value, precision) == expected


@pytest.mark.parametrize("text", ["12.345", ".5", "-41.999", "7", "0.004"])
@pytest.mark.parametrize("precision", [0, 1, 2, 4])
def test_formatted_text_parses_back_within_precision(text: str, precision: int) -> None:
    rounded = round_value(parse_number(text), precision)
    formatted = format_value(rounded, precision)
    assert is_number(formatted)
    assert abs(parse_number(formatted) - rounded) < Decimal(1).scaleb(-precision)
    assert parse_number(formatted) == rounded
