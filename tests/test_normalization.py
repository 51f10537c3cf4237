from __future__ import annotations

import pytest

from pystockwidget.ingestion.normalize import safe_float, safe_int, safe_str


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (152, 152),
        (-4, -4),
        (12.9, 12),
        (-3.5, -3),
        ("12", 12),
        (" 7 ", 7),
        ("+5", 5),
        ("12.9", 12),
        ("1e3", 1000),
        ("98765432109876543210", 98765432109876543210),
    ],
)
def test_safe_int_accepts_integer_decodable_values(value: object, expected: int) -> None:
    assert safe_int(value) == expected


@pytest.mark.parametrize(
    "value",
    [None, True, False, "", "--", "abc", "1_000", "+-5", [1], {"n": 1}, float("nan"), float("inf"), "Infinity"],
)
def test_safe_int_rejects_everything_else(value: object) -> None:
    assert safe_int(value) is None


def test_safe_float_parses_numeric_strings() -> None:
    assert safe_float("2.5") == 2.5
    assert safe_float("NaN") is None


def test_safe_str_keeps_scalars_only() -> None:
    assert safe_str("10:42:00") == "10:42:00"
    assert safe_str(5) == "5"
    assert safe_str("") is None
    assert safe_str({"a": 1}) is None
    assert safe_str(False) is None
