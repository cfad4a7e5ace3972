"""Tests for money helpers and log sanitizing"""
import logging
from decimal import Decimal

import pytest

from storefront.logging import configure_logging, sanitize_id_for_logging, sanitize_string_for_logging
from storefront.services.money import multiply, parse_price, to_decimal, to_float


@pytest.mark.parametrize(
    "value,expected",
    [
        (None, Decimal("0")),
        (19.99, Decimal("19.99")),
        ("5.50", Decimal("5.50")),
        (3, Decimal("3")),
        ("not-a-number", Decimal("0")),
    ],
)
def test_to_decimal(value, expected):
    assert to_decimal(value) == expected


@pytest.mark.parametrize(
    "value,expected",
    [
        (9.99, Decimal("9.99")),
        ("12.50", Decimal("12.50")),
        (0, Decimal("0")),
        (Decimal("3.10"), Decimal("3.10")),
    ],
)
def test_parse_price(value, expected):
    assert parse_price(value) == expected


@pytest.mark.parametrize("value", [None, "abc", "", "NaN", "Infinity", float("nan"), -1, "-0.01", True, [1]])
def test_parse_price_rejects_garbage(value):
    with pytest.raises(ValueError):
        parse_price(value)


def test_arithmetic_avoids_float_drift():
    assert multiply(19.99, 3) == Decimal("59.97")
    assert to_float(Decimal("59.97")) == 59.97


def test_sanitize_id_truncates_and_escapes():
    assert sanitize_id_for_logging(None) == "N/A"
    assert sanitize_id_for_logging("user-123456789") == "user-123"
    assert sanitize_id_for_logging("a\nb") == "a\\nb"


def test_sanitize_string_limits_length():
    assert sanitize_string_for_logging("x" * 60) == "x" * 50 + "..."
    assert sanitize_string_for_logging("P1\r\n") == "P1\\r\\n"


def test_configure_logging_keeps_existing_handlers():
    root = logging.getLogger()
    marker = logging.NullHandler()
    root.addHandler(marker)
    try:
        before = list(root.handlers)
        configure_logging(level="DEBUG")
        assert root.handlers == before
    finally:
        root.removeHandler(marker)
