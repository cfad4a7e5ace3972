"""
Money Utilities - Safe Decimal operations for monetary values.

Avoids float precision issues by using Decimal throughout.
"""
from decimal import Decimal, InvalidOperation
from typing import Union

Number = Union[str, int, float, Decimal]


def to_decimal(value: Union[Number, None]) -> Decimal:
    """
    Convert any value to Decimal safely.

    Args:
        value: Value to convert (str, int, float, Decimal, or None)

    Returns:
        Decimal representation of the value, or Decimal("0") if None/invalid
    """
    if value is None:
        return Decimal("0")

    if isinstance(value, Decimal):
        return value

    try:
        if isinstance(value, float):
            # Go through str to keep 19.99 as 19.99
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")


def parse_price(value: Number) -> Decimal:
    """
    Parse a price from external data, refusing anything that is not one.

    Unlike `to_decimal`, bad input is an error rather than zero.

    Raises:
        ValueError: None, bool, unparseable text, NaN/infinity, or negative
    """
    if value is None or isinstance(value, bool):
        raise ValueError(f"invalid price: {value!r}")
    try:
        price = Decimal(str(value)) if isinstance(value, float) else Decimal(value)
    except (InvalidOperation, ValueError, TypeError) as e:
        raise ValueError(f"invalid price: {value!r}") from e
    if not price.is_finite() or price < 0:
        raise ValueError(f"invalid price: {value!r}")
    return price


def to_float(value: Number) -> float:
    """
    Convert Decimal to float for JSON serialization.

    Use only at API boundaries, not for internal calculations.
    """
    return float(to_decimal(value))


def multiply(value: Number, factor: Number) -> Decimal:
    """Safe multiplication of monetary value by a factor."""
    return to_decimal(value) * to_decimal(factor)
