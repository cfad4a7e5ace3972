# Services Module
from .money import to_decimal, parse_price, to_float, multiply

__all__ = ["to_decimal", "parse_price", "to_float", "multiply"]
