from .scalar import Rational, UNDEFINED, ZERO, ONE, as_rational
from .convert import decimal_ratio, parse_ratio

__all__ = [
    "Rational",
    "UNDEFINED",
    "ZERO",
    "ONE",
    "as_rational",
    "decimal_ratio",
    "parse_ratio",
]
