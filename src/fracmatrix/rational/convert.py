"""Conversions between text / floating-point spellings and integer ratios."""
from __future__ import annotations

import math
import re
from decimal import Decimal, InvalidOperation


_RATIO_RE = re.compile(r"^\s*([+-]?\d+)\s*(?:/\s*([+-]?\d+))?\s*$")


def decimal_ratio(value) -> tuple[int, int]:
    """Return (n, d) spelling *value* exactly in decimal.

    d is the smallest power of ten that represents the decimal spelling
    ``str(value)``; the pair is not reduced.  Works for ``float``, numpy
    floating scalars and ``Decimal``.

    Raises ValueError for nan and infinities.
    """
    if isinstance(value, Decimal):
        dec = value
    else:
        if not math.isfinite(float(value)):
            raise ValueError(f"cannot convert non-finite value {value!r} to a rational")
        dec = Decimal(str(value))
    if not dec.is_finite():
        raise ValueError(f"cannot convert non-finite value {value!r} to a rational")

    sign, digits, exponent = dec.as_tuple()
    n = int("".join(str(dg) for dg in digits) or "0")
    if sign:
        n = -n
    if exponent >= 0:
        return n * 10 ** exponent, 1
    return n, 10 ** (-exponent)


def parse_ratio(text: str) -> tuple[int, int]:
    """Parse ``n``, ``n/d``, ``n / d`` or a decimal spelling into (n, d).

    The pair is returned as written (not reduced).  Raises ValueError when
    the text is none of these.
    """
    m = _RATIO_RE.match(text)
    if m:
        n = int(m.group(1))
        d = int(m.group(2)) if m.group(2) is not None else 1
        return n, d
    try:
        dec = Decimal(text.strip())
    except InvalidOperation:
        raise ValueError(f"not a rational literal: {text!r}") from None
    return decimal_ratio(dec)
