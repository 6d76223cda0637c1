"""Elementary row operations and row simplification.

All operations work in place on logical rows, across the full row width
(the solution column of an augmented matrix included), so they behave the
same for either storage orientation.
"""
from __future__ import annotations

import math
from typing import Any

from fracmatrix.rational.scalar import Rational
from .base import Matrix


def row_add(m: Matrix, target: int, source: int) -> None:
    """R_target <- R_target + R_source."""
    data = m._data
    for t, s in zip(m._row_positions(target), m._row_positions(source)):
        data[t] = data[t] + data[s]


def row_sub(m: Matrix, target: int, source: int) -> None:
    """R_target <- R_target - R_source."""
    data = m._data
    for t, s in zip(m._row_positions(target), m._row_positions(source)):
        data[t] = data[t] - data[s]


def row_mul(m: Matrix, target: int, factor: Any) -> None:
    """R_target <- R_target * factor."""
    data = m._data
    for t in m._row_positions(target):
        data[t] = data[t] * factor


def row_div(m: Matrix, target: int, factor: Any) -> None:
    """R_target <- R_target / factor.

    A zero factor is not trapped: rational cells become undefined.
    """
    data = m._data
    for t in m._row_positions(target):
        data[t] = data[t] / factor


def _rational_parts(v: Any) -> tuple[int, int]:
    try:
        return int(v.numerator), int(v.denominator)
    except AttributeError:
        raise TypeError(f"simplify needs rational entries, got {type(v).__name__}") from None


def row_gcd(m: Matrix, r: int) -> Rational | None:
    """
    Rational gcd of the absolute values of the nonzero entries of row r:
    gcd of the numerators over lcm of the denominators.

    Returns None when the row is all zeros or holds an undefined entry.
    """
    num_g = 0
    den_l = 1
    for v in m.row_slice(r):
        n, d = _rational_parts(v)
        if d == 0:
            return None
        if n == 0:
            continue
        num_g = math.gcd(num_g, abs(n))
        den_l = den_l * d // math.gcd(den_l, d)
    if num_g == 0:
        return None
    return Rational(num_g, den_l)


def simplify_row(m: Matrix, r: int, sink=None) -> bool:
    """Divide row r by the gcd of its entries when that gcd exceeds one.

    Returns True when the row changed.  The division is reported to *sink*
    like any other elementary operation.
    """
    g = row_gcd(m, r)
    if g is None or g <= 1:
        return False
    if sink is not None:
        sink.record("/", r, g)
    row_div(m, r, g)
    return True


def simplify_matrix(m: Matrix, sink=None) -> bool:
    """``simplify_row`` over every row in order; True when any row changed."""
    changed = False
    for r in range(m.num_rows):
        changed = simplify_row(m, r, sink) or changed
    return changed
