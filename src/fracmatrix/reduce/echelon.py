"""Row-echelon (REF) and reduced-row-echelon (RREF) engines.

Both engines are written once against a ``Reducer``, which applies each
elementary operation to the matrix (and to any mirror matrices) and reports
it to a step sink.  The silent and transcript variants differ only in the
sink they pass.

No rows are ever swapped.  A zero on the diagonal is repaired by adding a
lower row that has a nonzero entry in that column; a column without any
usable pivot is left alone, and the result then fails ``is_row_reduced``.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from fracmatrix.matrix.base import Matrix
from fracmatrix.matrix.rowops import row_add, row_div, row_mul, row_sub
from .steps import NullSink, StepSink, TranscriptSink

logger = logging.getLogger(__name__)


def _is_zero(v: Any) -> bool:
    return v == 0


def _is_one(v: Any) -> bool:
    return v == 1


class Reducer:
    """
    Drives elementary operations on ``matrix``.

    Every operation is reported to ``sink`` first, then applied to ``matrix``
    and replayed with the same arguments on each matrix in ``mirrors``.
    Control flow only ever looks at ``matrix``.
    """

    def __init__(self, matrix: Matrix, sink: StepSink | None = None, mirrors: Sequence[Matrix] = ()):
        self.matrix = matrix
        self.sink = sink if sink is not None else NullSink()
        self._targets = (matrix,) + tuple(mirrors)
        self.count = 0

    def header(self, phase: str) -> None:
        self.sink.header(phase)

    def add(self, target: int, source: int) -> None:
        self.sink.record("+", target, source)
        self.count += 1
        for m in self._targets:
            row_add(m, target, source)

    def sub(self, target: int, source: int) -> None:
        self.sink.record("-", target, source)
        self.count += 1
        for m in self._targets:
            row_sub(m, target, source)

    def mul(self, target: int, factor: Any) -> None:
        self.sink.record("*", target, factor)
        self.count += 1
        for m in self._targets:
            row_mul(m, target, factor)

    def div(self, target: int, factor: Any) -> None:
        self.sink.record("/", target, factor)
        self.count += 1
        for m in self._targets:
            row_div(m, target, factor)


# ---------------------------------------------------------------------------
# Forward elimination (REF)
# ---------------------------------------------------------------------------

def _eliminate_below(red: Reducer, r: int, c: int) -> None:
    """Clear m[r][c] (c < r) using pivot row c, if that pivot is usable."""
    m = red.matrix
    a = m.element(r, c)
    if _is_zero(a):
        return
    pivot = m.element(c, c)
    if _is_zero(pivot):
        return
    factor = a / pivot
    # scale the pivot row up, subtract it, scale it back
    red.mul(c, factor)
    red.sub(r, c)
    red.div(c, factor)


def _import_pivot(red: Reducer, r: int) -> bool:
    """Fill a zero at m[r][r] by adding the first suitable lower row.

    A candidate row first has its entries left of column r eliminated so the
    addition cannot disturb the zeros already made in row r.
    """
    m = red.matrix
    for i in range(r + 1, m.num_rows):
        for k in range(r):
            _eliminate_below(red, i, k)
        if _is_zero(m.element(i, r)):
            continue
        red.add(r, i)
        lead = m.element(r, r)
        if not _is_one(lead):
            red.div(r, lead)
        return True
    return False


def forward_eliminate(red: Reducer) -> None:
    """Bring ``red.matrix`` to REF: ones on the diagonal, zeros below it."""
    m = red.matrix
    rows, cols = m.dimensions
    for r in range(rows):
        for c in range(min(r + 1, cols)):
            if c < r:
                _eliminate_below(red, r, c)
                continue
            a = m.element(r, r)
            if _is_one(a):
                continue
            if not _is_zero(a):
                red.div(r, a)
                continue
            if not _import_pivot(red, r):
                logger.debug("no pivot available for column %d", c)


# ---------------------------------------------------------------------------
# Backward elimination (RREF)
# ---------------------------------------------------------------------------

def backward_eliminate(red: Reducer) -> None:
    """Clear the entries above each unit pivot, last column first."""
    m = red.matrix
    n = min(m.dimensions)
    for c in range(n - 1, 0, -1):
        if not _is_one(m.element(c, c)):
            continue
        for r in range(c - 1, -1, -1):
            k = m.element(r, c)
            if _is_zero(k):
                continue
            red.mul(c, k)
            red.sub(r, c)
            red.div(c, k)


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------

def is_row_reduced(m: Matrix) -> bool:
    """Unit diagonal within min(rows, cols) and zeros left of the diagonal."""
    rows, cols = m.dimensions
    n = min(rows, cols)
    for r in range(rows):
        for c in range(min(r, cols)):
            if not _is_zero(m.element(r, c)):
                return False
        if r < n and not _is_one(m.element(r, r)):
            return False
    return True


def is_rref(m: Matrix) -> bool:
    """``is_row_reduced`` plus zeros right of the diagonal inside the pivot block."""
    if not is_row_reduced(m):
        return False
    n = min(m.dimensions)
    for r in range(n):
        for c in range(r + 1, n):
            if not _is_zero(m.element(r, c)):
                return False
    return True


# ---------------------------------------------------------------------------
# Public engines
# ---------------------------------------------------------------------------

def _run_ref(m: Matrix, sink: StepSink) -> Reducer:
    red = Reducer(m, sink)
    red.header("REF")
    forward_eliminate(red)
    logger.debug("REF finished after %d operations", red.count)
    return red


def _run_rref(m: Matrix, sink: StepSink) -> Reducer:
    red = _run_ref(m, sink)
    red.header("RREF")
    before = red.count
    backward_eliminate(red)
    logger.debug("RREF finished after %d operations", red.count - before)
    return red


def to_ref(m: Matrix) -> Matrix:
    """Reduce *m* to row-echelon form in place and return it."""
    _run_ref(m, NullSink())
    return m


def to_ref_with_transcript(m: Matrix, style: str | None = None) -> tuple[Matrix, list[str]]:
    """``to_ref`` that also returns the list of applied steps."""
    sink = TranscriptSink(style)
    _run_ref(m, sink)
    return m, sink.lines


def to_rref(m: Matrix) -> Matrix:
    """Reduce *m* to reduced row-echelon form in place and return it.

    REF runs first; on a matrix that is already row reduced it applies no
    operations.
    """
    _run_rref(m, NullSink())
    return m


def to_rref_with_transcript(m: Matrix, style: str | None = None) -> tuple[Matrix, list[str]]:
    """``to_rref`` that also returns the list of applied steps."""
    sink = TranscriptSink(style)
    _run_rref(m, sink)
    return m, sink.lines
