from __future__ import annotations

from typing import Any

from fracmatrix.errors import NotSquare, Singular
from fracmatrix.matrix.base import AugmentedMatrix, Matrix
from fracmatrix.rational.scalar import ONE, ZERO, Rational
from .echelon import Reducer, forward_eliminate, is_row_reduced, to_rref
from .steps import StepSink


class _ScaleSink(StepSink):
    """Tracks how much the applied steps have scaled the determinant.

    Row additions leave it unchanged; multiplying a row by k scales it by k.
    """

    def __init__(self):
        self.scale: Rational = ONE

    def record(self, op: str, target: int, operand: Any) -> None:
        if op == "*":
            self.scale = self.scale * operand
        elif op == "/":
            self.scale = self.scale / operand


def determinant(m: Matrix) -> Rational:
    """
    Determinant of a square matrix (the coefficient block when augmented).

    Derived from REF: once the working copy has a unit diagonal its
    determinant is one, so the original determinant is the inverse of the
    accumulated scale.  A surviving zero pivot means the determinant is zero.
    """
    rows, cols = m.dimensions
    if rows != cols:
        raise NotSquare(f"determinant needs a square matrix, got {rows}x{cols}")
    work = m.coefficients() if m.augmented else m.copy()
    sink = _ScaleSink()
    forward_eliminate(Reducer(work, sink))
    if not is_row_reduced(work):
        return ZERO
    return ONE / sink.scale


def solve(m: AugmentedMatrix) -> list[Any]:
    """
    Unique solution of the linear system held by an augmented matrix.

    Raises NotSquare unless there are as many equations as unknowns, and
    Singular when the coefficient block does not reduce to the identity.
    """
    if not m.augmented:
        raise TypeError("solve needs an AugmentedMatrix")
    rows, cols = m.dimensions
    if rows != cols:
        raise NotSquare(f"solve needs as many equations as unknowns, got {rows}x{cols}")
    work = to_rref(m.copy())
    if not work.is_identity():
        raise Singular("system has no unique solution")
    return work.solution()


def is_linearly_independent(m: Matrix) -> bool:
    """True when the (coefficient) columns of *m* are linearly independent."""
    rows, cols = m.dimensions
    if cols > rows:
        return False
    work = m.coefficients() if m.augmented else m.copy()
    forward_eliminate(Reducer(work))
    return is_row_reduced(work)
