"""Tests for fracmatrix.matrix.rowops module."""
from fractions import Fraction

import pytest

from fracmatrix.errors import IndexOutOfRange
from fracmatrix.matrix.base import AugmentedMatrix, Matrix
from fracmatrix.matrix.rowops import (
    row_add,
    row_div,
    row_gcd,
    row_mul,
    row_sub,
    simplify_matrix,
    simplify_row,
)
from fracmatrix.rational.scalar import Rational
from fracmatrix.reduce.steps import TranscriptSink


ORIENTATIONS = ["row", "column"]


# --- elementary operations ---

@pytest.mark.parametrize("orientation", ORIENTATIONS)
def test_row_add_and_sub(orientation):
    m = Matrix.parse("1 2 3; 4 5 6", orientation)
    row_add(m, 0, 1)
    assert m.to_rows() == [[5, 7, 9], [4, 5, 6]]
    row_sub(m, 1, 0)
    assert m.to_rows() == [[5, 7, 9], [-1, -2, -3]]


@pytest.mark.parametrize("orientation", ORIENTATIONS)
def test_row_mul_and_div(orientation):
    m = Matrix.parse("1 2 3; 4 5 6", orientation)
    row_mul(m, 1, Rational(1, 2))
    assert m.to_rows() == [[1, 2, 3], [2, Rational(5, 2), 3]]
    row_div(m, 0, 3)
    assert m.to_rows()[0] == [Rational(1, 3), Rational(2, 3), 1]


@pytest.mark.parametrize("orientation", ORIENTATIONS)
def test_row_ops_reach_solution_column(orientation):
    m = AugmentedMatrix.parse("1 0 | 2; 0 1 | 3", orientation)
    row_add(m, 0, 1)
    assert m.solution() == [5, 3]
    row_mul(m, 1, 2)
    assert m.solution() == [5, 6]


def test_row_div_by_zero_is_not_trapped():
    m = Matrix.parse("1 2")
    row_div(m, 0, Rational(0))
    assert all(v.is_undefined for v in m.row_slice(0))


def test_row_ops_check_indices():
    m = Matrix.parse("1 2; 3 4")
    with pytest.raises(IndexOutOfRange):
        row_add(m, 0, 2)
    with pytest.raises(IndexOutOfRange):
        row_mul(m, 5, 2)


def test_orientations_agree():
    a = Matrix.parse("2 4 6; 1 3 5; 0 1 1", "row")
    b = Matrix.parse("2 4 6; 1 3 5; 0 1 1", "column")
    for m in (a, b):
        row_mul(m, 1, 2)
        row_sub(m, 0, 1)
        row_div(m, 2, Rational(-1, 3))
    assert a == b


# --- simplification ---

def test_row_gcd():
    m = Matrix.parse("4 -6 0 8; 0 0 0 0; 1/2 3/4 0 0")
    assert row_gcd(m, 0) == 2
    assert row_gcd(m, 1) is None
    assert row_gcd(m, 2) == Fraction(1, 4)


def test_simplify_row_divides_by_gcd():
    m = Matrix.parse("4 -6 8; 2 3 5")
    assert simplify_row(m, 0)
    assert m.to_rows()[0] == [2, -3, 4]
    assert not simplify_row(m, 1)
    assert m.to_rows()[1] == [2, 3, 5]


def test_simplify_row_fractional_gcd_below_one_is_left():
    m = Matrix.parse("1/2 3/4")
    assert not simplify_row(m, 0)
    assert m.to_rows() == [[Rational(1, 2), Rational(3, 4)]]


def test_simplify_row_skips_undefined():
    m = Matrix.from_rows([[Rational(2), Rational.undefined()]])
    assert not simplify_row(m, 0)


def test_simplify_matrix_reports_steps():
    m = AugmentedMatrix.parse("3 6 | 9; 1 1 | 1; 5/2 5 | 0", "column")
    sink = TranscriptSink("display")
    assert simplify_matrix(m, sink)
    assert m.to_rows() == [[1, 2, 3], [1, 1, 1], [1, 2, 0]]
    assert sink.lines == ["R1 / 3 → R1", "R3 / (5 / 2) → R3"]


def test_simplify_needs_rational_entries():
    m = Matrix.from_rows([[2.0, 4.0]])
    with pytest.raises(TypeError):
        simplify_row(m, 0)
