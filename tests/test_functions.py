"""Tests for fracmatrix.reduce.functions module."""
import pytest

from fracmatrix.errors import NotSquare, Singular
from fracmatrix.matrix.base import AugmentedMatrix, Matrix
from fracmatrix.rational.scalar import Rational
from fracmatrix.reduce.functions import determinant, is_linearly_independent, solve


# --- determinant ---

@pytest.mark.parametrize("text, expected", [
    ("4 7; 2 6", 10),
    ("0 1; 1 0", -1),
    ("2 1 -1; -3 -1 2; -2 1 2", -1),
    ("1 2 3; 4 5 7; 1 0 2", -7),
    ("1/2 1/3; 1/4 1/5", Rational(1, 60)),
    ("5", 5),
])
def test_determinant(text, expected):
    assert determinant(Matrix.parse(text)) == expected


@pytest.mark.parametrize("orientation", ["row", "column"])
def test_determinant_singular_is_zero(orientation):
    assert determinant(Matrix.parse("1 2 3; 4 5 6; 7 8 9", orientation)) == 0
    assert determinant(Matrix.parse("1 2; 2 4", orientation)) == 0


def test_determinant_leaves_input_untouched():
    m = Matrix.parse("4 7; 2 6")
    before = m.copy()
    determinant(m)
    assert m == before


def test_determinant_of_augmented_uses_coefficients():
    assert determinant(AugmentedMatrix.parse("4 7 | 100; 2 6 | -3")) == 10


def test_determinant_not_square():
    with pytest.raises(NotSquare):
        determinant(Matrix.parse("1 2 3"))


# --- solve ---

def test_solve():
    m = AugmentedMatrix.parse("2 1 -1 | 8; -3 -1 2 | -11; -2 1 2 | -3")
    assert solve(m) == [2, 3, -1]
    # input untouched
    assert m.element(0, 0) == 2


def test_solve_fractional_solution():
    assert solve(AugmentedMatrix.parse("4 7 | 1; 2 6 | 2", "column")) == [
        Rational(-4, 5),
        Rational(3, 5),
    ]


def test_solve_singular():
    with pytest.raises(Singular):
        solve(AugmentedMatrix.parse("1 2 | 3; 2 4 | 6"))


def test_solve_needs_augmented_square():
    with pytest.raises(TypeError):
        solve(Matrix.parse("1 2; 3 4"))
    with pytest.raises(NotSquare):
        solve(AugmentedMatrix.parse("1 2 | 3"))


# --- linear independence ---

def test_linearly_independent_columns():
    assert is_linearly_independent(Matrix.parse("1 0; 0 1; 1 1"))
    assert is_linearly_independent(Matrix.parse("4 7; 2 6"))


def test_linearly_dependent_columns():
    assert not is_linearly_independent(Matrix.parse("1 2; 2 4; 3 6"))
    assert not is_linearly_independent(Matrix.parse("1 2 3; 4 5 6"))
