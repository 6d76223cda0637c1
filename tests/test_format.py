"""Tests for fracmatrix.matrix.format module."""
from fracmatrix.matrix.base import AugmentedMatrix, Matrix
from fracmatrix.matrix.format import format_matrix, format_rows


def test_two_rows_use_corner_brackets():
    assert str(Matrix.parse("1 2; 3 4")) == "⎡ 1 2 ⎤\n⎣ 3 4 ⎦"


def test_middle_rows_use_extenders():
    lines = format_matrix(Matrix.parse("1; 2; 3; 4")).splitlines()
    assert [line[0] for line in lines] == ["⎡", "⎢", "⎢", "⎣"]
    assert [line[-1] for line in lines] == ["⎤", "⎥", "⎥", "⎦"]


def test_single_row_uses_square_brackets():
    assert str(Matrix.parse("1 2 3")) == "[ 1 2 3 ]"


def test_columns_right_aligned():
    text = format_matrix(Matrix.parse("1 -1/2; 10 3", "column"))
    assert text.splitlines() == ["⎡  1 -1 / 2 ⎤", "⎣ 10      3 ⎦"]


def test_augmented_separator():
    m = AugmentedMatrix.parse("1 2 | 3; 4 5 | 6")
    assert str(m) == "⎡ 1 2 | 3 ⎤\n⎣ 4 5 | 6 ⎦"


def test_undefined_cells_render_as_ud():
    m = Matrix.parse("UD 1")
    assert str(m) == "[ UD 1 ]"


def test_empty_matrix():
    assert str(Matrix(0, 0)) == "[]"
    assert format_rows([]) == "[]"


def test_debug_uses_repr():
    assert format_matrix(Matrix.parse("1/2"), debug=True) == "[ Rational(1, 2) ]"
