"""Tests for fracmatrix.reduce.inverse module."""
import pytest

from fracmatrix.errors import NotSquare, Singular
from fracmatrix.matrix.base import AugmentedMatrix, Matrix, Orientation
from fracmatrix.rational.scalar import Rational
from fracmatrix.reduce.inverse import (
    inverse,
    inverse_in_place,
    inverse_in_place_with_transcript,
    inverse_with_transcript,
)


ORIENTATIONS = ["row", "column"]


def hilbert(n, orientation="row"):
    return Matrix.from_rows(
        [[Rational(1, r + c + 1) for c in range(n)] for r in range(n)],
        orientation,
    )


# --- inverse ---

@pytest.mark.parametrize("orientation", ORIENTATIONS)
def test_inverse_two_by_two(orientation):
    m = Matrix.parse("4 7; 2 6", orientation)
    inv = inverse(m)
    assert inv.to_rows() == [
        [Rational(3, 5), Rational(-7, 10)],
        [Rational(-1, 5), Rational(2, 5)],
    ]
    assert (m @ inv).is_identity()
    assert (inv @ m).is_identity()
    assert inv.orientation is Orientation(orientation)


def test_inverse_leaves_input_untouched():
    m = Matrix.parse("4 7; 2 6")
    before = m.copy()
    inverse(m)
    assert m == before


def test_inverse_singular():
    with pytest.raises(Singular):
        inverse(Matrix.parse("1 2; 2 4"))


def test_inverse_singular_zero_row():
    with pytest.raises(Singular):
        inverse(Matrix.parse("1 2 3; 0 0 0; 4 5 6"))


def test_inverse_not_square():
    with pytest.raises(NotSquare):
        inverse(Matrix.parse("1 2 3; 4 5 6"))
    with pytest.raises(ValueError):
        inverse(AugmentedMatrix.parse("1 2 | 3"))


def test_inverse_needs_pivot_import():
    m = Matrix.parse("0 1; 1 0")
    assert inverse(m) == m


@pytest.mark.parametrize("n", [3, 4, 5])
def test_inverse_hilbert(n):
    h = hilbert(n, "column")
    inv = inverse(h)
    assert (h @ inv).is_identity()
    # Hilbert inverses are integral
    assert all(v.denominator == 1 for v in inv.buffer)


def test_inverse_identity():
    assert inverse(Matrix.identity(4)).is_identity()


def test_inverse_one_by_one():
    inv = inverse(Matrix.parse("-3/4"))
    assert inv.element(0, 0) == Rational(-4, 3)


# --- in place ---

@pytest.mark.parametrize("orientation", ORIENTATIONS)
def test_inverse_in_place(orientation):
    m = Matrix.parse("4 7; 2 6", orientation)
    out = inverse_in_place(m)
    assert out is m
    assert m.to_rows() == [
        [Rational(3, 5), Rational(-7, 10)],
        [Rational(-1, 5), Rational(2, 5)],
    ]


def test_inverse_in_place_singular_keeps_partial_state():
    m = Matrix.parse("1 2; 2 4")
    with pytest.raises(Singular):
        inverse_in_place(m)
    assert m.to_rows() == [[1, 2], [0, 0]]


# --- augmented ---

def test_inverse_of_augmented_is_plain():
    m = AugmentedMatrix.parse("4 7 | 1; 2 6 | 2")
    inv = inverse(m)
    assert not inv.augmented
    assert inv == inverse(m.coefficients())


def test_inverse_in_place_augmented_solves():
    # 4x + 7y = 1, 2x + 6y = 2
    m = AugmentedMatrix.parse("4 7 | 1; 2 6 | 2", "column")
    inverse_in_place(m)
    assert m.coefficients() == inverse(Matrix.parse("4 7; 2 6"))
    assert m.solution() == [Rational(-4, 5), Rational(3, 5)]


# --- transcripts ---

def test_inverse_with_transcript():
    inv, transcript = inverse_with_transcript(Matrix.parse("4 7; 2 6"), "display")
    assert inv.element(0, 0) == Rational(3, 5)
    assert transcript == [
        "------- REF -------",
        "R1 / 4 → R1",
        "R1 * 2 → R1",
        "R2 - R1 → R2",
        "R1 / 2 → R1",
        "R2 / (5 / 2) → R2",
        "------- RREF -------",
        "R2 * (7 / 4) → R2",
        "R1 - R2 → R1",
        "R2 / (7 / 4) → R2",
    ]


def test_singular_error_carries_partial_transcript():
    with pytest.raises(Singular) as info:
        inverse_with_transcript(Matrix.parse("1 2; 2 4"))
    transcript = info.value.transcript
    assert transcript[0] == "------- REF -------"
    assert len(transcript) == 4
    assert "------- RREF -------" not in transcript


def test_inverse_in_place_with_transcript():
    m = Matrix.parse("2 0; 0 4")
    out, transcript = inverse_in_place_with_transcript(m, "debug")
    assert out is m
    assert m.to_rows() == [[Rational(1, 2), 0], [0, Rational(1, 4)]]
    assert transcript == [
        "------- REF -------",
        "R1 / Rational(2, 1) → R1",
        "R2 / Rational(4, 1) → R2",
        "------- RREF -------",
    ]
