"""
fracmatrix: exact rational scalars and dense matrices with Gauss-Jordan
row reduction (REF, RREF), inversion and step-by-step transcripts.
"""

from .errors import (
    FracMatrixError,
    InvalidDenominator,
    ShapeMismatch,
    IndexOutOfRange,
    NotSquare,
    Singular,
    UndefinedScalar,
)
from .rational.scalar import Rational, UNDEFINED, ZERO, ONE, as_rational
from .matrix.base import Orientation, Matrix, AugmentedMatrix, RowView
from .matrix.rowops import row_add, row_sub, row_mul, row_div, simplify_row, simplify_matrix
from .matrix.format import format_matrix
from .reduce.steps import TranscriptSink, count_steps
from .reduce.echelon import (
    is_row_reduced,
    is_rref,
    to_ref,
    to_ref_with_transcript,
    to_rref,
    to_rref_with_transcript,
)
from .reduce.inverse import (
    inverse,
    inverse_with_transcript,
    inverse_in_place,
    inverse_in_place_with_transcript,
)
from .reduce.functions import determinant, solve, is_linearly_independent
from .viz.draw import draw_matrix, draw_reduction

__all__ = [
    # Errors
    "FracMatrixError",
    "InvalidDenominator",
    "ShapeMismatch",
    "IndexOutOfRange",
    "NotSquare",
    "Singular",
    "UndefinedScalar",
    # Scalars
    "Rational",
    "UNDEFINED",
    "ZERO",
    "ONE",
    "as_rational",
    # Matrices
    "Orientation",
    "Matrix",
    "AugmentedMatrix",
    "RowView",
    "row_add",
    "row_sub",
    "row_mul",
    "row_div",
    "simplify_row",
    "simplify_matrix",
    "format_matrix",
    # Reduction
    "TranscriptSink",
    "count_steps",
    "is_row_reduced",
    "is_rref",
    "to_ref",
    "to_ref_with_transcript",
    "to_rref",
    "to_rref_with_transcript",
    "inverse",
    "inverse_with_transcript",
    "inverse_in_place",
    "inverse_in_place_with_transcript",
    "determinant",
    "solve",
    "is_linearly_independent",
    # Viz
    "draw_matrix",
    "draw_reduction",
]
