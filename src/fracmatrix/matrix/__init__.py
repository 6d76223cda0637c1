from .base import Orientation, Matrix, AugmentedMatrix, RowView
from .rowops import row_add, row_sub, row_mul, row_div, row_gcd, simplify_row, simplify_matrix
from .format import format_matrix, format_rows

__all__ = [
    "Orientation",
    "Matrix",
    "AugmentedMatrix",
    "RowView",
    "row_add",
    "row_sub",
    "row_mul",
    "row_div",
    "row_gcd",
    "simplify_row",
    "simplify_matrix",
    "format_matrix",
    "format_rows",
]
