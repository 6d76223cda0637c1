"""Exception types raised by fracmatrix."""
from __future__ import annotations


class FracMatrixError(Exception):
    """Base class for every error raised by this package."""


class InvalidDenominator(FracMatrixError, ZeroDivisionError):
    """A rational was constructed as n / 0 with n != 0."""


class ShapeMismatch(FracMatrixError, ValueError):
    """Buffer length or operand shapes do not fit together."""


class IndexOutOfRange(FracMatrixError, IndexError):
    """A row or element index lies outside the logical bounds."""


class NotSquare(FracMatrixError, ValueError):
    """The operation needs a square (coefficient) matrix."""


class Singular(FracMatrixError, ArithmeticError):
    """The matrix does not reduce to the identity.

    ``transcript`` carries the steps applied before the failure when the
    error comes from a transcript-returning variant.
    """

    transcript = None


class UndefinedScalar(FracMatrixError, ArithmeticError):
    """A defined value was required but the undefined rational was found."""
