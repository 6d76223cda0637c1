"""Matrix inversion by Gauss-Jordan elimination against an identity."""
from __future__ import annotations

import logging

from fracmatrix.errors import NotSquare, Singular
from fracmatrix.matrix.base import Matrix
from .echelon import Reducer, backward_eliminate, forward_eliminate, is_row_reduced
from .steps import NullSink, StepSink, TranscriptSink

logger = logging.getLogger(__name__)


def _invert(work: Matrix, sink: StepSink) -> Matrix:
    """Reduce *work* in place while replaying every step on an identity.

    Returns the transformed identity, i.e. the inverse of *work*'s original
    coefficient block.  Raises NotSquare or Singular.
    """
    rows, cols = work.dimensions
    if rows != cols:
        raise NotSquare(f"cannot invert a {rows}x{cols} matrix; rows and columns must match")

    ident = Matrix.identity(rows, work.orientation)
    red = Reducer(work, sink, mirrors=(ident,))

    red.header("REF")
    forward_eliminate(red)
    if not is_row_reduced(work):
        logger.debug("inverse: zero pivot after REF (%d operations)", red.count)
        raise Singular("matrix is singular: a zero pivot survived forward elimination")

    red.header("RREF")
    backward_eliminate(red)
    if not work.is_identity():
        logger.debug("inverse: RREF did not reach the identity (%d operations)", red.count)
        raise Singular("matrix is singular: reduction did not reach the identity")

    logger.debug("inverse of %dx%d computed in %d operations", rows, cols, red.count)
    return ident


def _write_back(m: Matrix, ident: Matrix) -> None:
    n = ident.num_rows
    for r in range(n):
        for c in range(n):
            m.set(r, c, ident.element(r, c))


def inverse(m: Matrix) -> Matrix:
    """
    Inverse of *m*, which is left untouched.

    For an augmented matrix this is the inverse of the coefficient block, as
    a plain matrix.
    """
    return _invert(m.copy(), NullSink())


def inverse_with_transcript(m: Matrix, style: str | None = None) -> tuple[Matrix, list[str]]:
    """``inverse`` that also returns the transcript.

    On failure the partial transcript is attached to the Singular error as
    ``transcript``.
    """
    sink = TranscriptSink(style)
    try:
        inv = _invert(m.copy(), sink)
    except Singular as exc:
        exc.transcript = sink.lines
        raise
    return inv, sink.lines


def inverse_in_place(m: Matrix) -> Matrix:
    """
    Replace *m* by its inverse and return it.

    For an augmented matrix the coefficient block becomes the inverse and
    the solution column ends up holding the solved vector.  If the matrix is
    singular, *m* keeps whatever state the reduction reached.
    """
    ident = _invert(m, NullSink())
    _write_back(m, ident)
    return m


def inverse_in_place_with_transcript(m: Matrix, style: str | None = None) -> tuple[Matrix, list[str]]:
    """``inverse_in_place`` that also returns the transcript."""
    sink = TranscriptSink(style)
    try:
        ident = _invert(m, sink)
    except Singular as exc:
        exc.transcript = sink.lines
        raise
    _write_back(m, ident)
    return m, sink.lines
