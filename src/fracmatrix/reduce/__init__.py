from .steps import (
    Step,
    StepSink,
    NullSink,
    TranscriptSink,
    format_step,
    count_steps,
    REF_HEADER,
    RREF_HEADER,
)
from .echelon import (
    Reducer,
    forward_eliminate,
    backward_eliminate,
    is_row_reduced,
    is_rref,
    to_ref,
    to_ref_with_transcript,
    to_rref,
    to_rref_with_transcript,
)
from .inverse import (
    inverse,
    inverse_with_transcript,
    inverse_in_place,
    inverse_in_place_with_transcript,
)
from .functions import determinant, solve, is_linearly_independent

__all__ = [
    # Steps
    "Step",
    "StepSink",
    "NullSink",
    "TranscriptSink",
    "format_step",
    "count_steps",
    "REF_HEADER",
    "RREF_HEADER",
    # Engines
    "Reducer",
    "forward_eliminate",
    "backward_eliminate",
    "is_row_reduced",
    "is_rref",
    "to_ref",
    "to_ref_with_transcript",
    "to_rref",
    "to_rref_with_transcript",
    # Inverse
    "inverse",
    "inverse_with_transcript",
    "inverse_in_place",
    "inverse_in_place_with_transcript",
    # Derived
    "determinant",
    "solve",
    "is_linearly_independent",
]
