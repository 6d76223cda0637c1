"""Environment-driven defaults."""
from __future__ import annotations

import os


FRACMATRIX_ORIENTATION = os.environ.get("FRACMATRIX_ORIENTATION", "row")
FRACMATRIX_TRANSCRIPT_STYLE = os.environ.get("FRACMATRIX_TRANSCRIPT_STYLE", "display")

TRANSCRIPT_STYLES = ("display", "debug")


def default_orientation() -> str:
    """Orientation name used when a constructor is given none."""
    name = FRACMATRIX_ORIENTATION.strip().lower()
    if name not in ("row", "column"):
        raise ValueError(
            f"FRACMATRIX_ORIENTATION must be 'row' or 'column', got {FRACMATRIX_ORIENTATION!r}"
        )
    return name


def default_transcript_style() -> str:
    """Factor rendering used by transcripts when no style is passed."""
    style = FRACMATRIX_TRANSCRIPT_STYLE.strip().lower()
    if style not in TRANSCRIPT_STYLES:
        raise ValueError(
            f"FRACMATRIX_TRANSCRIPT_STYLE must be one of {TRANSCRIPT_STYLES}, "
            f"got {FRACMATRIX_TRANSCRIPT_STYLE!r}"
        )
    return style
