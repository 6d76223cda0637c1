from __future__ import annotations

import logging

import matplotlib.pyplot as plt

from fracmatrix.matrix.base import Matrix
from fracmatrix.reduce.echelon import is_row_reduced, to_ref, to_rref_with_transcript
from fracmatrix.reduce.steps import count_steps

logger = logging.getLogger(__name__)


def draw_matrix(m: Matrix, ax, title: str | None = None, *, font_size: int = 11):
    """
    Render *m* as a matplotlib table on *ax*.

    The solution column of an augmented matrix is shaded.  Returns the
    table, or None for an empty matrix.
    """
    ax.set_axis_off()
    if title:
        ax.set_title(title)
    cells = [[str(v) for v in row] for row in m.to_rows()]
    if not cells or not cells[0]:
        ax.text(0.5, 0.5, "(empty)", ha="center", va="center", transform=ax.transAxes)
        return None

    table = ax.table(cellText=cells, loc="center", cellLoc="right")
    table.auto_set_font_size(False)
    table.set_fontsize(font_size)
    if m.augmented:
        sol = m.num_columns
        for r in range(len(cells)):
            table[r, sol].set_facecolor("#e8e8e8")
    return table


def draw_reduction(
    m: Matrix,
    *,
    save_path: str | None = None,
    style: str | None = None,
    dpi: int = 200,
) -> list[str]:
    """
    Draw *m*, its REF and its RREF side by side.  *m* itself is not modified.

    If save_path is set the figure is written there, otherwise it is shown.
    Returns the RREF transcript.
    """
    ref = to_ref(m.copy())
    rref, transcript = to_rref_with_transcript(m.copy(), style)
    n_steps = count_steps(transcript)
    logger.info("reduction of %dx%d matrix: %d steps", m.num_rows, m.num_columns, n_steps)

    height = 1.5 + 0.4 * max(m.num_rows, 1)
    fig, axes = plt.subplots(1, 3, figsize=(12, height))
    axA, axB, axC = axes

    draw_matrix(m, axA, "input")
    draw_matrix(ref, axB, "REF" if is_row_reduced(ref) else "REF (zero pivot)")
    draw_matrix(rref, axC, f"RREF, {n_steps} steps")

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=dpi)
        plt.close(fig)
    else:
        plt.show()

    return transcript
