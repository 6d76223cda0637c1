"""Unicode bracket rendering for matrices."""
from __future__ import annotations



def _bracket(i: int, n: int) -> tuple[str, str]:
    if n == 1:
        return "[", "]"
    if i == 0:
        return "⎡", "⎤"
    if i == n - 1:
        return "⎣", "⎦"
    return "⎢", "⎥"


def format_rows(rows: list[list], *, augmented: bool = False, debug: bool = False) -> str:
    """Render logical rows with right-aligned columns.

    The last column of an augmented matrix is set off by ``|``.
    """
    if not rows:
        return "[]"
    render = repr if debug else str
    cells = [[render(v) for v in row] for row in rows]
    width = len(cells[0])
    col_w = [max((len(row[c]) for row in cells), default=0) for c in range(width)]

    lines = []
    for i, row in enumerate(cells):
        left, right = _bracket(i, len(cells))
        parts = [cell.rjust(col_w[c]) for c, cell in enumerate(row)]
        if augmented and parts:
            body = " ".join(parts[:-1])
            body = f"{body} | {parts[-1]}" if body else f"| {parts[-1]}"
        else:
            body = " ".join(parts)
        lines.append(f"{left} {body} {right}")
    return "\n".join(lines)


def format_matrix(m, debug: bool = False) -> str:
    """Render *m* with ⎡ ⎢ ⎣ / ⎤ ⎥ ⎦ brackets; ``debug`` uses ``repr`` for cells."""
    return format_rows(m.to_rows(), augmented=m.augmented, debug=debug)
