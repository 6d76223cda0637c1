from .draw import draw_matrix, draw_reduction

__all__ = [
    "draw_matrix",
    "draw_reduction",
]
