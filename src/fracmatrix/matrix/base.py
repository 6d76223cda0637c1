from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Sequence
from enum import Enum
from typing import Any

from fracmatrix.config import default_orientation
from fracmatrix.errors import IndexOutOfRange, ShapeMismatch
from fracmatrix.rational.scalar import ONE, ZERO, Rational
from .format import format_matrix


class Orientation(Enum):
    """How logical (row, column) coordinates map onto the flat buffer."""

    ROW = "row"
    COLUMN = "column"

    @classmethod
    def coerce(cls, value: Orientation | str | None) -> Orientation:
        """Accept an Orientation, its name ('row' / 'column') or None (configured default)."""
        if value is None:
            value = default_orientation()
        if isinstance(value, Orientation):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"unknown orientation {value!r} (expected 'row' or 'column')") from None

    def flipped(self) -> Orientation:
        return Orientation.COLUMN if self is Orientation.ROW else Orientation.ROW


_ROW_SPLIT_RE = re.compile(r"[;\n]")


class RowView(Sequence):
    """Live view of one logical row; writes go through to the matrix.

    Row-oriented storage makes this a contiguous window of the buffer,
    column-oriented storage a strided gather.
    """

    __slots__ = ("_matrix", "_row")

    def __init__(self, matrix: Matrix, row: int):
        matrix._check_row(row)
        self._matrix = matrix
        self._row = row

    @property
    def _positions(self) -> range:
        # recomputed per access so the view survives a reorient()
        return self._matrix._row_positions(self._row)

    def __len__(self) -> int:
        return self._matrix._width

    def _position(self, i: int) -> int:
        # no negative indexing, same bounds as Matrix.element
        if not isinstance(i, int) or not 0 <= i < len(self):
            raise IndexOutOfRange(f"column {i!r} out of range for row of length {len(self)}")
        return self._positions[i]

    def __getitem__(self, i):
        if isinstance(i, slice):
            return [self._matrix._data[p] for p in self._positions[i]]
        return self._matrix._data[self._position(i)]

    def __setitem__(self, i: int, value: Any) -> None:
        self._matrix._data[self._position(i)] = value

    def __eq__(self, other) -> bool:
        if not isinstance(other, Sequence):
            return NotImplemented
        return list(self) == list(other)

    def __repr__(self) -> str:
        return f"RowView(row={self._row}, {list(self)!r})"


class Matrix:
    """
    Dense matrix stored in a single flat buffer.

    Row orientation keeps logical (r, c) at ``r * width + c``; column
    orientation stores the transpose, with (r, c) at ``c * rows + r``.  All
    public accessors take logical coordinates, so orientation never changes
    what a caller reads.

    Elements may be of any type supporting ``+ - * /`` and comparison with
    0 and 1; the default fill is the rational zero.
    """

    augmented = False
    # stored columns not counted in the logical column count
    _extra = 0

    def __init__(
        self,
        rows: int = 0,
        cols: int = 0,
        orientation: Orientation | str | None = None,
        *,
        fill: Any = ZERO,
    ):
        _check_size(rows, cols)
        width = cols + self._extra
        self._init(rows, width, [fill] * (rows * width), Orientation.coerce(orientation))

    def _init(self, rows: int, width: int, data: list, orientation: Orientation) -> None:
        self._nrows = rows
        self._width = width
        self._data = data
        self._orientation = orientation

    @classmethod
    def _build(cls, rows: int, width: int, data: list, orientation: Orientation) -> Matrix:
        obj = cls.__new__(cls)
        obj._init(rows, width, data, orientation)
        return obj

    # -----------------------------------------------------------------------
    # Constructors
    # -----------------------------------------------------------------------

    @classmethod
    def splat(cls, value: Any, rows: int, cols: int, orientation=None) -> Matrix:
        """Matrix with every stored cell set to *value*."""
        return cls(rows, cols, orientation, fill=value)

    @classmethod
    def from_flat(cls, rows: int, cols: int, buffer: Iterable[Any], orientation=None) -> Matrix:
        """Wrap *buffer*, given in storage order for *orientation*.

        For augmented matrices *cols* counts coefficient columns and the buffer
        holds one extra solution entry per row.
        """
        _check_size(rows, cols)
        data = list(buffer)
        width = cols + cls._extra
        if len(data) != rows * width:
            raise ShapeMismatch(
                f"buffer of length {len(data)} does not fit a {rows}x{width} matrix "
                f"({rows * width} cells)"
            )
        return cls._build(rows, width, data, Orientation.coerce(orientation))

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[Any]], orientation=None) -> Matrix:
        """Build from a list of logical rows (augmented rows end with the solution entry)."""
        grid = [list(row) for row in rows]
        width = len(grid[0]) if grid else cls._extra
        for i, row in enumerate(grid):
            if len(row) != width:
                raise ShapeMismatch(f"row {i} has {len(row)} entries, expected {width}")
        if width < cls._extra:
            raise ShapeMismatch("augmented rows need at least the solution entry")
        data = [v for row in grid for v in row]
        m = cls._build(len(grid), width, data, Orientation.ROW)
        return m.reorient(Orientation.coerce(orientation))

    @classmethod
    def identity(cls, n: int, orientation=None) -> Matrix:
        """n x n identity over the rationals (zero solution column when augmented)."""
        m = cls(n, n, orientation, fill=ZERO)
        for i in range(n):
            m._data[m._index(i, i)] = ONE
        return m

    @classmethod
    def parse(cls, text: str, orientation=None) -> Matrix:
        """Parse ``"1 2 3; 4 5 6"``: rows split on ';' or newlines, entries on whitespace.

        Entries are read with ``Rational.parse`` and must not contain spaces
        (write ``1/2``, not ``1 / 2``).
        """
        rows = [part for part in _ROW_SPLIT_RE.split(text) if part.strip()]
        return cls.from_rows([cls._parse_row(part) for part in rows], orientation)

    @classmethod
    def _parse_row(cls, text: str) -> list[Rational]:
        if "|" in text:
            raise ShapeMismatch(f"'|' is only allowed in augmented matrices: {text.strip()!r}")
        return [Rational.parse(tok) for tok in text.split()]

    # -----------------------------------------------------------------------
    # Shape
    # -----------------------------------------------------------------------

    @property
    def dimensions(self) -> tuple[int, int]:
        """Logical (rows, columns); the solution column is not counted."""
        return self._nrows, self._width - self._extra

    @property
    def num_rows(self) -> int:
        return self._nrows

    @property
    def num_columns(self) -> int:
        return self._width - self._extra

    @property
    def width(self) -> int:
        """Full logical row length, solution column included."""
        return self._width

    @property
    def shape(self) -> tuple[int, int]:
        """Stored (R, C): the transpose of the logical shape when column oriented."""
        if self._orientation is Orientation.ROW:
            return self._nrows, self._width
        return self._width, self._nrows

    @property
    def orientation(self) -> Orientation:
        return self._orientation

    @property
    def buffer(self) -> tuple:
        """The flat storage, in storage order."""
        return tuple(self._data)

    def is_square(self) -> bool:
        return self._nrows == self.num_columns

    def is_identity(self) -> bool:
        """Square with ones on the diagonal and zeros elsewhere (coefficient block only)."""
        if not self.is_square():
            return False
        n = self._nrows
        for r in range(n):
            for c in range(n):
                v = self._data[self._index(r, c)]
                if not (v == 1 if r == c else v == 0):
                    return False
        return True

    # -----------------------------------------------------------------------
    # Addressing
    # -----------------------------------------------------------------------

    def _index(self, r: int, c: int) -> int:
        if self._orientation is Orientation.ROW:
            return r * self._width + c
        return c * self._nrows + r

    def _row_positions(self, r: int) -> range:
        self._check_row(r)
        if self._orientation is Orientation.ROW:
            start = r * self._width
            return range(start, start + self._width)
        return range(r, r + self._width * self._nrows, self._nrows)

    def _check_row(self, r: int) -> None:
        if not isinstance(r, int) or not 0 <= r < self._nrows:
            raise IndexOutOfRange(f"row {r!r} out of range for {self._nrows} rows")

    def _check(self, r: int, c: int) -> None:
        self._check_row(r)
        if not isinstance(c, int) or not 0 <= c < self._width:
            raise IndexOutOfRange(f"column {c!r} out of range for rows of length {self._width}")

    def element(self, r: int, c: int) -> Any:
        self._check(r, c)
        return self._data[self._index(r, c)]

    def set(self, r: int, c: int, value: Any) -> None:
        self._check(r, c)
        self._data[self._index(r, c)] = value

    def __getitem__(self, key):
        if isinstance(key, tuple):
            r, c = key
            return self.element(r, c)
        return self.row_slice(key)

    def __setitem__(self, key, value) -> None:
        if not isinstance(key, tuple):
            raise TypeError("assign single cells with m[r, c] = value")
        r, c = key
        self.set(r, c, value)

    def row_slice(self, r: int) -> RowView:
        return RowView(self, r)

    def column(self, c: int) -> list:
        if not isinstance(c, int) or not 0 <= c < self._width:
            raise IndexOutOfRange(f"column {c!r} out of range for rows of length {self._width}")
        return [self._data[self._index(r, c)] for r in range(self._nrows)]

    def iter_rows(self) -> Iterator[list]:
        for r in range(self._nrows):
            yield [self._data[p] for p in self._row_positions(r)]

    def to_rows(self) -> list[list]:
        return list(self.iter_rows())

    # -----------------------------------------------------------------------
    # Orientation
    # -----------------------------------------------------------------------

    def reorient(self, target: Orientation | str) -> Matrix:
        """Rewrite the buffer for *target* orientation in place; returns self."""
        target = Orientation.coerce(target)
        if target is self._orientation:
            return self
        scratch: list = [None] * len(self._data)
        for r in range(self._nrows):
            for c in range(self._width):
                if target is Orientation.ROW:
                    dst = r * self._width + c
                else:
                    dst = c * self._nrows + r
                scratch[dst] = self._data[self._index(r, c)]
        self._data = scratch
        self._orientation = target
        return self

    def transpose(self) -> Matrix:
        if self.augmented:
            raise TypeError("augmented matrices cannot be transposed")
        out = Matrix(self._width, self._nrows, self._orientation, fill=None)
        for r in range(self._nrows):
            for c in range(self._width):
                out._data[out._index(c, r)] = self._data[self._index(r, c)]
        return out

    def copy(self) -> Matrix:
        return self._build(self._nrows, self._width, list(self._data), self._orientation)

    __copy__ = copy

    # -----------------------------------------------------------------------
    # Comparison / display
    # -----------------------------------------------------------------------

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.augmented != other.augmented:
            return False
        if (self._nrows, self._width) != (other._nrows, other._width):
            return False
        for r in range(self._nrows):
            for c in range(self._width):
                if not self._data[self._index(r, c)] == other._data[other._index(r, c)]:
                    return False
        return True

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return format_matrix(self)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}.from_rows({self.to_rows()!r}, "
            f"orientation={self._orientation.value!r})"
        )

    # -----------------------------------------------------------------------
    # Arithmetic
    # -----------------------------------------------------------------------

    def _same_shape(self, other: Matrix, op: str) -> None:
        if self.augmented != other.augmented or (self._nrows, self._width) != (
            other._nrows,
            other._width,
        ):
            raise ShapeMismatch(
                f"cannot {op} {self._describe()} and {other._describe()}"
            )

    def _describe(self) -> str:
        kind = "augmented" if self.augmented else "plain"
        rows, cols = self.dimensions
        return f"{kind} {rows}x{cols} matrix"

    def _map(self, fn) -> Matrix:
        out = self._build(self._nrows, self._width, [None] * len(self._data), self._orientation)
        for r in range(self._nrows):
            for c in range(self._width):
                i = self._index(r, c)
                out._data[i] = fn(self._data[i], r, c)
        return out

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self._same_shape(other, "add")
        return self._map(lambda v, r, c: v + other._data[other._index(r, c)])

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self._same_shape(other, "subtract")
        return self._map(lambda v, r, c: v - other._data[other._index(r, c)])

    def __iadd__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self._same_shape(other, "add")
        for r in range(self._nrows):
            for c in range(self._width):
                i = self._index(r, c)
                self._data[i] = self._data[i] + other._data[other._index(r, c)]
        return self

    def __isub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self._same_shape(other, "subtract")
        for r in range(self._nrows):
            for c in range(self._width):
                i = self._index(r, c)
                self._data[i] = self._data[i] - other._data[other._index(r, c)]
        return self

    def __neg__(self) -> Matrix:
        return self._map(lambda v, r, c: -v)

    def matmul(self, other: Matrix) -> Matrix:
        """Matrix product; both operands must be plain with matching inner dimension."""
        if self.augmented or other.augmented:
            raise ShapeMismatch("matrix products are defined for plain matrices only")
        n, k = self.dimensions
        k2, m = other.dimensions
        if k != k2:
            raise ShapeMismatch(
                f"cannot multiply {self._describe()} by {other._describe()}"
            )
        out = Matrix(n, m, self._orientation, fill=None)
        for i in range(n):
            for j in range(m):
                total = ZERO
                for p in range(k):
                    total = total + self._data[self._index(i, p)] * other._data[other._index(p, j)]
                out._data[out._index(i, j)] = total
        return out

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.matmul(other)

    def __mul__(self, other):
        if isinstance(other, Matrix):
            return self.matmul(other)
        return self._map(lambda v, r, c: v * other)

    def __rmul__(self, other):
        return self._map(lambda v, r, c: other * v)

    def __truediv__(self, other):
        if isinstance(other, Matrix):
            from fracmatrix.reduce.inverse import inverse

            return self.matmul(inverse(other))
        return self._map(lambda v, r, c: v / other)


class AugmentedMatrix(Matrix):
    """
    Matrix whose last column is the right-hand side of a linear system.

    Constructors take the coefficient column count; ``dimensions`` reports it
    too.  Element access with ``c == num_columns`` reaches the solution column.
    """

    augmented = True
    _extra = 1

    @classmethod
    def _parse_row(cls, text: str) -> list[Rational]:
        parts = text.split("|")
        if len(parts) != 2:
            raise ShapeMismatch(f"augmented row needs exactly one '|': {text.strip()!r}")
        left = [Rational.parse(tok) for tok in parts[0].split()]
        right = [Rational.parse(tok) for tok in parts[1].split()]
        if len(right) != 1:
            raise ShapeMismatch(f"augmented row needs one solution entry: {text.strip()!r}")
        return left + right

    @classmethod
    def from_parts(cls, coefficients: Matrix, solution: Sequence[Any], orientation=None) -> AugmentedMatrix:
        """Join a plain coefficient matrix and a right-hand side column."""
        if coefficients.augmented:
            raise ShapeMismatch("coefficients must be a plain matrix")
        if len(solution) != coefficients.num_rows:
            raise ShapeMismatch(
                f"solution has {len(solution)} entries for {coefficients.num_rows} rows"
            )
        rows = [row + [s] for row, s in zip(coefficients.to_rows(), solution)]
        if orientation is None:
            orientation = coefficients.orientation
        if not rows:
            return cls(0, coefficients.num_columns, orientation)
        return cls.from_rows(rows, orientation)

    def coefficients(self) -> Matrix:
        """Plain copy of the coefficient block."""
        cols = self.num_columns
        out = Matrix(self._nrows, cols, self._orientation, fill=None)
        for r in range(self._nrows):
            for c in range(cols):
                out._data[out._index(r, c)] = self._data[self._index(r, c)]
        return out

    def solution(self) -> list:
        return self.column(self.num_columns)


def _check_size(rows: int, cols: int) -> None:
    if not isinstance(rows, int) or not isinstance(cols, int) or rows < 0 or cols < 0:
        raise ShapeMismatch(f"matrix size must be two non-negative integers, got ({rows!r}, {cols!r})")
