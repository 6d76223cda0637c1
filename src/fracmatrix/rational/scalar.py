"""Exact rational scalar with a distinguished undefined value."""
from __future__ import annotations

import math
import numbers
import operator
from decimal import Decimal
from fractions import Fraction
from collections.abc import Callable

from fracmatrix.errors import InvalidDenominator, UndefinedScalar
from .convert import decimal_ratio, parse_ratio


def _canonical(n: int, d: int) -> tuple[int, int]:
    """Canonical (n, d); (0, 0) is returned for the undefined value."""
    if n == 0 and d == 0:
        return 0, 1
    if d == 0:
        return 0, 0
    if d < 0:
        n, d = -n, -d
    if n % d == 0:
        return n // d, 1
    g = math.gcd(n, d)
    return n // g, d // g


class Rational:
    """
    Exact value n / d.

    A defined value always has d >= 1 with the sign on n and gcd(|n|, d) = 1;
    zero is (0, 1).  The undefined value is stored as (0, 0): it absorbs every
    arithmetic operation, has no ordering and compares unequal to everything,
    itself included.

    Operands may be other Rationals, any ``numbers.Integral`` (all machine
    integer widths), any ``numbers.Rational`` such as ``Fraction``, floats
    (through their decimal spelling) and ``Decimal``.  Results are Rationals.
    Comparisons take a float at its exact binary value, so ``Rational(1, 10)``
    is not equal to ``0.1`` even though ``Rational(1, 10) + 0.0`` is 1/10.
    """

    __slots__ = ("_n", "_d")

    def __init__(self, numerator: int = 0, denominator: int = 1):
        numerator = operator.index(numerator)
        denominator = operator.index(denominator)
        if denominator == 0 and numerator != 0:
            raise InvalidDenominator(f"cannot build a rational {numerator} / 0")
        self._n, self._d = _canonical(numerator, denominator)

    @classmethod
    def _from_pair(cls, n: int, d: int) -> Rational:
        obj = object.__new__(cls)
        obj._n, obj._d = _canonical(n, d)
        return obj

    # -----------------------------------------------------------------------
    # Constructors
    # -----------------------------------------------------------------------

    @classmethod
    def undefined(cls) -> Rational:
        return UNDEFINED

    @classmethod
    def from_float(cls, value) -> Rational:
        """Exact value of the decimal spelling of *value* (e.g. 0.1 -> 1/10)."""
        n, d = decimal_ratio(value)
        return cls._from_pair(n, d)

    @classmethod
    def from_number(cls, value) -> Rational:
        """Convert an integer, rational, float or Decimal.

        Non-finite floats raise ValueError, as in ``from_float``.
        """
        if isinstance(value, (float, Decimal)):
            return cls.from_float(value)
        r = _coerce(value)
        if r is NotImplemented:
            raise TypeError(f"cannot convert {type(value).__name__} to Rational")
        return r

    @classmethod
    def parse(cls, text: str) -> Rational:
        """Read ``n``, ``n/d``, ``n / d``, a decimal spelling, or ``UD``."""
        if text.strip().upper() == "UD":
            return UNDEFINED
        n, d = parse_ratio(text)
        if d == 0:
            if n != 0:
                raise InvalidDenominator(f"cannot build a rational from {text!r}")
        return cls._from_pair(n, d)

    # -----------------------------------------------------------------------
    # Accessors
    # -----------------------------------------------------------------------

    @property
    def numerator(self) -> int:
        return self._n

    @property
    def denominator(self) -> int:
        return self._d

    @property
    def is_undefined(self) -> bool:
        return self._d == 0

    def is_zero(self) -> bool:
        return self._d == 1 and self._n == 0

    def is_one(self) -> bool:
        return self._d == 1 and self._n == 1

    def defined(self) -> Rational:
        """Return self, or raise UndefinedScalar for the undefined value."""
        if self._d == 0:
            raise UndefinedScalar("expected a defined rational, got UD")
        return self

    def as_integer_ratio(self) -> tuple[int, int]:
        self.defined()
        return self._n, self._d

    def to_fraction(self) -> Fraction:
        self.defined()
        return Fraction(self._n, self._d)

    def reciprocal(self) -> Rational:
        if self._d == 0:
            return self
        return Rational._from_pair(self._d, self._n)

    # -----------------------------------------------------------------------
    # Arithmetic
    # -----------------------------------------------------------------------

    def __neg__(self) -> Rational:
        if self._d == 0:
            return self
        return Rational._from_pair(-self._n, self._d)

    def __pos__(self) -> Rational:
        return self

    def __abs__(self) -> Rational:
        if self._d == 0:
            return self
        return Rational._from_pair(abs(self._n), self._d)

    def checked_add(self, other) -> Rational | None:
        return _checked(self, other, _add)

    def checked_sub(self, other) -> Rational | None:
        return _checked(self, other, _sub)

    def checked_mul(self, other) -> Rational | None:
        return _checked(self, other, _mul)

    def checked_div(self, other) -> Rational | None:
        return _checked(self, other, _div)

    def checked_mod(self, other) -> Rational | None:
        return _checked(self, other, _mod)

    # -----------------------------------------------------------------------
    # Comparison
    # -----------------------------------------------------------------------

    def compare(self, other) -> int | None:
        """-1, 0 or 1; None when either side is undefined.

        Floats compare by their exact binary value, like ``Fraction``.
        """
        o = _coerce_exact(other)
        if o is NotImplemented:
            raise TypeError(f"cannot compare Rational with {type(other).__name__}")
        if self._d == 0 or o._d == 0:
            return None
        lhs = self._n * o._d
        rhs = o._n * self._d
        return (lhs > rhs) - (lhs < rhs)

    def __eq__(self, other) -> bool:
        o = _coerce_exact(other)
        if o is NotImplemented:
            return NotImplemented
        if self._d == 0 or o._d == 0:
            return False
        return self._n * o._d == o._n * self._d

    def _ordered(self, other, test: Callable[[int], bool]):
        o = _coerce_exact(other)
        if o is NotImplemented:
            return NotImplemented
        c = self.compare(o)
        if c is None:
            return False
        return test(c)

    def __lt__(self, other):
        return self._ordered(other, lambda c: c < 0)

    def __le__(self, other):
        return self._ordered(other, lambda c: c <= 0)

    def __gt__(self, other):
        return self._ordered(other, lambda c: c > 0)

    def __ge__(self, other):
        return self._ordered(other, lambda c: c >= 0)

    def __hash__(self) -> int:
        if self._d == 0:
            return hash(("Rational", "UD"))
        if self._d == 1:
            return hash(self._n)
        return hash(Fraction(self._n, self._d))

    def __bool__(self) -> bool:
        return self._n != 0

    # -----------------------------------------------------------------------
    # Numeric conversion
    # -----------------------------------------------------------------------

    def __trunc__(self) -> int:
        self.defined()
        q = abs(self._n) // self._d
        return -q if self._n < 0 else q

    __int__ = __trunc__

    def __floor__(self) -> int:
        self.defined()
        return self._n // self._d

    def __ceil__(self) -> int:
        self.defined()
        return -(-self._n // self._d)

    def __float__(self) -> float:
        if self._d == 0:
            return math.nan
        return self._n / self._d

    # -----------------------------------------------------------------------
    # Value semantics
    # -----------------------------------------------------------------------

    def __copy__(self) -> Rational:
        return self

    def __deepcopy__(self, memo) -> Rational:
        return self

    def __reduce__(self):
        if self._d == 0:
            return (Rational.undefined, ())
        return (Rational, (self._n, self._d))

    def __str__(self) -> str:
        if self._d == 0:
            return "UD"
        if self._d == 1:
            return str(self._n)
        return f"{self._n} / {self._d}"

    def __repr__(self) -> str:
        if self._d == 0:
            return "Rational.undefined()"
        return f"Rational({self._n}, {self._d})"


def _coerce(value):
    if isinstance(value, Rational):
        return value
    if isinstance(value, numbers.Integral):
        return Rational._from_pair(int(value), 1)
    if isinstance(value, numbers.Rational):
        return Rational._from_pair(int(value.numerator), int(value.denominator))
    if isinstance(value, (numbers.Real, Decimal)):
        # nan and infinities act as the undefined value in arithmetic
        if isinstance(value, Decimal):
            if not value.is_finite():
                return UNDEFINED
        elif not math.isfinite(float(value)):
            return UNDEFINED
        n, d = decimal_ratio(value)
        return Rational._from_pair(n, d)
    return NotImplemented


def _coerce_exact(value):
    # comparisons use the exact binary value of a float
    if isinstance(value, numbers.Real) and not isinstance(value, (numbers.Rational, Decimal)):
        x = float(value)
        if not math.isfinite(x):
            return UNDEFINED
        return Rational._from_pair(*x.as_integer_ratio())
    return _coerce(value)


# Pair arithmetic on two Rationals.  Undefined operands are handled by the
# callers; division and modulo by zero produce UNDEFINED here.

def _add(a: Rational, b: Rational) -> Rational:
    return Rational._from_pair(a._n * b._d + b._n * a._d, a._d * b._d)


def _sub(a: Rational, b: Rational) -> Rational:
    return Rational._from_pair(a._n * b._d - b._n * a._d, a._d * b._d)


def _mul(a: Rational, b: Rational) -> Rational:
    return Rational._from_pair(a._n * b._n, a._d * b._d)


def _div(a: Rational, b: Rational) -> Rational:
    if b._n == 0:
        return UNDEFINED
    return Rational._from_pair(a._n * b._d, a._d * b._n)


def _mod(a: Rational, b: Rational) -> Rational:
    if b._n == 0:
        return UNDEFINED
    q = (a._n * b._d) // (a._d * b._n)
    return Rational._from_pair(a._n * b._d - q * b._n * a._d, a._d * b._d)


def _checked(a: Rational, other, fn) -> Rational | None:
    b = _coerce(other)
    if b is NotImplemented:
        raise TypeError(f"unsupported operand type {type(other).__name__}")
    if a._d == 0 or b._d == 0:
        return None
    result = fn(a, b)
    if result._d == 0:
        return None
    return result


def _operator_fallbacks(fn):
    """Build forward and reflected dunder methods from a pair function."""

    def forward(a, b):
        o = _coerce(b)
        if o is NotImplemented:
            return NotImplemented
        if a._d == 0 or o._d == 0:
            return UNDEFINED
        return fn(a, o)

    def reverse(b, a):
        o = _coerce(a)
        if o is NotImplemented:
            return NotImplemented
        if o._d == 0 or b._d == 0:
            return UNDEFINED
        return fn(o, b)

    forward.__name__ = "__" + fn.__name__.strip("_") + "__"
    reverse.__name__ = "__r" + fn.__name__.strip("_") + "__"
    return forward, reverse


Rational.__add__, Rational.__radd__ = _operator_fallbacks(_add)
Rational.__sub__, Rational.__rsub__ = _operator_fallbacks(_sub)
Rational.__mul__, Rational.__rmul__ = _operator_fallbacks(_mul)
Rational.__truediv__, Rational.__rtruediv__ = _operator_fallbacks(_div)
Rational.__mod__, Rational.__rmod__ = _operator_fallbacks(_mod)


UNDEFINED = object.__new__(Rational)
UNDEFINED._n, UNDEFINED._d = 0, 0

ZERO = Rational(0)
ONE = Rational(1)


def as_rational(value) -> Rational:
    """Coerce *value* into a Rational (see ``Rational.from_number``)."""
    return Rational.from_number(value)
