"""Interval arithmetic with directed rounding, for proper and directed intervals."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from fractions import Fraction
from typing import Callable

import mpmath
from mpmath import libmp


class Precision(IntEnum):
    """Binary precisions (in bits) used for reading and arithmetic."""

    LONGDOUBLE = 63
    DOUBLE = 53
    FLOAT = 32
    MPREAL = 40


class OutDigits(IntEnum):
    """Numbers of significant decimal digits used when printing."""

    LONGDOUBLE = 17
    DOUBLE = 16
    FLOAT = 7


class Mode(Enum):
    """Arithmetic used by the operators of :class:`Interval`."""

    DINT = "dint"
    PINT = "pint"


@dataclass
class _Settings:
    mode: Mode = Mode.PINT
    precision: int = Precision.MPREAL


_settings = _Settings()

_DOWN = libmp.round_floor
_UP = libmp.round_ceiling
_NEAREST = libmp.round_nearest

_ZERO_DIVISION = "Division by an interval containing 0."


def set_mode(mode):
    """Choose the arithmetic used by the interval operators."""
    _settings.mode = Mode(mode)


def get_mode():
    """Return the arithmetic used by the interval operators."""
    return _settings.mode


def set_precision(precision):
    """Set the binary precision for reading and arithmetic."""
    bits = int(precision)
    if bits < 2:
        raise ValueError(f"precision must be at least 2 bits, got {precision!r}")
    _settings.precision = bits


def get_precision():
    """Return the binary precision for reading and arithmetic."""
    return _settings.precision


def _to_mpf(value):
    if isinstance(value, mpmath.mpf):
        return value
    if isinstance(value, bool):
        value = int(value)
    if isinstance(value, int):
        return mpmath.mp.make_mpf(libmp.from_int(value))
    if isinstance(value, float):
        return mpmath.mp.make_mpf(libmp.from_float(value))
    return mpmath.mpf(value)


def _add(x, y, rounding):
    return mpmath.fadd(x, y, prec=_settings.precision, rounding=rounding)


def _sub(x, y, rounding):
    return mpmath.fsub(x, y, prec=_settings.precision, rounding=rounding)


def _mul(x, y, rounding):
    return mpmath.fmul(x, y, prec=_settings.precision, rounding=rounding)


def _div(x, y, rounding):
    return mpmath.fdiv(x, y, prec=_settings.precision, rounding=rounding)


def _exact_fraction(value) -> Fraction:
    sign, man, exp, _ = value._mpf_
    magnitude = Fraction(man << exp) if exp >= 0 else Fraction(man, 1 << -exp)
    return -magnitude if sign else magnitude


def _decimal_string(value, upward: bool, digits: int = OutDigits.LONGDOUBLE) -> str:
    """Scientific notation with `digits` significant digits, rounded outward."""
    if not mpmath.isfinite(value):
        return str(value)
    if value == 0:
        return "0." + "0" * (digits - 1) + "E0"
    exact = _exact_fraction(value)
    negative = exact < 0
    magnitude = abs(exact)

    exponent = len(str(magnitude.numerator)) - len(str(magnitude.denominator))
    while magnitude < Fraction(10) ** exponent:
        exponent -= 1
    while magnitude >= Fraction(10) ** (exponent + 1):
        exponent += 1

    scaled = magnitude / Fraction(10) ** (exponent - digits + 1)
    if upward != negative:
        mantissa = -(-scaled.numerator // scaled.denominator)
    else:
        mantissa = scaled.numerator // scaled.denominator
    if mantissa >= 10**digits:
        mantissa //= 10
        exponent += 1

    text = str(mantissa)
    sign = "-" if negative else ""
    return f"{sign}{text[0]}.{text[1:]}E{exponent}"


@dataclass(frozen=True)
class Interval:
    """A closed interval [a, b]; a > b denotes an improper (directed) interval."""

    a: mpmath.mpf = 0
    b: mpmath.mpf = 0

    def __post_init__(self):
        object.__setattr__(self, "a", _to_mpf(self.a))
        object.__setattr__(self, "b", _to_mpf(self.b))

    @staticmethod
    def _coerce(other):
        if isinstance(other, Interval):
            return other
        if isinstance(other, (int, float, mpmath.mpf)):
            return Interval(other, other)
        return None

    def __add__(self, other):
        if not isinstance(other, Interval):
            return NotImplemented
        return diadd(self, other) if _settings.mode is Mode.DINT else iadd(self, other)

    def __sub__(self, other):
        if not isinstance(other, Interval):
            return NotImplemented
        return disub(self, other) if _settings.mode is Mode.DINT else isub(self, other)

    def __mul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return dimul(self, other) if _settings.mode is Mode.DINT else imul(self, other)

    def __rmul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return dimul(other, self) if _settings.mode is Mode.DINT else imul(other, self)

    def __truediv__(self, other):
        if not isinstance(other, Interval):
            return NotImplemented
        return didiv(self, other) if _settings.mode is Mode.DINT else idiv(self, other)

    def projection(self):
        """The proper interval with the same endpoints."""
        return Interval(self.b, self.a) if self.a > self.b else self

    def opposite(self):
        """The interval [-a, -b]."""
        return Interval(-self.a, -self.b)

    def dual(self):
        """The interval with its endpoints swapped."""
        return Interval(self.b, self.a)

    def inverse(self):
        """The interval [1/a, 1/b], rounded to the wider enclosure."""
        z1 = Interval(_div(1, self.a, _DOWN), _div(1, self.b, _UP))
        z2 = Interval(_div(1, self.a, _UP), _div(1, self.b, _DOWN))
        return z1 if dint_width(z1) >= dint_width(z2) else z2

    def mid(self):
        """The midpoint (a + b) / 2."""
        return _div(_add(self.b, self.a, _NEAREST), 2, _NEAREST)

    def width(self):
        """The width according to the current mode."""
        return dint_width(self) if _settings.mode is Mode.DINT else int_width(self)

    def ends_to_strings(self):
        """Both endpoints in scientific notation, the left rounded down, the right up."""
        return _decimal_string(self.a, upward=False), _decimal_string(self.b, upward=True)


def int_read(text):
    """The narrowest interval enclosing the decimal number written in `text`."""
    source = str(text).strip()
    if not source:
        raise ValueError(f"invalid number: {text!r}")
    precision = _settings.precision
    try:
        low = libmp.from_str(source, precision, _DOWN)
        high = libmp.from_str(source, precision, _UP)
    except (ValueError, TypeError):
        raise ValueError(f"invalid number: {text!r}") from None
    return Interval(mpmath.mp.make_mpf(low), mpmath.mp.make_mpf(high))


def left_read(text):
    """The decimal number in `text`, rounded down."""
    return int_read(text).a


def right_read(text):
    """The decimal number in `text`, rounded up."""
    return int_read(text).b


def int_width(x):
    """b - a rounded upward."""
    return _sub(x.b, x.a, _UP)


def dint_width(x):
    """|b - a|, the larger of the two directed roundings."""
    w1 = abs(_sub(x.b, x.a, _UP))
    w2 = abs(_sub(x.b, x.a, _DOWN))
    return w1 if w1 > w2 else w2


def iadd(x, y):
    return Interval(_add(x.a, y.a, _DOWN), _add(x.b, y.b, _UP))


def isub(x, y):
    return Interval(_sub(x.a, y.b, _DOWN), _sub(x.b, y.a, _UP))


def _products(op: Callable, x, y, rounding):
    return [op(u, v, rounding) for u in (x.a, x.b) for v in (y.a, y.b)]


def imul(x, y):
    return Interval(min(_products(_mul, x, y, _DOWN)), max(_products(_mul, x, y, _UP)))


def idiv(x, y):
    if y.a <= 0 <= y.b:
        raise ZeroDivisionError(_ZERO_DIVISION)
    return Interval(min(_products(_div, x, y, _DOWN)), max(_products(_div, x, y, _UP)))


def _choose(z1, z2):
    return z1 if z1.width() >= z2.width() else z2


def _directed(op: Callable, p, q):
    """Pick between [p down, q up] and [p up, q down]."""
    z1 = Interval(op(*p, _DOWN), op(*q, _UP))
    z2 = Interval(op(*p, _UP), op(*q, _DOWN))
    return _choose(z1, z2)


def _is_proper(x):
    return x.a <= x.b


def _has_zero(x):
    return (x.a <= 0 and x.b >= 0) or (x.a >= 0 and x.b <= 0)


def _signs(x):
    negative = x.a < 0 and x.b < 0
    positive = x.a > 0 and x.b > 0
    return negative, positive


def diadd(x, y):
    if _is_proper(x) and _is_proper(y):
        return iadd(x, y)
    return _directed(_add, (x.a, y.a), (x.b, y.b))


def disub(x, y):
    if _is_proper(x) and _is_proper(y):
        return isub(x, y)
    return _directed(_sub, (x.a, y.b), (x.b, y.a))


def dimul(x, y):
    if _is_proper(x) and _is_proper(y):
        return imul(x, y)
    xn, xp = _signs(x)
    yn, yp = _signs(y)

    if (xn or xp) and (yn or yp):
        if xp and yp:
            p, q = (x.a, y.a), (x.b, y.b)
        elif xp and yn:
            p, q = (x.b, y.a), (x.a, y.b)
        elif xn and yp:
            p, q = (x.a, y.b), (x.b, y.a)
        else:
            p, q = (x.b, y.b), (x.a, y.a)
        return _directed(_mul, p, q)

    if (xn or xp) and _has_zero(y):
        if xp and _is_proper(y):
            p, q = (x.b, y.a), (x.b, y.b)
        elif xp:
            p, q = (x.a, y.a), (x.a, y.b)
        elif xn and _is_proper(y):
            p, q = (x.a, y.b), (x.a, y.a)
        else:
            p, q = (x.b, y.b), (x.b, y.a)
        return _directed(_mul, p, q)

    if _has_zero(x) and (yn or yp):
        if _is_proper(x) and yp:
            p, q = (x.a, y.b), (x.b, y.b)
        elif x.a <= 0 and yn:
            p, q = (x.b, y.a), (x.a, y.a)
        elif not _is_proper(x) and yp:
            p, q = (x.a, y.a), (x.b, y.a)
        else:
            p, q = (x.b, y.b), (x.a, y.b)
        return _directed(_mul, p, q)

    if x.a >= 0 and x.b <= 0 and y.a >= 0 and y.b <= 0:
        z1 = Interval(
            max(_mul(x.a, y.a, _DOWN), _mul(x.b, y.b, _DOWN)),
            min(_mul(x.a, y.b, _UP), _mul(x.b, y.a, _UP)),
        )
        z2 = Interval(
            max(_mul(x.a, y.a, _UP), _mul(x.b, y.b, _UP)),
            min(_mul(x.a, y.b, _DOWN), _mul(x.b, y.a, _DOWN)),
        )
        return _choose(z1, z2)

    return Interval(0, 0)


def didiv(x, y):
    if _is_proper(x) and _is_proper(y):
        return idiv(x, y)
    xn, xp = _signs(x)
    yn, yp = _signs(y)

    if (xn or xp) and (yn or yp):
        if xp and yp:
            p, q = (x.a, y.b), (x.b, y.a)
        elif xp and yn:
            p, q = (x.b, y.b), (x.a, y.a)
        elif xn and yp:
            p, q = (x.a, y.a), (x.b, y.b)
        else:
            p, q = (x.b, y.a), (x.a, y.b)
        return _directed(_div, p, q)

    if (x.a <= 0 and x.b >= 0) or (x.a >= 0 and x.b <= 0 and (yn or yp)):
        if _is_proper(x) and yp:
            p, q = (x.a, y.a), (x.b, y.a)
        elif _is_proper(x) and yn:
            p, q = (x.b, y.b), (x.a, y.b)
        elif not _is_proper(x) and yp:
            p, q = (x.a, y.b), (x.b, y.b)
        else:
            p, q = (x.b, y.a), (x.a, y.a)
        return _directed(_div, p, q)

    raise ZeroDivisionError(_ZERO_DIVISION)


def hull(x, y):
    """The smallest proper interval holding all four endpoints."""
    ends = (x.a, x.b, y.a, y.b)
    return Interval(min(ends), max(ends))


def iabs(x):
    """The absolute values of the endpoints, in ascending order."""
    low, high = abs(x.a), abs(x.b)
    return Interval(high, low) if high < low else Interval(low, high)


def isqr2():
    """An enclosure of the square root of 2."""
    return Interval(left_read("1.414213562373095048"), right_read("1.414213562373095049"))


def isqr3():
    """An enclosure of the square root of 3."""
    return Interval(left_read("1.732050807568877293"), right_read("1.732050807568877294"))


def ipi():
    """An enclosure of pi."""
    return Interval(left_read("3.141592653589793238"), right_read("3.141592653589793239"))