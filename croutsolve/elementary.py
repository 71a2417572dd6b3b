"""Elementary functions of intervals, evaluated by enclosing Taylor series."""

from __future__ import annotations

import mpmath
from mpmath import libmp

from croutsolve.interval import (
    Interval,
    diadd,
    didiv,
    dimul,
    disub,
    get_precision,
    iadd,
    idiv,
    imul,
    isub,
)

_MAX_TERMS = 100_000
_BASE_TOLERANCE = mpmath.mpf("1e-18")


class SeriesError(ArithmeticError):
    """Raised when a series expansion does not settle within the term limit."""


def _tolerance():
    """The convergence threshold: 1e-18, widened to a few ulps at low precision."""
    ulp_bound = mpmath.ldexp(mpmath.mpf(1), 2 - get_precision())
    return max(_BASE_TOLERANCE, ulp_bound)


def _require_proper(x, name):
    if x.a > x.b:
        raise ValueError(f"{name} needs a proper interval, got [{x.a}, {x.b}]")


def _difference(old, new):
    return abs(mpmath.fsub(old, new, exact=True))


def _relative(old, new):
    if old == 0:
        return mpmath.inf
    return _difference(old, new) / abs(old)


def _converged(w, w1, eps, both_zero_case):
    da = _difference(w.a, w1.a)
    db = _difference(w.b, w1.b)
    if w.a != 0 and w.b != 0:
        return _relative(w.a, w1.a) < eps and _relative(w.b, w1.b) < eps
    if w.a == 0 and w.b != 0:
        return da < eps and _relative(w.b, w1.b) < eps
    if w.a != 0:
        return (_relative(w.a, w1.a) < eps and db < eps) or (da < eps and db < eps)
    return both_zero_case and da < eps and db < eps


def _clip_unit(w):
    a, b = w.a, w.b
    if b > 1:
        b = 1
        if a > 1:
            a = 1
    if a < -1:
        a = -1
        if b < -1:
            b = -1
    return Interval(a, b)


def _alternating(first, x2, denominator, arithmetic, *, zero_shortcut, both_zero_case):
    """Sum first - first*x2/d1 + ... until successive partial sums agree."""
    add, sub, mul, div = arithmetic
    eps = _tolerance()
    term = first
    w = first
    k = 1
    subtract = True
    for _ in range(_MAX_TERMS):
        d = denominator(k)
        term = mul(term, div(x2, Interval(d, d)))
        w1 = sub(w, term) if subtract else add(w, term)
        if zero_shortcut and w.a == 0 and w.b == 0:
            return Interval(0, 0)
        if _converged(w, w1, eps, both_zero_case):
            return _clip_unit(w1)
        w = w1
        k += 2
        subtract = not subtract
    raise SeriesError(f"series did not converge within {_MAX_TERMS} terms")


def _exponential(x, divide, add):
    eps = _tolerance()
    term = Interval(1, 1)
    w = term
    for k in range(1, _MAX_TERMS + 1):
        term = imul(term, divide(x, Interval(k, k)))
        w1 = add(w, term)
        if _relative(w.a, w1.a) < eps and _relative(w.b, w1.b) < eps:
            return w1
        w = w1
    raise SeriesError(f"series did not converge within {_MAX_TERMS} terms")


def _square(x, name):
    _require_proper(x, name)
    if x.a <= 0 <= x.b:
        low = mpmath.mpf(0)
    elif x.a > 0:
        low = x.a
    else:
        low = x.b
    high = max(abs(x.a), abs(x.b))
    prec = get_precision()
    return Interval(
        mpmath.fmul(low, low, prec=prec, rounding=libmp.round_floor),
        mpmath.fmul(high, high, prec=prec, rounding=libmp.round_ceiling),
    )


def _sqrt(value, rounding):
    return mpmath.mp.make_mpf(libmp.mpf_sqrt(value._mpf_, get_precision(), rounding))


def isin(x):
    """An enclosure of sin over a proper interval."""
    _require_proper(x, "isin")
    return _alternating(
        x,
        imul(x, x),
        lambda k: (k + 1) * (k + 2),
        (iadd, isub, imul, idiv),
        zero_shortcut=True,
        both_zero_case=False,
    )


def icos(x):
    """An enclosure of cos."""
    return _alternating(
        Interval(1, 1),
        imul(x, x),
        lambda k: k * (k + 1),
        (iadd, isub, imul, idiv),
        zero_shortcut=False,
        both_zero_case=True,
    )


def iexp(x):
    """An enclosure of exp; an interval straddling zero yields [1, 1]."""
    if x.a < 0 < x.b:
        return Interval(1, 1)
    _require_proper(x, "iexp")
    return _exponential(x, idiv, iadd)


def isqr(x):
    """The square of a proper interval."""
    return _square(x, "isqr")


def isqrt(x):
    """The square root of a proper, non-negative interval."""
    _require_proper(x, "isqrt")
    if x.a < 0:
        raise ValueError(f"isqrt needs a non-negative interval, got [{x.a}, {x.b}]")
    return Interval(_sqrt(x.a, libmp.round_floor), _sqrt(x.b, libmp.round_ceiling))


def disin(x):
    """An enclosure of sin using directed-interval arithmetic."""
    _require_proper(x, "disin")
    return _alternating(
        x,
        dimul(x, x),
        lambda k: (k + 1) * (k + 2),
        (diadd, disub, dimul, didiv),
        zero_shortcut=False,
        both_zero_case=False,
    )


def dicos(x):
    """An enclosure of cos using directed-interval arithmetic."""
    _require_proper(x, "dicos")
    return _alternating(
        Interval(1, 1),
        dimul(x, x),
        lambda k: k * (k + 1),
        (diadd, disub, dimul, didiv),
        zero_shortcut=False,
        both_zero_case=False,
    )


def diexp(x):
    """An enclosure of exp using directed-interval arithmetic."""
    _require_proper(x, "diexp")
    return _exponential(x, didiv, diadd)


def disqr(x):
    """The square of a proper interval."""
    return _square(x, "disqr")