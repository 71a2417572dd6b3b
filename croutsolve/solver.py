"""Crout LU solvers for full, symmetric and tridiagonal linear systems."""

from __future__ import annotations

from croutsolve.interval import Interval, iabs

_EPS = 1e-20


class PivotError(ArithmeticError):
    """Raised when the decomposition meets a (near) zero pivot."""

    def __init__(self, column: int, message: str = "zero pivot"):
        super().__init__(f"{message} in column {column}")
        self.column = column


def _check_shapes(a, b):
    n = len(a)
    if any(len(row) != n for row in a):
        raise ValueError("the matrix must be square")
    if len(b) != n:
        raise ValueError("the right-hand side must match the matrix size")
    return n


def _constants(a, b):
    sample = a[0][0] if a else (b[0] if b else 0.0)
    if isinstance(sample, Interval):
        return Interval(0, 0), Interval(1, 1)
    kind = type(sample)
    if kind is int or kind is bool:
        kind = float
    return kind(0), kind(1)


def _magnitude(value):
    if isinstance(value, Interval):
        return iabs(value).b
    return abs(value)


def _near_zero(value):
    return _magnitude(value) < _EPS


def _decompose(a, n, zero, one, is_singular, message):
    lower = [[zero] * n for _ in range(n)]
    upper = [[one if i == j else zero for j in range(n)] for i in range(n)]
    for j in range(n):
        for i in range(j, n):
            s = sum((lower[i][k] * upper[k][j] for k in range(j)), zero)
            lower[i][j] = a[i][j] - s
        if is_singular(lower[j][j]):
            raise PivotError(j + 1, message)
        for i in range(j + 1, n):
            s = sum((lower[j][k] * upper[k][i] for k in range(j)), zero)
            upper[j][i] = (a[j][i] - s) / lower[j][j]
    return lower, upper


def _substitute(lower, upper, b, n, zero):
    y = [zero] * n
    for i in range(n):
        s = sum((lower[i][k] * y[k] for k in range(i)), zero)
        y[i] = (b[i] - s) / lower[i][i]
    x = [zero] * n
    for i in reversed(range(n)):
        s = sum((upper[i][k] * x[k] for k in range(i + 1, n)), zero)
        x[i] = y[i] - s
    return x


def solve_crout(a, b):
    """Solve a x = b by Crout decomposition; raises PivotError on an exact zero pivot."""
    n = _check_shapes(a, b)
    zero, one = _constants(a, b)
    lower, upper = _decompose(
        a, n, zero, one, lambda pivot: pivot == zero, "zero pivot (Crout)"
    )
    return _substitute(lower, upper, b, n, zero)


def solve_crout_symmetric(a, b):
    """Solve a symmetric system; raises PivotError when a pivot is below 1e-20."""
    n = _check_shapes(a, b)
    zero, one = _constants(a, b)
    lower, upper = _decompose(a, n, zero, one, _near_zero, "pivot close to zero")
    return _substitute(lower, upper, b, n, zero)


def solve_crout_tridiagonal(a, b):
    """Solve a tridiagonal system using only the three central diagonals."""
    n = _check_shapes(a, b)
    if n == 0:
        raise ValueError("the matrix must not be empty")
    zero, _ = _constants(a, b)

    diag = [a[i][i] for i in range(n)]
    sub = [a[i][i - 1] if i > 0 else zero for i in range(n)]
    sup = [a[i][i + 1] if i < n - 1 else zero for i in range(n)]

    u = [zero] * n
    y = [zero] * n
    pivot = diag[0]
    if _near_zero(pivot):
        raise PivotError(1, "pivot close to zero")
    u[0] = sup[0] / pivot
    y[0] = b[0] / pivot
    for i in range(1, n):
        pivot = diag[i] - sub[i] * u[i - 1]
        if _near_zero(pivot):
            raise PivotError(i + 1, "pivot close to zero")
        if i < n - 1:
            u[i] = sup[i] / pivot
        y[i] = (b[i] - sub[i] * y[i - 1]) / pivot

    x = [zero] * n
    x[n - 1] = y[n - 1]
    for i in reversed(range(n - 1)):
        x[i] = y[i] - u[i] * x[i + 1]
    return x