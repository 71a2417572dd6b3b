"""Reading numbers, vectors and matrices of a chosen kind from text cells."""

from __future__ import annotations

import re
from enum import Enum

import mpmath
from mpmath import libmp

from croutsolve.interval import Interval, int_read

_MPREAL_BITS = 256

_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
)


class NumberKind(Enum):
    """The arithmetic a parsed value is meant for."""

    DOUBLE = "double"
    MPREAL = "mpreal"
    INTERVAL = "interval"


class ParseError(ValueError):
    """Raised when a cell does not hold a value of the requested kind."""


def _parse_double(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ParseError(f"invalid value: {text}")
    return float(match.group().strip())


def _parse_mpreal(text: str) -> mpmath.mpf:
    try:
        value = libmp.from_str(text.strip(), _MPREAL_BITS, libmp.round_nearest)
    except (ValueError, TypeError):
        raise ParseError(f"invalid value: {text}") from None
    return mpmath.mp.make_mpf(value)


def _read_interval(text: str) -> Interval:
    try:
        return int_read(text)
    except ValueError:
        raise ParseError(f"invalid value: {text}") from None


def _parse_interval(text: str) -> Interval:
    commas = text.count(",")
    if commas == 1:
        left_text, right_text = text.split(",")
        left = _read_interval(left_text).a
        right = _read_interval(right_text).b
        if left > right:
            left, right = right, left
        return Interval(left, right)
    if commas == 0:
        return _read_interval(text)
    raise ParseError("invalid interval format")


_PARSERS = {
    NumberKind.DOUBLE: _parse_double,
    NumberKind.MPREAL: _parse_mpreal,
    NumberKind.INTERVAL: _parse_interval,
}


def parse_value(text, kind):
    """Parse one cell; intervals are written as 'a,b' or as a single number."""
    return _PARSERS[NumberKind(kind)](str(text))


def parse_vector(cells, kind):
    """Parse a sequence of cells into a list of values."""
    return [parse_value(cell, kind) for cell in cells]


def parse_matrix(rows, kind):
    """Parse rows of cells into a list of lists of values."""
    return [parse_vector(row, kind) for row in rows]