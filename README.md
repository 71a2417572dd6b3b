# croutsolve

A library for solving linear systems `A x = b` with Crout's LU
decomposition. Matrix entries can be plain floats, `mpmath.mpf` numbers,
or `Interval` objects whose arithmetic rounds outward.

## Installation

```
pip install croutsolve
```

Its only dependency is `mpmath`.

## Solving a system

`croutsolve.solver` provides three solvers. Each takes a square matrix as a
list of rows and a right-hand side as a list. Each returns the solution as
a list.

```python
from croutsolve.solver import solve_crout, PivotError

a = [[4.0, 1.0], [1.0, 3.0]]
b = [1.0, 2.0]
x = solve_crout(a, b)   # close to [1/11, 7/11]
```

* `solve_crout(a, b)` factors the full matrix. It raises `PivotError` when a
  pivot is exactly zero.
* `solve_crout_symmetric(a, b)` factors the full matrix in the same way. It
  raises `PivotError` as soon as a pivot's magnitude falls below `1e-20`.
* `solve_crout_tridiagonal(a, b)` reads only the sub-, main and
  super-diagonal of `a`. It raises `PivotError` when a pivot's magnitude
  falls below `1e-20`, and `ValueError` for an empty matrix.

`PivotError` is an `ArithmeticError`. Its `column` attribute holds the
1-based column where the factorisation stopped. A matrix that is not
square, or a right-hand side of the wrong length, raises `ValueError`.

For an interval entry, the pivot's magnitude is the larger absolute value of
its two ends.

## Reading input from text

`croutsolve.parser` turns text cells into values of one `NumberKind`:

* `NumberKind.DOUBLE` gives a Python `float`. A leading number is read, and
  any text after it is ignored.
* `NumberKind.MPREAL` gives an `mpmath.mpf` rounded to 256 bits.
* `NumberKind.INTERVAL` gives an `Interval`. A cell holds either one number,
  read as the narrowest interval that encloses it, or two ends separated by
  one comma. The left end is rounded down and the right end up. Swapped ends
  are put in order.

```python
from croutsolve.parser import NumberKind, parse_matrix, parse_vector, parse_value

a = parse_matrix([["4", "1"], ["1", "3"]], NumberKind.INTERVAL)
b = parse_vector(["1", "2.5,2.6"], NumberKind.INTERVAL)
v = parse_value("0.1", NumberKind.MPREAL)
```

Text that cannot be read raises `ParseError`, a subclass of `ValueError`.
So does an interval cell with more than one comma.

## Interval arithmetic

`croutsolve.interval.Interval(a, b)` is a frozen dataclass with `mpmath.mpf`
ends. An interval with `a > b` is improper, or directed.

Two intervals combine with `+`, `-`, `*` and `/`. For `*`, either side may
also be an `int`, `float` or `mpf`. The arithmetic used depends on the
module-wide mode:

* `Mode.PINT` is the default. It gives proper interval arithmetic through
  `iadd`, `isub`, `imul` and `idiv`.
* `Mode.DINT` gives directed interval arithmetic through `diadd`, `disub`,
  `dimul` and `didiv`.

Change the mode with `set_mode` and read it with `get_mode`. Division by an
interval that contains zero raises `ZeroDivisionError`.

Every endpoint operation is rounded to the current binary precision. This
is 40 bits by default (`Precision.MPREAL`). Change it with `set_precision`
and read it with `get_precision`.

Methods of `Interval`:

* `projection()`
* `opposite()`
* `dual()`
* `inverse()`
* `mid()`
* `width()`, which depends on the mode
* `ends_to_strings()`, which gives both ends in scientific notation with 17
  digits, the left end rounded down and the right end up

Module functions:

* `int_read`, `left_read` and `right_read` read decimal text with directed
  rounding.
* `int_width` and `dint_width` give widths.
* `hull` gives the smallest interval that contains two intervals.
* `iabs` gives the absolute value of an interval.
* `isqr2`, `isqr3` and `ipi` give enclosures of √2, √3 and π.

## Elementary functions

`croutsolve.elementary` computes enclosures by Taylor series:

* `isin`, `icos` and `iexp`
* the directed forms `disin`, `dicos` and `diexp`
* `isqr` and `disqr`, the square of an interval
* `isqrt`, the square root of an interval

The sine and cosine results are clipped to `[-1, 1]`. `iexp` returns
`[1, 1]` for an interval that straddles zero.

Functions that need a proper interval raise `ValueError` for an improper
one. `isqrt` also raises `ValueError` for a negative lower end. A series
that has not converged after 100 000 terms raises `SeriesError`.

## What this package does not do

This package is only a library. It has no command-line program and no window
for typing in matrices. To use it, call the parser and solver functions from
your own code.