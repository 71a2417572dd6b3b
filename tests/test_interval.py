from fractions import Fraction

import mpmath
import pytest

from croutsolve.interval import (
    Interval,
    Mode,
    Precision,
    diadd,
    didiv,
    dimul,
    dint_width,
    disub,
    get_mode,
    get_precision,
    hull,
    iabs,
    iadd,
    idiv,
    imul,
    int_read,
    int_width,
    ipi,
    isqr2,
    isqr3,
    isub,
    left_read,
    right_read,
    set_mode,
    set_precision,
)


@pytest.fixture(autouse=True)
def _restore_settings():
    mode, precision = get_mode(), get_precision()
    yield
    set_mode(mode)
    set_precision(precision)


def _exact(x, factor):
    return mpmath.fmul(x, factor, exact=True)


def test_default_settings_and_mode_round_trip():
    assert get_mode() is Mode.PINT
    assert get_precision() == Precision.MPREAL
    set_mode(Mode.DINT)
    assert get_mode() is Mode.DINT


def test_int_read_encloses_decimal():
    x = int_read("0.1")
    assert x.a < x.b
    assert _exact(x.a, 10) < 1 < _exact(x.b, 10)


def test_int_read_exact_value_is_degenerate():
    x = int_read("0.5")
    assert x.a == x.b == mpmath.mpf("0.5")


@pytest.mark.parametrize("text", ["abc", "", "1,5"])
def test_int_read_rejects_garbage(text):
    with pytest.raises(ValueError):
        int_read(text)


def test_left_and_right_read_match_int_read():
    x = int_read("2.7")
    assert left_read("2.7") == x.a
    assert right_read("2.7") == x.b


def test_higher_precision_gives_narrower_reading():
    set_precision(Precision.LONGDOUBLE)
    narrow = int_width(int_read("0.1"))
    set_precision(Precision.FLOAT)
    wide = int_width(int_read("0.1"))
    assert 0 < narrow < wide


def test_set_precision_rejects_tiny_values():
    with pytest.raises(ValueError):
        set_precision(0)


def test_constants_enclose_true_values():
    r2, r3, pi = isqr2(), isqr3(), ipi()
    assert _exact(r2.a, r2.a) <= 2 <= _exact(r2.b, r2.b)
    assert _exact(r3.a, r3.a) <= 3 <= _exact(r3.b, r3.b)
    with mpmath.workprec(200):
        assert pi.a <= mpmath.pi <= pi.b


def test_iadd_encloses_exact_sum():
    r = iadd(int_read("0.1"), int_read("0.2"))
    assert r.a < r.b
    assert _exact(r.a, 10) <= 3 <= _exact(r.b, 10)


def test_isub_of_itself_contains_zero():
    x = int_read("0.3")
    r = isub(x, x)
    assert r.a <= 0 <= r.b


@pytest.mark.parametrize(
    "x, y",
    [
        (Interval(-1, 2), Interval(3, 4)),
        (Interval(-5, -2), Interval(-3, 7)),
        (Interval(1, 6), Interval(-4, -1)),
    ],
)
def test_imul_endpoints_are_products(x, y):
    r = imul(x, y)
    products = {u * v for u in (x.a, x.b) for v in (y.a, y.b)}
    assert r.a in products and r.b in products
    assert all(r.a <= p <= r.b for p in products)


def test_idiv_encloses_all_quotients():
    x, y = Interval(1, 10), Interval(1, 2)
    r = idiv(x, y)
    for u in (x.a, x.b):
        for v in (y.a, y.b):
            assert r.a <= _exact(u, 1) / v <= r.b
    assert _exact(r.a, 2) <= 1


def test_idiv_by_interval_with_zero_raises():
    with pytest.raises(ZeroDivisionError):
        idiv(Interval(1, 2), Interval(-1, 1))


def test_operators_dispatch_to_proper_arithmetic():
    x, y = Interval(1, 2), Interval(3, 4)
    assert x + y == iadd(x, y)
    assert x - y == isub(x, y)
    assert x * y == imul(x, y)
    assert x / y == idiv(x, y)


def test_scalar_multiplication_commutes():
    x = Interval(1, 3)
    assert 2 * x == x * 2 == imul(x, Interval(2, 2))


def test_dual_opposite_projection():
    x = Interval(3, 1)
    assert x.dual().dual() == x
    assert x.opposite().opposite() == x
    assert x.projection() == x.dual()
    assert x.dual().projection() == x.dual()


def test_inverse_is_dual_of_reciprocal():
    x = Interval(2, 4)
    assert x.inverse().dual() == idiv(Interval(1, 1), x)


def test_widths():
    x = Interval(1, 3)
    assert int_width(x) == -int_width(x.dual())
    assert dint_width(x) == dint_width(x.dual()) == int_width(x)
    assert x.dual().width() < 0
    set_mode(Mode.DINT)
    assert x.dual().width() == int_width(x)


def test_directed_add_sub_agree_on_proper_intervals():
    x, y = int_read("0.1"), int_read("0.7")
    assert diadd(x, y) == iadd(x, y)
    assert disub(x, y) == isub(x, y)


def test_directed_add_sub_cancel():
    x = Interval(1, 2)
    assert diadd(x, x.opposite()) == Interval(0, 0)
    assert disub(x, x.dual()) == Interval(0, 0)


def test_dimul_with_inverse_gives_one():
    x = Interval(2, 4)
    assert dimul(x, x.inverse()) == Interval(1, 1)
    proper = x * x.inverse()
    assert proper.a < 1 < proper.b
    set_mode(Mode.DINT)
    assert x * x.inverse() == Interval(1, 1)


def test_didiv_by_dual_gives_one():
    x = Interval(2, 4)
    assert didiv(x, x.dual()) == Interval(1, 1)
    set_mode(Mode.DINT)
    assert x / x.dual() == Interval(1, 1)


def test_dimul_zero_case():
    assert dimul(Interval(-1, 1), Interval(1, -1)) == Interval(0, 0)


def test_didiv_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        didiv(Interval(2, 1), Interval(1, -1))


def test_hull_and_abs():
    x, y = Interval(3, -1), Interval(2, 5)
    h = hull(x, y)
    assert all(h.a <= e <= h.b for e in (x.a, x.b, y.a, y.b))
    assert h.a in (x.a, x.b, y.a, y.b) and h.b in (x.a, x.b, y.a, y.b)
    assert iabs(Interval(-3, 2)) == Interval(2, 3)


def test_mid_lies_between_endpoints():
    x = int_read("0.1") + int_read("5.3")
    assert x.a <= x.mid() <= x.b


def test_ends_to_strings_format():
    assert Interval(1, 1).ends_to_strings() == ("1.0000000000000000E0", "1.0000000000000000E0")
    left, right = Interval(-1.5, 250).ends_to_strings()
    assert left == "-1.5000000000000000E0"
    assert right == "2.5000000000000000E2"


def test_ends_to_strings_round_outward():
    set_precision(Precision.LONGDOUBLE)
    left, right = int_read("0.1").ends_to_strings()
    assert Fraction(left) <= Fraction(1, 10) <= Fraction(right)
    assert Fraction(left) < Fraction(right)