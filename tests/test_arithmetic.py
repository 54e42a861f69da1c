import pytest

from drillkit.arithmetic import add, div, mod, mul, sub


def test_add_sub_roundtrip():
    assert sub(add(17, 25), 25) == 17


def test_mul_by_one_and_zero():
    assert mul(42, 1) == 42
    assert mul(42, 0) == 0


def test_division_truncates_toward_zero():
    assert div(7, 2) == 3
    assert div(-7, 2) == -3
    assert mod(-7, 2) == -1


@pytest.mark.parametrize(
    "a,b", [(7, 2), (-7, 2), (7, -2), (-7, -2), (0, 5), (100, 7), (-100, 7)]
)
def test_quotient_remainder_invariant(a, b):
    q, r = div(a, b), mod(a, b)
    assert add(mul(b, q), r) == a
    assert abs(r) < abs(b)
    assert r == 0 or (r < 0) == (a < 0)


@pytest.mark.parametrize("a", [0, 5, -5])
def test_zero_divisor_yields_zero(a):
    assert div(a, 0) == 0
    assert mod(a, 0) == 0