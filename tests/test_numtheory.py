import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from bigprime.numtheory import extended_gcd, mod_inverse


@pytest.mark.parametrize(
    "a,b,g",
    [(10, 2, 2), (10, 3, 1), (0, 3, 3), (3, 3, 3), (56, 42, 14), (3, -3, 3), (-6, 3, 3), (-4, -2, 2)],
)
def test_extended_gcd_known_values(a, b, g):
    got_g, x, y = extended_gcd(a, b)
    assert got_g == g
    assert a * x + b * y == g


def test_extended_gcd_of_zeros():
    assert extended_gcd(0, 0)[0] == 0


@given(st.integers(min_value=-(1 << 200), max_value=1 << 200), st.integers(min_value=-(1 << 200), max_value=1 << 200))
def test_extended_gcd_bezout_identity(a, b):
    g, x, y = extended_gcd(a, b)
    assert g == math.gcd(a, b)
    assert a * x + b * y == g


def test_mod_inverse_none_when_not_coprime():
    assert mod_inverse(6, 9) is None


def test_mod_inverse_none_for_zero_modulus():
    assert mod_inverse(3, 0) is None


def test_mod_inverse_of_negative_value():
    inv = mod_inverse(-3, 7)
    assert inv is not None
    assert (-3 * inv) % 7 == 1
    assert 0 <= inv < 7


@given(
    st.integers(min_value=-(1 << 200), max_value=1 << 200),
    st.integers(min_value=2, max_value=1 << 200),
)
def test_mod_inverse_matches_builtin(a, m):
    inv = mod_inverse(a, m)
    if math.gcd(a, m) == 1:
        assert inv == pow(a, -1, m)
        assert (a * inv) % m == 1
    else:
        assert inv is None