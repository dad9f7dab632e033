# tests/test_split.py

import random
from fractions import Fraction

import pytest

from jdcount.core.numeric import EXACT, NATIVE
from jdcount.engines.split import floor_split


@pytest.mark.parametrize("x,n,f", [
    (Fraction(-1, 4), -1, Fraction(3, 4)),
    (Fraction(5, 2), 2, Fraction(1, 2)),
    (Fraction(-3), -3, 0),
    (Fraction(-9, 4), -3, Fraction(3, 4)),
    (Fraction(2453883125, 1000), 2453883, Fraction(1, 8)),
])
def test_exact_floor_direction(x, n, f):
    out = floor_split(x, EXACT)
    assert out == (n, f)
    assert isinstance(out.day, Fraction)
    assert isinstance(out.fraction, Fraction)


@pytest.mark.parametrize("x,n,f", [
    (-0.25, -1.0, 0.75),
    (2.5, 2.0, 0.5),
    (-3.0, -3.0, 0.0),
    (-2.25, -3.0, 0.75),
])
def test_native_floor_direction(x, n, f):
    out = floor_split(x, NATIVE)
    assert out == (n, f)
    assert isinstance(out.day, float)


def test_int_input_is_exact():
    n, f = floor_split(7, EXACT)
    assert n == 7 and f == 0
    assert isinstance(n, Fraction)


def test_native_tiny_negative_keeps_fraction_in_range():
    # -1e-20 - (-1.0) rounds to 1.0 in binary floating point
    n, f = floor_split(-1e-20, NATIVE)
    assert 0.0 <= f < 1.0
    assert n == 0.0


def test_split_join_law():
    rng = random.Random(42)
    for _ in range(2000):
        x = Fraction(rng.randint(-10**12, 10**12), rng.randint(1, 10**6))
        n, f = floor_split(x, EXACT)
        assert n + f == x
        assert 0 <= f < 1
        assert n.denominator == 1
