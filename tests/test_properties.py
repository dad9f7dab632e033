# tests/test_properties.py

import random
from fractions import Fraction

import pytest

from jdcount import exact, native
from jdcount.engines.flavours import FLAVOURS

NAMES = list(FLAVOURS)


def sample(rng):
    x = Fraction(rng.randint(-2**44, 2**44), 2**rng.randint(0, 20))
    zone = Fraction(rng.randint(-48, 56), 96)
    return x, zone


def zargs(family, src, dst, zone):
    return (zone,) if family.converter(src, dst).resolution.needs_zone else ()


def test_identity():
    rng = random.Random(1)
    for name in NAMES:
        for _ in range(50):
            x, _z = sample(rng)
            assert exact[f"{name}_to_{name}"](x) == x
            n, f = exact.split(x)
            assert exact[f"{name}n_to_{name}nf"](n, f) == (n, f)
            assert exact[f"{name}n_to_{name}n"](n) == n


def test_round_trip():
    rng = random.Random(2)
    for a in NAMES:
        for b in NAMES:
            fwd = exact.converter(a, b)
            back = exact.converter(b, a)
            for _ in range(20):
                x, zone = sample(rng)
                z = zargs(exact, a, b, zone)
                assert back.to_value(fwd.to_value(x, *z), *z) == x
                n, f = fwd.to_split(x, *z)
                assert back.split_to_value(n, f, *z) == x
                assert back.split_to_split(*fwd.split_to_split(*exact.split(x), *z), *z) == exact.split(x)


def test_associativity_via_intermediate():
    rng = random.Random(3)
    for a in NAMES:
        for b in NAMES:
            for c in NAMES:
                x, zone = sample(rng)
                direct = exact.converter(a, c).to_value(x, *zargs(exact, a, c, zone))
                via_b = exact.converter(a, b).to_value(x, *zargs(exact, a, b, zone))
                via_b = exact.converter(b, c).to_value(via_b, *zargs(exact, b, c, zone))
                assert direct == via_b


def test_split_join_through_conversions():
    rng = random.Random(4)
    for a in NAMES:
        for b in NAMES:
            x, zone = sample(rng)
            z = zargs(exact, a, b, zone)
            n, f = exact.converter(a, b).to_split(x, *z)
            assert n + f == exact.converter(a, b).to_value(x, *z)
            assert 0 <= f < 1
            assert n.denominator == 1


def test_native_round_trip_is_close():
    rng = random.Random(5)
    for a in NAMES:
        for b in NAMES:
            fwd = native.converter(a, b)
            back = native.converter(b, a)
            for _ in range(20):
                x = rng.uniform(-1e6, 3e6)
                zone = rng.uniform(-0.5, 0.6)
                z = zargs(native, a, b, zone)
                assert back.to_value(fwd.to_value(x, *z), *z) == pytest.approx(x, abs=1e-6)
                n, f = fwd.to_split(x, *z)
                assert 0.0 <= f < 1.0
                assert back.split_to_value(n, f, *z) == pytest.approx(x, abs=1e-6)
