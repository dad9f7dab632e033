# tests/test_resolver.py

from fractions import Fraction

import pytest

from jdcount.engines.flavours import FLAVOURS
from jdcount.engines.resolver import PAIRS, resolve


def test_all_pairs_present():
    assert len(PAIRS) == 64
    for s in FLAVOURS:
        for d in FLAVOURS:
            assert PAIRS[(s, d)] == resolve(s, d)


def test_epoch_diff():
    assert resolve("jd", "mjd").epoch_diff == Fraction("-2400000.5")
    assert resolve("mjd", "jd").epoch_diff == Fraction("2400000.5")
    assert resolve("cjd", "rd").epoch_diff == Fraction(-1721425)
    for name in FLAVOURS:
        assert resolve(name, name).epoch_diff == 0


@pytest.mark.parametrize("src,dst,sign", [
    ("jd", "mjd", 0),
    ("cjd", "ld", 0),
    ("jd", "cjd", 1),
    ("tjd", "rd", 1),
    ("cjd", "jd", -1),
    ("ld", "djd", -1),
])
def test_zone_sign(src, dst, sign):
    res = resolve(src, dst)
    assert res.zone_sign == sign
    assert res.needs_zone is (sign != 0)


@pytest.mark.parametrize("src,dst,optional", [
    ("jd", "rjd", True),
    ("jd", "djd", True),
    ("mjd", "tjd", True),
    ("cjd", "rd", True),
    ("rd", "ld", True),
    ("jd", "mjd", False),
    ("rjd", "tjd", False),
    # whole-day epoch difference, but the zone makes the boundary differ
    ("cjd", "mjd", False),
    ("jd", "cjd", False),
])
def test_fraction_optional(src, dst, optional):
    assert resolve(src, dst).fraction_optional is optional


def test_identity_pairs_take_optional_fraction():
    for name in FLAVOURS:
        res = resolve(name, name)
        assert res.whole_day
        assert res.fraction_optional


def test_resolve_accepts_records():
    res = resolve(FLAVOURS["mjd"], "JD")
    assert res.name == "mjd_to_jd"
