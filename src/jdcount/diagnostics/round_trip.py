from __future__ import annotations

import argparse
import logging
import random
from fractions import Fraction
from typing import Tuple

from ..api import get_family
from ..engines.family import ConversionFamily, PairConverter
from ..engines.flavours import FLAVOURS

logger = logging.getLogger(__name__)


def random_sample(rng: random.Random, family: ConversionFamily) -> Tuple[object, object]:
    """A day count within a few thousand years of the MJD epoch, and a zone offset."""
    x = Fraction(rng.randint(-2**40, 2**40), 2**20) + Fraction(2400000)
    zone = Fraction(rng.randint(-48, 56), 96)
    arith = family.arith
    return arith.coerce(x), arith.coerce(zone)


def _agree(family: ConversionFamily, a, b) -> bool:
    if family.arith.name == "rational":
        return a == b
    return abs(a - b) <= 1e-6


def check_pair(pc: PairConverter, back: PairConverter, x, zone, family: ConversionFamily) -> int:
    """Round-trip one sample through a pair and its reverse; returns failure count."""
    zargs = (zone,) if pc.resolution.needs_zone else ()
    failures = 0

    y = pc.to_value(x, *zargs)
    x2 = back.to_value(y, *zargs)
    if not _agree(family, x, x2):
        failures += 1
        print(f"\nFAIL value {pc.resolution.name}: x={x} -> {y} -> {x2} (zone={zone})")

    n, f = pc.to_split(x, *zargs)
    if n != pc.to_day_number(x, *zargs):
        failures += 1
        print(f"\nFAIL day number {pc.resolution.name}: x={x} (zone={zone})")

    x3 = back.split_to_value(n, f, *zargs)
    if not _agree(family, x, x3):
        failures += 1
        print(f"\nFAIL split {pc.resolution.name}: x={x} -> ({n}, {f}) -> {x3} (zone={zone})")

    return failures


def roundtrip_test(family: ConversionFamily, N: int, seed: int, *, max_failures: int) -> int:
    rng = random.Random(seed)
    failures = 0
    for src in FLAVOURS:
        for dst in FLAVOURS:
            pc = family.converter(src, dst)
            back = family.converter(dst, src)
            for _ in range(N):
                x, zone = random_sample(rng, family)
                failures += check_pair(pc, back, x, zone, family)
                if failures >= max_failures:
                    return failures
    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests over all flavour pairs.")
    p.add_argument("--numeric", choices=["rational", "float"], default="rational", help="Numeric backend.")
    p.add_argument("--N", type=int, default=200, help="Trials per pair.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    family = get_family(args.numeric)
    logger.info("round trip: %d pairs x %d samples (%s)", len(FLAVOURS) ** 2, args.N, args.numeric)
    failures = roundtrip_test(family, N=args.N, seed=args.seed, max_failures=args.max_failures)

    if failures == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {failures}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
