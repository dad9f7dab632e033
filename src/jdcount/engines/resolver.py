"""
jdcount.engines.resolver
------------------------
Per-pair resolution: the net epoch shift between two flavours and the sign
with which a caller's zone offset enters the conversion.

A zoned clock reads ahead of UT by the zone offset, so leaving a zoned
flavour subtracts the offset and entering one adds it. Pairs that agree on
zone-relativity take no zone at all.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from types import MappingProxyType
from typing import Mapping, Tuple

from ..core.types import Flavour
from .flavours import FLAVOURS, flavour


@dataclass(frozen=True)
class PairResolution:
    src: Flavour
    dst: Flavour
    epoch_diff: Fraction
    zone_sign: int  # +1 add zone, -1 subtract zone, 0 no zone parameter

    @property
    def needs_zone(self) -> bool:
        return self.zone_sign != 0

    @property
    def whole_day(self) -> bool:
        """True when both flavours delimit days at the same clock instant."""
        return self.epoch_diff.denominator == 1

    @property
    def fraction_optional(self) -> bool:
        # a day number alone converts unambiguously only if boundaries coincide
        return self.whole_day and not self.needs_zone

    @property
    def name(self) -> str:
        return f"{self.src.name}_to_{self.dst.name}"


def _zone_sign(src: Flavour, dst: Flavour) -> int:
    if src.zoned == dst.zoned:
        return 0
    return -1 if src.zoned else 1


def resolve(src: str | Flavour, dst: str | Flavour) -> PairResolution:
    """Resolve an ordered pair of flavours (names or Flavour records)."""
    s = flavour(src) if isinstance(src, str) else src
    d = flavour(dst) if isinstance(dst, str) else dst
    return PairResolution(
        src=s,
        dst=d,
        epoch_diff=s.epoch_jd - d.epoch_jd,
        zone_sign=_zone_sign(s, d),
    )


PAIRS: Mapping[Tuple[str, str], PairResolution] = MappingProxyType({
    (s, d): resolve(s, d) for s in FLAVOURS for d in FLAVOURS
})
