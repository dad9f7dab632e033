from __future__ import annotations
from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Literal, NamedTuple

@dataclass(frozen=True)
class Flavour:
    """One linear day count: its epoch as a JD value and its zone-relativity."""
    name: str
    epoch_jd: Fraction
    zoned: bool = False
    title: str = ""
    epoch_text: str = ""

    @property
    def day_start(self) -> Literal["noon", "midnight"]:
        # JD days start at noon; a half-day epoch shift moves the boundary to midnight
        return "noon" if self.epoch_jd.denominator == 1 else "midnight"

class DaySplit(NamedTuple):
    """Day number plus day fraction in [0, 1)."""
    day: Any
    fraction: Any
