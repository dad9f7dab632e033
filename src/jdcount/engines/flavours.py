"""
jdcount.engines.flavours
------------------------
The fixed table of day-count flavours.

Every flavour is a linear count of days; the only differences are the epoch
(stored as an exact JD value) and whether the count is read in Universal
Time or in the caller's timezone. Absolute counts whose epoch is a whole JD
start their days at noon, the rest at midnight. There is no convention for
zone-relative noon-based counts, so that combination does not occur.
"""

from __future__ import annotations

from fractions import Fraction
from types import MappingProxyType
from typing import Mapping, Tuple

from ..core.errors import UnknownFlavourError
from ..core.types import Flavour


_TABLE: Tuple[Flavour, ...] = (
    Flavour("jd", Fraction(0), title="Julian Date",
            epoch_text="-4713-11-24T12Z"),
    Flavour("rjd", Fraction(2400000), title="Reduced Julian Date",
            epoch_text="1858-11-16T12Z"),
    Flavour("mjd", Fraction(4800001, 2), title="Modified Julian Date",
            epoch_text="1858-11-17T00Z"),
    Flavour("djd", Fraction(2415020), title="Dublin Julian Date",
            epoch_text="1899-12-31T12Z"),
    Flavour("tjd", Fraction(4880001, 2), title="Truncated Julian Date",
            epoch_text="1968-05-24T00Z"),
    Flavour("cjd", Fraction(-1, 2), zoned=True, title="Chronological Julian Date",
            epoch_text="-4713-11-24T00"),
    Flavour("rd", Fraction(3442849, 2), zoned=True, title="Rata Die",
            epoch_text="0000-12-31T00"),
    Flavour("ld", Fraction(4598319, 2), zoned=True, title="Lilian Date",
            epoch_text="1582-10-14T00"),
)

FLAVOURS: Mapping[str, Flavour] = MappingProxyType({f.name: f for f in _TABLE})


def flavour(name: str) -> Flavour:
    """Look up a flavour by name (case-insensitive, e.g. 'MJD' or 'mjd')."""
    key = name.lower()
    if key not in FLAVOURS:
        raise UnknownFlavourError(f"Unknown flavour '{name}'. Available: {list(FLAVOURS)}")
    return FLAVOURS[key]
