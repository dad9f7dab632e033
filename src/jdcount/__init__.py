"""jdcount public API.

Conversions between flavours of Julian Date (JD, RJD, MJD, DJD, TJD, CJD,
RD, LD), each as a continuous count or as day number plus day fraction.

Two prebuilt conversion families are exported: ``exact`` works on
``fractions.Fraction`` (and ``int``) values and is exact, ``native`` works
on floats and is subject to rounding.

    >>> from fractions import Fraction
    >>> from jdcount import exact
    >>> exact.jd_to_mjd(Fraction("2453883.125"))
    Fraction(431061, 8)
"""

from .api import (
    list_flavours,
    flavour_info,
    get_family,
    convert,
    to_day_number,
    to_split,
    from_split,
    split_to_day_number,
    split_to_split,
)
from .core.errors import JDCountError, NonIntegerDayNumber, FractionOutOfRange, UnknownFlavourError
from .core.types import DaySplit, Flavour
from .engines.family import ConversionFamily, EXACT_FAMILY as exact, NATIVE_FAMILY as native
from .engines.flavours import FLAVOURS

__all__ = [
    "list_flavours",
    "flavour_info",
    "get_family",
    "convert",
    "to_day_number",
    "to_split",
    "from_split",
    "split_to_day_number",
    "split_to_split",
    "exact",
    "native",
    "ConversionFamily",
    "DaySplit",
    "Flavour",
    "FLAVOURS",
    "JDCountError",
    "NonIntegerDayNumber",
    "FractionOutOfRange",
    "UnknownFlavourError",
]
