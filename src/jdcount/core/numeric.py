"""
jdcount.core.numeric
--------------------
The arithmetic contract the conversion engine relies on, with a native
float backend and an exact rational backend.

The engine never inspects the type of a value. A backend is picked once,
when a ConversionFamily is built, and every constant the engine adds is
coerced into that backend's type up front.
"""

from __future__ import annotations

import math
from fractions import Fraction
from types import MappingProxyType
from typing import Protocol, TypeVar, Union

NumT = Union[int, float, Fraction]
T = TypeVar("T")


class Arithmetic(Protocol[T]):
    name: str

    @property
    def zero(self) -> T:
        ...

    def coerce(self, q: Fraction) -> T:
        """Exact table constant -> backend value."""
        ...

    def floor(self, x: T) -> T:
        """Floor toward negative infinity, same type as the input."""
        ...

    def is_integer(self, x: T) -> bool:
        ...

    def parse(self, text: str) -> T:
        """Decimal or 'p/q' text -> backend value."""
        ...


class FloatArithmetic:
    """Native floats: fast, subject to rounding and magnitude-related loss."""
    name = "float"

    @property
    def zero(self) -> float:
        return 0.0

    def coerce(self, q: Fraction) -> float:
        return float(q)

    def floor(self, x: float) -> float:
        return float(math.floor(x))

    def is_integer(self, x: float) -> bool:
        return math.isfinite(x) and float(x).is_integer()

    def parse(self, text: str) -> float:
        return float(Fraction(text)) if "/" in text else float(text)

    def __repr__(self) -> str:
        return "FloatArithmetic()"


class RationalArithmetic:
    """Exact rationals via fractions.Fraction; ints are accepted as exact values."""
    name = "rational"

    @property
    def zero(self) -> Fraction:
        return Fraction(0)

    def coerce(self, q: Fraction) -> Fraction:
        return Fraction(q)

    def floor(self, x: Fraction) -> Fraction:
        # Fraction.__floor__ is numerator // denominator, no float round trip
        return Fraction(math.floor(x))

    def is_integer(self, x: Fraction) -> bool:
        return Fraction(x).denominator == 1

    def parse(self, text: str) -> Fraction:
        return Fraction(text)

    def __repr__(self) -> str:
        return "RationalArithmetic()"


NATIVE = FloatArithmetic()
EXACT = RationalArithmetic()

BACKENDS = MappingProxyType({
    NATIVE.name: NATIVE,
    EXACT.name: EXACT,
})
