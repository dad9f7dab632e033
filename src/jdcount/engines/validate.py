from __future__ import annotations

from ..core.errors import FractionOutOfRange, NonIntegerDayNumber
from ..core.numeric import Arithmetic, NumT


def check_day(n: NumT, f: NumT, arith: Arithmetic) -> None:
    """Validate an externally supplied (day number, day fraction) pair."""
    if not arith.is_integer(n):
        raise NonIntegerDayNumber(f"purported day number {n} is not an integer")
    # written so that NaN fails too
    if not (f >= 0 and f < 1):
        raise FractionOutOfRange(f"purported day fraction {f} is out of range [0, 1)")
