from __future__ import annotations

from ..core.numeric import Arithmetic, NumT
from ..core.types import DaySplit


def floor_split(x: NumT, arith: Arithmetic) -> DaySplit:
    """
    Decompose a continuous day count into (day number, day fraction).

    The day number is floor(x), toward negative infinity, so the fraction
    always lies in [0, 1): floor_split(-2.25) == (-3, 0.75).

    With the rational backend this is exact. With floats, x - floor(x) can
    round up to 1.0 for tiny negative x; that case is carried into the next
    day so the fraction range still holds.
    """
    n = arith.floor(x)
    f = x - n
    if not f < 1:
        n = n + 1
        f = f - 1
    return DaySplit(n, f)
