from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, List, Optional

from .core.numeric import BACKENDS, NumT
from .core.types import DaySplit
from .engines.family import EXACT_FAMILY, NATIVE_FAMILY, ConversionFamily, ConvFunc, PairConverter
from .engines.flavours import FLAVOURS, flavour

_FAMILIES = MappingProxyType({
    EXACT_FAMILY.arith.name: EXACT_FAMILY,
    NATIVE_FAMILY.arith.name: NATIVE_FAMILY,
})

def list_flavours() -> List[str]:
    return list(FLAVOURS)

def flavour_info(name: str) -> Dict[str, Any]:
    f = flavour(name)
    return {
        "name": f.name,
        "title": f.title,
        "epoch_jd": str(f.epoch_jd),
        "epoch_jd_float": float(f.epoch_jd),
        "epoch": f.epoch_text,
        "zoned": f.zoned,
        "day_start": f.day_start,
    }

def get_family(numeric: str = "rational") -> ConversionFamily:
    if numeric not in _FAMILIES:
        raise KeyError(f"Unknown numeric backend '{numeric}'. Available: {sorted(BACKENDS)}")
    return _FAMILIES[numeric]

def _pair(src: str, dst: str, numeric: str) -> PairConverter:
    return get_family(numeric).converter(src, dst)

def _call(pc: PairConverter, fn: ConvFunc, args: tuple, zone: Optional[NumT]) -> Any:
    if pc.resolution.needs_zone:
        if zone is None:
            raise TypeError(f"{fn.__name__}() requires a zone offset")
        return fn(*args, zone)
    if zone is not None:
        raise TypeError(f"{fn.__name__}() takes no zone offset")
    return fn(*args)

def _split_args(pc: PairConverter, fn: ConvFunc, n: NumT, fraction: Optional[NumT]) -> tuple:
    if fraction is not None:
        return (n, fraction)
    if not pc.resolution.fraction_optional:
        raise TypeError(f"{fn.__name__}() requires a day fraction: days are delimited differently")
    return (n,)

# ============================================================
# Continuous input
# ============================================================

def convert(x: NumT, src: str, dst: str, *, zone: Optional[NumT] = None, numeric: str = "rational") -> NumT:
    """Continuous count of flavour src -> continuous count of flavour dst."""
    pc = _pair(src, dst, numeric)
    return _call(pc, pc.to_value, (x,), zone)

def to_day_number(x: NumT, src: str, dst: str, *, zone: Optional[NumT] = None, numeric: str = "rational") -> NumT:
    pc = _pair(src, dst, numeric)
    return _call(pc, pc.to_day_number, (x,), zone)

def to_split(x: NumT, src: str, dst: str, *, zone: Optional[NumT] = None, numeric: str = "rational") -> DaySplit:
    pc = _pair(src, dst, numeric)
    return _call(pc, pc.to_split, (x,), zone)

# ============================================================
# Day number + fraction input
# ============================================================

def from_split(n: NumT, f: NumT, src: str, dst: str, *, zone: Optional[NumT] = None, numeric: str = "rational") -> NumT:
    pc = _pair(src, dst, numeric)
    return _call(pc, pc.split_to_value, (n, f), zone)

def split_to_day_number(
    n: NumT,
    src: str,
    dst: str,
    *,
    fraction: Optional[NumT] = None,
    zone: Optional[NumT] = None,
    numeric: str = "rational",
) -> NumT:
    """
    Day number of flavour src -> day number of flavour dst.

    The fraction may be omitted only between flavours that delimit days at
    the same instant (e.g. jd and rjd, or cjd and rd).
    """
    pc = _pair(src, dst, numeric)
    return _call(pc, pc.split_to_day_number, _split_args(pc, pc.split_to_day_number, n, fraction), zone)

def split_to_split(
    n: NumT,
    src: str,
    dst: str,
    *,
    fraction: Optional[NumT] = None,
    zone: Optional[NumT] = None,
    numeric: str = "rational",
) -> DaySplit:
    pc = _pair(src, dst, numeric)
    return _call(pc, pc.split_to_split, _split_args(pc, pc.split_to_split, n, fraction), zone)
