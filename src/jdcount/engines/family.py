"""
jdcount.engines.family
----------------------
Generates the conversion callables for every ordered pair of flavours.

For flavours xyz and abc the six callables are

    xyz_to_abc      (XYZD)              -> ABCD
    xyz_to_abcn     (XYZD)              -> ABCDN
    xyz_to_abcnf    (XYZD)              -> (ABCDN, ABCDF)
    xyzn_to_abc     (XYZDN, XYZDF)      -> ABCD
    xyzn_to_abcn    (XYZDN, XYZDF)      -> ABCDN
    xyzn_to_abcnf   (XYZDN, XYZDF)      -> (ABCDN, ABCDF)

each taking a trailing ``zone`` argument when exactly one side of the pair
is zone-relative. The day-number and pair forms share one computation, so
they always agree on the day number.

The XYZDF argument of the split -> split forms defaults to zero when the
two flavours delimit days at the same instant and agree on zone-relativity.
Otherwise a day number on its own does not identify a day of the other
flavour and the fraction must be given.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Callable, Dict, Iterator, List, Mapping, Tuple

from ..core.numeric import EXACT, NATIVE, Arithmetic, NumT
from ..core.types import DaySplit
from .flavours import flavour
from .resolver import PAIRS, PairResolution
from .split import floor_split
from .validate import check_day

logger = logging.getLogger(__name__)

ConvFunc = Callable[..., object]


def _named(fn: ConvFunc, name: str, doc: str) -> ConvFunc:
    fn.__name__ = name
    fn.__qualname__ = name
    fn.__doc__ = doc
    return fn


class PairConverter:
    """The six conversion shapes for one ordered pair, bound to one backend."""

    def __init__(self, res: PairResolution, arith: Arithmetic):
        self.resolution = res
        self.arith = arith

        diff = arith.coerce(res.epoch_diff)
        sign = res.zone_sign

        def shift(v, zone):
            return v + zone if sign > 0 else v - zone

        if res.needs_zone:
            def to_value(x, zone):
                return shift(x + diff, zone)

            def to_split(x, zone):
                return floor_split(to_value(x, zone), arith)

            def to_day_number(x, zone):
                return to_split(x, zone).day

            def split_to_value(n, f, zone):
                check_day(n, f, arith)
                return shift(n + f + diff, zone)

            def split_to_split(n, f, zone):
                return floor_split(split_to_value(n, f, zone), arith)

            def split_to_day_number(n, f, zone):
                return split_to_split(n, f, zone).day

        else:
            def to_value(x):
                return x + diff

            def to_split(x):
                return floor_split(x + diff, arith)

            def to_day_number(x):
                return to_split(x).day

            def split_to_value(n, f):
                check_day(n, f, arith)
                return n + f + diff

            if res.fraction_optional:
                zero = arith.zero

                def split_to_split(n, f=zero):
                    return floor_split(split_to_value(n, f), arith)

                def split_to_day_number(n, f=zero):
                    return split_to_split(n, f).day
            else:
                def split_to_split(n, f):
                    return floor_split(split_to_value(n, f), arith)

                def split_to_day_number(n, f):
                    return split_to_split(n, f).day

        s, d = res.src.name, res.dst.name
        S, D = s.upper(), d.upper()
        z = ", ZONE" if res.needs_zone else ""
        ff = f"[, {S}F]" if res.fraction_optional else f", {S}F"

        self.to_value = _named(
            to_value, f"{s}_to_{d}", f"({S}{z}) -> {D}")
        self.to_day_number = _named(
            to_day_number, f"{s}_to_{d}n", f"({S}{z}) -> {D}N")
        self.to_split = _named(
            to_split, f"{s}_to_{d}nf", f"({S}{z}) -> ({D}N, {D}F)")
        self.split_to_value = _named(
            split_to_value, f"{s}n_to_{d}", f"({S}N, {S}F{z}) -> {D}")
        self.split_to_day_number = _named(
            split_to_day_number, f"{s}n_to_{d}n", f"({S}N{ff}{z}) -> {D}N")
        self.split_to_split = _named(
            split_to_split, f"{s}n_to_{d}nf", f"({S}N{ff}{z}) -> ({D}N, {D}F)")

    def functions(self) -> Tuple[ConvFunc, ...]:
        return (
            self.to_value,
            self.to_day_number,
            self.to_split,
            self.split_to_value,
            self.split_to_day_number,
            self.split_to_split,
        )

    def __repr__(self) -> str:
        return f"PairConverter({self.resolution.name!r}, {self.arith!r})"


class ConversionFamily:
    """
    All 64 pair converters for one numeric backend.

    Callables are available as attributes (``family.jd_to_mjd``), by
    subscription (``family["jd_to_mjd"]``), or through
    ``family.converter("jd", "mjd")``.
    """

    def __init__(self, arith: Arithmetic):
        self.arith = arith
        pairs = {key: PairConverter(res, arith) for key, res in PAIRS.items()}
        funcs: Dict[str, ConvFunc] = {}
        for pc in pairs.values():
            for fn in pc.functions():
                funcs[fn.__name__] = fn
        self._pairs: Mapping[Tuple[str, str], PairConverter] = MappingProxyType(pairs)
        self._funcs: Mapping[str, ConvFunc] = MappingProxyType(funcs)
        logger.debug("built %d conversion functions over %d pairs (%s)",
                     len(funcs), len(pairs), arith.name)

    def converter(self, src: str, dst: str) -> PairConverter:
        return self._pairs[(flavour(src).name, flavour(dst).name)]

    def names(self) -> List[str]:
        return sorted(self._funcs)

    def split(self, x: NumT) -> DaySplit:
        return floor_split(x, self.arith)

    def check(self, n: NumT, f: NumT) -> None:
        check_day(n, f, self.arith)

    def __getitem__(self, name: str) -> ConvFunc:
        if name not in self._funcs:
            raise KeyError(f"Unknown conversion '{name}'")
        return self._funcs[name]

    def __getattr__(self, name: str) -> ConvFunc:
        funcs = self.__dict__.get("_funcs")
        if funcs is None or name not in funcs:
            raise AttributeError(f"{type(self).__name__!s} has no conversion '{name}'")
        return funcs[name]

    def __contains__(self, name: object) -> bool:
        return name in self._funcs

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._funcs)

    def __dir__(self) -> List[str]:
        return sorted(set(super().__dir__()) | set(self._funcs))

    def __repr__(self) -> str:
        return f"ConversionFamily({self.arith!r})"


EXACT_FAMILY = ConversionFamily(EXACT)
NATIVE_FAMILY = ConversionFamily(NATIVE)
