from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import sys
from fractions import Fraction
from typing import Any, Optional

from .core.errors import JDCountError
from .core.numeric import Arithmetic


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _fmt(v: Any) -> str:
    if isinstance(v, Fraction) and v.denominator != 1:
        return f"{v} ({float(v):.9f})"
    return str(v)


def _numeric(args: argparse.Namespace) -> str:
    return "float" if args.float else "rational"


def _parse(arith: Arithmetic, text: Optional[str]):
    return None if text is None else arith.parse(text)


def cmd_flavours(argv: list[str]) -> int:
    import jdcount

    p = argparse.ArgumentParser(prog="jdcount flavours", description="List the supported day-count flavours")
    p.parse_args(argv)

    print(f"{'name':<5} {'epoch (JD)':>12}  {'zoned':<5}  {'day start':<9}  {'epoch':<16}  title")
    for name in jdcount.list_flavours():
        info = jdcount.flavour_info(name)
        print(
            f"{info['name']:<5} {info['epoch_jd_float']:>12.1f}  {'yes' if info['zoned'] else 'no':<5}  "
            f"{info['day_start']:<9}  {info['epoch']:<16}  {info['title']}"
        )
    return 0


def cmd_convert(argv: list[str]) -> int:
    import jdcount

    p = argparse.ArgumentParser(prog="jdcount convert", description="Continuous day count -> other flavour")
    p.add_argument("src", help="source flavour, e.g. jd")
    p.add_argument("dst", help="destination flavour, e.g. mjd")
    p.add_argument("value", help="day count (decimal or p/q)")
    p.add_argument("--zone", default=None, help="zone offset in days (decimal or p/q, e.g. -5/24)")
    p.add_argument("--float", action="store_true", help="use native floats instead of exact rationals")
    p.add_argument("--split", action="store_true", help="print day number and day fraction")
    args = p.parse_args(argv)

    numeric = _numeric(args)
    arith = jdcount.get_family(numeric).arith
    x = arith.parse(args.value)
    zone = _parse(arith, args.zone)

    if args.split:
        n, f = jdcount.to_split(x, args.src, args.dst, zone=zone, numeric=numeric)
        print(f"{args.dst.upper()}N = {_fmt(n)}")
        print(f"{args.dst.upper()}F = {_fmt(f)}")
    else:
        print(_fmt(jdcount.convert(x, args.src, args.dst, zone=zone, numeric=numeric)))
    return 0


def cmd_from_split(argv: list[str]) -> int:
    import jdcount

    p = argparse.ArgumentParser(prog="jdcount from-split", description="Day number (+ fraction) -> other flavour")
    p.add_argument("src", help="source flavour, e.g. cjd")
    p.add_argument("dst", help="destination flavour, e.g. rd")
    p.add_argument("day", help="day number")
    p.add_argument("fraction", nargs="?", default=None, help="day fraction in [0, 1)")
    p.add_argument("--zone", default=None, help="zone offset in days (decimal or p/q)")
    p.add_argument("--float", action="store_true", help="use native floats instead of exact rationals")
    p.add_argument("--split", action="store_true", help="print day number and day fraction")
    args = p.parse_args(argv)

    numeric = _numeric(args)
    arith = jdcount.get_family(numeric).arith
    n = arith.parse(args.day)
    f = _parse(arith, args.fraction)
    zone = _parse(arith, args.zone)

    if args.split:
        n2, f2 = jdcount.split_to_split(n, args.src, args.dst, fraction=f, zone=zone, numeric=numeric)
        print(f"{args.dst.upper()}N = {_fmt(n2)}")
        print(f"{args.dst.upper()}F = {_fmt(f2)}")
    else:
        if f is None:
            raise SystemExit("from-split without --split requires a day fraction")
        print(_fmt(jdcount.from_split(n, f, args.src, args.dst, zone=zone, numeric=numeric)))
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="jdcount", description="Julian Date flavour conversion CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("flavours", help="List the supported day-count flavours")
    sub.add_parser("convert", help="Continuous day count -> other flavour")
    sub.add_parser("from-split", help="Day number (+ fraction) -> other flavour")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=["round-trip"], help="Which diagnostic to run")

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.cmd == "flavours":
            return cmd_flavours(rest)

        if args.cmd == "convert":
            return cmd_convert(rest)

        if args.cmd == "from-split":
            return cmd_from_split(rest)

        if args.cmd == "diag":
            tool_map = {
                "round-trip": "jdcount.diagnostics.round_trip",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except (JDCountError, TypeError) as e:
        print(f"jdcount: {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
