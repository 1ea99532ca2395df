from __future__ import annotations

import argparse
from datetime import date
import importlib
import logging
import re
import sys


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _iso_date(s: str) -> date:
    """argparse type for a Gregorian YYYY-MM-DD."""
    if not _DATE_RE.match(s):
        raise argparse.ArgumentTypeError(f"expected a Gregorian date as YYYY-MM-DD, got {s!r}")
    try:
        return date.fromisoformat(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"{s}: {e}") from None


# diagnostics reachable as `nongli diag <tool>`; each module exposes main(argv)
DIAG_TOOLS = {
    "round-trip": "nongli.diagnostics.round_trip",
    "leap-months": "nongli.diagnostics.leap_months",
    "dump-ephemeris": "nongli.diagnostics.dump_ephemeris",
    "validate-ephem": "nongli.diagnostics.ephem.validate_reference",
}


def _run_tool(modpath: str, argv: list[str]) -> int:
    return int(importlib.import_module(modpath).main(argv) or 0)


def _lunar_label(lunar) -> str:
    from nongli.diagnostics.pretty_month import lunar_day_name, lunar_month_name

    return f"{lunar_month_name(lunar.month, lunar.is_leap_month)}{lunar_day_name(lunar.day)}"


def cmd_day(argv: list[str]) -> int:
    import nongli

    p = argparse.ArgumentParser(prog="nongli day", description="Gregorian -> lunar date, ganzhi and almanac")
    p.add_argument("date", type=_iso_date, help="YYYY-MM-DD")
    p.add_argument("--engine", default=None)
    p.add_argument("--debug", action="store_true")
    args = p.parse_args(argv)

    info = nongli.day_info(args.date, engine=args.engine, debug=args.debug)
    a = info.almanac
    print(f"solar     : {info.solar}  ({info.engine.name})")
    print(f"lunar     : {info.lunar}  {_lunar_label(info.lunar)}")
    print(f"ganzhi    : {info.year_gz}年 {info.month_gz}月 {info.day_gz}日")
    print(f"zodiac    : {info.zodiac.hanzi} ({info.zodiac.name.title()})")
    if a.solar_term:
        print(f"term      : {a.solar_term}")
    if a.festivals:
        print(f"festivals : {' '.join(sorted(a.festivals))}")
    print(f"officer   : {a.officer}")
    print(f"彭祖百忌  : {' '.join(a.peng_zu)}")
    print(f"宜        : {' '.join(a.yi) or '-'}")
    print(f"忌        : {' '.join(a.ji) or '-'}")
    if info.debug:
        print(f"debug     : {info.debug}")
    return 0


def cmd_lunar(argv: list[str]) -> int:
    import nongli

    p = argparse.ArgumentParser(prog="nongli lunar", description="Lunar date -> Gregorian date")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("day", type=int)
    p.add_argument("--leap", action="store_true", help="the leap instance of the month")
    p.add_argument("--engine", default=None)
    args = p.parse_args(argv)

    solar = nongli.lunar_to_solar(args.year, args.month, args.day, args.leap, engine=args.engine)
    print(solar)
    return 0


def cmd_terms(argv: list[str]) -> int:
    import nongli
    from nongli.core.time import from_julian_day

    p = argparse.ArgumentParser(prog="nongli terms", description="The 24 solar terms from 立春 of a year")
    p.add_argument("year", type=int)
    p.add_argument("--engine", default=None)
    args = p.parse_args(argv)

    for t in nongli.terms_for_year(args.year, engine=args.engine):
        y, m, d = from_julian_day(t.julian_moment)
        frac = (t.julian_moment + 0.5) % 1.0
        hh, mm = divmod(int(round(frac * 1440)) % 1440, 60)
        mark = "中" if t.is_principal else "节"
        print(f"{t.index:2d}  {t.name}  {mark}  {y:04d}-{m:02d}-{d:02d} {hh:02d}:{mm:02d}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `nongli YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="nongli", description="Chinese lunisolar calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="log debug records to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Gregorian -> lunar date, ganzhi and almanac")
    sub.add_parser("lunar", help="Lunar date -> Gregorian date")
    sub.add_parser("month", help="Print the 42-cell month grid")
    sub.add_parser("terms", help="Print the 24 solar terms of a year")
    sub.add_parser("engines", help="List the registered engines")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=sorted(DIAG_TOOLS),
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.cmd == "day":
        return cmd_day(rest)

    if args.cmd == "lunar":
        return cmd_lunar(rest)

    if args.cmd == "month":
        return _run_tool("nongli.diagnostics.pretty_month", rest)

    if args.cmd == "terms":
        return cmd_terms(rest)

    if args.cmd == "engines":
        import nongli

        for name in nongli.list_engines():
            info = nongli.engine_info(name)
            print(f"{name:10s} UTC{info['utc_offset_hours']:+g}  {info['ephemeris']:12s} {info.get('description', '')}")
        return 0

    if args.cmd == "diag":
        return _run_tool(DIAG_TOOLS[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
