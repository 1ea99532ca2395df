from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import nongli
from nongli.core.types import DayCell

MONTH_NAMES = ("正月", "二月", "三月", "四月", "五月", "六月", "七月", "八月", "九月", "十月", "冬月", "腊月")
_TENS = ("初", "十", "廿", "三")
_UNITS = ("一", "二", "三", "四", "五", "六", "七", "八", "九", "十")


def lunar_day_name(day: int) -> str:
    if day == 10:
        return "初十"
    if day == 20:
        return "二十"
    if day == 30:
        return "三十"
    return _TENS[(day - 1) // 10] + _UNITS[(day - 1) % 10]


def lunar_month_name(month: int, is_leap: bool) -> str:
    return ("闰" if is_leap else "") + MONTH_NAMES[month - 1]


def dow_header() -> str:
    return "Su      Mo      Tu      We      Th      Fr      Sa"


def cell_label(c: DayCell) -> Tuple[str, str]:
    """(top, bottom): Gregorian day, then festival / term / lunar day."""
    top = f"{c.solar_date.day:2d}" + ("" if c.is_current_month else ".")
    lunar = c.lunar_date
    if c.almanac.festivals:
        bot = sorted(c.almanac.festivals)[0]
    elif c.almanac.solar_term:
        bot = c.almanac.solar_term
    elif lunar.day == 1:
        bot = lunar_month_name(lunar.month, lunar.is_leap_month)
    else:
        bot = lunar_day_name(lunar.day)
    return top, bot


def _pad(s: str, w: int = 6) -> str:
    # CJK glyphs are double width
    width = sum(2 if ord(ch) > 0x2E80 else 1 for ch in s)
    return s + " " * max(0, w - width)


def print_grid(title: str, cells: Tuple[DayCell, ...]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for i in range(0, len(cells), 7):
        week = [cell_label(c) for c in cells[i:i + 7]]
        print("  ".join(_pad(t) for t, _ in week))
        print("  ".join(_pad(b) for _, b in week))
    print()


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Print the 42-cell Gregorian month grid with lunar labels.")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("--engine", default=None, help="china|korea|vietnam (default: china)")
    args = p.parse_args(argv)

    cells = nongli.generate_month_grid(args.year, args.month, engine=args.engine)
    first = next(c for c in cells if c.is_current_month)
    gz = nongli.gan_zhi_strings(first.solar_date, first.lunar_date, engine=args.engine)
    title = f"{args.year}-{args.month:02d}   {gz.year}年  ({cells[0].solar_date} .. {cells[-1].solar_date})"
    print_grid(title, cells)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
