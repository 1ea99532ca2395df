"""
nongli.grid
-----------
The 42-cell month grid (six weeks, Sunday first) and month navigation.

A grid is rebuilt from scratch for every (year, month); it never depends on
"today" and never caches cells across calls.
"""

from __future__ import annotations

from typing import Tuple

from .core.engine import CalendarEngine
from .core.time import day_of_week, days_in_month, to_jdn, validate_ymd
from .core.types import DayCell, SolarDate

GRID_CELLS = 42
# leading and trailing cells may fall this far outside the supported range
GRID_PAD_DAYS = 14
WEEKEND = (0, 6)  # Sunday, Saturday


def grid_start_jdn(year: int, month: int) -> int:
    """JDN of the Sunday on or before the 1st of the month."""
    validate_ymd(year, month, 1)
    first = to_jdn(year, month, 1)
    return first - day_of_week(float(first))


def generate_month_grid(engine: CalendarEngine, year: int, month: int) -> Tuple[DayCell, ...]:
    """
    The month itself must lie inside the engine's range; the cells of the
    neighbouring months are converted even just past either end of it.
    """
    start = grid_start_jdn(year, month)
    for day in (1, days_in_month(year, month)):
        engine.solar_to_lunar(SolarDate.from_ymd(year, month, day))
    cells = []
    for jdn in range(start, start + GRID_CELLS):
        solar = SolarDate.from_jdn(jdn)
        lunar = engine.solar_to_lunar(solar, pad_days=GRID_PAD_DAYS)
        cells.append(
            DayCell(
                solar_date=solar,
                lunar_date=lunar,
                is_current_month=solar.month == month,
                is_weekend=solar.weekday in WEEKEND,
                almanac=engine.almanac_for(solar, lunar, pad_days=GRID_PAD_DAYS),
            )
        )
    return tuple(cells)


def next_month(year: int, month: int) -> Tuple[int, int]:
    validate_ymd(year, month, 1)
    return (year + 1, 1) if month == 12 else (year, month + 1)


def prev_month(year: int, month: int) -> Tuple[int, int]:
    validate_ymd(year, month, 1)
    return (year - 1, 12) if month == 1 else (year, month - 1)
