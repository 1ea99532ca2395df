"""
nongli.engines.sexagenary
-------------------------
Stem-branch (干支) designations for years, months, days and hours.
Pure functions of their numeric inputs.
"""

from __future__ import annotations

import math
from typing import Tuple

from ..core.types import Branch, GanZhi, Stem, Zodiac

# 2000-01-01 (JDN 2451545) is 戊午 = cycle index 54
DAY_OFFSET = 49
# 1984 is 甲子
YEAR_EPOCH = 4


def day_gan_zhi(julian_day: float) -> GanZhi:
    """Day ganzhi of the civil day containing julian_day."""
    return GanZhi.from_index(math.floor(julian_day + 0.5) + DAY_OFFSET)


def year_gan_zhi(lunar_year: int) -> GanZhi:
    return GanZhi.from_index(lunar_year - YEAR_EPOCH)


def month_gan_zhi(year_stem: Stem, month_no: int) -> GanZhi:
    """
    month_no 1..12 counts solar-term months from the 寅 month.
    Five-tigers rule: 甲/己 years open with 丙寅, 乙/庚 with 戊寅, and so on.
    """
    if not 1 <= month_no <= 12:
        raise ValueError(f"month_no must be in 1..12, got {month_no}")
    stem = (2 * int(year_stem) + 2 + month_no - 1) % 10
    branch = (month_no + 1) % 12
    return GanZhi(Stem(stem), Branch(branch))


def hour_branch(hour: int) -> Branch:
    """Double-hour branch; 子 spans 23:00-00:59."""
    if not 0 <= hour <= 23:
        raise ValueError(f"hour must be in 0..23, got {hour}")
    return Branch(((hour + 1) // 2) % 12)


def hour_gan_zhi(day_stem: Stem, hour: int) -> GanZhi:
    """Five-rats rule: 甲/己 days open with 甲子, 乙/庚 with 丙子, ..."""
    branch = hour_branch(hour)
    stem = (2 * int(day_stem) + int(branch)) % 10
    return GanZhi(Stem(stem), branch)


def zodiac_for_year(lunar_year: int) -> Zodiac:
    return Zodiac(int(year_gan_zhi(lunar_year).branch))


def sixty_cycle() -> Tuple[GanZhi, ...]:
    return tuple(GanZhi.from_index(i) for i in range(60))
