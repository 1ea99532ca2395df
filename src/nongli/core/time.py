"""
nongli.core.time
----------------
Julian Day arithmetic on the proleptic Gregorian calendar.

Convention: a civil day is represented by its Julian Day at noon, which is the
integer Julian Day Number (JDN) held as a float. All other computations in the
package anchor to this axis.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from typing import Tuple

# floor(jd + 1.5) mod 7 -> 0=Sunday..6=Saturday
_WEEKDAY_SHIFT = 1.5


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    if month == 2:
        return 29 if is_leap_year(year) else 28
    return 30 if month in (4, 6, 9, 11) else 31


def validate_ymd(year: int, month: int, day: int) -> None:
    """Raise ValueError if (year, month, day) is not a Gregorian date."""
    n = days_in_month(year, month)
    if not 1 <= day <= n:
        raise ValueError(f"day must be in 1..{n} for {year}-{month:02d}, got {day}")


def to_jdn(year: int, month: int, day: int) -> int:
    """Gregorian date -> Julian Day Number (Fliegel-Van Flandern)."""
    a = (14 - month) // 12
    y2 = year + 4800 - a
    m2 = month + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def from_jdn(jdn: int) -> Tuple[int, int, int]:
    """Inverse of to_jdn."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day


def jd_to_jdn(jd: float) -> int:
    """Julian Date (days from noon) -> the JDN of the civil day containing it."""
    return int(math.floor(jd + 0.5))


def to_julian_day(year: int, month: int, day: int) -> float:
    """Gregorian date -> Julian Day at civil noon."""
    validate_ymd(year, month, day)
    return float(to_jdn(year, month, day))


def from_julian_day(jd: float) -> Tuple[int, int, int]:
    """Julian Day -> Gregorian (year, month, day) of the civil day containing jd."""
    return from_jdn(jd_to_jdn(jd))


def day_of_week(jd: float) -> int:
    """0=Sunday .. 6=Saturday."""
    return int(math.floor(jd + _WEEKDAY_SHIFT)) % 7


def jdn_from_date(d: date) -> int:
    return to_jdn(d.year, d.month, d.day)


def date_from_jdn(jdn: int) -> date:
    return date(*from_jdn(jdn))


# ------------------------------------------------------------
# Civil clocks
# ------------------------------------------------------------

# (switch date, offset in hours used before it)
OffsetHistory = Tuple[Tuple[Tuple[int, int, int], float], ...]


@dataclass(frozen=True)
class CivilClock:
    """
    Maps UT instants to the civil time that cuts days.

    `history` lists earlier meridians in increasing date order; an instant
    falls under an earlier offset while its civil day precedes the switch.
    """
    utc_offset_hours: float
    history: OffsetHistory = ()

    def offset_at(self, jd_ut: float) -> float:
        off = self.utc_offset_hours
        for switch, before in reversed(self.history):
            if jd_to_jdn(jd_ut + off / 24.0) >= to_jdn(*switch):
                break
            off = before
        return off

    def to_civil(self, jd_ut: float) -> float:
        return jd_ut + self.offset_at(jd_ut) / 24.0

    def civil_jdn(self, jd_ut: float) -> int:
        return jd_to_jdn(self.to_civil(jd_ut))
