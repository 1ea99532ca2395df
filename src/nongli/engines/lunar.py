"""
nongli.engines.lunar
--------------------
Lunar months from new moons and principal terms.

A sui (岁) runs from the month containing the winter solstice of year y-1
(always month 11) up to, not including, the month containing the winter
solstice of year y. A sui of 13 months carries one leap month: the first
month after the opening month 11 that contains no principal term. The leap
month repeats the number of the month before it. The lunar year turns at
month 1.

All boundaries are civil days (JDN) on the engine's clock: a month
starts on the day its new moon falls on, and contains a principal term if
the term's day lies in [start, next start).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Optional, Tuple

from ..astro.args import lunation_index
from ..core.errors import InvalidLunarDateError
from ..core.time import CivilClock, from_jdn
from ..core.types import LunarDate
from .ephemeris import EphemerisProtocol
from .solar_terms import SolarTermTable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LunarMonth:
    year: int
    month: int
    is_leap: bool
    start_jdn: int
    days: int
    k: int  # Meeus lunation index of the opening new moon

    @property
    def end_jdn(self) -> int:
        """First day of the following month."""
        return self.start_jdn + self.days

    def contains(self, jdn: int) -> bool:
        return self.start_jdn <= jdn < self.end_jdn


class LunarMonthEngine:
    def __init__(self, ephemeris: EphemerisProtocol, terms: SolarTermTable, clock: CivilClock):
        self.ephemeris = ephemeris
        self.terms = terms
        self.clock = clock
        self.sui = lru_cache(maxsize=512)(self._build_sui)

    # ---------------------------------------------------------
    # New moons on the civil axis
    # ---------------------------------------------------------

    def new_moon_jdn(self, k: int) -> int:
        return self.clock.civil_jdn(self.ephemeris.new_moon(k))

    def lunation_on_or_before(self, jdn: int) -> int:
        """Index k of the last new moon whose civil day is <= jdn."""
        k = lunation_index(jdn - self.clock.utc_offset_hours / 24.0)
        while self.new_moon_jdn(k) > jdn:
            k -= 1
        while self.new_moon_jdn(k + 1) <= jdn:
            k += 1
        return k

    # ---------------------------------------------------------
    # Sui construction
    # ---------------------------------------------------------

    def _leap_position(self, starts: List[int]) -> Optional[int]:
        if len(starts) - 1 != 13:
            return None
        for i in range(1, 13):
            if not self.terms.principal_days(starts[i], starts[i + 1]):
                return i
        # every month holds a zhongqi only under edge rounding; take the
        # month just before the next sui's month 11
        return 12

    def _build_sui(self, y: int) -> Tuple[LunarMonth, ...]:
        k0 = self.lunation_on_or_before(self.terms.winter_solstice(y - 1).jdn)
        k1 = self.lunation_on_or_before(self.terms.winter_solstice(y).jdn)
        starts = [self.new_moon_jdn(k) for k in range(k0, k1 + 1)]
        leap_pos = self._leap_position(starts)
        logger.debug("sui %d: %d months, leap position %s", y, k1 - k0, leap_pos)

        months = []
        num, year = 11, y - 1
        for i in range(k1 - k0):
            leap = i == leap_pos
            if i > 0 and not leap:
                num = num % 12 + 1
                if num == 1:
                    year = y
            months.append(LunarMonth(year, num, leap, starts[i], starts[i + 1] - starts[i], k0 + i))
        return tuple(months)

    # ---------------------------------------------------------
    # Lookups
    # ---------------------------------------------------------

    def month_of(self, jdn: int) -> LunarMonth:
        y = from_jdn(jdn)[0]
        nxt = self.sui(y + 1)
        months = nxt if jdn >= nxt[0].start_jdn else self.sui(y)
        for m in months:
            if m.contains(jdn):
                return m
        raise RuntimeError(f"JDN {jdn} not covered by sui {y} / {y + 1}")

    def months_in_year(self, year: int) -> Tuple[LunarMonth, ...]:
        """Months of lunar year `year` in order, leap month included."""
        return tuple(m for m in self.sui(year) + self.sui(year + 1) if m.year == year)

    def leap_month(self, year: int) -> int:
        """Number of the leap month of lunar year `year`, or 0."""
        for m in self.months_in_year(year):
            if m.is_leap:
                return m.month
        return 0

    def find_month(self, year: int, month: int, is_leap: bool) -> LunarMonth:
        if not 1 <= month <= 12:
            raise InvalidLunarDateError(f"lunar month must be in 1..12, got {month}")
        for m in self.months_in_year(year):
            if m.month == month and m.is_leap == is_leap:
                return m
        raise InvalidLunarDateError(f"lunar year {year} has no leap month {month}")

    # ---------------------------------------------------------
    # Conversions
    # ---------------------------------------------------------

    def to_lunar(self, jdn: int) -> LunarDate:
        m = self.month_of(jdn)
        return LunarDate(year=m.year, month=m.month, is_leap_month=m.is_leap, day=jdn - m.start_jdn + 1)

    def to_jdn(self, year: int, month: int, is_leap: bool, day: int) -> int:
        m = self.find_month(year, month, is_leap)
        if not 1 <= day <= m.days:
            raise InvalidLunarDateError(f"lunar {year}-{month:02d}{'L' if is_leap else ''} has {m.days} days, got day {day}")
        return m.start_jdn + day - 1
