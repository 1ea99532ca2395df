"""
nongli.engines.solar_terms
--------------------------
The 24 solar terms (节气) of a term-year, cut to civil days on the engine's
clock. Even indices are the 节 (jie) that open the solar-term months;
odd indices are the 12 principal terms (中气, zhongqi) used by the leap-month rule.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from ..core.time import CivilClock, from_jdn
from ..core.types import SolarTerm
from .ephemeris import EphemerisProtocol

TERM_NAMES = (
    "立春", "雨水", "惊蛰", "春分", "清明", "谷雨",
    "立夏", "小满", "芒种", "夏至", "小暑", "大暑",
    "立秋", "处暑", "白露", "秋分", "寒露", "霜降",
    "立冬", "小雪", "大雪", "冬至", "小寒", "大寒",
)

WINTER_SOLSTICE = TERM_NAMES.index("冬至")


def principal_term(n: int) -> bool:
    """True if term index n (0=立春) is a zhongqi."""
    return n % 2 == 1


class SolarTermTable:
    def __init__(self, ephemeris: EphemerisProtocol, clock: CivilClock):
        self.ephemeris = ephemeris
        self.clock = clock

    def terms_for_year(self, year: int) -> Tuple[SolarTerm, ...]:
        """立春 of `year` .. 大寒 of `year + 1`, strictly increasing."""
        return tuple(
            SolarTerm(name=TERM_NAMES[i], index=i, julian_moment=self.clock.to_civil(jd), year=year)
            for i, jd in enumerate(self.ephemeris.solar_terms(year))
        )

    def winter_solstice(self, year: int) -> SolarTerm:
        """冬至 falling in December of `year`."""
        return self.terms_for_year(year)[WINTER_SOLSTICE]

    def _around(self, jdn: int) -> List[SolarTerm]:
        y = from_jdn(jdn)[0]
        return list(self.terms_for_year(y - 1)) + list(self.terms_for_year(y))

    def term_on_day(self, jdn: int) -> Optional[SolarTerm]:
        for t in self._around(jdn):
            if t.jdn == jdn:
                return t
        return None

    def principal_days(self, start_jdn: int, end_jdn: int) -> List[int]:
        """Civil days in [start_jdn, end_jdn) on which a zhongqi falls."""
        y0 = from_jdn(start_jdn)[0] - 1
        y1 = from_jdn(end_jdn)[0]
        out = []
        for y in range(y0, y1 + 1):
            for t in self.terms_for_year(y):
                if t.is_principal and start_jdn <= t.jdn < end_jdn:
                    out.append(t.jdn)
        return out

    def jie_month(self, jdn: int) -> Tuple[int, int]:
        """
        (term_year, month_no) of the solar-term month containing the day.

        month_no 1 is the 寅 month opened by 立春; the day a 节 falls on
        already belongs to the month it opens.
        """
        last = None
        for t in self._around(jdn):
            if t.index % 2 == 0 and t.jdn <= jdn:
                last = t
        if last is None:
            raise RuntimeError(f"no jie found on or before JDN {jdn}")
        return last.year, last.index // 2 + 1

    def lichun_year(self, jdn: int) -> int:
        """The ganzhi year as cut at 立春."""
        return self.jie_month(jdn)[0]
