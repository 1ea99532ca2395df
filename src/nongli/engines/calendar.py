"""
nongli.engines.calendar
-----------------------
The Orchestrator. Binds the solar-term table, the lunar month engine, the
sexagenary rules and the almanac store behind one range-checked interface.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, Tuple

from ..almanac.store import build_entry
from ..core.errors import OutOfRangeError
from ..core.time import to_jdn
from ..core.types import (
    AlmanacEntry,
    CalendarSpec,
    DayInfo,
    EngineId,
    GanZhi,
    GanZhiStrings,
    LunarDate,
    SolarDate,
    SolarTerm,
)
from .ephemeris import EphemerisProtocol
from .lunar import LunarMonth, LunarMonthEngine
from .sexagenary import day_gan_zhi, hour_gan_zhi, month_gan_zhi, year_gan_zhi, zodiac_for_year
from .solar_terms import SolarTermTable


class CalendarEngine:
    def __init__(self, spec: CalendarSpec, ephemeris: EphemerisProtocol):
        self.spec = spec
        self.id: EngineId = spec.id
        self.ephemeris = ephemeris
        self.terms = SolarTermTable(ephemeris, spec.clock)
        self.lunar = LunarMonthEngine(ephemeris, self.terms, spec.clock)

    # ---------------------------------------------------------
    # Range
    # ---------------------------------------------------------

    def check_solar(self, solar: SolarDate, *, pad_days: int = 0) -> SolarDate:
        """
        Reject dates outside min_year-01-01 .. max_year-12-31. `pad_days`
        widens the window on both sides for callers that show neighbouring
        days, such as the leading and trailing cells of a month grid.
        """
        lo = to_jdn(self.spec.min_year, 1, 1) - pad_days
        hi = to_jdn(self.spec.max_year, 12, 31) + pad_days
        if not lo <= solar.jdn <= hi:
            raise OutOfRangeError(
                f"{solar} is outside the supported range {self.spec.min_year}-01-01 .. {self.spec.max_year}-12-31"
            )
        return solar

    def check_lunar_year(self, year: int) -> int:
        # lunar year min_year-1 still owns the first weeks of January min_year
        if not self.spec.min_year - 1 <= year <= self.spec.max_year:
            raise OutOfRangeError(f"lunar year {year} is outside the supported range")
        return year

    def check_term_year(self, year: int) -> int:
        if not self.spec.min_year - 1 <= year <= self.spec.max_year:
            raise OutOfRangeError(f"term-year {year} is outside the supported range")
        return year

    # ---------------------------------------------------------
    # Conversions
    # ---------------------------------------------------------

    def solar_to_lunar(self, solar: SolarDate, *, pad_days: int = 0) -> LunarDate:
        return self.lunar.to_lunar(self.check_solar(solar, pad_days=pad_days).jdn)

    def lunar_to_solar(self, lunar: LunarDate) -> SolarDate:
        self.check_lunar_year(lunar.year)
        jdn = self.lunar.to_jdn(lunar.year, lunar.month, lunar.is_leap_month, lunar.day)
        return self.check_solar(SolarDate.from_jdn(jdn))

    def terms_for_year(self, year: int) -> Tuple[SolarTerm, ...]:
        return self.terms.terms_for_year(self.check_term_year(year))

    def months_in_year(self, year: int) -> Tuple[LunarMonth, ...]:
        return self.lunar.months_in_year(self.check_lunar_year(year))

    def leap_month(self, year: int) -> int:
        return self.lunar.leap_month(self.check_lunar_year(year))

    # ---------------------------------------------------------
    # Sexagenary
    # ---------------------------------------------------------

    def gan_zhi(self, solar: SolarDate, lunar: LunarDate) -> Tuple[GanZhi, GanZhi, GanZhi]:
        """(year, month, day): year by lunar year, month by solar-term month."""
        self.check_solar(solar)
        return year_gan_zhi(lunar.year), self.month_gan_zhi(solar), day_gan_zhi(solar.julian_day)

    def gan_zhi_strings(self, solar: SolarDate, lunar: LunarDate) -> GanZhiStrings:
        y, m, d = self.gan_zhi(solar, lunar)
        return GanZhiStrings(year=y.name, month=m.name, day=d.name)

    def hour_gan_zhi(self, solar: SolarDate, hour: int) -> GanZhi:
        return hour_gan_zhi(day_gan_zhi(solar.julian_day).stem, hour)

    # ---------------------------------------------------------
    # Almanac
    # ---------------------------------------------------------

    def solar_term_name_if_exact(self, solar: SolarDate):
        term = self.terms.term_on_day(self.check_solar(solar).jdn)
        return term.name if term else None

    def month_gan_zhi(self, solar: SolarDate) -> GanZhi:
        """Ganzhi of the solar-term month, turning on the day of each 节."""
        term_year, month_no = self.terms.jie_month(solar.jdn)
        return month_gan_zhi(year_gan_zhi(term_year).stem, month_no)

    def almanac_for(self, solar: SolarDate, lunar: LunarDate = None, *, pad_days: int = 0) -> AlmanacEntry:
        self.check_solar(solar, pad_days=pad_days)
        if lunar is None:
            lunar = self.lunar.to_lunar(solar.jdn)
        return build_entry(
            solar,
            lunar,
            day_gz=day_gan_zhi(solar.julian_day),
            month_gz=self.month_gan_zhi(solar),
            terms=self.terms,
            next_lunar=self.lunar.to_lunar(solar.jdn + 1),
        )

    # ---------------------------------------------------------
    # High-Level API Methods (Required by CLI / api.py)
    # ---------------------------------------------------------

    def info(self) -> Dict[str, Any]:
        return {
            "id": asdict(self.id),
            "utc_offset_hours": self.spec.utc_offset_hours,
            "offset_history": self.spec.offset_history,
            "range": (self.spec.min_year, self.spec.max_year),
            "ephemeris": self.ephemeris.kind,
            **self.spec.meta,
        }

    def day_info(self, solar: SolarDate, *, debug: bool = False) -> DayInfo:
        lunar = self.solar_to_lunar(solar)
        year_gz, month_gz, day_gz = self.gan_zhi(solar, lunar)
        dbg = None
        if debug:
            m = self.lunar.month_of(solar.jdn)
            term_year, month_no = self.terms.jie_month(solar.jdn)
            dbg = {
                "jdn": solar.jdn,
                "lunation_k": m.k,
                "month_start": SolarDate.from_jdn(m.start_jdn),
                "month_days": m.days,
                "term_year": term_year,
                "term_month": month_no,
            }
        return DayInfo(
            solar=solar,
            lunar=lunar,
            engine=self.id,
            year_gz=year_gz,
            month_gz=month_gz,
            day_gz=day_gz,
            zodiac=zodiac_for_year(lunar.year),
            almanac=self.almanac_for(solar, lunar),
            debug=dbg,
        )
