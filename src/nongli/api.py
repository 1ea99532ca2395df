from __future__ import annotations

import os
from datetime import date
from typing import Any, Dict, List, Optional, Tuple, Union

from .core.engine import CalendarEngine, EngineRegistry
from .core.types import (
    AlmanacEntry,
    DayCell,
    DayInfo,
    EngineSpec,
    GanZhi,
    GanZhiStrings,
    LunarDate,
    SolarDate,
    SolarTerm,
)
from .engines.factory import make_engine as _make_engine
from .engines.lunar import LunarMonth
from . import grid as _grid

ENGINE_ENV = "NONGLI_ENGINE"
DEFAULT_ENGINE = "china"

SolarLike = Union[SolarDate, date]

_registry: Optional[EngineRegistry] = None

def set_registry(reg: EngineRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> EngineRegistry:
    if _registry is None:
        raise RuntimeError("Engine registry not initialized")
    return _registry

def _engine(name: Optional[str]) -> CalendarEngine:
    return _reg().get(name or os.environ.get(ENGINE_ENV, DEFAULT_ENGINE))

def _solar(d: SolarLike) -> SolarDate:
    return d if isinstance(d, SolarDate) else SolarDate.from_date(d)

# ============================================================
# Registry
# ============================================================

def list_engines() -> List[str]:
    return _reg().names()

def engine_info(engine: Optional[str] = None) -> Dict[str, Any]:
    return _engine(engine).info()

def get_engine(engine: Optional[str] = None) -> CalendarEngine:
    return _engine(engine)

def get_calendar(name: str, *, utc_offset_hours: Optional[float] = None, table: Optional[str] = None) -> CalendarEngine:
    """
    Build a fresh engine from a named spec, optionally moved to another
    meridian. An explicit offset applies to every year and drops the
    spec's earlier meridians.
    """
    spec = EngineSpec.like(name)
    if utc_offset_hours is not None:
        spec = spec.tweak(utc_offset_hours=utc_offset_hours, offset_history=())
    if table is not None:
        from .engines.ephemeris import TabulatedEphemeris
        return _make_engine(spec, ephemeris=TabulatedEphemeris.load(table))
    return _make_engine(spec)

def make_engine(spec: EngineSpec) -> CalendarEngine:
    return _make_engine(spec)

def register_engine(name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
    _reg().register(name, engine, overwrite=overwrite)

# ============================================================
# Conversions
# ============================================================

def solar_to_lunar(year: int, month: int, day: int, *, engine: Optional[str] = None) -> LunarDate:
    return _engine(engine).solar_to_lunar(SolarDate.from_ymd(year, month, day))

def lunar_to_solar(
    year: int,
    month: int,
    day: int,
    is_leap_month: bool = False,
    *,
    engine: Optional[str] = None,
) -> SolarDate:
    return _engine(engine).lunar_to_solar(LunarDate(year, month, is_leap_month, day))

def day_info(d: SolarLike, *, engine: Optional[str] = None, debug: bool = False) -> DayInfo:
    return _engine(engine).day_info(_solar(d), debug=debug)

# ============================================================
# Ganzhi, terms, almanac
# ============================================================

def gan_zhi_strings(
    solar_date: SolarLike,
    lunar_date: Optional[LunarDate] = None,
    *,
    engine: Optional[str] = None,
) -> GanZhiStrings:
    eng = _engine(engine)
    solar = _solar(solar_date)
    if lunar_date is None:
        lunar_date = eng.solar_to_lunar(solar)
    return eng.gan_zhi_strings(solar, lunar_date)

def hour_gan_zhi(solar_date: SolarLike, hour: int, *, engine: Optional[str] = None) -> GanZhi:
    return _engine(engine).hour_gan_zhi(_solar(solar_date), hour)

def almanac_for(solar_date: SolarLike, *, engine: Optional[str] = None) -> AlmanacEntry:
    return _engine(engine).almanac_for(_solar(solar_date))

def terms_for_year(year: int, *, engine: Optional[str] = None) -> Tuple[SolarTerm, ...]:
    return _engine(engine).terms_for_year(year)

# ============================================================
# Lunar year structure
# ============================================================

def leap_month(year: int, *, engine: Optional[str] = None) -> int:
    return _engine(engine).leap_month(year)

def months_in_year(year: int, *, engine: Optional[str] = None) -> Tuple[LunarMonth, ...]:
    return _engine(engine).months_in_year(year)

def days_in_lunar_month(year: int, month: int, is_leap_month: bool = False, *, engine: Optional[str] = None) -> int:
    eng = _engine(engine)
    eng.check_lunar_year(year)
    return eng.lunar.find_month(year, month, is_leap_month).days

# ============================================================
# Month grid
# ============================================================

def generate_month_grid(year: int, month: int, *, engine: Optional[str] = None) -> Tuple[DayCell, ...]:
    return _grid.generate_month_grid(_engine(engine), year, month)

def next_month(year: int, month: int) -> Tuple[int, int]:
    return _grid.next_month(year, month)

def prev_month(year: int, month: int) -> Tuple[int, int]:
    return _grid.prev_month(year, month)
