"""nongli: Chinese, Korean and Vietnamese lunisolar calendars.

Importing the package registers the standard engines; the functions
re-exported here take an optional `engine=` name and default to "china".
"""

from ._bootstrap import install_default_registry as _install

_install()

from .api import (
    solar_to_lunar,
    lunar_to_solar,
    day_info,
    gan_zhi_strings,
    hour_gan_zhi,
    almanac_for,
    terms_for_year,
    leap_month,
    months_in_year,
    days_in_lunar_month,
    generate_month_grid,
    next_month,
    prev_month,
    list_engines,
    engine_info,
    get_engine,
    get_calendar,
    make_engine,
    register_engine,
)
from .core.errors import EngineUnavailableError, InvalidLunarDateError, NongliError, OutOfRangeError
from .core.time import day_of_week, from_julian_day, to_julian_day
from .core.types import AlmanacEntry, DayCell, GanZhi, LunarDate, SolarDate, SolarTerm

__all__ = [
    "solar_to_lunar",
    "lunar_to_solar",
    "day_info",
    "gan_zhi_strings",
    "hour_gan_zhi",
    "almanac_for",
    "terms_for_year",
    "leap_month",
    "months_in_year",
    "days_in_lunar_month",
    "generate_month_grid",
    "next_month",
    "prev_month",
    "list_engines",
    "engine_info",
    "get_engine",
    "get_calendar",
    "make_engine",
    "register_engine",
    "to_julian_day",
    "from_julian_day",
    "day_of_week",
    "SolarDate",
    "LunarDate",
    "GanZhi",
    "SolarTerm",
    "AlmanacEntry",
    "DayCell",
    "NongliError",
    "OutOfRangeError",
    "InvalidLunarDateError",
    "EngineUnavailableError",
]
