"""
nongli.almanac.store
--------------------
Read-only queries over the festival tables and the yi/ji rules. A query that matches
no rule returns an empty result, never an error.
"""

from __future__ import annotations

from typing import FrozenSet, Optional, Set, Tuple

from ..core.types import AlmanacEntry, GanZhi, LunarDate, SolarDate
from ..engines.solar_terms import SolarTermTable
from . import rules as _rules  # noqa: F401  (registers the standard rules)
from . import tables as t
from .registry import AlmanacContext, apply_rules


def _nth_weekday(solar: SolarDate) -> Tuple[int, int]:
    """(n, weekday) such that the date is the n-th such weekday of its month."""
    return (solar.day - 1) // 7 + 1, solar.weekday


def festivals_for(solar: SolarDate, lunar: LunarDate, next_lunar: Optional[LunarDate] = None) -> FrozenSet[str]:
    """
    Union of fixed solar, weekday-rule solar and fixed lunar festivals.

    ``next_lunar`` is the lunar date of the following day; when given, the last
    day of month 12 is marked 除夕.
    """
    out: Set[str] = set(t.SOLAR_FESTIVALS.get((solar.month, solar.day), ()))

    n, wd = _nth_weekday(solar)
    week = t.SOLAR_WEEK_FESTIVALS.get((solar.month, n, wd))
    if week:
        out.add(week)

    if not lunar.is_leap_month:
        out.update(t.LUNAR_FESTIVALS.get((lunar.month, lunar.day), ()))

    if (
        next_lunar is not None
        and lunar.month == 12
        and not lunar.is_leap_month
        and next_lunar.month == 1
        and next_lunar.day == 1
        and not next_lunar.is_leap_month
    ):
        out.add(t.NEW_YEARS_EVE)
    return frozenset(out)


def solar_term_name_if_exact(solar: SolarDate, terms: SolarTermTable) -> Optional[str]:
    term = terms.term_on_day(solar.jdn)
    return term.name if term else None


def yi_ji_for(
    day_gz: GanZhi,
    lunar: LunarDate,
    *,
    solar: SolarDate,
    month_gz: GanZhi,
    term_today: Optional[str] = None,
    term_tomorrow: Optional[str] = None,
) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
    res = apply_rules(AlmanacContext(solar, lunar, day_gz, month_gz, term_today, term_tomorrow))
    return res.yi, res.ji


def build_entry(
    solar: SolarDate,
    lunar: LunarDate,
    *,
    day_gz: GanZhi,
    month_gz: GanZhi,
    terms: SolarTermTable,
    next_lunar: Optional[LunarDate] = None,
) -> AlmanacEntry:
    term_today = solar_term_name_if_exact(solar, terms)
    term_tomorrow = solar_term_name_if_exact(solar.shift(1), terms)
    res = apply_rules(AlmanacContext(solar, lunar, day_gz, month_gz, term_today, term_tomorrow))
    return AlmanacEntry(
        festivals=festivals_for(solar, lunar, next_lunar),
        solar_term=term_today,
        yi=res.yi,
        ji=res.ji,
        officer=res.officer,
        peng_zu=res.peng_zu,
    )
