"""
The traditional 择日 table: yi/ji activities keyed by the month ganzhi (cut
at the 节) and the day ganzhi, as published with lunar_python.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Tuple

from lunar_python.util import LunarUtil

from ..core.types import GanZhi

# placeholder the table returns for an empty list
EMPTY_MARK = "无"


def _clean(items) -> Tuple[str, ...]:
    return tuple(x for x in items or () if x and x != EMPTY_MARK)


@lru_cache(maxsize=4096)
def _lookup(month_name: str, day_name: str) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
    return (
        _clean(LunarUtil.getDayYi(month_name, day_name)),
        _clean(LunarUtil.getDayJi(month_name, day_name)),
    )


def day_yi_ji(month_gz: GanZhi, day_gz: GanZhi) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
    """(yi, ji) for a day; either may be empty."""
    return _lookup(month_gz.name, day_gz.name)
