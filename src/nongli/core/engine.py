"""
nongli.core.engine
------------------
The calendar-engine protocol and the name table the module-level API
dispatches through.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Protocol, Tuple

from .types import AlmanacEntry, DayInfo, EngineId, GanZhiStrings, LunarDate, SolarDate, SolarTerm


class CalendarEngine(Protocol):
    id: EngineId

    def info(self) -> Dict[str, Any]: ...
    def day_info(self, solar: SolarDate, *, debug: bool = False) -> DayInfo: ...
    def solar_to_lunar(self, solar: SolarDate, *, pad_days: int = 0) -> LunarDate: ...
    def lunar_to_solar(self, lunar: LunarDate) -> SolarDate: ...
    def almanac_for(self, solar: SolarDate, lunar: LunarDate = None, *, pad_days: int = 0) -> AlmanacEntry: ...
    def gan_zhi_strings(self, solar: SolarDate, lunar: LunarDate) -> GanZhiStrings: ...
    def terms_for_year(self, year: int) -> Tuple[SolarTerm, ...]: ...
    def leap_month(self, year: int) -> int: ...


@dataclass
class EngineRegistry:
    """Calendar engines by name ("china", "korea", ...)."""
    engines: Dict[str, CalendarEngine] = field(default_factory=dict)

    def __contains__(self, name: str) -> bool:
        return name in self.engines

    def get(self, name: str) -> CalendarEngine:
        try:
            return self.engines[name]
        except KeyError:
            raise KeyError(f"No calendar engine named {name!r}; registered: {', '.join(self.names())}") from None

    def names(self) -> List[str]:
        return sorted(self.engines)

    def register(self, name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
        if name in self.engines and not overwrite:
            raise KeyError(f"Calendar engine {name!r} is already registered; pass overwrite=True to replace it")
        self.engines[name] = engine

    def unregister(self, name: str) -> CalendarEngine:
        if name not in self.engines:
            raise KeyError(f"No calendar engine named {name!r}")
        return self.engines.pop(name)
