from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ..core.types import Branch, GanZhi, LunarDate, SolarDate


@dataclass(frozen=True)
class AlmanacContext:
    """Everything a yi/ji rule may look at for one day."""
    solar: SolarDate
    lunar: LunarDate
    day_gz: GanZhi
    month_gz: GanZhi  # solar-term month, cut at the 节
    term_today: Optional[str] = None
    term_tomorrow: Optional[str] = None

    @property
    def month_branch(self) -> Branch:
        return self.month_gz.branch


@dataclass(frozen=True)
class YiJi:
    yi: Tuple[str, ...] = ()
    ji: Tuple[str, ...] = ()
    officer: Optional[str] = None
    peng_zu: Tuple[str, ...] = ()


RuleFunc = Callable[[AlmanacContext, YiJi], YiJi]
_REGISTRY: Dict[str, RuleFunc] = {}
_ORDER: List[str] = []

def register_rule(name: str, fn: RuleFunc) -> None:
    if name not in _REGISTRY:
        _ORDER.append(name)
    _REGISTRY[name] = fn

def list_rules() -> List[str]:
    return list(_ORDER)

def apply_rules(ctx: AlmanacContext, names: Optional[Sequence[str]] = None) -> YiJi:
    """Fold the named rules (default: all, in registration order) over an empty result."""
    out = YiJi()
    for name in (list(names) if names is not None else _ORDER):
        if name not in _REGISTRY:
            raise KeyError(f"Unknown almanac rule '{name}'. Available: {sorted(_REGISTRY)}")
        out = _REGISTRY[name](ctx, out)
    return out

# helpers for rule implementations
def merge(existing: Tuple[str, ...], extra: Sequence[str]) -> Tuple[str, ...]:
    """Append without duplicates, keeping first-seen order."""
    seen = list(existing)
    for x in extra:
        if x not in seen:
            seen.append(x)
    return tuple(seen)
