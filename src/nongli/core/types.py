from __future__ import annotations
from dataclasses import dataclass, field, replace
from datetime import date
from enum import IntEnum
from typing import Any, Dict, FrozenSet, Literal, Optional, Tuple

from .time import CivilClock, OffsetHistory, day_of_week, from_jdn, jd_to_jdn, to_jdn, validate_ymd

STEM_HANZI = "甲乙丙丁戊己庚辛壬癸"
BRANCH_HANZI = "子丑寅卯辰巳午未申酉戌亥"
ZODIAC_HANZI = "鼠牛虎兔龙蛇马羊猴鸡狗猪"


class Stem(IntEnum):
    JIA = 0
    YI = 1
    BING = 2
    DING = 3
    WU = 4
    JI = 5
    GENG = 6
    XIN = 7
    REN = 8
    GUI = 9

    @property
    def hanzi(self) -> str:
        return STEM_HANZI[self]


class Branch(IntEnum):
    ZI = 0
    CHOU = 1
    YIN = 2
    MAO = 3
    CHEN = 4
    SI = 5
    WU = 6
    WEI = 7
    SHEN = 8
    YOU = 9
    XU = 10
    HAI = 11

    @property
    def hanzi(self) -> str:
        return BRANCH_HANZI[self]


class Zodiac(IntEnum):
    RAT = 0
    OX = 1
    TIGER = 2
    RABBIT = 3
    DRAGON = 4
    SNAKE = 5
    HORSE = 6
    GOAT = 7
    MONKEY = 8
    ROOSTER = 9
    DOG = 10
    PIG = 11

    @property
    def hanzi(self) -> str:
        return ZODIAC_HANZI[self]


@dataclass(frozen=True)
class GanZhi:
    stem: Stem
    branch: Branch

    def __post_init__(self):
        # stem and branch must share parity to sit on the 60-cycle
        if (int(self.stem) - int(self.branch)) % 2 != 0:
            raise ValueError(f"{self.stem.name}/{self.branch.name} is not a sexagenary pair")

    @classmethod
    def from_index(cls, i: int) -> "GanZhi":
        i %= 60
        return cls(Stem(i % 10), Branch(i % 12))

    @property
    def cycle_index(self) -> int:
        # unique i in 0..59 with i = stem (mod 10) and i = branch (mod 12)
        return (6 * int(self.stem) - 5 * int(self.branch)) % 60

    @property
    def name(self) -> str:
        return self.stem.hanzi + self.branch.hanzi

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class SolarDate:
    """A Gregorian civil date anchored on its Julian Day (civil noon)."""
    year: int
    month: int
    day: int
    julian_day: float

    def __post_init__(self):
        validate_ymd(self.year, self.month, self.day)
        if float(to_jdn(self.year, self.month, self.day)) != self.julian_day:
            raise ValueError(f"julian_day {self.julian_day} does not match {self.year}-{self.month:02d}-{self.day:02d}")

    @classmethod
    def from_ymd(cls, year: int, month: int, day: int) -> "SolarDate":
        validate_ymd(year, month, day)
        return cls(year, month, day, float(to_jdn(year, month, day)))

    @classmethod
    def from_jdn(cls, jdn: int) -> "SolarDate":
        y, m, d = from_jdn(jdn)
        return cls(y, m, d, float(jdn))

    @classmethod
    def from_date(cls, d: date) -> "SolarDate":
        return cls.from_ymd(d.year, d.month, d.day)

    @property
    def jdn(self) -> int:
        return int(self.julian_day)

    @property
    def weekday(self) -> int:
        """0=Sunday .. 6=Saturday."""
        return day_of_week(self.julian_day)

    def as_date(self) -> date:
        return date(self.year, self.month, self.day)

    def shift(self, days: int) -> "SolarDate":
        return SolarDate.from_jdn(self.jdn + days)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


@dataclass(frozen=True)
class LunarDate:
    year: int
    month: int
    is_leap_month: bool
    day: int

    def __str__(self) -> str:
        leap = "L" if self.is_leap_month else ""
        return f"{self.year}-{leap}{self.month:02d}-{self.day:02d}"


@dataclass(frozen=True)
class SolarTerm:
    name: str
    index: int              # 0=立春 .. 23=大寒
    julian_moment: float    # JD in the engine's civil time
    year: int               # the term-year (立春 of `year` .. 大寒 of year+1)

    @property
    def is_principal(self) -> bool:
        return self.index % 2 == 1

    @property
    def jdn(self) -> int:
        """The civil day containing the instant."""
        return jd_to_jdn(self.julian_moment)


@dataclass(frozen=True)
class AlmanacEntry:
    festivals: FrozenSet[str] = frozenset()
    solar_term: Optional[str] = None
    yi: Tuple[str, ...] = ()
    ji: Tuple[str, ...] = ()
    officer: Optional[str] = None
    peng_zu: Tuple[str, ...] = ()


@dataclass(frozen=True)
class DayCell:
    solar_date: SolarDate
    lunar_date: LunarDate
    is_current_month: bool
    is_weekend: bool
    almanac: AlmanacEntry


@dataclass(frozen=True)
class GanZhiStrings:
    year: str
    month: str
    day: str


@dataclass(frozen=True)
class EngineId:
    family: Literal["standard", "custom"]
    name: str
    version: str


@dataclass(frozen=True)
class DayInfo:
    solar: SolarDate
    lunar: LunarDate
    engine: EngineId
    year_gz: GanZhi
    month_gz: GanZhi
    day_gz: GanZhi
    zodiac: Zodiac
    almanac: AlmanacEntry
    debug: Optional[Dict[str, Any]] = None


@dataclass(frozen=True)
class CalendarSpec:
    """Pure data payload for constructing a lunisolar calendar engine."""
    id: EngineId
    utc_offset_hours: float
    min_year: int = 1900
    max_year: int = 2100
    # earlier meridians: ((switch y, m, d), offset before), oldest first
    offset_history: OffsetHistory = ()
    meta: Dict[str, Any] = field(default_factory=dict)

    @property
    def clock(self) -> CivilClock:
        return CivilClock(self.utc_offset_hours, self.offset_history)


@dataclass(frozen=True)
class EngineSpec:
    """A CalendarSpec tagged with the kind of instant provider it expects."""
    kind: Literal["astronomical", "tabulated"]
    id: EngineId
    payload: CalendarSpec

    @staticmethod
    def like(name: str) -> "EngineSpec":
        from ..engines.specs import ALL_SPECS
        if name not in ALL_SPECS:
            raise KeyError(f"Unknown base spec '{name}'. Available: {sorted(ALL_SPECS)}")
        return ALL_SPECS[name]

    def tweak(self, **kwargs) -> "EngineSpec":
        return replace(self, payload=replace(self.payload, **kwargs))
