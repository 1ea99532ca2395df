from __future__ import annotations

from typing import Dict

from ..core.types import CalendarSpec, EngineId, EngineSpec


# ============================================================
# SHARED CONSTANTS
# ============================================================

# Gregorian coverage of every standard engine
MIN_YEAR = 1900
MAX_YEAR = 2100

# Civil meridians (hours east of Greenwich)
UTC_CHINA = 8.0     # 120 deg E, 中国标准时间
UTC_KOREA = 9.0     # 135 deg E
UTC_VIETNAM = 7.0   # 105 deg E

# Local mean time of Beijing (116 deg 25 min E), which cut days until the
# 1929 calendar reform put the almanac on the 120 deg E meridian
UTC_BEIJING_LMT = (116.0 + 25.0 / 60.0) / 15.0

# North Vietnam moved from UTC+8 to UTC+7 on 1967-08-08
CHINA_HISTORY = (((1929, 1, 1), UTC_BEIJING_LMT),)
VIETNAM_HISTORY = (((1967, 8, 8), UTC_CHINA),)


# ============================================================
# STANDARD ENGINES
# ============================================================

# All variants share every rule (sui, zhongqi leap rule, ganzhi, almanac) and
# differ only in the meridians used to cut days.

CHINA_SPEC = CalendarSpec(
    id=EngineId("standard", "china", "1.0"),
    utc_offset_hours=UTC_CHINA,
    min_year=MIN_YEAR,
    max_year=MAX_YEAR,
    offset_history=CHINA_HISTORY,
    meta={"description": "Chinese 农历 (Shixian rules, days cut at UTC+8, Beijing mean time before 1929)"},
)

KOREA_SPEC = CalendarSpec(
    id=EngineId("standard", "korea", "1.0"),
    utc_offset_hours=UTC_KOREA,
    min_year=MIN_YEAR,
    max_year=MAX_YEAR,
    meta={"description": "Korean 음력 (same rules, days cut at UTC+9)"},
)

VIETNAM_SPEC = CalendarSpec(
    id=EngineId("standard", "vietnam", "1.0"),
    utc_offset_hours=UTC_VIETNAM,
    min_year=MIN_YEAR,
    max_year=MAX_YEAR,
    offset_history=VIETNAM_HISTORY,
    meta={"description": "Vietnamese âm lịch (same rules, days cut at UTC+7, UTC+8 before 1967-08-08)"},
)

CHINA = EngineSpec(kind="astronomical", id=CHINA_SPEC.id, payload=CHINA_SPEC)
KOREA = EngineSpec(kind="astronomical", id=KOREA_SPEC.id, payload=KOREA_SPEC)
VIETNAM = EngineSpec(kind="astronomical", id=VIETNAM_SPEC.id, payload=VIETNAM_SPEC)

ALL_SPECS: Dict[str, EngineSpec] = {
    "china": CHINA,
    "korea": KOREA,
    "vietnam": VIETNAM,
}
