"""Static festival and almanac tables. Built once at import, never mutated."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

# (month, day) -> festivals on that Gregorian date
SOLAR_FESTIVALS: Mapping[Tuple[int, int], Tuple[str, ...]] = MappingProxyType({
    (1, 1): ("元旦节",),
    (2, 14): ("情人节",),
    (3, 8): ("妇女节",),
    (3, 12): ("植树节",),
    (3, 15): ("消费者权益日",),
    (4, 1): ("愚人节",),
    (5, 1): ("劳动节",),
    (5, 4): ("青年节",),
    (6, 1): ("儿童节",),
    (7, 1): ("建党节",),
    (8, 1): ("建军节",),
    (9, 10): ("教师节",),
    (10, 1): ("国庆节",),
    (10, 31): ("万圣节前夜",),
    (11, 1): ("万圣节",),
    (12, 24): ("平安夜",),
    (12, 25): ("圣诞节",),
})

# (month, nth, weekday 0=Sunday) -> festival
SOLAR_WEEK_FESTIVALS: Mapping[Tuple[int, int, int], str] = MappingProxyType({
    (5, 2, 0): "母亲节",
    (6, 3, 0): "父亲节",
    (11, 4, 4): "感恩节",
})

# (lunar month, lunar day) -> festivals; never applied to leap months
LUNAR_FESTIVALS: Mapping[Tuple[int, int], Tuple[str, ...]] = MappingProxyType({
    (1, 1): ("春节",),
    (1, 15): ("元宵节",),
    (2, 2): ("龙头节",),
    (5, 5): ("端午节",),
    (7, 7): ("七夕节",),
    (7, 15): ("中元节",),
    (8, 15): ("中秋节",),
    (9, 9): ("重阳节",),
    (12, 8): ("腊八节",),
    (12, 23): ("小年",),
})

NEW_YEARS_EVE = "除夕"

# 建除十二神, indexed by (day branch - month branch) mod 12
OFFICERS = ("建", "除", "满", "平", "定", "执", "破", "危", "成", "收", "开", "闭")

# 彭祖百忌, by day stem and by day branch
PENG_ZU_STEM: Tuple[str, ...] = (
    "甲不开仓财物耗散",
    "乙不栽植千株不长",
    "丙不修灶必见灾殃",
    "丁不剃头头必生疮",
    "戊不受田田主不祥",
    "己不破券二比并亡",
    "庚不经络织机虚张",
    "辛不合酱主人不尝",
    "壬不泱水更难提防",
    "癸不词讼理弱敌强",
)

PENG_ZU_BRANCH: Tuple[str, ...] = (
    "子不问卜自惹祸殃",
    "丑不冠带主不还乡",
    "寅不祭祀神鬼不尝",
    "卯不穿井水泉不香",
    "辰不哭泣必主重丧",
    "巳不远行财物伏藏",
    "午不苫盖屋主更张",
    "未不服药毒气入肠",
    "申不安床鬼祟入房",
    "酉不会客醉坐颠狂",
    "戌不吃犬作怪上床",
    "亥不嫁娶不利新郎",
)

# 杨公忌日 (lunar month, day)
YANG_GONG_DAYS = frozenset({
    (1, 13), (2, 11), (3, 9), (4, 7), (5, 5), (6, 3),
    (7, 1), (7, 29), (8, 27), (9, 25), (10, 23), (11, 21), (12, 19),
})
YANG_GONG_JI = ("嫁娶", "开市", "动土", "出行", "安葬")

# the day before these terms is 四离 (equinox/solstice) or 四绝 (立 terms)
SI_LI_TERMS = frozenset({"春分", "夏至", "秋分", "冬至"})
SI_JUE_TERMS = frozenset({"立春", "立夏", "立秋", "立冬"})

NOTHING_AUSPICIOUS = "诸事不宜"
