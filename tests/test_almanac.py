# tests/test_almanac.py

import pytest

import nongli
from nongli.almanac import tables
from nongli.almanac.registry import AlmanacContext, apply_rules, list_rules, merge
from nongli.almanac.store import festivals_for, yi_ji_for
from nongli.almanac.traditional import day_yi_ji
from nongli.core.time import to_jdn
from nongli.core.types import Branch, GanZhi, LunarDate, SolarDate, Stem


def _almanac(y, m, d, engine="china"):
    return nongli.almanac_for(SolarDate.from_ymd(y, m, d), engine=engine)


@pytest.mark.parametrize("ymd, festival", [
    ((2024, 1, 1), "元旦节"),
    ((2024, 10, 1), "国庆节"),
    ((2024, 12, 25), "圣诞节"),
    ((2024, 2, 10), "春节"),
    ((2024, 2, 24), "元宵节"),
    ((2024, 6, 10), "端午节"),
    ((2024, 9, 17), "中秋节"),
    ((2024, 2, 9), "除夕"),
    ((2025, 1, 28), "除夕"),       # 腊月 of 2024 has 29 days
    ((2024, 5, 12), "母亲节"),
    ((2024, 6, 16), "父亲节"),
    ((2024, 11, 28), "感恩节"),
])
def test_festivals(ymd, festival):
    assert festival in _almanac(*ymd).festivals


def test_plain_day_has_no_festival():
    assert _almanac(2024, 3, 13).festivals == frozenset()


def test_leap_month_carries_no_lunar_festival():
    # 二月初二 of 2023 is 龙头节, the leap 二月初二 is not
    assert "龙头节" in _almanac(2023, 2, 21).festivals
    assert nongli.solar_to_lunar(2023, 3, 23) == LunarDate(2023, 2, True, 2)
    assert "龙头节" not in _almanac(2023, 3, 23).festivals


def test_new_years_eve_needs_next_day():
    solar = SolarDate.from_ymd(2024, 2, 9)
    lunar = LunarDate(2023, 12, False, 30)
    assert "除夕" not in festivals_for(solar, lunar)
    assert "除夕" in festivals_for(solar, lunar, LunarDate(2024, 1, False, 1))


def test_solar_term_marker():
    assert _almanac(2024, 2, 4).solar_term == "立春"
    assert _almanac(2024, 12, 21).solar_term == "冬至"
    assert _almanac(2024, 2, 5).solar_term is None


def test_day_before_equinox_or_li_term_is_inauspicious():
    # 四离: day before 春分 (2024-03-20); 四绝: day before 立春 (2024-02-04)
    assert _almanac(2024, 3, 19).yi == (tables.NOTHING_AUSPICIOUS,)
    assert _almanac(2024, 2, 3).yi == (tables.NOTHING_AUSPICIOUS,)
    assert _almanac(2024, 3, 18).yi != (tables.NOTHING_AUSPICIOUS,)


def test_yi_and_ji_never_overlap():
    start = to_jdn(2024, 1, 1)
    for jdn in range(start, start + 366):
        a = nongli.almanac_for(SolarDate.from_jdn(jdn))
        assert not set(a.yi) & set(a.ji)
        assert a.officer in tables.OFFICERS


def test_2024_new_year_traditional_yi_ji():
    a = _almanac(2024, 2, 10)  # 甲辰 day in the 丙寅 month
    assert a.yi[:3] == ("嫁娶", "开光", "求嗣")
    assert {"开市", "交易", "立券"} <= set(a.ji)
    assert not {"开市", "交易", "立券"} & set(a.yi)
    assert a.officer == "满"
    assert a.peng_zu == ("甲不开仓财物耗散", "辰不哭泣必主重丧")


def test_traditional_table_is_keyed_by_month_and_day():
    jia_chen = GanZhi(Stem.JIA, Branch.CHEN)
    yi, ji = day_yi_ji(GanZhi(Stem.BING, Branch.YIN), jia_chen)
    assert yi[:3] == ("嫁娶", "开光", "求嗣")
    assert "无" not in yi and "无" not in ji
    # the same day in another month reads differently
    assert day_yi_ji(GanZhi(Stem.DING, Branch.MAO), jia_chen) != (yi, ji)


def test_officer_repeats_on_jie_days():
    eng = nongli.get_engine("china")
    for t in eng.terms_for_year(2024):
        if t.is_principal:
            continue
        day = SolarDate.from_jdn(t.jdn)
        assert eng.almanac_for(day).officer == eng.almanac_for(day.shift(-1)).officer
        nxt = eng.almanac_for(day.shift(1)).officer
        assert tables.OFFICERS.index(nxt) == (tables.OFFICERS.index(eng.almanac_for(day).officer) + 1) % 12


def test_yang_gong_day():
    # 正月十三 of 2024
    assert nongli.solar_to_lunar(2024, 2, 22) == LunarDate(2024, 1, False, 13)
    a = _almanac(2024, 2, 22)
    for act in tables.YANG_GONG_JI:
        assert act in a.ji
        assert act not in a.yi


def test_rule_registry():
    assert list_rules()[:6] == ["traditional", "day_officer", "peng_zu", "yang_gong", "si_li_si_jue", "resolve_conflicts"]
    ctx = AlmanacContext(
        solar=SolarDate.from_ymd(2024, 2, 10),
        lunar=LunarDate(2024, 1, False, 1),
        day_gz=GanZhi.from_index(40),
        month_gz=GanZhi(Stem.BING, Branch.YIN),
    )
    assert ctx.month_branch == Branch.YIN
    only_officer = apply_rules(ctx, names=["day_officer"])
    assert only_officer.officer == "满"
    assert only_officer.peng_zu == ()
    assert only_officer.yi == () and only_officer.ji == ()
    with pytest.raises(KeyError):
        apply_rules(ctx, names=["no-such-rule"])


def test_merge_keeps_order_without_duplicates():
    assert merge(("a", "b"), ("b", "c", "a", "d")) == ("a", "b", "c", "d")


def test_yi_ji_for_query():
    yi, ji = yi_ji_for(
        GanZhi.from_index(52),  # 丙辰
        LunarDate(2024, 1, False, 13),
        solar=SolarDate.from_ymd(2024, 2, 22),
        month_gz=GanZhi(Stem.BING, Branch.YIN),
    )
    # 杨公忌 moves 嫁娶 into ji even where the table allows it
    assert "嫁娶" in ji and "嫁娶" not in yi
