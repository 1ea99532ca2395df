# tests/test_sexagenary.py

import random

import pytest

from nongli.core.time import to_julian_day
from nongli.core.types import Branch, GanZhi, Stem, Zodiac
from nongli.engines import sexagenary as sx


def test_sixty_cycle_is_complete_and_ordered():
    cycle = sx.sixty_cycle()
    assert len(cycle) == 60
    assert len({g.name for g in cycle}) == 60
    assert cycle[0].name == "甲子"
    assert cycle[59].name == "癸亥"
    for i, g in enumerate(cycle):
        assert g.cycle_index == i
        assert GanZhi.from_index(i) == g


def test_non_sexagenary_pair_is_rejected():
    with pytest.raises(ValueError):
        GanZhi(Stem.JIA, Branch.CHOU)


def test_day_anchor():
    assert sx.day_gan_zhi(to_julian_day(2000, 1, 1)).name == "戊午"
    assert sx.day_gan_zhi(to_julian_day(2024, 2, 10)).name == "甲辰"


def test_consecutive_days_advance_by_one():
    random.seed(5)
    for _ in range(500):
        jd = float(random.randint(2415021, 2488434))
        a = sx.day_gan_zhi(jd).cycle_index
        b = sx.day_gan_zhi(jd + 1).cycle_index
        assert b == (a + 1) % 60
        assert sx.day_gan_zhi(jd + 60) == sx.day_gan_zhi(jd)


@pytest.mark.parametrize("year, name, zodiac", [
    (1984, "甲子", Zodiac.RAT),
    (2000, "庚辰", Zodiac.DRAGON),
    (2023, "癸卯", Zodiac.RABBIT),
    (2024, "甲辰", Zodiac.DRAGON),
    (2025, "乙巳", Zodiac.SNAKE),
])
def test_year_gan_zhi(year, name, zodiac):
    assert sx.year_gan_zhi(year).name == name
    assert sx.zodiac_for_year(year) == zodiac


def test_year_cycle_period():
    for y in range(1900, 2100):
        assert sx.year_gan_zhi(y + 60) == sx.year_gan_zhi(y)
        assert sx.zodiac_for_year(y + 12) == sx.zodiac_for_year(y)


def test_five_tigers_rule():
    # 甲/己 years open with 丙寅, 乙/庚 with 戊寅, 丙/辛 with 庚寅, 丁/壬 with 壬寅, 戊/癸 with 甲寅
    openers = {0: "丙寅", 1: "戊寅", 2: "庚寅", 3: "壬寅", 4: "甲寅"}
    for s in Stem:
        assert sx.month_gan_zhi(s, 1).name == openers[int(s) % 5]
    assert sx.month_gan_zhi(Stem.JIA, 12).name == "丁丑"
    with pytest.raises(ValueError):
        sx.month_gan_zhi(Stem.JIA, 13)


def test_five_rats_rule():
    assert sx.hour_gan_zhi(Stem.JIA, 0).name == "甲子"
    assert sx.hour_gan_zhi(Stem.JIA, 1).name == "乙丑"
    assert sx.hour_gan_zhi(Stem.JIA, 23).name == "甲子"
    assert sx.hour_gan_zhi(Stem.YI, 0).name == "丙子"
    assert sx.hour_gan_zhi(Stem.WU, 12).name == "戊午"
    assert sx.hour_branch(11) == Branch.WU
    with pytest.raises(ValueError):
        sx.hour_branch(24)
