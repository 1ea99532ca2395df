# tests/test_time.py

import random

import pytest

from nongli.core import time as t
from nongli.core.types import SolarDate


def test_jdn_date_roundtrip():
    random.seed(42)
    for _ in range(10000):
        jdn_in = random.randint(2415021, 2488434)  # 1900-01-01 .. 2100-12-31
        y, m, d = t.from_jdn(jdn_in)
        assert t.to_jdn(y, m, d) == jdn_in


def test_julian_day_roundtrip_for_integer_jd():
    random.seed(7)
    for _ in range(2000):
        jd = float(random.randint(2415021, 2488434))
        assert t.to_julian_day(*t.from_julian_day(jd)) == jd


def test_known_epochs():
    # J2000.0 civil date is January 1, 2000
    assert t.to_julian_day(2000, 1, 1) == 2451545.0
    assert t.to_jdn(1900, 1, 1) == 2415021
    assert t.from_julian_day(2451545.0) == (2000, 1, 1)
    # an instant before civil midnight still belongs to the previous day
    assert t.from_julian_day(2451544.49) == (1999, 12, 31)


def test_day_of_week_anchor():
    # 2000-01-01 was a Saturday, 2024-02-10 a Saturday, 2024-02-11 a Sunday
    assert t.day_of_week(t.to_julian_day(2000, 1, 1)) == 6
    assert t.day_of_week(t.to_julian_day(2024, 2, 10)) == 6
    assert t.day_of_week(t.to_julian_day(2024, 2, 11)) == 0


def test_day_of_week_matches_datetime():
    random.seed(3)
    for _ in range(500):
        s = SolarDate.from_jdn(random.randint(2415021, 2488434))
        # datetime: Monday=0 .. Sunday=6
        assert s.weekday == (s.as_date().weekday() + 1) % 7


@pytest.mark.parametrize("ymd", [(2023, 13, 1), (2023, 0, 1), (2023, 2, 29), (2024, 2, 30), (2023, 4, 31), (2023, 1, 0)])
def test_invalid_dates_raise(ymd):
    with pytest.raises(ValueError):
        t.to_julian_day(*ymd)
    with pytest.raises(ValueError):
        SolarDate.from_ymd(*ymd)


def test_leap_years():
    assert t.is_leap_year(2000)
    assert t.is_leap_year(2024)
    assert not t.is_leap_year(1900)
    assert not t.is_leap_year(2100)
    assert t.days_in_month(2024, 2) == 29
    assert t.days_in_month(2100, 2) == 28


def test_solar_date_validates_julian_day():
    with pytest.raises(ValueError):
        SolarDate(2000, 1, 1, 2451546.0)
    s = SolarDate.from_ymd(2000, 1, 1)
    assert s.jdn == 2451545
    assert s.shift(31) == SolarDate.from_ymd(2000, 2, 1)
    assert str(s) == "2000-01-01"


def test_civil_clock_fixed_offset():
    clock = t.CivilClock(8.0)
    # 2024-02-09 16:30 UT is 00:30 on the 10th at UTC+8
    jd = t.to_jdn(2024, 2, 9) + 4.5 / 24.0
    assert clock.offset_at(jd) == 8.0
    assert clock.civil_jdn(jd) == t.to_jdn(2024, 2, 10)


def test_civil_clock_switches_meridian():
    clock = t.CivilClock(7.0, (((1967, 8, 8), 8.0),))
    before = t.to_jdn(1967, 8, 6) + 0.0
    after = t.to_jdn(1967, 8, 9) + 0.0
    assert clock.offset_at(before) == 8.0
    assert clock.offset_at(after) == 7.0
    assert clock.to_civil(after) - after == pytest.approx(7.0 / 24.0)
    # 16:30 UT on 08-07 is still 08-07 at UTC+7, so the old meridian applies
    edge = t.to_jdn(1967, 8, 7) + 4.5 / 24.0
    assert clock.offset_at(edge) == 8.0
    assert clock.civil_jdn(edge) == t.to_jdn(1967, 8, 8)
