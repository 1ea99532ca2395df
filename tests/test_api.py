# tests/test_api.py

import pytest

import nongli
from nongli.core.engine import EngineRegistry
from nongli.core.types import EngineSpec, LunarDate, SolarDate


def test_list_engines():
    assert nongli.list_engines() == ["china", "korea", "vietnam"]


def test_engine_info():
    info = nongli.engine_info("korea")
    assert info["utc_offset_hours"] == 9.0
    assert info["range"] == (1900, 2100)
    assert info["ephemeris"] == "astronomical"


def test_unknown_engine_raises_key_error():
    with pytest.raises(KeyError):
        nongli.solar_to_lunar(2024, 2, 10, engine="mars")


def test_default_engine_from_environment(monkeypatch):
    monkeypatch.setenv("NONGLI_ENGINE", "vietnam")
    assert nongli.engine_info()["id"]["name"] == "vietnam"
    monkeypatch.delenv("NONGLI_ENGINE")
    assert nongli.engine_info()["id"]["name"] == "china"


def test_gan_zhi_strings_scenario():
    s = SolarDate.from_ymd(2024, 2, 10)
    gz = nongli.gan_zhi_strings(s, nongli.solar_to_lunar(2024, 2, 10))
    assert (gz.year, gz.month, gz.day) == ("甲辰", "丙寅", "甲辰")
    # the lunar date is derived when omitted
    assert nongli.gan_zhi_strings(s) == gz


def test_year_ganzhi_turns_at_lunar_new_year_month_ganzhi_at_lichun():
    # 2024-02-05: after 立春 but before 春节
    gz = nongli.gan_zhi_strings(SolarDate.from_ymd(2024, 2, 5))
    assert gz.year == "癸卯"
    assert gz.month == "丙寅"
    # 2024-02-03: before 立春, still the 丑 month of 癸卯
    assert nongli.gan_zhi_strings(SolarDate.from_ymd(2024, 2, 3)).month == "乙丑"


def test_hour_gan_zhi():
    s = SolarDate.from_ymd(2024, 2, 10)  # 甲 day
    assert nongli.hour_gan_zhi(s, 0).name == "甲子"
    assert nongli.hour_gan_zhi(s, 12).name == "庚午"
    assert nongli.hour_gan_zhi(s, 13).name == "辛未"


def test_day_info_accepts_datetime_date():
    from datetime import date

    info = nongli.day_info(date(2024, 2, 10), debug=True)
    assert info.lunar == LunarDate(2024, 1, False, 1)
    assert info.engine.name == "china"
    assert info.debug["month_days"] == 29
    assert info.debug["term_month"] == 1


def test_register_and_derive_engine():
    spec = EngineSpec.like("china").tweak(utc_offset_hours=8.0, meta={"description": "copy"})
    eng = nongli.make_engine(spec)
    nongli.register_engine("china-copy", eng)
    try:
        assert "china-copy" in nongli.list_engines()
        assert nongli.solar_to_lunar(2024, 2, 10, engine="china-copy") == LunarDate(2024, 1, False, 1)
        with pytest.raises(KeyError):
            nongli.register_engine("china-copy", eng)
        nongli.register_engine("china-copy", eng, overwrite=True)
    finally:
        if "china-copy" in nongli.api._reg():
            nongli.api._reg().unregister("china-copy")


def test_get_calendar_moves_meridian():
    eng = nongli.get_calendar("china", utc_offset_hours=9.0)
    assert eng.spec.utc_offset_hours == 9.0
    assert eng.spec.offset_history == ()
    assert nongli.engine_info("china")["offset_history"] == (((1929, 1, 1), pytest.approx(7.7611, abs=1e-4)),)
    assert nongli.get_engine("china").spec.utc_offset_hours == 8.0
    with pytest.raises(KeyError):
        nongli.get_calendar("atlantis")


def test_registry_errors_name_the_engines():
    reg = EngineRegistry({"china": nongli.get_engine("china")})
    assert "china" in reg and "korea" not in reg
    with pytest.raises(KeyError, match="registered: china"):
        reg.get("korea")
    with pytest.raises(KeyError):
        reg.unregister("korea")
    assert reg.unregister("china") is not None
    assert reg.names() == []
