# tests/test_grid.py

import pytest

import nongli
from nongli.grid import GRID_CELLS, grid_start_jdn


def test_february_2024_grid():
    cells = nongli.generate_month_grid(2024, 2)
    assert len(cells) == GRID_CELLS == 42

    first, last = cells[0].solar_date, cells[-1].solar_date
    assert (first.year, first.month, first.day) == (2024, 1, 28)
    assert (last.year, last.month, last.day) == (2024, 3, 9)
    assert first.weekday == 0

    assert not cells[0].is_current_month
    assert not cells[-1].is_current_month
    assert sum(c.is_current_month for c in cells) == 29

    feb10 = cells[13]
    assert (feb10.solar_date.month, feb10.solar_date.day) == (2, 10)
    assert "春节" in feb10.almanac.festivals
    assert (feb10.lunar_date.month, feb10.lunar_date.day) == (1, 1)
    assert feb10.is_weekend  # a Saturday


@pytest.mark.parametrize("year, month", [(1900, 2), (1950, 7), (2000, 1), (2024, 9), (2026, 3), (2100, 11)])
def test_grid_invariants(year, month):
    cells = nongli.generate_month_grid(year, month)
    assert len(cells) == 42
    assert cells[0].solar_date.weekday == 0
    assert sum(c.is_current_month for c in cells) >= 28
    for a, b in zip(cells, cells[1:]):
        assert b.solar_date.julian_day == a.solar_date.julian_day + 1
    for c in cells:
        assert c.is_weekend == (c.solar_date.weekday in (0, 6))
        assert c.is_current_month == (c.solar_date.month == month)
        assert c.lunar_date == nongli.solar_to_lunar(c.solar_date.year, c.solar_date.month, c.solar_date.day)


def test_grid_is_pure():
    assert nongli.generate_month_grid(2024, 2) == nongli.generate_month_grid(2024, 2)


def test_month_starting_on_sunday_has_no_leading_cells():
    # 2024-09-01 is a Sunday
    cells = nongli.generate_month_grid(2024, 9)
    assert cells[0].is_current_month
    assert cells[0].solar_date.day == 1


def test_grids_at_the_ends_of_coverage():
    jan = nongli.generate_month_grid(1900, 1)
    # 1900-01-01 is a Monday, so the grid opens on 1899-12-31
    assert (jan[0].solar_date.year, jan[0].solar_date.month, jan[0].solar_date.day) == (1899, 12, 31)
    assert not jan[0].is_current_month
    assert jan[0].lunar_date.year == 1899
    dec = nongli.generate_month_grid(2100, 12)
    assert dec[-1].solar_date.year == 2101
    assert dec[-1].almanac.officer is not None
    # outside cells stay out of reach of the plain conversions
    with pytest.raises(nongli.OutOfRangeError):
        nongli.solar_to_lunar(1899, 12, 31)


def test_grid_outside_coverage_raises():
    with pytest.raises(nongli.OutOfRangeError):
        nongli.generate_month_grid(1899, 12)
    with pytest.raises(nongli.OutOfRangeError):
        nongli.generate_month_grid(2101, 1)


def test_invalid_month_raises():
    with pytest.raises(ValueError):
        nongli.generate_month_grid(2024, 13)
    with pytest.raises(ValueError):
        grid_start_jdn(2024, 0)


def test_navigation_wraps_year():
    assert nongli.next_month(2024, 12) == (2025, 1)
    assert nongli.next_month(2024, 2) == (2024, 3)
    assert nongli.prev_month(2024, 1) == (2023, 12)
    assert nongli.prev_month(2024, 3) == (2024, 2)
    ym = (2024, 5)
    for _ in range(12):
        ym = nongli.next_month(*ym)
    assert ym == (2025, 5)
