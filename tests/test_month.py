# tests/test_month.py

import pytest

from amlich.calendar import GregorianDay
from amlich.core.errors import InvalidDateError
from amlich.month import GregorianDayRange, GregorianMonth


def test_september_2019_bound():
    bound = GregorianMonth(2019, 9).get_bound()
    first, last = bound.to_tuple()
    assert first == GregorianDay.new(1, 9, 2019)
    assert last == GregorianDay.new(30, 9, 2019)
    assert len(bound) == 30
    assert [g.day for g in bound] == list(range(1, 31))


@pytest.mark.parametrize(
    "year, month, days",
    [(2019, 2, 28), (2020, 2, 29), (1900, 2, 28), (2000, 2, 29), (2019, 4, 30), (2019, 12, 31)],
)
def test_month_lengths(year, month, days):
    assert len(GregorianMonth(year, month).get_bound()) == days


def test_reform_month_skips_ten_days():
    days = list(GregorianMonth(1582, 10).get_bound())
    assert len(days) == 21
    assert [g.day for g in days[3:5]] == [4, 15]


def test_range_iteration_is_restartable():
    bound = GregorianMonth(2020, 2).get_bound()
    assert list(bound) == list(bound.iter())
    it = iter(bound)
    assert next(it) == GregorianDay.new(1, 2, 2020)
    assert next(it) == GregorianDay.new(2, 2, 2020)
    assert next(iter(bound)) == GregorianDay.new(1, 2, 2020)


def test_range_crossing_year():
    r = GregorianDayRange(GregorianDay.new(30, 12, 2019), GregorianDay.new(2, 1, 2020))
    assert [str(g) for g in r] == ["30/12/2019", "31/12/2019", "01/01/2020", "02/01/2020"]


def test_empty_range():
    r = GregorianDayRange(GregorianDay.new(2, 1, 2020), GregorianDay.new(1, 1, 2020))
    assert len(r) == 0
    assert list(r) == []


def test_previous_next():
    assert GregorianMonth(2019, 1).previous() == GregorianMonth(2018, 12)
    assert GregorianMonth(2019, 12).next() == GregorianMonth(2020, 1)
    assert GregorianMonth(2019, 6).next().previous() == GregorianMonth(2019, 6)


def test_title():
    assert GregorianMonth.new(2019, 9).to_title() == "Am lich 09/2019"
    assert GregorianMonth(987, 11).to_title() == "Am lich 11/0987"


def test_to_month():
    assert GregorianDay.new(13, 9, 2019).to_month() == GregorianMonth(2019, 9)


@pytest.mark.parametrize("month", [0, 13])
def test_invalid_month(month):
    with pytest.raises(InvalidDateError):
        GregorianMonth(2019, month)


def test_lunar_days_of_september_2019():
    bound = GregorianMonth(2019, 9).get_bound()
    lunar = [g.to_lunar() for g in bound]
    assert str(lunar[0]) == "03/08/2019 AL"
    assert str(lunar[12]) == "15/08/2019 AL"
    assert str(lunar[28]) == "01/09/2019 AL"
    assert not any(l.leap for l in lunar)
