# tests/test_leap.py

import logging

import pytest

from amlich.core.config import AmlichConfig
from amlich.core.time import to_jdn
from amlich.engines import leap

TZ = 7.0


@pytest.mark.parametrize(
    "year, day, month, greg_year",
    [
        (2016, 29, 11, 2016),
        (2017, 18, 12, 2017),
        (2019, 26, 11, 2019),
    ],
)
def test_lunar_month_11(year, day, month, greg_year):
    assert leap.lunar_month_11(year, TZ) == to_jdn(day, month, greg_year)


def test_leap_month_offset_2017():
    """
    Lunar year 2017: month 11 of 2016 begins 2016-11-29 and the sixth month
    is repeated, 8 lunations later.
    """
    a11 = leap.lunar_month_11(2016, TZ)
    assert leap.leap_month_offset(a11, TZ) == 8


def test_resolve_leap_month():
    a11 = leap.lunar_month_11(2016, TZ)
    b11 = leap.lunar_month_11(2017, TZ)
    assert b11 - a11 > 365
    assert leap.resolve_leap_month(a11, b11, TZ) == leap.LeapMonth(offset=8, month=6)

    # 2018/2019 bracket holds twelve lunations
    a11 = leap.lunar_month_11(2018, TZ)
    b11 = leap.lunar_month_11(2019, TZ)
    assert b11 - a11 <= 365
    assert leap.resolve_leap_month(a11, b11, TZ) is None


@pytest.mark.parametrize(
    "year, leap_month",
    [
        (2001, 4),
        (2004, 2),
        (2006, 7),
        (2009, 5),
        (2012, 4),
        (2014, 9),
        (2017, 6),
        (2020, 4),
        (2023, 2),
        (2025, 6),
        (2033, 11),
        (2128, 11),
        (2148, 1),
    ],
)
def test_leap_month_of_year(year, leap_month):
    assert leap.leap_month_of_year(year) == leap_month


@pytest.mark.parametrize("year", [2015, 2016, 2018, 2019, 2021, 2022, 2024])
def test_common_years(year):
    assert leap.leap_month_of_year(year) is None


def test_scan_cap_logs_warning(caplog):
    caplog.set_level(logging.WARNING, logger="amlich.engines.leap")
    a11 = leap.lunar_month_11(2016, TZ)
    assert leap.leap_month_offset(a11, TZ, cap=2) == 1
    assert "did not converge" in caplog.text


def test_config_cap_is_used(caplog):
    caplog.set_level(logging.WARNING, logger="amlich.engines.leap")
    cfg = AmlichConfig(leap_scan_cap=3)
    # the capped scan stops before reaching month 6
    assert leap.leap_month_of_year(2017, cfg) != 6
    assert "did not converge" in caplog.text
