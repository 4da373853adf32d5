# tests/test_time.py

import random

import pytest

from amlich.core import time as tm


def test_known_epochs():
    assert tm.to_jdn(1, 1, 2000) == 2451545
    assert tm.from_jdn(2451545) == (1, 1, 2000)
    # 1900 January 1, the new-moon reference epoch
    assert tm.to_jdn(1, 1, 1900) == 2415021


def test_reform_boundary():
    """
    Julian 1582-10-04 is followed directly by Gregorian 1582-10-15.
    """
    assert tm.to_jdn(15, 10, 1582) == 2299161
    assert tm.to_jdn(4, 10, 1582) == 2299160
    assert tm.from_jdn(2299160) == (4, 10, 1582)
    assert tm.from_jdn(2299161) == (15, 10, 1582)


def test_julian_leap_rule_before_reform():
    # 1500 is a leap year under the Julian rule only
    assert tm.days_in_month(2, 1500) == 29
    assert tm.days_in_month(2, 1900) == 28
    assert tm.days_in_month(2, 2000) == 29


def test_jdn_roundtrip():
    random.seed(42)
    for _ in range(20000):
        jdn_in = random.randint(1000000, 3000000)
        assert tm.to_jdn(*tm.from_jdn(jdn_in)) == jdn_in


def test_jdn_roundtrip_around_reform():
    for jdn_in in range(2299100, 2299220):
        assert tm.to_jdn(*tm.from_jdn(jdn_in)) == jdn_in


def test_civil_roundtrip():
    random.seed(42)
    for _ in range(5000):
        y = random.randint(1600, 2400)
        m = random.randint(1, 12)
        d = random.randint(1, tm.days_in_month(m, y))
        assert tm.from_jdn(tm.to_jdn(d, m, y)) == (d, m, y)


def test_consecutive_days():
    jdn = tm.to_jdn(28, 2, 2019)
    assert tm.from_jdn(jdn + 1) == (1, 3, 2019)
    assert tm.from_jdn(tm.to_jdn(31, 12, 2019) + 1) == (1, 1, 2020)


def test_day_overflow_is_not_validated():
    # to_jdn accepts day 32 and rolls into the next month
    assert tm.to_jdn(32, 12, 2019) == tm.to_jdn(1, 1, 2020)


@pytest.mark.parametrize(
    "day, month, year, ok",
    [
        (29, 2, 2020, True),
        (29, 2, 2019, False),
        (31, 4, 2019, False),
        (40, 1, 2019, False),
        (1, 13, 2019, False),
        (0, 1, 2019, False),
        (4, 10, 1582, True),
        (10, 10, 1582, False),
        (15, 10, 1582, True),
    ],
)
def test_is_valid_date(day, month, year, ok):
    assert tm.is_valid_date(day, month, year) is ok
