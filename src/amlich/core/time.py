"""
amlich.core.time
----------------
Civil date <-> Julian Day Number (JDN).

Dates before 15 October 1582 (JDN 2299161) follow the Julian calendar,
later ones the Gregorian calendar. Both directions evaluate in double
precision and truncate to int only at the final fields.
"""

from __future__ import annotations

import math
from typing import Tuple

JDN_GREGORIAN_REFORM = 2299161  # 1582-10-15, first Gregorian day
JDN_J2000 = 2451545             # 2000-01-01


def to_jdn(day: int, month: int, year: int) -> int:
    """Civil (day, month, year) -> JDN. No range checks: day 32 overflows into the next month."""
    a = float(math.floor((14 - month) / 12))
    y = float(year) + 4800.0 - a
    m = float(month) + 12.0 * a - 3.0
    jd = (
        float(day)
        + math.floor((153.0 * m + 2.0) / 5.0)
        + 365.0 * y
        + math.floor(y / 4.0)
        - math.floor(y / 100.0)
        + math.floor(y / 400.0)
        - 32045.0
    )
    if jd < JDN_GREGORIAN_REFORM:
        jd = (
            float(day)
            + math.floor((153.0 * m + 2.0) / 5.0)
            + 365.0 * y
            + math.floor(y / 4.0)
            - 32083.0
        )
    return int(jd)


def from_jdn(jdn: int) -> Tuple[int, int, int]:
    """JDN -> civil (day, month, year)."""
    jd = float(jdn)
    if jd > JDN_GREGORIAN_REFORM - 1:
        a = jd + 32044.0
        b = float(math.floor((4.0 * a + 3.0) / 146097.0))
        c = a - math.floor(b * 146097.0 / 4.0)
    else:
        b = 0.0
        c = jd + 32082.0
    d = float(math.floor((4.0 * c + 3.0) / 1461.0))
    e = c - math.floor(1461.0 * d / 4.0)
    m = float(math.floor((5.0 * e + 2.0) / 153.0))
    day = e - math.floor((153.0 * m + 2.0) / 5.0) + 1.0
    month = m + 3.0 - 12.0 * math.floor(m / 10.0)
    year = b * 100.0 + d - 4800.0 + math.floor(m / 10.0)
    return int(day), int(month), int(year)


def days_in_month(month: int, year: int) -> int:
    """
    Last day of a civil month, found by stepping back from 31 until the
    day survives a round trip through the JDN (no month-length table).
    """
    last = 31
    while from_jdn(to_jdn(last, month, year))[0] != last:
        last -= 1
    return last


def is_valid_date(day: int, month: int, year: int) -> bool:
    """True iff the civil date exists; also rejects 1582-10-05 .. 1582-10-14."""
    if not (1 <= month <= 12) or day < 1:
        return False
    return from_jdn(to_jdn(day, month, year)) == (day, month, year)
