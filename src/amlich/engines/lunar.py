"""
amlich.engines.lunar
--------------------
Lunar (day, month, year, leap) <-> JDN.

Both directions locate the two month-11 new moons bracketing the date,
count lunations from the first one and shift labels past the leap month
when the bracket holds one.
"""

from __future__ import annotations

import logging
import math
from typing import Tuple

from ..astro.lunar import JD_NEW_MOON_EPOCH, SYNODIC_MONTH, new_moon_day
from ..core.config import DEFAULT_CONFIG, AmlichConfig
from ..core.errors import InvalidDateError, LeapMonthMismatchError
from ..core.time import from_jdn
from .leap import lunar_month_11, resolve_leap_month

logger = logging.getLogger(__name__)

LunarTuple = Tuple[int, int, int, bool]  # (day, month, year, leap)


def lunar_to_jdn(day: int, month: int, year: int, leap: bool = False, config: AmlichConfig = DEFAULT_CONFIG) -> int:
    tz = config.tz_hours
    if month < 11:
        a11 = lunar_month_11(year - 1, tz)
        b11 = lunar_month_11(year, tz)
    else:
        a11 = lunar_month_11(year, tz)
        b11 = lunar_month_11(year + 1, tz)

    k = math.floor(0.5 + (a11 - JD_NEW_MOON_EPOCH) / SYNODIC_MONTH)
    off = (month - 11) % 12

    leap_month = resolve_leap_month(a11, b11, tz, config.leap_scan_cap)
    if leap_month is not None:
        if leap and month != leap_month.month:
            raise LeapMonthMismatchError(year, month, leap_month.month)
        if leap or off >= leap_month.offset:
            off += 1
    elif leap:
        raise LeapMonthMismatchError(year, month, None)

    month_start = new_moon_day(k + off, tz)
    if month_start + day - 1 >= new_moon_day(k + off + 1, tz):
        raise InvalidDateError(f"Lunar month {month}/{year} has no day {day}")
    logger.debug("lunar %d/%d/%d leap=%s: a11=%d k=%d off=%d", day, month, year, leap, a11, k, off)
    return month_start + day - 1


def jdn_to_lunar(jdn: int, config: AmlichConfig = DEFAULT_CONFIG) -> LunarTuple:
    tz = config.tz_hours

    # Latest new moon on or before jdn
    k = math.floor((jdn - JD_NEW_MOON_EPOCH) / SYNODIC_MONTH) + 1
    month_start = new_moon_day(k, tz)
    while month_start > jdn:
        k -= 1
        month_start = new_moon_day(k, tz)

    _, _, yy = from_jdn(jdn)
    a11 = b11 = lunar_month_11(yy, tz)
    if a11 >= month_start:
        lunar_year = yy
        a11 = lunar_month_11(yy - 1, tz)
    else:
        lunar_year = yy + 1
        b11 = lunar_month_11(yy + 1, tz)

    lunar_day = jdn - month_start + 1
    diff = math.floor((month_start - a11) / 29)
    lunar_leap = False
    lunar_month = diff + 11

    leap_month = resolve_leap_month(a11, b11, tz, config.leap_scan_cap)
    if leap_month is not None and diff >= leap_month.offset:
        lunar_month = diff + 10
        lunar_leap = diff == leap_month.offset

    if lunar_month > 12:
        lunar_month -= 12
    # Months 11 and 12 early in the bracket belong to the previous lunar year.
    if lunar_month >= 11 and diff < 4:
        lunar_year -= 1

    return lunar_day, lunar_month, lunar_year, lunar_leap
