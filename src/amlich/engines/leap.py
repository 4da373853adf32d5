"""
amlich.engines.leap
-------------------
Leap-month resolution.

A lunar year is bracketed by the new moons opening lunar month 11 (the month
containing the winter solstice) of two consecutive years. If those new moons
are more than 365 days apart the bracket holds 13 lunations and one of them,
the first one during which the sun does not enter a new 30-degree sector,
is the inserted leap month.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional

from ..astro.lunar import JD_NEW_MOON_EPOCH, SYNODIC_MONTH, new_moon_day
from ..astro.solar import sun_longitude_sector
from ..core.config import DEFAULT_CONFIG, AmlichConfig
from ..core.time import to_jdn

logger = logging.getLogger(__name__)

LEAP_SCAN_CAP = 14


@dataclass(frozen=True)
class LeapMonth:
    """
    offset:  lunations from month 11 to the leap month
    month:   label of the leap month (it repeats the preceding month's number)
    """
    offset: int
    month: int


def lunar_month_11(year: int, tz: float) -> int:
    """JDN of the new moon opening lunar month 11 of the given year."""
    # Day 32 of December is 1 January of year + 1.
    off = to_jdn(32, 12, year) - 2415021
    k = math.floor(off / SYNODIC_MONTH)
    nm = new_moon_day(k, tz)
    if sun_longitude_sector(nm, tz) >= 9:
        nm = new_moon_day(k - 1, tz)
    return nm


def leap_month_offset(a11: int, tz: float, cap: int = LEAP_SCAN_CAP) -> int:
    """
    Offset from month 11 (JDN a11) of the first lunation whose start and end
    fall in the same solar sector.
    """
    k = math.floor((a11 - JD_NEW_MOON_EPOCH) / SYNODIC_MONTH + 0.5)
    i = 1  # month following month 11
    arc = sun_longitude_sector(new_moon_day(k + i, tz), tz)
    while True:
        last = arc
        i += 1
        arc = sun_longitude_sector(new_moon_day(k + i, tz), tz)
        if arc == last:
            break
        if i >= cap:
            logger.warning(
                "Leap month scan did not converge: a11=%d k=%d cap=%d, using offset %d",
                a11, k, cap, i - 1,
            )
            break
    return i - 1


def resolve_leap_month(a11: int, b11: int, tz: float, cap: int = LEAP_SCAN_CAP) -> Optional[LeapMonth]:
    """Leap month of the lunar year bracketed by a11 and b11, or None for a 12-month year."""
    if b11 - a11 <= 365:
        return None
    offset = leap_month_offset(a11, tz, cap)
    # offset 1 repeats month 11, offset 2 repeats month 12, offset 3 month 1, ...
    month = (offset - 2) % 12 or 12
    logger.debug("a11=%d b11=%d: leap offset %d, leap month %d", a11, b11, offset, month)
    return LeapMonth(offset=offset, month=month)


def leap_month_of_year(lunar_year: int, config: AmlichConfig = DEFAULT_CONFIG) -> Optional[int]:
    """Leap month label of a lunar year, or None if the year has twelve months."""
    tz = config.tz_hours
    cap = config.leap_scan_cap
    m11 = lunar_month_11(lunar_year, tz)

    # Months 1..10 sit in the bracket ending at this year's month 11,
    # months 11 and 12 in the bracket starting there.
    leap = resolve_leap_month(lunar_month_11(lunar_year - 1, tz), m11, tz, cap)
    if leap is not None and leap.offset >= 3:
        return leap.month
    leap = resolve_leap_month(m11, lunar_month_11(lunar_year + 1, tz), tz, cap)
    if leap is not None and leap.offset <= 2:
        return leap.month
    return None
