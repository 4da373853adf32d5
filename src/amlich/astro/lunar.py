"""
amlich.astro.lunar
------------------
Time of the k-th new moon after the reference new moon of 1900 January 0.5,
from a truncated periodic series (mean lunation plus 14 sine corrections).

The constants must be kept to the printed precision: an error of a few
minutes near local midnight moves a month boundary by a whole day.
"""

from __future__ import annotations

import math

DR = math.pi / 180.0  # degrees -> radians

JD_NEW_MOON_EPOCH = 2415021.076998695  # new moon k = 0, JD
SYNODIC_MONTH = 29.530588853           # mean synodic month, days


def new_moon_jd(k: float) -> float:
    """Julian Date (UT) of new moon number k."""
    t = k / 1236.85  # Julian centuries from 1900 January 0.5
    tt = t * t
    ttt = tt * t

    # Mean new moon
    jd1 = 2415020.75933 + 29.53058868 * k + 0.0001178 * tt - 0.000000155 * ttt
    jd1 = jd1 + 0.00033 * math.sin((166.56 + 132.87 * t - 0.009173 * tt) * DR)

    M = 359.2242 + 29.10535608 * k - 0.0000333 * tt - 0.00000347 * ttt      # sun mean anomaly
    Mpr = 306.0253 + 385.81691806 * k + 0.0107306 * tt + 0.00001236 * ttt  # moon mean anomaly
    F = 21.2964 + 390.67050646 * k - 0.0016528 * tt - 0.00000239 * ttt    # moon argument of latitude

    C1 = (0.1734 - 0.000393 * t) * math.sin(M * DR) + 0.0021 * math.sin(2.0 * DR * M)
    C1 = C1 - 0.4068 * math.sin(Mpr * DR) + 0.0161 * math.sin(DR * 2.0 * Mpr)
    C1 = C1 - 0.0004 * math.sin(DR * 3.0 * Mpr)
    C1 = C1 + 0.0104 * math.sin(DR * 2.0 * F) - 0.0051 * math.sin(DR * (M + Mpr))
    C1 = C1 - 0.0074 * math.sin(DR * (M - Mpr)) + 0.0004 * math.sin(DR * (2.0 * F + M))
    C1 = C1 - 0.0004 * math.sin(DR * (2.0 * F - M)) - 0.0006 * math.sin(DR * (2.0 * F + Mpr))
    C1 = C1 + 0.0010 * math.sin(DR * (2.0 * F - Mpr)) + 0.0005 * math.sin(DR * (2.0 * Mpr + M))

    # Secular (TT - UT) correction, days
    if t < -11.0:
        delta_t = 0.001 + 0.000839 * t + 0.0002261 * tt - 0.00000845 * ttt - 0.000000081 * t * ttt
    else:
        delta_t = -0.000278 + 0.000265 * t + 0.000262 * tt

    return jd1 + C1 - delta_t


def new_moon_day(k: float, tz: float) -> int:
    """JDN of the local civil day (UTC+tz) on which new moon k falls."""
    return int(math.floor(new_moon_jd(k) + 0.5 + tz / 24.0))
