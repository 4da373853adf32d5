from __future__ import annotations

import math

DR = math.pi / 180.0
JD_J2000_MIDNIGHT = 2451545.5


def sun_longitude(jdn: float, tz: float) -> float:
    """
    True solar longitude (radians, wrapped to [0, 2*pi)) at local midnight
    starting day jdn. Mean elements plus a 3-term equation of center.
    """
    T = (jdn - JD_J2000_MIDNIGHT - tz / 24.0) / 36525.0  # Julian centuries from 2000-01-01 12:00 UT
    T2 = T * T
    M = 357.52910 + 35999.05030 * T - 0.0001559 * T2 - 0.00000048 * T * T2  # mean anomaly, deg
    L0 = 280.46645 + 36000.76983 * T + 0.0003032 * T2                       # mean longitude, deg
    DL = (1.914600 - 0.004817 * T - 0.000014 * T2) * math.sin(DR * M)
    DL = DL + (0.019993 - 0.000101 * T) * math.sin(DR * 2.0 * M) + 0.000290 * math.sin(DR * 3.0 * M)
    L = (L0 + DL) * DR
    return L - 2.0 * math.pi * math.floor(L / (2.0 * math.pi))


def sun_longitude_sector(jdn: float, tz: float) -> int:
    """Index 0..11 of the 30-degree solar sector (major term) occupied at jdn."""
    return int(math.floor(sun_longitude(jdn, tz) / math.pi * 6.0))
