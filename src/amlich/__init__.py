"""amlich public API.

Civil (Julian/Gregorian) dates, Julian Day Numbers and the Vietnamese
lunisolar calendar (Am Lich). Most users need only the names re-exported here.
"""

from .api import (
    gregorian_to_lunar,
    lunar_to_gregorian,
    day_of_week,
    leap_month,
    month_days,
    new_year_day,
)
from .calendar import Calendar, GregorianDay, LunarDay
from .month import GregorianMonth, GregorianDayRange
from .core.config import AmlichConfig, DEFAULT_CONFIG
from .core.errors import AmlichError, InvalidDateError, InvalidInputError, LeapMonthMismatchError
from .core.time import to_jdn, from_jdn
from .core.types import Day, DayOfWeek

__all__ = [
    "gregorian_to_lunar",
    "lunar_to_gregorian",
    "day_of_week",
    "leap_month",
    "month_days",
    "new_year_day",
    "Calendar",
    "GregorianDay",
    "LunarDay",
    "GregorianMonth",
    "GregorianDayRange",
    "AmlichConfig",
    "DEFAULT_CONFIG",
    "AmlichError",
    "InvalidDateError",
    "InvalidInputError",
    "LeapMonthMismatchError",
    "to_jdn",
    "from_jdn",
    "Day",
    "DayOfWeek",
]
