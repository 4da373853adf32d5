from __future__ import annotations

from typing import List, Optional

from .calendar import GregorianDay, LunarDay
from .core.config import DEFAULT_CONFIG, AmlichConfig
from .core.types import DayOfWeek
from .engines.leap import leap_month_of_year
from .month import GregorianMonth


def gregorian_to_lunar(day: int, month: int, year: int, *, config: AmlichConfig = DEFAULT_CONFIG) -> LunarDay:
    return GregorianDay.new(day, month, year, config=config).to_lunar()


def lunar_to_gregorian(
    day: int, month: int, year: int, leap: bool = False, *, config: AmlichConfig = DEFAULT_CONFIG
) -> GregorianDay:
    return LunarDay.new(day, month, year, leap, config=config).to_gregorian()


def day_of_week(day: int, month: int, year: int) -> DayOfWeek:
    return GregorianDay.new(day, month, year).day_of_week()


def leap_month(lunar_year: int, *, config: AmlichConfig = DEFAULT_CONFIG) -> Optional[int]:
    """Leap month label of a lunar year (1..12), or None."""
    return leap_month_of_year(lunar_year, config)


def month_days(year: int, month: int, *, config: AmlichConfig = DEFAULT_CONFIG) -> List[GregorianDay]:
    return list(GregorianMonth(year, month, config=config).get_bound())


def new_year_day(lunar_year: int, *, config: AmlichConfig = DEFAULT_CONFIG) -> GregorianDay:
    """Civil date of Tet, day 1 of month 1."""
    return lunar_to_gregorian(1, 1, lunar_year, config=config)
