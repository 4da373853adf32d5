"""
amlich.calendar
---------------
Date values of the two calendars. The JDN is the common currency: every
cross-calendar conversion and the day of week go through to_julian_days().
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from functools import total_ordering
from typing import TYPE_CHECKING

from .core.config import DEFAULT_CONFIG, AmlichConfig
from .core.errors import InvalidDateError
from .core.time import from_jdn, is_valid_date, to_jdn
from .core.types import Day, DayOfWeek
from .engines.lunar import jdn_to_lunar, lunar_to_jdn

if TYPE_CHECKING:
    from .month import GregorianMonth

# date.toordinal() is 1 on 0001-01-01 (proleptic Gregorian), JDN 1721426
_JDN_ORDINAL_OFFSET = 1721425


class Calendar:
    """Capabilities shared by GregorianDay and LunarDay."""
    config: AmlichConfig

    def to_julian_days(self) -> int:
        raise NotImplementedError

    @classmethod
    def from_julian_days(cls, jdn: int, *, config: AmlichConfig = DEFAULT_CONFIG):
        raise NotImplementedError

    def to_gregorian(self) -> "GregorianDay":
        return GregorianDay.from_julian_days(self.to_julian_days(), config=self.config)

    def to_lunar(self) -> "LunarDay":
        return LunarDay.from_julian_days(self.to_julian_days(), config=self.config)

    def day_of_week(self) -> DayOfWeek:
        return DayOfWeek.from_jdn(self.to_julian_days())


@total_ordering
@dataclass(frozen=True)
class GregorianDay(Calendar):
    """Civil date: Julian calendar before 1582-10-15, Gregorian from then on."""
    inner: Day
    config: AmlichConfig = field(default=DEFAULT_CONFIG, compare=False, repr=False)

    def __post_init__(self) -> None:
        d = self.inner
        if not is_valid_date(d.day, d.month, d.year):
            raise InvalidDateError(f"Invalid civil date {d.day:02d}/{d.month:02d}/{d.year:04d}")

    @classmethod
    def new(cls, day: int, month: int, year: int, *, config: AmlichConfig = DEFAULT_CONFIG) -> "GregorianDay":
        return cls(Day(day, month, year), config=config)

    @classmethod
    def from_julian_days(cls, jdn: int, *, config: AmlichConfig = DEFAULT_CONFIG) -> "GregorianDay":
        return cls(Day(*from_jdn(jdn)), config=config)

    @classmethod
    def from_date(cls, d: date, *, config: AmlichConfig = DEFAULT_CONFIG) -> "GregorianDay":
        """Same instant as a datetime.date (which is proleptic Gregorian, so pre-1582 fields differ)."""
        return cls.from_julian_days(d.toordinal() + _JDN_ORDINAL_OFFSET, config=config)

    def to_date(self) -> date:
        return date.fromordinal(self.to_julian_days() - _JDN_ORDINAL_OFFSET)

    @property
    def day(self) -> int:
        return self.inner.day

    @property
    def month(self) -> int:
        return self.inner.month

    @property
    def year(self) -> int:
        return self.inner.year

    def to_julian_days(self) -> int:
        return to_jdn(self.inner.day, self.inner.month, self.inner.year)

    def to_month(self) -> "GregorianMonth":
        from .month import GregorianMonth
        return GregorianMonth(self.inner.year, self.inner.month, config=self.config)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, GregorianDay):
            return NotImplemented
        return self.to_julian_days() < other.to_julian_days()

    def isoformat(self) -> str:
        return f"{self.inner.year:04d}-{self.inner.month:02d}-{self.inner.day:02d}"

    def __str__(self) -> str:
        return f"{self.inner.day:02d}/{self.inner.month:02d}/{self.inner.year:04d}"


@dataclass(frozen=True)
class LunarDay(Calendar):
    """
    Vietnamese lunisolar date. leap=True marks the inserted month, which
    repeats the number of the month before it.
    """
    inner: Day
    leap: bool = False
    config: AmlichConfig = field(default=DEFAULT_CONFIG, compare=False, repr=False)

    def __post_init__(self) -> None:
        d = self.inner
        if not (1 <= d.month <= 12) or not (1 <= d.day <= 30):
            raise InvalidDateError(f"Invalid lunar date {d.day:02d}/{d.month:02d}/{d.year:04d}")

    @classmethod
    def new(
        cls, day: int, month: int, year: int, leap: bool = False, *, config: AmlichConfig = DEFAULT_CONFIG
    ) -> "LunarDay":
        return cls(Day(day, month, year), leap, config=config)

    @classmethod
    def from_julian_days(cls, jdn: int, *, config: AmlichConfig = DEFAULT_CONFIG) -> "LunarDay":
        day, month, year, leap = jdn_to_lunar(jdn, config)
        return cls(Day(day, month, year), leap, config=config)

    @property
    def day(self) -> int:
        return self.inner.day

    @property
    def month(self) -> int:
        return self.inner.month

    @property
    def year(self) -> int:
        return self.inner.year

    def to_julian_days(self) -> int:
        """Raises LeapMonthMismatchError if leap is set on a month that is not the leap month.
        Raises InvalidDateError for day 30 of a 29-day month.
        """
        d = self.inner
        return lunar_to_jdn(d.day, d.month, d.year, self.leap, self.config)

    def __str__(self) -> str:
        return f"{self.inner.day:02d}/{self.inner.month:02d}/{self.inner.year:04d} AL"
