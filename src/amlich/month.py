from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Tuple

from .calendar import GregorianDay
from .core.config import DEFAULT_CONFIG, AmlichConfig
from .core.errors import InvalidDateError
from .core.time import days_in_month


@dataclass(frozen=True)
class GregorianDayRange:
    """Inclusive run of civil days. Iterating is lazy and can be repeated."""
    begin: GregorianDay
    end: GregorianDay

    def iter(self) -> Iterator[GregorianDay]:
        jdn = self.begin.to_julian_days()
        last = self.end.to_julian_days()
        while jdn <= last:
            yield GregorianDay.from_julian_days(jdn, config=self.begin.config)
            jdn += 1

    def __iter__(self) -> Iterator[GregorianDay]:
        return self.iter()

    def __len__(self) -> int:
        return max(0, self.end.to_julian_days() - self.begin.to_julian_days() + 1)

    def to_tuple(self) -> Tuple[GregorianDay, GregorianDay]:
        return (self.begin, self.end)


@dataclass(frozen=True)
class GregorianMonth:
    year: int
    month: int
    config: AmlichConfig = field(default=DEFAULT_CONFIG, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not (1 <= self.month <= 12):
            raise InvalidDateError(f"Invalid month {self.month}")

    @classmethod
    def new(cls, year: int, month: int, *, config: AmlichConfig = DEFAULT_CONFIG) -> "GregorianMonth":
        return cls(year, month, config=config)

    def get_bound(self) -> GregorianDayRange:
        last = days_in_month(self.month, self.year)
        return GregorianDayRange(
            begin=GregorianDay.new(1, self.month, self.year, config=self.config),
            end=GregorianDay.new(last, self.month, self.year, config=self.config),
        )

    def previous(self) -> "GregorianMonth":
        year, month = self.year, self.month - 1
        if month <= 0:
            month += 12
            year -= 1
        return GregorianMonth(year, month, config=self.config)

    def next(self) -> "GregorianMonth":
        year, month = self.year, self.month + 1
        if month > 12:
            month -= 12
            year += 1
        return GregorianMonth(year, month, config=self.config)

    def to_title(self) -> str:
        return f"Am lich {self.month:02d}/{self.year:04d}"
