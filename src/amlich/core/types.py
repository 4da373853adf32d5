from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple

from .errors import InvalidInputError


@dataclass(frozen=True)
class Day:
    """Day/month/year payload shared by the civil and lunar calendars. Not range-checked."""
    day: int
    month: int
    year: int

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.day, self.month, self.year)


class DayOfWeek(IntEnum):
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def from_index(cls, x: int) -> "DayOfWeek":
        if not (0 <= x <= 6):
            raise InvalidInputError(f"Invalid day of week: {x}")
        return cls(x)

    @classmethod
    def from_jdn(cls, jdn: int) -> "DayOfWeek":
        return cls.from_index((jdn + 1) % 7)

    def __str__(self) -> str:
        return self.name.capitalize()

    def short_title(self) -> str:
        return str(self)[:3]
