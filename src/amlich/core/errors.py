from __future__ import annotations

from typing import Optional


class AmlichError(Exception):
    """Base error."""


class InvalidInputError(AmlichError, ValueError):
    """Raised for an out-of-range index or configuration value."""


class InvalidDateError(AmlichError, ValueError):
    """Raised when a civil or lunar date does not exist."""


class LeapMonthMismatchError(AmlichError):
    """Raised when a lunar date's leap flag disagrees with the computed leap month."""

    def __init__(self, year: int, month: int, leap_month: Optional[int]):
        self.year = year
        self.month = month
        self.leap_month = leap_month
        if leap_month is None:
            msg = f"Lunar year {year} has no leap month (got leap month {month})."
        else:
            msg = f"Leap month of lunar year {year} is {leap_month}, not {month}."
        super().__init__(msg)
