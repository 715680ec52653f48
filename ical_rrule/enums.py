"""Enumerated values used in a recurrence rule.

Both enums are closed sets backed by explicit lookup tables, so that
converting to and from the rfc5545 text form never depends on the enum
member names.
"""

from __future__ import annotations

import enum

from .exceptions import InvalidWeekdayCodeError

__all__ = [
    "Frequency",
    "Weekday",
    "WEEKDAYS",
    "WEEKEND",
]


# Note: This can be StrEnum in python 3.11 and higher
class Frequency(str, enum.Enum):
    """Type of recurrence rule."""

    DAILY = "DAILY"
    """Repeating events based on an interval of a day or more."""

    WEEKLY = "WEEKLY"
    """Repeating events based on an interval of a week or more."""

    MONTHLY = "MONTHLY"
    """Repeating events based on an interval of a month or more."""

    YEARLY = "YEARLY"
    """Repeating events based on an interval of a year or more."""

    def __str__(self) -> str:
        """Return string representation."""
        return self.value

    @classmethod
    def parse(cls, value: str) -> Frequency | None:
        """Look up a frequency ignoring case, or None when unrecognized."""
        return _FREQUENCY_BY_VALUE.get(value.upper())


class Weekday(str, enum.Enum):
    """Corresponds to a day of the week, in ISO order."""

    MONDAY = "MO"
    TUESDAY = "TU"
    WEDNESDAY = "WE"
    THURSDAY = "TH"
    FRIDAY = "FR"
    SATURDAY = "SA"
    SUNDAY = "SU"

    def __str__(self) -> str:
        """Return string representation."""
        return self.value

    @property
    def code(self) -> str:
        """Return the two letter rfc5545 weekday code."""
        return self.value

    @property
    def iso_weekday(self) -> int:
        """Return the ISO day of the week, where Monday is 1 and Sunday is 7."""
        return _ISO_WEEKDAY[self]

    @classmethod
    def from_code(cls, code: str) -> Weekday:
        """Return the Weekday for an upper case two letter rfc5545 code."""
        if (weekday := _WEEKDAY_BY_CODE.get(code)) is None:
            raise InvalidWeekdayCodeError(f"Unknown weekday code: {code!r}")
        return weekday


_FREQUENCY_BY_VALUE: dict[str, Frequency] = {
    "DAILY": Frequency.DAILY,
    "WEEKLY": Frequency.WEEKLY,
    "MONTHLY": Frequency.MONTHLY,
    "YEARLY": Frequency.YEARLY,
}
_WEEKDAY_BY_CODE: dict[str, Weekday] = {
    "MO": Weekday.MONDAY,
    "TU": Weekday.TUESDAY,
    "WE": Weekday.WEDNESDAY,
    "TH": Weekday.THURSDAY,
    "FR": Weekday.FRIDAY,
    "SA": Weekday.SATURDAY,
    "SU": Weekday.SUNDAY,
}
_ISO_WEEKDAY: dict[Weekday, int] = {
    Weekday.MONDAY: 1,
    Weekday.TUESDAY: 2,
    Weekday.WEDNESDAY: 3,
    Weekday.THURSDAY: 4,
    Weekday.FRIDAY: 5,
    Weekday.SATURDAY: 6,
    Weekday.SUNDAY: 7,
}

WEEKDAYS = frozenset(
    {
        Weekday.MONDAY,
        Weekday.TUESDAY,
        Weekday.WEDNESDAY,
        Weekday.THURSDAY,
        Weekday.FRIDAY,
    }
)
"""Monday through Friday."""

WEEKEND = frozenset({Weekday.SATURDAY, Weekday.SUNDAY})
"""Saturday and Sunday."""
