"""Range checks for the numeric parts of a recurrence rule.

The same predicates are used when checking a rule that was constructed
directly and when parsing a rule from text, so that both paths agree on
what is a legal value.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

__all__ = [
    "interval_valid",
    "month_valid",
    "month_day_valid",
    "set_pos_valid",
    "all_valid",
]

MAX_MONTH = 12
MAX_MONTH_DAYS = 31
MAX_YEAR_DAYS = 366


def interval_valid(value: int) -> bool:
    """Return true if the value is a legal INTERVAL."""
    return value >= 0


def month_valid(value: int) -> bool:
    """Return true if the value is a month number between 1 and 12."""
    return 1 <= value <= MAX_MONTH


def _in_range_non_zero(limit: int) -> Callable[[int], bool]:
    def validate(value: int) -> bool:
        return value != 0 and -limit <= value <= limit

    return validate


month_day_valid = _in_range_non_zero(MAX_MONTH_DAYS)
"""Return true if the value is a day of the month in -31..-1 or 1..31."""

set_pos_valid = _in_range_non_zero(MAX_YEAR_DAYS)
"""Return true if the value is a set position in -366..-1 or 1..366."""


def all_valid(values: Iterable[int], validator: Callable[[int], bool]) -> bool:
    """Return true if every value passes the validator, including no values."""
    return all(validator(value) for value in values)
