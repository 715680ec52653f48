"""
.. include:: ../README.md
"""

from .enums import WEEKDAYS, WEEKEND, Frequency, Weekday
from .exceptions import RRuleError, RRuleValidationError
from .rrule import RecurrenceRule, parse, serialize

__all__ = [
    "const",
    "enums",
    "exceptions",
    "rrule",
    "validators",
    "Frequency",
    "RecurrenceRule",
    "RRuleError",
    "RRuleValidationError",
    "Weekday",
    "WEEKDAYS",
    "WEEKEND",
    "parse",
    "serialize",
]
