"""Implementation of an rfc5545 recurrence rule value.

A `RecurrenceRule` holds the frequency, interval and the BYDAY, BYMONTH,
BYMONTHDAY and BYSETPOS rule parts. The rule can be created directly from
field values or parsed from the text form of an RRULE property:

```python
from ical_rrule import RecurrenceRule, Weekday

rule = RecurrenceRule.from_rrule("RRULE:FREQ=WEEKLY;BYDAY=MO,WE")
assert rule.by_day == {Weekday.MONDAY, Weekday.WEDNESDAY}
print(rule.replace(interval=2).as_rrule_str())
```

The above example will output:
```
RRULE:FREQ=WEEKLY;INTERVAL=2;BYDAY=MO,WE
```

A rule created directly is not range checked, so an invalid rule may exist
as a value and be inspected with `is_valid` and the other validity
properties. Range checks are applied when encoding the rule as text, and
when parsing it from text. Weekdays are always encoded in ISO order
starting with Monday, and numeric values in ascending order.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
import logging
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from .const import (
    BYDAY,
    BYDAY_ERROR,
    BYMONTH,
    BYMONTH_ERROR,
    BYMONTHDAY,
    BYMONTHDAY_ERROR,
    BYSETPOS,
    BYSETPOS_ERROR,
    DEFAULT_INTERVAL,
    FREQ,
    FREQUENCY_ERROR,
    INTERVAL,
    INTERVAL_ERROR,
    KEY_VALUE_SEPARATOR,
    LIST_SEPARATOR,
    PARTS_SEPARATOR,
    PROPERTY_PREFIX,
)
from .enums import Frequency, Weekday
from .exceptions import (
    InvalidByDayError,
    InvalidByMonthDayError,
    InvalidByMonthError,
    InvalidBySetPosError,
    InvalidFrequencyError,
    InvalidIntervalError,
    InvalidWeekdayCodeError,
    RRuleValidationError,
)
from .validators import (
    all_valid,
    interval_valid,
    month_day_valid,
    month_valid,
    set_pos_valid,
)

__all__ = [
    "RecurrenceRule",
    "parse",
    "serialize",
]

_LOGGER = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class _NumberListPart:
    """A rule part holding a list of integers restricted to a range."""

    name: str
    field: str
    validator: Callable[[int], bool]
    error: type[RRuleValidationError]
    message: str

    def parse(self, value: str) -> frozenset[int]:
        """Parse the comma separated rule part value."""
        numbers: list[int] = []
        for token in value.split(LIST_SEPARATOR):
            if (number := _parse_int(token)) is None or not self.validator(number):
                raise self.error(self.message, detailed_error=token)
            numbers.append(number)
        return frozenset(numbers)

    def encode(self, values: frozenset[int]) -> str:
        """Encode the values as a comma separated rule part value."""
        return LIST_SEPARATOR.join(str(value) for value in sorted(values))


# Order is significant: it is the order values are checked and encoded
_NUMBER_LIST_PARTS = (
    _NumberListPart(
        BYMONTH, "by_month", month_valid, InvalidByMonthError, BYMONTH_ERROR
    ),
    _NumberListPart(
        BYMONTHDAY,
        "by_month_day",
        month_day_valid,
        InvalidByMonthDayError,
        BYMONTHDAY_ERROR,
    ),
    _NumberListPart(
        BYSETPOS, "by_set_pos", set_pos_valid, InvalidBySetPosError, BYSETPOS_ERROR
    ),
)
_SUPPORTED_PARTS = {FREQ, INTERVAL, BYDAY} | {
    part.name for part in _NUMBER_LIST_PARTS
}


def _parse_int(value: str) -> int | None:
    """Return the integer value of the token, or None if it is not one."""
    if not _INTEGER_RE.fullmatch(value):
        return None
    try:
        return int(value)
    except ValueError:
        # Exceeds the interpreter limit on integer string conversion
        return None


def _int_text(value: int) -> str | None:
    try:
        return str(value)
    except ValueError:
        return None


def _sorted_weekdays(values: frozenset[Weekday]) -> list[Weekday]:
    return sorted(values, key=lambda weekday: weekday.iso_weekday)


class RecurrenceRule(BaseModel):
    """A recurrence rule specification.

    Values are immutable; use `replace` to create a modified copy.
    """

    frequency: Frequency = Frequency.DAILY
    """The base unit of the recurrence."""

    interval: int = DEFAULT_INTERVAL
    """Interval at which the recurrence rule repeats, must not be negative."""

    by_day: frozenset[Weekday] = Field(default_factory=frozenset)
    """Days of the week."""

    by_month: frozenset[int] = Field(default_factory=frozenset)
    """Month numbers between 1 and 12."""

    by_month_day: frozenset[int] = Field(default_factory=frozenset)
    """Days of the month between 1 and 31, or -31 and -1 counting from the end."""

    by_set_pos: frozenset[int] = Field(default_factory=frozenset)
    """Values that corresponds to the nth occurrence within the set of instances."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def is_interval_valid(self) -> bool:
        """Return true if the interval is not negative."""
        return interval_valid(self.interval)

    @property
    def is_by_month_valid(self) -> bool:
        """Return true if all months are in range."""
        return all_valid(self.by_month, month_valid)

    @property
    def is_by_month_day_valid(self) -> bool:
        """Return true if all days of the month are in range."""
        return all_valid(self.by_month_day, month_day_valid)

    @property
    def is_by_set_pos_valid(self) -> bool:
        """Return true if all set positions are in range."""
        return all_valid(self.by_set_pos, set_pos_valid)

    @property
    def is_valid(self) -> bool:
        """Return true if every rule part is in range."""
        return (
            self.is_interval_valid
            and self.is_by_month_valid
            and self.is_by_month_day_valid
            and self.is_by_set_pos_valid
        )

    def check(self) -> None:
        """Raise an error for the first rule part that is out of range."""
        interval_text = _int_text(self.interval)
        if not self.is_interval_valid or interval_text is None:
            raise InvalidIntervalError(INTERVAL_ERROR, detailed_error=interval_text)
        for part in _NUMBER_LIST_PARTS:
            values: frozenset[int] = getattr(self, part.field)
            for value in sorted(values):
                if not part.validator(value):
                    raise part.error(part.message, detailed_error=_int_text(value))

    def replace(self, **changes: Any) -> RecurrenceRule:
        """Return a new rule with the specified fields replaced."""
        return type(self)(**{**dict(self), **changes})

    def as_rrule_str(self) -> str:
        """Return the rule as an RRULE string, raising if it is not valid."""
        self.check()
        parts = [f"{FREQ}{KEY_VALUE_SEPARATOR}{self.frequency.value}"]
        # The default interval is implied when omitted
        if self.interval != DEFAULT_INTERVAL:
            parts.append(f"{INTERVAL}{KEY_VALUE_SEPARATOR}{self.interval}")
        if self.by_day:
            codes = LIST_SEPARATOR.join(
                weekday.code for weekday in _sorted_weekdays(self.by_day)
            )
            parts.append(f"{BYDAY}{KEY_VALUE_SEPARATOR}{codes}")
        for part in _NUMBER_LIST_PARTS:
            if values := getattr(self, part.field):
                parts.append(f"{part.name}{KEY_VALUE_SEPARATOR}{part.encode(values)}")
        return PROPERTY_PREFIX + PARTS_SEPARATOR.join(parts)

    @classmethod
    def from_rrule(cls, rrule_str: str) -> RecurrenceRule:
        """Create a RecurrenceRule from an RRULE string.

        The "RRULE:" prefix is optional. Parts that are not of the form
        "KEY=VALUE", or that are not supported, are ignored.
        """
        parts = _split_parts(rrule_str)
        fields: dict[str, Any] = {}
        if (value := parts.get(FREQ)) is not None:
            fields["frequency"] = _parse_frequency(value)
        if (value := parts.get(INTERVAL)) is not None:
            fields["interval"] = _parse_interval(value)
        if (value := parts.get(BYDAY)) is not None:
            fields["by_day"] = _parse_by_day(value)
        for part in _NUMBER_LIST_PARTS:
            if (value := parts.get(part.name)) is not None:
                fields[part.field] = part.parse(value)
        return cls(**fields)

    @field_serializer("by_day")
    def serialize_by_day(self, values: frozenset[Weekday]) -> list[Weekday]:
        return _sorted_weekdays(values)

    @field_serializer("by_month", "by_month_day", "by_set_pos")
    def serialize_numbers(self, values: frozenset[int]) -> list[int]:
        return sorted(values)


def _split_parts(rrule_str: str) -> dict[str, str]:
    """Split the rule text into a dictionary of rule part names and values."""
    result: dict[str, str] = {}
    value = rrule_str.removeprefix(PROPERTY_PREFIX)
    for part in value.split(PARTS_SEPARATOR):
        key, _, part_value = part.partition(KEY_VALUE_SEPARATOR)
        if not key or not part_value:
            if part:
                _LOGGER.debug("Ignoring malformed recurrence rule part: %s", part)
            continue
        if key not in _SUPPORTED_PARTS:
            _LOGGER.debug("Ignoring unsupported recurrence rule part: %s", key)
            continue
        result[key] = part_value
    return result


def _parse_frequency(value: str) -> Frequency:
    if (frequency := Frequency.parse(value)) is None:
        raise InvalidFrequencyError(FREQUENCY_ERROR, detailed_error=value)
    return frequency


def _parse_interval(value: str) -> int:
    if (interval := _parse_int(value)) is None or not interval_valid(interval):
        raise InvalidIntervalError(INTERVAL_ERROR, detailed_error=value)
    return interval


def _parse_by_day(value: str) -> frozenset[Weekday]:
    try:
        return frozenset(
            Weekday.from_code(code) for code in value.split(LIST_SEPARATOR)
        )
    except InvalidWeekdayCodeError as err:
        raise InvalidByDayError(BYDAY_ERROR, detailed_error=value) from err


def parse(rrule_str: str) -> RecurrenceRule:
    """Parse an RRULE string into a RecurrenceRule."""
    return RecurrenceRule.from_rrule(rrule_str)


def serialize(rule: RecurrenceRule) -> str:
    """Encode a RecurrenceRule as an RRULE string."""
    return rule.as_rrule_str()
