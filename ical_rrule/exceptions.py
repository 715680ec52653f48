"""Exceptions for the ical_rrule library."""


class RRuleError(Exception):
    """Base exception for all ical_rrule errors."""


class RRuleValidationError(RRuleError, ValueError):
    """Exception raised when a recurrence rule fails validation.

    The 'message' attribute contains the human-readable message, which is
    stable and safe to compare against. The 'detailed_error' attribute can
    provide additional information such as the offending raw value, useful
    for debugging purposes.
    """

    def __init__(self, message: str, *, detailed_error: str | None = None) -> None:
        """Initialize the RRuleValidationError with a message."""
        super().__init__(message)
        self.message = message
        self.detailed_error = detailed_error


class InvalidFrequencyError(RRuleValidationError):
    """The FREQ rule part is not a supported frequency."""


class InvalidIntervalError(RRuleValidationError):
    """The INTERVAL rule part is not a non-negative integer."""


class InvalidByDayError(RRuleValidationError):
    """The BYDAY rule part contains an unknown weekday code."""


class InvalidByMonthError(RRuleValidationError):
    """The BYMONTH rule part contains a value outside 1-12."""


class InvalidByMonthDayError(RRuleValidationError):
    """The BYMONTHDAY rule part contains zero or a value outside -31..31."""


class InvalidBySetPosError(RRuleValidationError):
    """The BYSETPOS rule part contains zero or a value outside -366..366."""


class InvalidWeekdayCodeError(RRuleError, ValueError):
    """Exception raised when looking up an unknown two letter weekday code."""
