"""Tests for frequency and weekday enums."""

import pytest

from ical_rrule.const import BYDAY_ERROR, FREQUENCY_ERROR
from ical_rrule.enums import WEEKDAYS, WEEKEND, Frequency, Weekday
from ical_rrule.exceptions import InvalidWeekdayCodeError


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("DAILY", Frequency.DAILY),
        ("weekly", Frequency.WEEKLY),
        ("Monthly", Frequency.MONTHLY),
        ("yEARLY", Frequency.YEARLY),
    ],
)
def test_frequency_parse(value: str, expected: Frequency) -> None:
    """Test frequency lookup ignores case."""
    assert Frequency.parse(value) == expected


@pytest.mark.parametrize("value", ["", "day", "HOURLY", "DAILY "])
def test_frequency_parse_unknown(value: str) -> None:
    """Test an unknown frequency is not found."""
    assert Frequency.parse(value) is None


def test_frequency_str() -> None:
    """Test the text form of a frequency is its name."""
    assert str(Frequency.MONTHLY) == "MONTHLY"
    assert [str(freq) for freq in Frequency] == [
        "DAILY",
        "WEEKLY",
        "MONTHLY",
        "YEARLY",
    ]


def test_weekday_codes() -> None:
    """Test every weekday has a code in ISO order."""
    assert [weekday.code for weekday in Weekday] == [
        "MO",
        "TU",
        "WE",
        "TH",
        "FR",
        "SA",
        "SU",
    ]
    assert [weekday.iso_weekday for weekday in Weekday] == [1, 2, 3, 4, 5, 6, 7]
    assert str(Weekday.THURSDAY) == "TH"


@pytest.mark.parametrize("weekday", list(Weekday))
def test_weekday_from_code(weekday: Weekday) -> None:
    """Test the mapping between weekdays and codes in both directions."""
    assert Weekday.from_code(weekday.code) is weekday


@pytest.mark.parametrize("code", ["", "mo", "Mo", "MON", "MONDAY", "XX"])
def test_weekday_from_invalid_code(code: str) -> None:
    """Test that codes must match exactly."""
    with pytest.raises(InvalidWeekdayCodeError, match="Unknown weekday code"):
        Weekday.from_code(code)


def test_weekdays_and_weekend() -> None:
    """Test the weekday groupings cover the week."""
    assert Weekday.MONDAY in WEEKDAYS
    assert Weekday.SATURDAY not in WEEKDAYS
    assert WEEKEND == {Weekday.SATURDAY, Weekday.SUNDAY}
    assert WEEKDAYS | WEEKEND == set(Weekday)
    assert not WEEKDAYS & WEEKEND


def test_error_messages_list_every_value() -> None:
    """Test the FREQ and BYDAY error messages name every legal value in order."""
    assert FREQUENCY_ERROR.endswith(",".join(freq.value for freq in Frequency))
    assert BYDAY_ERROR.endswith(",".join(weekday.code for weekday in Weekday))
