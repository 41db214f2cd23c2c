"""Tests for timestamp normalization."""

from datetime import date, datetime, timedelta, timezone

import pytest

from whenwords import InvalidTimestampError, normalize_timestamp
from whenwords.timestamps import to_utc_datetime

JAN_1_2024 = int(datetime(2024, 1, 1, 0, 0, 0, tzinfo=timezone.utc).timestamp())


def test_numbers_pass_through_unchanged():
    """Test that epoch seconds are returned as-is, without rounding."""
    assert normalize_timestamp(JAN_1_2024) == 1704067200
    assert normalize_timestamp(0) == 0
    assert normalize_timestamp(-86400) == -86400
    assert normalize_timestamp(1.75) == 1.75


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2024-01-01T00:00:00Z", 1704067200),
        ("2024-01-01T00:00:00+00:00", 1704067200),
        ("2024-01-01", 1704067200),
        ("2024-01-01T01:00:00+01:00", 1704067200),
        ("2024-01-01T00:00:00.999Z", 1704067200),
        ("2024-01-01T12:30:00", 1704112200),
        ("  2024-01-01T00:00:00Z  ", 1704067200),
    ],
)
def test_iso_strings_parse_to_utc_seconds(text, expected):
    """Test ISO 8601 parsing, with offset-less text read as UTC."""
    assert normalize_timestamp(text) == expected


def test_datetimes_are_floored_to_seconds():
    """Test that aware and naive datetimes convert via their epoch value."""
    aware = datetime(2024, 1, 1, 0, 0, 0, 900000, tzinfo=timezone.utc)
    assert normalize_timestamp(aware) == JAN_1_2024

    pacific = timezone(timedelta(hours=-8))
    assert normalize_timestamp(datetime(2023, 12, 31, 16, 0, tzinfo=pacific)) == JAN_1_2024

    naive = datetime(2024, 1, 1, 0, 0, 0)
    assert normalize_timestamp(naive) == JAN_1_2024


def test_dates_are_midnight_utc():
    assert normalize_timestamp(date(2024, 1, 1)) == JAN_1_2024


@pytest.mark.parametrize("text", ["not a date", "", "2024-13-45", "yesterday"])
def test_invalid_strings_raise(text):
    """Test that unparseable text raises InvalidTimestampError carrying the text."""
    with pytest.raises(InvalidTimestampError, match="Invalid timestamp format") as info:
        normalize_timestamp(text)
    assert info.value.value == text


@pytest.mark.parametrize("value", [None, [1704067200], {"ts": 1}, True, object()])
def test_unsupported_types_raise(value):
    with pytest.raises(InvalidTimestampError):
        normalize_timestamp(value)


def test_invalid_timestamp_is_a_value_error():
    with pytest.raises(ValueError):
        normalize_timestamp("garbage")


@pytest.mark.parametrize(
    "value",
    [JAN_1_2024, "2024-03-05T10:15:00Z", datetime(2024, 3, 5, tzinfo=timezone.utc)],
)
def test_normalization_is_idempotent(value):
    once = normalize_timestamp(value)
    assert normalize_timestamp(once) == once


def test_to_utc_datetime():
    dt = to_utc_datetime("2024-03-05T10:15:00+02:00")
    assert dt == datetime(2024, 3, 5, 8, 15, tzinfo=timezone.utc)
    assert dt.tzinfo is timezone.utc
