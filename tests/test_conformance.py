"""Cross-function behaviour: documented examples and round trips."""

from datetime import datetime, timezone

import pytest

from whenwords import (
    date_range,
    duration,
    human_date,
    normalize_timestamp,
    parse_duration,
    timeago,
)

T = int(datetime(2024, 1, 17, 12, 0, 0, tzinfo=timezone.utc).timestamp())

CASES = [
    ("timeago same instant", timeago, (T, T), "just now"),
    ("timeago 44s past", timeago, (T, T + 44), "just now"),
    ("timeago 45s past", timeago, (T, T + 45), "1 minute ago"),
    ("timeago 45s future", timeago, (T + 45, T), "in 1 minute"),
    ("timeago 3 hours", timeago, (T - 3 * 3600, T), "3 hours ago"),
    ("duration zero", duration, (0,), "0 seconds"),
    ("duration zero compact", duration, (0, {"compact": True}), "0s"),
    ("duration 9000", duration, (9000,), "2 hours, 30 minutes"),
    ("duration 9000 compact", duration, (9000, {"compact": True}), "2h 30m"),
    ("parse compact", parse_duration, ("2h 30m",), 9000),
    ("parse colon", parse_duration, ("1:30:00",), 5400),
    ("parse and", parse_duration, ("2 hours and 15 minutes",), 8100),
    ("human today", human_date, (T, T), "Today"),
    ("human last sunday", human_date, (T - 3 * 86400, T), "Last Sunday"),
    ("range same month", date_range, ("2024-03-01", "2024-03-09"), "March 1–9, 2024"),
    (
        "range across years",
        date_range,
        ("2024-12-30", "2025-01-03"),
        "December 30, 2024 – January 3, 2025",
    ),
]


@pytest.mark.parametrize(
    "func, args, expected", [case[1:] for case in CASES], ids=[case[0] for case in CASES]
)
def test_documented_examples(func, args, expected):
    assert func(*args) == expected


@pytest.mark.parametrize("seconds", [9000, 3661, 86400, 93784, 31536000])
def test_duration_round_trip(seconds):
    """Test that formatting a parsed duration keeps the same unit breakdown."""
    text = duration(seconds)
    assert duration(parse_duration(text)) == text


@pytest.mark.parametrize("seconds", [9000, 3661, 86400, 93784])
def test_compact_duration_round_trip(seconds):
    text = duration(seconds, compact=True)
    assert duration(parse_duration(text), compact=True) == text


@pytest.mark.parametrize("value", [T, "2024-01-17T12:00:00Z", "2024-01-17"])
def test_just_now_for_any_representation(value):
    assert timeago(value, value) == "just now"
    assert timeago(normalize_timestamp(value)) == "just now"
