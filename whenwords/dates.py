"""Contextual calendar labels and compact date ranges, computed in UTC."""

import math

from whenwords.timestamps import Timestamp, normalize_timestamp, to_utc_datetime
from whenwords.util import DAY

# Python's datetime.weekday(): Monday == 0
_DAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

_MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def human_date(timestamp: Timestamp, reference: Timestamp | None = None) -> str:
    """Return a contextual label for ``timestamp`` as seen from ``reference``.

    Args:
        timestamp: The date to describe
        reference: The "today" to compare against (defaults to ``timestamp``)

    Returns:
        "Today", "Yesterday", "Tomorrow", "Last <Weekday>" (2-6 days back),
        "This <Weekday>" (2-6 days ahead), "<Month> <Day>" within the same
        year, or "<Month> <Day>, <Year>" otherwise.

    Example:
        >>> thursday = 1705536000  # 2024-01-18 00:00 UTC
        >>> human_date(thursday - 3 * 86400, thursday)
        'Last Monday'
    """
    ts = normalize_timestamp(timestamp)
    ref = ts if reference is None else normalize_timestamp(reference)

    event = to_utc_datetime(ts).date()
    today = to_utc_datetime(ref).date()
    days_diff = math.floor((ref - ts) / DAY)

    if event == today:
        return "Today"
    if (today - event).days == 1:
        return "Yesterday"
    if (event - today).days == 1:
        return "Tomorrow"
    if 1 < days_diff < 7:
        return f"Last {_DAY_NAMES[(today.weekday() - days_diff) % 7]}"
    if -7 < days_diff < -1:
        return f"This {_DAY_NAMES[(today.weekday() - days_diff) % 7]}"

    month_day = f"{_MONTH_NAMES[event.month - 1]} {event.day}"
    if event.year == today.year:
        return month_day
    return f"{month_day}, {event.year}"


def date_range(start: Timestamp, end: Timestamp) -> str:
    """Format two timestamps as a date range, collapsing shared parts.

    The arguments may be given in either order.

    Example:
        >>> date_range("2024-01-15", "2024-01-22")
        'January 15–22, 2024'
        >>> date_range("2024-01-15", "2024-02-15")
        'January 15 – February 15, 2024'
        >>> date_range("2023-12-28", "2024-01-02")
        'December 28, 2023 – January 2, 2024'
    """
    ts = normalize_timestamp(start)
    te = normalize_timestamp(end)
    if ts > te:
        ts, te = te, ts

    first = to_utc_datetime(ts).date()
    last = to_utc_datetime(te).date()

    first_month = _MONTH_NAMES[first.month - 1]
    last_month = _MONTH_NAMES[last.month - 1]

    if first == last:
        return f"{first_month} {first.day}, {first.year}"
    if (first.year, first.month) == (last.year, last.month):
        return f"{first_month} {first.day}–{last.day}, {last.year}"
    if first.year == last.year:
        return f"{first_month} {first.day} – {last_month} {last.day}, {last.year}"
    return (
        f"{first_month} {first.day}, {first.year} – "
        f"{last_month} {last.day}, {last.year}"
    )
