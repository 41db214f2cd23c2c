"""Normalization of timestamp representations to Unix epoch seconds.

Every formatter in whenwords accepts the same set of inputs for a point in
time and funnels them through :func:`normalize_timestamp` before doing any
arithmetic. All calendar math happens in UTC.
"""

import math
from datetime import date, datetime, time, timezone
from typing import Any, TypeAlias

from dateutil.parser import isoparse
from loguru import logger

from whenwords.errors import InvalidTimestampError

Timestamp: TypeAlias = int | float | str | datetime | date


def normalize_timestamp(value: Any) -> int | float:
    """Convert a timestamp representation to seconds since the Unix epoch.

    Accepts:
    - int/float: Passed through as-is (no rounding)
    - str: ISO 8601 date or date-time; text without an offset is read as UTC
    - datetime: Aware values use their offset, naive values are read as UTC
    - date: Midnight UTC of that day

    String and datetime inputs are floored to whole seconds.

    Raises:
        InvalidTimestampError: If a string cannot be parsed or the type
            is not supported
    """
    if isinstance(value, bool):
        raise InvalidTimestampError(
            value, "Booleans are not timestamps; pass epoch seconds instead."
        )
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        return _parse_iso(value)
    if isinstance(value, datetime):
        return _datetime_seconds(value)
    if isinstance(value, date):
        return _datetime_seconds(datetime.combine(value, time.min, tzinfo=timezone.utc))
    raise InvalidTimestampError(
        value,
        f"Expected int, float, str, datetime, or date; got {type(value).__name__!r}.\n"
        f"Examples:\n"
        f"  normalize_timestamp(1704067200)  # Unix seconds\n"
        f'  normalize_timestamp("2024-01-01T00:00:00Z")  # ISO 8601\n'
        f"  normalize_timestamp(datetime(2024, 1, 1, tzinfo=timezone.utc))",
    )


def to_utc_datetime(value: Any) -> datetime:
    """Normalize ``value`` and return it as an aware UTC datetime."""
    return datetime.fromtimestamp(normalize_timestamp(value), tz=timezone.utc)


def _parse_iso(text: str) -> int:
    try:
        parsed = isoparse(text.strip())
    except (ValueError, OverflowError) as exc:
        raise InvalidTimestampError(text) from exc
    logger.debug("Parsed timestamp text {!r} as {}", text, parsed.isoformat())
    return _datetime_seconds(parsed)


def _datetime_seconds(dt: datetime) -> int:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return math.floor(dt.timestamp())
