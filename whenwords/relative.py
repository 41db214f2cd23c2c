"""Relative time phrases such as "3 hours ago" or "in 2 days"."""

from dataclasses import dataclass

from whenwords.timestamps import Timestamp, normalize_timestamp
from whenwords.util import DAY, HOUR, MINUTE, MONTH, YEAR, pluralize, round_half_up


@dataclass(frozen=True)
class _Threshold:
    """A row of the relative-time table.

    Applies while ``diff < below``. A ``divisor`` of None means the count is
    fixed at 1, otherwise the count is ``round_half_up(diff / divisor)``.
    """

    below: float
    unit: str
    divisor: int | None = None


# Evaluated top to bottom, first row whose bound exceeds the diff wins
_THRESHOLDS: tuple[_Threshold, ...] = (
    _Threshold(90, "minute"),
    _Threshold(45 * MINUTE, "minute", MINUTE),
    _Threshold(90 * MINUTE, "hour"),
    _Threshold(22 * HOUR, "hour", HOUR),
    _Threshold(36 * HOUR, "day"),
    _Threshold(26 * DAY, "day", DAY),
    _Threshold(46 * DAY, "month"),
    _Threshold(320 * DAY, "month", MONTH),
    _Threshold(548 * DAY, "year"),
    _Threshold(float("inf"), "year", YEAR),
)

_JUST_NOW_BELOW = 45


def timeago(timestamp: Timestamp, reference: Timestamp | None = None) -> str:
    """Describe ``timestamp`` relative to ``reference`` in coarse English.

    Args:
        timestamp: The event time
        reference: The "now" to compare against. Defaults to ``timestamp``
            itself, which always yields "just now".

    Returns:
        "just now", "in <N> <units>" for future events or "<N> <units> ago"
        for past ones.

    Example:
        >>> timeago(0, 3 * 3600)
        '3 hours ago'
        >>> timeago(86400, 0)
        'in 1 day'
    """
    ts = normalize_timestamp(timestamp)
    ref = ts if reference is None else normalize_timestamp(reference)

    diff = abs(ref - ts)
    if diff < _JUST_NOW_BELOW:
        return "just now"

    threshold = next(t for t in _THRESHOLDS if diff < t.below)
    count = 1 if threshold.divisor is None else round_half_up(diff / threshold.divisor)
    phrase = f"{count} {pluralize(count, threshold.unit)}"
    return f"in {phrase}" if ts > ref else f"{phrase} ago"
