"""Utility constants for whenwords.

Time unit constants represent durations in seconds. Months and years are
fixed-length approximations (30 and 365 days), never calendar-accurate.
"""

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800
MONTH = 2592000
YEAR = 31536000


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 going up (2.5 -> 3)."""
    return int(value + 0.5) if value >= 0 else -int(-value + 0.5)


def pluralize(count: int | float, unit: str) -> str:
    """Return ``unit`` with a trailing "s" unless ``count`` is exactly 1."""
    return unit if count == 1 else f"{unit}s"
