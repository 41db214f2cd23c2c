"""whenwords - human-readable dates, relative times and durations.

All functions are pure: callers always pass the reference "now" explicitly
and all calendar math is done in UTC.
"""

from loguru import logger

from .dates import date_range, human_date
from .durations import FormatOptions, duration
from .errors import (
    InvalidTimestampError,
    NegativeDurationError,
    UnparseableDurationError,
    WhenwordsError,
)
from .parsing import parse_duration
from .relative import timeago
from .timestamps import Timestamp, normalize_timestamp

# Silent unless an application opts in with logger.enable("whenwords")
logger.disable(__name__)

__all__ = [
    "Timestamp",
    "FormatOptions",
    "normalize_timestamp",
    "timeago",
    "duration",
    "parse_duration",
    "human_date",
    "date_range",
    "WhenwordsError",
    "InvalidTimestampError",
    "NegativeDurationError",
    "UnparseableDurationError",
]
