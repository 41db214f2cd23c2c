"""Parsing of free-form duration text into seconds.

Two notations are understood:

- Colon notation, ``H:MM`` or ``H:MM:SS`` ("1:30:00" is 5400 seconds)
- Mixed units, any sequence of number/unit pairs with optional
  connectives ("2 hours and 15 minutes", "1h30m", "3 days, 4 hrs")

Text that sits between recognized pairs is ignored, so long as at least one
unit is found.
"""

import re
from typing import Any

from loguru import logger

from whenwords.errors import NegativeDurationError, UnparseableDurationError
from whenwords.util import DAY, HOUR, MINUTE, SECOND, WEEK, YEAR

# Alias -> seconds. Single letters are the ambiguous short forms.
UNIT_ALIASES: dict[str, int] = {
    "years": YEAR, "year": YEAR, "y": YEAR,
    "weeks": WEEK, "week": WEEK, "wks": WEEK, "wk": WEEK, "w": WEEK,
    "days": DAY, "day": DAY, "d": DAY,
    "hours": HOUR, "hour": HOUR, "hrs": HOUR, "hr": HOUR, "h": HOUR,
    "minutes": MINUTE, "minute": MINUTE, "mins": MINUTE, "min": MINUTE, "m": MINUTE,
    "seconds": SECOND, "second": SECOND, "secs": SECOND, "sec": SECOND, "s": SECOND,
}  # fmt: skip

# Longest spellings first so "mins" wins over "m"; the lookahead keeps a
# short form from matching the start of a longer word ("m" in "month").
_UNIT_PATTERN = "|".join(sorted(UNIT_ALIASES, key=lambda alias: (-len(alias), alias)))
_TOKEN_RE = re.compile(rf"(\d+(?:\.\d*)?|\.\d+)\s*({_UNIT_PATTERN})(?![a-z])")

_COLON_RE = re.compile(r"^(\d+):(\d{1,2})(?::(\d{1,2}))?$")
_NEGATIVE_RE = re.compile(r"-\s*\d")
_CONNECTIVE_RE = re.compile(r",\s*and\s*|\s+and\s+|,")


def parse_duration(text: Any) -> int | float:
    """Parse a human-written duration into a number of seconds.

    Args:
        text: Duration text, e.g. "2h 30m", "1:30:00", "2 hours and 15 minutes"

    Returns:
        Total seconds. Fractional inputs ("1.5 hours") may give a float.

    Raises:
        UnparseableDurationError: If the text is empty or has no known unit
        NegativeDurationError: If the text contains a negative number

    Example:
        >>> parse_duration("2h 30m")
        9000
        >>> parse_duration("1:30:00")
        5400
    """
    if not isinstance(text, str):
        raise UnparseableDurationError(
            text, f"expected a string, got {type(text).__name__!r}"
        )
    working = text.strip().lower()
    if not working:
        raise UnparseableDurationError(text, "empty string")
    if _NEGATIVE_RE.search(working):
        raise NegativeDurationError(text)

    colon = _COLON_RE.match(working)
    if colon:
        hours, minutes, seconds = colon.groups(default="0")
        logger.debug("Parsed {!r} as colon notation", text)
        return int(hours) * HOUR + int(minutes) * MINUTE + int(seconds)

    working = _CONNECTIVE_RE.sub(" ", working)

    total: int | float = 0
    found_unit = False
    for match in _TOKEN_RE.finditer(working):
        number, unit = match.groups()
        value = float(number) if "." in number else int(number)
        logger.debug("Matched duration token {} {}", value, unit)
        total += value * UNIT_ALIASES[unit]
        found_unit = True

    if not found_unit:
        raise UnparseableDurationError(text, "no parseable units found")
    return total
