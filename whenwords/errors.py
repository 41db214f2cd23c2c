"""Exception hierarchy for whenwords conversions."""

from typing import Any


class WhenwordsError(ValueError):
    """Base exception for all conversion errors raised by whenwords."""


class InvalidTimestampError(WhenwordsError):
    """Raised when a value cannot be normalized to epoch seconds."""

    def __init__(self, value: Any, reason: str = "") -> None:
        message = f"Invalid timestamp format: {value!r}"
        if reason:
            message = f"{message}\n{reason}"
        super().__init__(message)
        self.value: Any = value


class NegativeDurationError(WhenwordsError):
    """Raised when a duration is negative."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Negative durations are not allowed: {value!r}")
        self.value: Any = value


class UnparseableDurationError(WhenwordsError):
    """Raised when duration text is empty or contains no recognizable unit."""

    def __init__(self, text: Any, reason: str) -> None:
        super().__init__(f"Cannot parse duration {text!r}: {reason}")
        self.text: Any = text
