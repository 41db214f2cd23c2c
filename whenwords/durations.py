"""Rendering of second counts as multi-unit duration phrases."""

from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields
from typing import Any

from whenwords.errors import NegativeDurationError
from whenwords.util import DAY, HOUR, MINUTE, MONTH, SECOND, YEAR, pluralize


@dataclass(frozen=True, kw_only=True)
class FormatOptions:
    """Options controlling :func:`duration` output.

    Attributes:
        compact: Use short suffixes ("2h 30m") instead of words
        max_units: Maximum number of non-zero units to display (>= 1)
    """

    compact: bool = False
    max_units: int = 2

    def __post_init__(self) -> None:
        if isinstance(self.max_units, bool) or not isinstance(self.max_units, int):
            raise ValueError(
                f"max_units must be an integer, got {type(self.max_units).__name__!r}"
            )
        if self.max_units < 1:
            raise ValueError(f"max_units must be >= 1, got {self.max_units}")

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "FormatOptions":
        """Build options from a plain mapping, ignoring unrecognized keys."""
        known = {f.name for f in fields(cls)}
        kwargs = {
            key: value
            for key, value in mapping.items()
            if key in known and value is not None
        }
        if "compact" in kwargs:
            kwargs["compact"] = bool(kwargs["compact"])
        return cls(**kwargs)


@dataclass(frozen=True)
class _Unit:
    name: str
    divisor: int
    short_name: str


# Cascade order, largest first
_UNITS: tuple[_Unit, ...] = (
    _Unit("year", YEAR, "y"),
    _Unit("month", MONTH, "mo"),
    _Unit("day", DAY, "d"),
    _Unit("hour", HOUR, "h"),
    _Unit("minute", MINUTE, "m"),
    _Unit("second", SECOND, "s"),
)


def duration(
    seconds: int | float,
    options: FormatOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> str:
    """Format a non-negative number of seconds as a human-readable duration.

    Units are consumed greedily from years down to seconds, skipping zero
    counts, until ``max_units`` parts are emitted. When the cap cuts off a
    remainder of at least half the last emitted unit, that unit is rounded up.

    Args:
        seconds: Duration in seconds
        options: A FormatOptions, a mapping with "compact"/"max_units" keys,
            or None for defaults. Unrecognized keys are ignored.
        **overrides: Option values applied on top of ``options``

    Returns:
        Formatted duration, e.g. "2 hours, 30 minutes" or "2h 30m"

    Raises:
        NegativeDurationError: If seconds is negative

    Example:
        >>> duration(9000)
        '2 hours, 30 minutes'
        >>> duration(9000, compact=True)
        '2h 30m'
        >>> duration(93784, {"max_units": 3})
        '1 day, 2 hours, 3 minutes'
    """
    opts = _resolve_options(options, overrides)
    if seconds < 0:
        raise NegativeDurationError(seconds)

    # (index into _UNITS, count) for each emitted part
    parts: list[tuple[int, int]] = []
    remaining = seconds
    for index, unit in enumerate(_UNITS):
        if len(parts) >= opts.max_units:
            break
        count = int(remaining // unit.divisor)
        if count > 0:
            parts.append((index, count))
            remaining -= count * unit.divisor

    if len(parts) == opts.max_units and remaining > 0:
        index, count = parts[-1]
        if remaining / _UNITS[index].divisor >= 0.5:
            parts[-1] = (index, count + 1)

    if not parts:
        return "0s" if opts.compact else "0 seconds"

    if opts.compact:
        return " ".join(f"{count}{_UNITS[index].short_name}" for index, count in parts)
    return ", ".join(
        f"{count} {pluralize(count, _UNITS[index].name)}" for index, count in parts
    )


def _resolve_options(
    options: FormatOptions | Mapping[str, Any] | None, overrides: Mapping[str, Any]
) -> FormatOptions:
    if options is None:
        resolved = FormatOptions()
    elif isinstance(options, FormatOptions):
        resolved = options
    elif isinstance(options, Mapping):
        resolved = FormatOptions.from_mapping(options)
    else:
        raise TypeError(
            f"options must be FormatOptions, a mapping, or None; "
            f"got {type(options).__name__!r}"
        )
    if overrides:
        resolved = FormatOptions.from_mapping({**asdict(resolved), **overrides})
    return resolved
