"""durationkit: ISO 8601 durations with calendar-aware arithmetic."""

from __future__ import annotations

from durationkit.calendar import apply_to_date, subtract_from_date
from durationkit.duration import (
    ComponentDuration,
    ConflictError,
    Duration,
    DurationError,
    DurationTypeError,
    IncompatibilityError,
    OutOfRangeError,
    ParseError,
    Unit,
    UnknownUnitError,
    UnsupportedOperationError,
    WeekDuration,
    add,
    construct,
    copy,
    from_number,
    invert,
    normalize,
    parse,
    reduce_precision,
    render,
    subtract,
    to_seconds,
)

__version__ = "0.1.0"

__all__ = [
    "ComponentDuration",
    "ConflictError",
    "Duration",
    "DurationError",
    "DurationTypeError",
    "IncompatibilityError",
    "OutOfRangeError",
    "ParseError",
    "Unit",
    "UnknownUnitError",
    "UnsupportedOperationError",
    "WeekDuration",
    "__version__",
    "add",
    "apply_to_date",
    "construct",
    "copy",
    "from_number",
    "invert",
    "normalize",
    "parse",
    "reduce_precision",
    "render",
    "subtract",
    "subtract_from_date",
    "to_seconds",
]
