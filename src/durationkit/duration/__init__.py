# src/durationkit/duration/__init__.py
"""
durationkit.duration
~~~~~~~~~~~~~~~~~~~~

ISO 8601 durations.  A Duration is either a week count (``P3W``) or six
calendar components (``P1Y2M3DT4H5M6S``); the two never mix.

Basic usage::

    from durationkit.duration import parse

    d = parse("PT90S")
    d.normalize()                  # in place → PT1M30S
    str(d + {"hours": 1})          # → 'PT1H1M30S'
    parse("P1D").to_seconds()      # → 86400.0

Public API
----------
Duration                  Base class; ComponentDuration and WeekDuration.
Unit                      The six calendar components, largest first.
construct                 Build a Duration from a mapping of unit names.
parse, from_number        Build a Duration from text or a single number.
normalize_components      Vectorized carry over arrays of shape (..., 6).
DurationError             Base exception for all duration-related errors.
"""

from __future__ import annotations

from durationkit.duration._exceptions import (
    ConflictError,
    DurationError,
    DurationTypeError,
    IncompatibilityError,
    OutOfRangeError,
    ParseError,
    UnknownUnitError,
    UnsupportedOperationError,
)
from durationkit.duration._units import UNITS, WEEKS, Unit
from durationkit.duration.duration import (
    ComponentDuration,
    Duration,
    WeekDuration,
    add,
    construct,
    copy,
    invert,
    normalize,
    reduce_precision,
    render,
    subtract,
    to_seconds,
)
from durationkit.duration.normalize import normalize_components
from durationkit.duration.parser import from_number, parse

__all__ = [
    "ComponentDuration",
    "ConflictError",
    "Duration",
    "DurationError",
    "DurationTypeError",
    "IncompatibilityError",
    "OutOfRangeError",
    "ParseError",
    "UNITS",
    "Unit",
    "UnknownUnitError",
    "UnsupportedOperationError",
    "WEEKS",
    "WeekDuration",
    "add",
    "construct",
    "copy",
    "from_number",
    "invert",
    "normalize",
    "normalize_components",
    "parse",
    "reduce_precision",
    "render",
    "subtract",
    "to_seconds",
]
