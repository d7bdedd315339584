from __future__ import annotations


class DurationError(Exception):
    """Base class for all duration-related errors."""


class DurationTypeError(DurationError, TypeError):
    """A value that must be numeric (or a duration) is not."""


class ConflictError(DurationError, ValueError):
    """``weeks`` was combined with calendar components."""


class ParseError(DurationError, ValueError):
    """Text is not a valid ISO 8601 duration."""

    def __init__(self, text: str) -> None:
        super().__init__(f"{text!r} is not a valid ISO 8601 duration")
        self.text = text


class UnknownUnitError(DurationError, ValueError):
    def __init__(self, unit: object) -> None:
        super().__init__(f"Unknown unit: {unit!r}")
        self.unit = unit


class IncompatibilityError(DurationError, TypeError):
    """Week and component durations cannot be added together."""


class OutOfRangeError(DurationError, ValueError):
    """Years and months have no fixed length in seconds."""


class UnsupportedOperationError(DurationError, NotImplementedError):
    pass
