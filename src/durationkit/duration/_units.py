from __future__ import annotations

import math
from enum import IntEnum
from numbers import Real
from typing import Any

import numpy as np

from ._exceptions import DurationTypeError, UnknownUnitError


class Unit(IntEnum):
    """Calendar components, largest first. The value is the storage index."""

    YEARS = 0
    MONTHS = 1
    DAYS = 2
    HOURS = 3
    MINUTES = 4
    SECONDS = 5

    @property
    def key(self) -> str:
        return self.name.lower()

    @property
    def letter(self) -> str:
        return self.name[0]

    @property
    def threshold(self) -> int:
        """How many of this unit make one of the next larger unit (0 = none)."""
        return int(THRESHOLDS[self])

    @classmethod
    def coerce(cls, unit: str | Unit) -> Unit:
        if isinstance(unit, Unit):
            return unit
        if isinstance(unit, str):
            member = _BY_KEY.get(unit)
            if member is not None:
                return member
        raise UnknownUnitError(unit)


WEEKS = "weeks"

UNITS: tuple[Unit, ...] = tuple(Unit)
UNIT_KEYS: tuple[str, ...] = tuple(u.key for u in UNITS)
_BY_KEY: dict[str, Unit] = {u.key: u for u in UNITS}

# months→years 12, hours→days 24, minutes→hours 60, seconds→minutes 60.
# Days have no fixed length in months.
THRESHOLDS: np.ndarray = np.array([0, 12, 0, 24, 60, 60], dtype=np.float64)
THRESHOLDS.setflags(write=False)

SECONDS_PER_WEEK: int = 7 * 24 * 60 * 60


def coerce_number(value: Any, name: str = "value") -> float:
    """Coerce *value* to a finite float or raise DurationTypeError."""
    if isinstance(value, (Real, np.number, np.bool_, str)):
        try:
            number = float(value)
        except (TypeError, ValueError):
            raise DurationTypeError(f"{name!r} is not a number: {value!r}") from None
    else:
        raise DurationTypeError(f"{name!r} is not a number: {value!r}")
    if not math.isfinite(number):
        raise DurationTypeError(f"{name!r} must be finite; got {value!r}")
    return number
