from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Optional, Union

import numpy as np

from ._exceptions import (
    ConflictError,
    DurationTypeError,
    IncompatibilityError,
    OutOfRangeError,
)
from ._units import SECONDS_PER_WEEK, UNIT_KEYS, UNITS, WEEKS, Unit, coerce_number
from .normalize import normalize_components

if TYPE_CHECKING:
    from durationkit.calendar.calendar import DateLike

DurationLike = Union["Duration", Mapping[str, Any]]

_TIME_UNITS = (Unit.HOURS, Unit.MINUTES, Unit.SECONDS)


def _format_number(value: float) -> str:
    # + 0.0 folds negative zero into zero
    return np.format_float_positional(float(value) + 0.0, trim="-")


class Duration:
    """
    An ISO 8601 duration: either a week count (``WeekDuration``) or six
    calendar components (``ComponentDuration``), never both.

    Build instances with ``construct``, ``parse`` or ``from_number``.
    """

    __slots__ = ()
    __hash__ = None  # type: ignore[assignment]

    # ── shape ────────────────────────────────────────────────────────────

    def as_dict(self) -> dict[str, float]:
        raise NotImplementedError

    def copy(self) -> Duration:
        return construct(self.as_dict())

    __copy__ = copy

    def __deepcopy__(self, memo: dict[int, Any]) -> Duration:
        return self.copy()

    # ── normalization ────────────────────────────────────────────────────

    def normalize(self) -> None:
        """Normalize in place.  The only operation that mutates a Duration."""

    def normalized(self) -> Duration:
        clone = self.copy()
        clone.normalize()
        return clone

    # ── arithmetic ───────────────────────────────────────────────────────

    def invert(self) -> Duration:
        return construct({k: -v for k, v in self.as_dict().items()})

    def add(self, other: DurationLike) -> Duration:
        raise NotImplementedError

    def subtract(self, other: DurationLike) -> Duration:
        return self.add({k: -v for k, v in _fields_of(other).items()})

    def reduce_precision(self, to: Union[str, Unit]) -> Duration:
        raise NotImplementedError

    def to_seconds(self) -> float:
        raise NotImplementedError

    def apply_to_date(self, date: DateLike) -> DateLike:
        from durationkit.calendar import apply_to_date

        return apply_to_date(self, date)

    def subtract_from_date(self, date: DateLike) -> DateLike:
        from durationkit.calendar import subtract_from_date

        return subtract_from_date(self, date)

    def __neg__(self) -> Duration:
        return self.invert()

    def __add__(self, other: Any) -> Duration:
        if not isinstance(other, (Duration, Mapping)):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> Duration:
        if not isinstance(other, (Duration, Mapping)):
            return NotImplemented
        return self.subtract(other)

    def __float__(self) -> float:
        return self.to_seconds()

    # ── rendering ────────────────────────────────────────────────────────

    def render(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Duration({self.render()})"


class WeekDuration(Duration):

    __slots__ = ("_weeks",)

    def __init__(self, weeks: float) -> None:
        self._weeks = float(weeks)

    @property
    def weeks(self) -> float:
        return self._weeks

    def as_dict(self) -> dict[str, float]:
        return {WEEKS: self._weeks}

    def add(self, other: DurationLike) -> Duration:
        fields = _fields_of(other)
        if WEEKS in fields:
            return construct({WEEKS: self._weeks + fields[WEEKS]})
        if fields:
            raise IncompatibilityError(
                f"Cannot add components {sorted(fields)} to a week duration."
            )
        return self.copy()

    def reduce_precision(self, to: Union[str, Unit]) -> Duration:
        unit = Unit.coerce(to)
        # Weeks cannot be expressed in years or months.
        if unit in (Unit.YEARS, Unit.MONTHS):
            return construct({})
        return self.copy()

    def to_seconds(self) -> float:
        return self._weeks * SECONDS_PER_WEEK

    def render(self) -> str:
        return f"P{_format_number(self._weeks)}W"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WeekDuration):
            return NotImplemented
        return self._weeks == other._weeks


class ComponentDuration(Duration):

    __slots__ = ("_values",)

    def __init__(self, values: np.ndarray) -> None:
        self._values: np.ndarray = np.array(values, dtype=np.float64).reshape(len(UNITS))

    def __getitem__(self, unit: Union[str, Unit]) -> float:
        return float(self._values[Unit.coerce(unit)])

    @property
    def years(self) -> float:
        return float(self._values[Unit.YEARS])

    @property
    def months(self) -> float:
        return float(self._values[Unit.MONTHS])

    @property
    def days(self) -> float:
        return float(self._values[Unit.DAYS])

    @property
    def hours(self) -> float:
        return float(self._values[Unit.HOURS])

    @property
    def minutes(self) -> float:
        return float(self._values[Unit.MINUTES])

    @property
    def seconds(self) -> float:
        return float(self._values[Unit.SECONDS])

    @property
    def values(self) -> np.ndarray:
        """Read-only view of the components, ordered years..seconds."""
        view = self._values.view()
        view.setflags(write=False)
        return view

    def as_dict(self) -> dict[str, float]:
        return {u.key: float(self._values[u]) for u in UNITS}

    def normalize(self) -> None:
        normalize_components(self._values)

    def add(self, other: DurationLike) -> Duration:
        # A weeks field has no component counterpart and is ignored.
        fields = _fields_of(other)
        return construct({
            u.key: float(self._values[u]) + fields.get(u.key, 0.0) for u in UNITS
        })

    def reduce_precision(self, to: Union[str, Unit]) -> Duration:
        unit = Unit.coerce(to)
        return construct({u.key: float(self._values[u]) for u in UNITS[: unit + 1]})

    def to_seconds(self) -> float:
        if self._values[Unit.YEARS] or self._values[Unit.MONTHS]:
            raise OutOfRangeError(
                "Only durations without years or months convert to seconds; "
                f"got {self.render()}."
            )
        days, hours, minutes, seconds = (float(v) for v in self._values[Unit.DAYS:])
        return ((days * 24 + hours) * 60 + minutes) * 60 + seconds

    def render(self) -> str:
        def part(unit: Unit) -> str:
            value = self._values[unit]
            return f"{_format_number(value)}{unit.letter}" if value else ""

        date = "".join(part(u) for u in UNITS[: Unit.HOURS])
        time = "".join(part(u) for u in _TIME_UNITS)
        if not date and not time:
            return "PT0S"
        return f"P{date}T{time}" if time else f"P{date}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComponentDuration):
            return NotImplemented
        return bool(np.array_equal(self._values, other._values))


# ── construction ─────────────────────────────────────────────────────────────

def construct(init: Optional[Mapping[str, Any]] = None, **fields: Any) -> Duration:
    """
    Build a Duration from a mapping of unit names to numbers.

    A ``weeks`` key yields a ``WeekDuration`` and may not be combined with
    any component.  Otherwise missing components default to 0.  Unknown keys
    are ignored.
    """
    merged: dict[str, Any] = dict(init) if init is not None else {}
    merged.update(fields)

    if WEEKS in merged:
        conflicts = [k for k in UNIT_KEYS if k in merged]
        if conflicts:
            raise ConflictError(
                f"A duration cannot contain both 'weeks' and {conflicts}."
            )
        return WeekDuration(coerce_number(merged[WEEKS], WEEKS))

    values = np.zeros(len(UNITS), dtype=np.float64)
    for unit in UNITS:
        if unit.key in merged:
            values[unit] = coerce_number(merged[unit.key], unit.key)
    return ComponentDuration(values)


def _fields_of(other: DurationLike) -> dict[str, float]:
    """Fields carried by a duration or duration-like mapping, coerced to floats."""
    if isinstance(other, Duration):
        return other.as_dict()
    if not isinstance(other, Mapping):
        raise DurationTypeError(
            f"Expected a Duration or a mapping of units; got {type(other).__name__}."
        )
    return {
        key: coerce_number(other[key], key)
        for key in (*UNIT_KEYS, WEEKS)
        if key in other
    }


# ── functional API ───────────────────────────────────────────────────────────

def render(d: Duration) -> str:
    return d.render()


def to_seconds(d: Duration) -> float:
    return d.to_seconds()


def copy(d: Duration) -> Duration:
    return d.copy()


def normalize(d: Duration) -> None:
    d.normalize()


def invert(d: Duration) -> Duration:
    return d.invert()


def add(a: Duration, b: DurationLike) -> Duration:
    return a.add(b)


def subtract(a: Duration, b: DurationLike) -> Duration:
    return a.subtract(b)


def reduce_precision(d: Duration, to: Union[str, Unit]) -> Duration:
    return d.reduce_precision(to)
