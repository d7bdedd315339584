from __future__ import annotations

from datetime import datetime, timezone
from typing import Union

import numpy as np

from durationkit.duration import ComponentDuration, Duration, Unit, UnsupportedOperationError

DateLike = Union[datetime, "np.datetime64", "np.ndarray"]

# Sub-month steps; months and years go through the month index so that
# day-of-month overflow rolls into the next month.
_SPANS: dict[Unit, np.timedelta64] = {
    Unit.DAYS: np.timedelta64(1, "D"),
    Unit.HOURS: np.timedelta64(1, "h"),
    Unit.MINUTES: np.timedelta64(1, "m"),
}

# Each field is read relative to the start of the next coarser one.
_COARSER = {Unit.HOURS: "datetime64[D]", Unit.MINUTES: "datetime64[h]"}


def _to_array(date: DateLike) -> tuple[np.ndarray, str]:
    """UTC ``datetime64[us]`` array plus a tag telling how to convert back."""
    if isinstance(date, datetime):
        if date.tzinfo is None:
            return np.atleast_1d(np.datetime64(date, "us")), "naive"
        utc = date.astimezone(timezone.utc).replace(tzinfo=None)
        return np.atleast_1d(np.datetime64(utc, "us")), "aware"
    if isinstance(date, np.datetime64):
        return np.atleast_1d(date.astype("datetime64[us]")), "datetime64"
    return np.asarray(date).astype("datetime64[us]"), "array"


def _from_array(arr: np.ndarray, kind: str) -> DateLike:
    if kind == "array":
        return arr
    value = arr.reshape(-1)[0]
    if kind == "datetime64":
        return value
    result: datetime = value.astype(datetime)
    if kind == "aware":
        return result.replace(tzinfo=timezone.utc)
    return result


def _shift_months(arr: np.ndarray, months: np.ndarray) -> np.ndarray:
    month_start = arr.astype("datetime64[M]")
    offset = arr - month_start.astype("datetime64[us]")
    shifted = month_start + months.astype("timedelta64[M]")
    return shifted.astype("datetime64[us]") + offset


def _field(arr: np.ndarray, unit: Unit) -> np.ndarray:
    """Calendar field of each timestamp: year, month 0-11, day 1-31, hour or minute."""
    if unit is Unit.YEARS:
        return arr.astype("datetime64[Y]").astype(np.int64) + 1970
    if unit is Unit.MONTHS:
        return arr.astype("datetime64[M]").astype(np.int64) % 12
    if unit is Unit.DAYS:
        days = arr.astype("datetime64[D]") - arr.astype("datetime64[M]")
        return days.astype(np.int64) + 1
    return (arr - arr.astype(_COARSER[unit])) // _SPANS[unit]


def _steps(arr: np.ndarray, unit: Unit, value: float) -> np.ndarray:
    # The field is set to trunc(field + value), so a fraction truncates the
    # sum rather than the value itself.
    current = _field(arr, unit)
    return (np.trunc(current + value) - current).astype(np.int64)


def _apply(values: np.ndarray, arr: np.ndarray) -> np.ndarray:
    for unit in Unit:
        value = float(values[unit])
        if not value:
            continue
        if unit is Unit.YEARS:
            arr = _shift_months(arr, _steps(arr, unit, value) * 12)
        elif unit is Unit.MONTHS:
            arr = _shift_months(arr, _steps(arr, unit, value))
        elif unit is Unit.SECONDS:
            # half-millisecond ties round up
            millis = int(np.floor(value * 1000 + 0.5))
            arr = arr + np.timedelta64(millis, "ms")
        else:
            arr = arr + _SPANS[unit] * _steps(arr, unit, value)
    return arr


def apply_to_date(duration: Duration, date: DateLike) -> DateLike:
    """
    Add ``duration`` to a UTC timestamp.

    Components are applied largest first.  Years and months move the month
    index and keep the day-of-month, so overflow rolls forward the way
    calendar fields do (2024-01-31 + P1M is 2024-03-02).  A fractional
    field moves the date's own field to ``trunc(field + value)``, so
    05:00 - PT1.5H is 03:00.  Seconds are applied with millisecond
    precision.

    ``date`` may be a ``datetime`` (naive values are taken as UTC), a
    ``numpy.datetime64`` or an array of them; the result has the same kind.
    The input is never modified.
    """
    if not isinstance(duration, ComponentDuration):
        raise UnsupportedOperationError(
            f"Applying {duration!r} to a date is not supported; "
            "only component durations have calendar semantics."
        )
    arr, kind = _to_array(date)
    return _from_array(_apply(duration.values, arr), kind)


def subtract_from_date(duration: Duration, date: DateLike) -> DateLike:
    """Subtract ``duration`` from a UTC timestamp (see ``apply_to_date``)."""
    return apply_to_date(duration.invert(), date)
