# src/durationkit/calendar/__init__.py
"""
durationkit.calendar
~~~~~~~~~~~~~~~~~~~~

Calendar application of durations: add or subtract a component duration to
UTC timestamps, resolving month and year overflow the way calendar fields do.

Basic usage::

    from datetime import datetime
    from durationkit.calendar import apply_to_date
    from durationkit.duration import parse

    apply_to_date(parse("P1D"), datetime(2024, 1, 31))   # → 2024-02-01 00:00

NumPy ``datetime64`` arrays are accepted everywhere a scalar is::

    import numpy as np
    dates = np.array(["2024-01-31", "2024-02-29"], dtype="datetime64[us]")
    apply_to_date(parse("P1Y"), dates)

Public API
----------
apply_to_date        Add a duration to a timestamp.
subtract_from_date   Subtract a duration from a timestamp.
"""

from __future__ import annotations

from durationkit.calendar.calendar import DateLike, apply_to_date, subtract_from_date

__all__ = [
    "DateLike",
    "apply_to_date",
    "subtract_from_date",
]
