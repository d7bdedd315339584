from __future__ import annotations

import logging

import numpy as np

from ._units import THRESHOLDS, UNITS

logger = logging.getLogger(__name__)

_N = len(UNITS)

# Multiplier pushing a fractional remainder into the next smaller unit.
# Zero for months (no fixed number of days) and seconds (smallest unit).
_FRACTION_THRESHOLDS: np.ndarray = np.append(THRESHOLDS[1:], 0.0)
_FRACTION_THRESHOLDS.setflags(write=False)


def _carry_pass(v: np.ndarray) -> None:
    for i in range(_N):
        down = _FRACTION_THRESHOLDS[i]
        if down:
            whole = np.trunc(v[..., i])
            v[..., i + 1] += (v[..., i] - whole) * down
            v[..., i] = whole

        up = THRESHOLDS[i]
        if up:
            over = v[..., i] >= up
            if np.any(over):
                v[..., i - 1] += np.where(over, np.floor_divide(v[..., i], up), 0.0)
                v[..., i] = np.where(over, np.mod(v[..., i], up), v[..., i])


def normalize_components(values: np.ndarray) -> int:
    """
    Normalize component rows in place.

    ``values`` has shape ``(..., 6)`` with columns ordered years..seconds.
    Fractions flow towards smaller units and overflow towards larger ones,
    pass after pass, until nothing changes.  Returns the number of passes
    that changed something.
    """
    if values.shape[-1] != _N:
        raise ValueError(f"Expected trailing dimension of {_N}; got {values.shape}.")

    passes = 0
    while True:
        before = values.copy()
        _carry_pass(values)
        if np.array_equal(before, values):
            break
        passes += 1

    logger.debug("Normalized %d row(s) in %d pass(es)", values.size // _N, passes)
    return passes
