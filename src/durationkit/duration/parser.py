from __future__ import annotations

import logging
import re
from typing import Any, Union

from ._exceptions import DurationTypeError, ParseError
from ._units import UNITS, WEEKS, Unit, coerce_number
from .duration import Duration, construct

logger = logging.getLogger(__name__)

_NUMBER = r"([0-9]+(?:\.[0-9]+)?)"

_WEEK_RE = re.compile(rf"P{_NUMBER}W")


def _component_pattern() -> re.Pattern[str]:
    parts = [f"(?:{_NUMBER}{u.letter})?" for u in UNITS]
    # The time part must follow ``T``; this is what tells minutes from months.
    date = "".join(parts[: Unit.HOURS])
    time = "".join(parts[Unit.HOURS:])
    return re.compile(rf"P{date}(?:T{time})?")


_COMPONENT_RE = _component_pattern()


def parse(text: str) -> Duration:
    """
    Parse an ISO 8601 duration such as ``P1Y2M3DT4H5M6S`` or ``P3W``.

    A comma is accepted as decimal separator.  Raises ``ParseError`` when the
    text does not match the grammar.
    """
    if not isinstance(text, str):
        raise DurationTypeError(f"Expected a string; got {type(text).__name__}.")
    normalized = text.replace(",", ".")

    week = _WEEK_RE.fullmatch(normalized)
    if week:
        return construct({WEEKS: float(week.group(1))})

    match = _COMPONENT_RE.fullmatch(normalized)
    if match is None:
        logger.debug("Not an ISO 8601 duration: %r", text)
        raise ParseError(text)

    init = {
        unit.key: float(group)
        for unit, group in zip(UNITS, match.groups())
        if group is not None
    }
    return construct(init)


def from_number(value: Any, unit: Union[str, Unit] = "seconds") -> Duration:
    """Duration of ``value`` in a single unit (any component or ``weeks``)."""
    number = coerce_number(value)
    if unit == WEEKS:
        return construct({WEEKS: number})
    return construct({Unit.coerce(unit).key: number})
