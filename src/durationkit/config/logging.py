"""Logging setup for the durationkit command line.

Library modules log through ``logging.getLogger(__name__)`` and never
configure anything themselves.  The CLI calls ``configure_logging`` once per
invocation, which installs one structlog-formatted handler on the
``durationkit`` logger: console lines by default, JSON lines with
``--log-json``.  Handlers owned by the host application are left alone.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

import structlog
from structlog.types import Processor

PACKAGE_LOGGER = "durationkit"

_HANDLER_NAME = "durationkit.cli"


def _pre_chain() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]


def _renderer(log_json: bool, stream: TextIO) -> Processor:
    if log_json:
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=stream.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Handler:
    """Send ``durationkit`` log records to *stream* (stderr by default).

    Args:
        verbose: DEBUG for the package loggers; otherwise WARNING and above.
        log_json: One JSON object per line instead of console lines.
        stream: Destination; resolved to the current ``sys.stderr`` when None.

    Returns:
        The installed handler.  Calling again replaces it rather than
        stacking a second one.
    """
    stream = sys.stderr if stream is None else stream
    pre_chain = _pre_chain()

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(stream)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json, stream),
            ],
        )
    )

    package = logging.getLogger(PACKAGE_LOGGER)
    for old in [h for h in package.handlers if h.get_name() == _HANDLER_NAME]:
        package.removeHandler(old)
    package.addHandler(handler)
    package.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package.propagate = False
    return handler
