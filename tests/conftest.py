"""Shared pytest fixtures for durationkit tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest
from click.testing import CliRunner

from durationkit.config.logging import PACKAGE_LOGGER


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def restore_logging() -> Generator[None, None, None]:
    """Restore the package logger after a test configures logging."""
    pkg = logging.getLogger(PACKAGE_LOGGER)
    handlers, level, propagate = pkg.handlers[:], pkg.level, pkg.propagate
    yield
    pkg.handlers = handlers
    pkg.setLevel(level)
    pkg.propagate = propagate
