"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest
import structlog
from structlog.testing import LogCapture


@pytest.fixture
def log_output() -> Iterator[LogCapture]:
    """Capture structlog events emitted during a test."""
    capture = LogCapture()
    structlog.configure(processors=[capture])
    yield capture
    structlog.reset_defaults()


@pytest.fixture
def nan() -> float:
    """A quiet NaN."""
    return float("nan")


@pytest.fixture
def inf() -> float:
    """Positive infinity."""
    return float("inf")
