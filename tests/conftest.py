"""Shared fixtures for the test suite."""

from collections.abc import Generator

import pytest
import structlog

from request_outcome.outcome.metrics import OutcomeMetrics
from tests.helpers.observers import RecordingObserver


@pytest.fixture(autouse=True)
def reset_state() -> Generator[None, None, None]:
    """Reset metrics singleton and structlog configuration around each test."""
    OutcomeMetrics.reset()
    structlog.reset_defaults()
    yield
    OutcomeMetrics.reset()
    structlog.reset_defaults()


@pytest.fixture
def observer() -> RecordingObserver:
    """Create a recording observer."""
    return RecordingObserver()
