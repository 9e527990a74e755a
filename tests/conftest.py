"""Pytest configuration and fixtures."""

from collections.abc import Generator
from typing import Any

import pytest
import structlog
from structlog.testing import capture_logs

from devkit_ddd import DomainEvent


class RecordingEmitter:
    """Emitter that remembers every event it receives, optionally failing on one."""

    def __init__(self, fail_on: int | None = None) -> None:
        self.emitted: list[DomainEvent[Any]] = []
        self.fail_on = fail_on

    def emit(self, event: DomainEvent[Any]) -> None:
        self.emitted.append(event)
        if self.fail_on is not None and len(self.emitted) == self.fail_on:
            raise RuntimeError("emitter is down")


@pytest.fixture
def emitter() -> RecordingEmitter:
    """Emitter that records delivered events."""
    return RecordingEmitter()


@pytest.fixture
def failing_emitter() -> RecordingEmitter:
    """Emitter that fails while delivering the second event."""
    return RecordingEmitter(fail_on=2)


@pytest.fixture
def captured_logs() -> Generator[list[dict[str, Any]], None, None]:
    """Capture structlog entries emitted during the test."""
    with capture_logs() as logs:
        yield logs


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Undo any structlog configuration a test applied."""
    yield
    structlog.reset_defaults()
