"""
Root Pytest Fixtures.

Shared fixtures available to all tests. No test touches the network: HTTP
traffic goes through `httpx.MockTransport`.
"""

import io
import logging
import os
from collections.abc import Callable, Generator

import httpx
import pytest
from rich.console import Console


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(autouse=True)
def restore_root_logging() -> Generator[None, None, None]:
    """Undo the root handlers installed by setup_logging()."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop MINIHTTP_* variables from the developer's shell."""
    for key in list(os.environ):
        if key.upper().startswith("MINIHTTP_"):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# Consoles
# =============================================================================


@pytest.fixture
def plain_console() -> Console:
    """A wide, colourless console writing into a buffer."""
    return Console(file=io.StringIO(), width=200, color_system=None, force_terminal=False)


@pytest.fixture
def ansi_console() -> Console:
    """A wide truecolor console writing into a buffer."""
    return Console(file=io.StringIO(), width=200, color_system="truecolor", force_terminal=True)


# =============================================================================
# HTTP
# =============================================================================


class RecordingHandler:
    """MockTransport handler that records requests and replays one response."""

    def __init__(self, response: httpx.Response | None = None, error: Exception | None = None):
        self.response = response or httpx.Response(200, text="ok")
        self.error = error
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def recording_handler() -> Callable[..., RecordingHandler]:
    """Factory for RecordingHandler instances."""
    return RecordingHandler
