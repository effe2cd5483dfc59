"""Pytest configuration and fixtures.

Provides environment isolation, logging configuration and shared test
doubles. Fixtures here are autouse unless noted.
"""

from __future__ import annotations

from collections.abc import Callable
from contextlib import suppress
from dataclasses import dataclass, field
import json
import logging
import os
from typing import Any

import httpx
import pytest

# =============================================================================
# Test Doubles
# =============================================================================


@dataclass
class RecordingTransport:
    """Builds an ``httpx.MockTransport`` that records every request.

    Responses are produced by ``handler``; the default answers 200 with a
    JSON echo of the method, path, query and body.
    """

    handler: Callable[[httpx.Request], httpx.Response] | None = None
    requests: list[httpx.Request] = field(default_factory=list)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.handler is not None:
            return self.handler(request)
        body = json.loads(request.content) if request.content else None
        return httpx.Response(
            200,
            json={
                "method": request.method,
                "path": request.url.path,
                "query": dict(request.url.params),
                "body": body,
            },
        )

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handle)


@pytest.fixture
def recording_transport() -> RecordingTransport:
    """Return a fresh RecordingTransport (not autouse)."""
    return RecordingTransport()


class Abort(BaseException):  # noqa: N818
    """A fault that is neither an Exception nor a control signal."""


# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    with suppress(Exception):
        monkeypatch.setattr(
            "dotenv.load_dotenv", lambda *_args, **_kwargs: False, raising=False
        )


@pytest.fixture(autouse=True)
def isolate_awesome_env(monkeypatch):
    """Clear AWESOME_* env vars so tests see library defaults."""
    for key in list(os.environ.keys()):
        if key.startswith("AWESOME_"):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def quiet_noisy_libraries():
    """Suppress noisy third-party loggers."""
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


# =============================================================================
# Shared producers
# =============================================================================

MOCK_DATA = "Mock Data"


@pytest.fixture
def message_transform() -> Callable[[Exception], dict[str, Any]]:
    """Transform that keeps only the error message."""
    return lambda err: {"message": str(err)}
