"""Configuration: frozen FetchConfig with environment fallbacks."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import os

import dotenv
import httpx

from awesome.errors import ConfigurationError

TIMEOUT_ENV_VAR = "AWESOME_FETCH_TIMEOUT_S"
BASE_URL_ENV_VAR = "AWESOME_FETCH_BASE_URL"
DEFAULT_TIMEOUT_S = 10.0


def _load_env() -> None:
    """Load a .env file from the working directory without overriding os.environ."""
    path = dotenv.find_dotenv(usecwd=True)
    if path:
        dotenv.load_dotenv(path)


@dataclass(frozen=True)
class FetchConfig:
    """Immutable configuration for ``fetch()``.

    Unset fields are resolved from ``AWESOME_FETCH_TIMEOUT_S`` and
    ``AWESOME_FETCH_BASE_URL``.

    Example:
        config = FetchConfig(base_url="https://api.example.com")
        wrapper = create_wrapper(fetch_config=config)
    """

    timeout_s: float | None = None
    base_url: str | None = None
    #: Sent with every request; per-request headers win on conflict.
    headers: Mapping[str, str] | None = None
    #: Custom transport, e.g. ``httpx.MockTransport`` in tests.
    transport: httpx.AsyncBaseTransport | None = None

    def __post_init__(self) -> None:
        """Resolve environment fallbacks and validate."""
        _load_env()
        if self.timeout_s is None:
            raw = os.environ.get(TIMEOUT_ENV_VAR)
            if raw is None or not raw.strip():
                resolved = DEFAULT_TIMEOUT_S
            else:
                try:
                    resolved = float(raw)
                except ValueError:
                    raise ConfigurationError(
                        f"{TIMEOUT_ENV_VAR} must be a number, got {raw!r}",
                        hint=f"Set {TIMEOUT_ENV_VAR}=10 or pass timeout_s=...",
                    ) from None
            object.__setattr__(self, "timeout_s", resolved)

        if self.timeout_s <= 0:
            raise ConfigurationError(
                f"timeout_s must be > 0, got {self.timeout_s}",
                hint="This bounds how long a single fetch() may take.",
            )

        if self.base_url is None:
            object.__setattr__(self, "base_url", os.environ.get(BASE_URL_ENV_VAR))

    def __str__(self) -> str:
        """Return a developer-friendly representation without headers."""
        return (
            f"FetchConfig(timeout_s={self.timeout_s!r}, base_url={self.base_url!r}, "
            f"headers={'[REDACTED]' if self.headers else None})"
        )

    __repr__ = __str__
