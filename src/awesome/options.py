"""Per-call and per-wrapper options."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Literal

from pydantic import BaseModel

from awesome.errors import ConfigurationError

#: Maps a recognized fault to the value stored in ``Failure.error``.
Transform = Callable[[Exception], Any]

HTTPMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]
_HTTP_METHODS: frozenset[str] = frozenset(
    {"GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"}
)


@dataclass(frozen=True)
class Options:
    """Error-normalization options.

    Passed per call, or bound as the default of a wrapper. A per-call value
    replaces the bound default as a whole; fields are never merged.
    """

    #: Applied to recognized faults only. Must not raise.
    transform: Transform | None = None

    def __post_init__(self) -> None:
        """Validate option shapes early for clear errors."""
        if self.transform is not None and not callable(self.transform):
            raise ConfigurationError(
                "transform must be callable",
                hint="Pass transform=lambda err: {'message': str(err)}.",
            )


@dataclass(frozen=True)
class FetchOptions:
    """Request shape for ``fetch()``."""

    method: HTTPMethod = "GET"
    headers: Mapping[str, str] | None = None
    #: JSON-encoded into the request body when set.
    body: Mapping[str, Any] | None = None
    #: Appended to the URL as a query string.
    params: Mapping[str, str] | None = None
    #: Overrides ``FetchConfig.timeout_s`` for this request.
    timeout_s: float | None = None
    #: Pydantic ``BaseModel`` subclass the JSON body is validated into.
    response_model: type[BaseModel] | None = None

    def __post_init__(self) -> None:
        """Validate option shapes early for clear errors."""
        if self.method not in _HTTP_METHODS:
            raise ConfigurationError(
                f"Unknown HTTP method: {self.method!r}",
                hint=f"Supported methods: {', '.join(sorted(_HTTP_METHODS))}",
            )
        if self.body is not None and not isinstance(self.body, Mapping):
            raise ConfigurationError(
                "body must be a mapping",
                hint="Pass body={'key': 'value'}; it is sent as JSON.",
            )
        if self.timeout_s is not None and self.timeout_s <= 0:
            raise ConfigurationError(
                f"timeout_s must be > 0, got {self.timeout_s}",
            )
        if self.response_model is not None and not (
            isinstance(self.response_model, type)
            and issubclass(self.response_model, BaseModel)
        ):
            raise ConfigurationError(
                "response_model must be a Pydantic model class",
                hint="Pass a BaseModel subclass, e.g. response_model=User.",
            )
