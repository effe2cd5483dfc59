"""Exception hierarchy for awesome."""

from __future__ import annotations

INTERNAL_ERROR_MESSAGE = "internal error"


class AwesomeError(Exception):
    """Base exception for all awesome errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(AwesomeError):
    """Options or configuration validation failed."""


class InternalError(AwesomeError):
    """Stand-in for a fault that is not an ``Exception``.

    The original fault is attached as ``__cause__`` by the normalizer.
    """

    def __init__(
        self, message: str = INTERNAL_ERROR_MESSAGE, *, hint: str | None = None
    ) -> None:
        super().__init__(message, hint=hint)


class ResponseError(AwesomeError):
    """HTTP request completed with a non-2xx status."""

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        status_code: int | None = None,
        method: str | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.status_code = status_code
        self.method = method
        self.url = url


class UnwrapError(AwesomeError):
    """``unwrap()`` was called on a failure whose error is not an exception."""

    def __init__(self, error: object) -> None:
        super().__init__(
            f"called unwrap() on a failure: {error!r}",
            hint="Check result.is_err before unwrapping.",
        )
        self.error = error
