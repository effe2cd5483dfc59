"""Wrapper instances: call a producer, catch its fault, return a result.

Options resolution is whole-value: an ``options`` argument passed to an
entry point replaces the wrapper's bound default entirely, even when it
carries no transform. Without either, recognized faults pass through as-is.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeVar

from awesome._dev_flags import dev_validate_enabled
from awesome._validation import _require_zero_arg_callable
from awesome._http import request_json
from awesome.normalize import failure_from, is_control_signal
from awesome.result import Result, Success

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from awesome.config import FetchConfig
    from awesome.options import FetchOptions, Options, Transform

T = TypeVar("T")


@dataclass(frozen=True)
class Wrapper:
    """A sync and an async entry point sharing a default ``Options``.

    Holds no mutable state, so one instance can serve concurrent callers.

    Example:
        wrapper = create_wrapper(Options(transform=lambda e: {"message": str(e)}))
        result = wrapper.execute_sync(lambda: int("x"))
        # Failure(error={'message': "invalid literal for int() ..."})
    """

    default_options: Options | None = None
    #: Used by ``fetch()``; resolved from the environment per call when *None*.
    fetch_config: FetchConfig | None = None

    def resolve_transform(self, options: Options | None = None) -> Transform | None:
        """Return the transform in effect for a call given its *options*."""
        effective = options if options is not None else self.default_options
        if effective is None:
            return None
        return effective.transform

    def execute_sync(
        self, producer: Callable[[], T], options: Options | None = None
    ) -> Result[T]:
        """Call *producer* once and wrap its value or fault."""
        transform = self.resolve_transform(options)
        try:
            if dev_validate_enabled():
                _require_zero_arg_callable(producer, "producer")
            data = producer()
        except BaseException as exc:
            if is_control_signal(exc):
                raise
            return failure_from(exc, transform)
        return Success(data)

    async def execute_async(
        self, producer: Callable[[], Awaitable[T]], options: Options | None = None
    ) -> Result[T]:
        """Call *producer* once, await its completion and wrap the outcome."""
        transform = self.resolve_transform(options)
        try:
            if dev_validate_enabled():
                _require_zero_arg_callable(producer, "producer")
            data = await producer()
        except BaseException as exc:
            if is_control_signal(exc):
                raise
            return failure_from(exc, transform)
        return Success(data)

    async def fetch(
        self,
        url: str,
        fetch_options: FetchOptions | None = None,
        options: Options | None = None,
    ) -> Result[Any]:
        """Request *url* and wrap the decoded JSON body.

        A non-2xx status becomes a fault and follows the same classification
        as any other producer fault.
        """
        return await self.execute_async(
            lambda: request_json(url, fetch_options, self.fetch_config), options
        )


def create_wrapper(
    default_options: Options | None = None,
    *,
    fetch_config: FetchConfig | None = None,
) -> Wrapper:
    """Create a wrapper bound to *default_options* (held by reference)."""
    return Wrapper(default_options=default_options, fetch_config=fetch_config)
