"""Fault classification and normalization.

Every fault caught by a wrapper passes through ``normalize_fault``:

- an ``Exception`` is a recognized error; it is handed to the configured
  transform, or stored unchanged when there is none;
- any other ``BaseException`` is unrecognized and replaced by an
  ``InternalError`` with a fixed message, whatever the transform.

``KeyboardInterrupt``, ``SystemExit``, ``GeneratorExit`` and
``asyncio.CancelledError`` control the process, task or coroutine. They are
never treated as faults, and neither is an exception group carrying one of
them.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from awesome.errors import InternalError
from awesome.result import Failure

if TYPE_CHECKING:
    from awesome.options import Transform

logger = logging.getLogger(__name__)

#: Re-raised by the wrappers instead of being captured.
CONTROL_SIGNALS: tuple[type[BaseException], ...] = (
    KeyboardInterrupt,
    SystemExit,
    GeneratorExit,
    asyncio.CancelledError,
)


def is_recognized_fault(fault: BaseException) -> bool:
    """Return True when *fault* is an error object a transform can inspect."""
    return isinstance(fault, Exception)


def is_control_signal(fault: BaseException) -> bool:
    """Return True for a control signal, or a group carrying at least one."""
    if isinstance(fault, BaseExceptionGroup):
        match, _ = fault.split(CONTROL_SIGNALS)
        return match is not None
    return isinstance(fault, CONTROL_SIGNALS)


def normalize_fault(fault: BaseException, transform: Transform | None = None) -> Any:
    """Return the value stored in ``Failure.error`` for *fault*."""
    if is_recognized_fault(fault):
        if transform is None:
            return fault
        return transform(fault)

    logger.debug("Normalizing unrecognized fault %s", type(fault).__name__)
    internal = InternalError()
    internal.__cause__ = fault
    return internal


def failure_from(fault: BaseException, transform: Transform | None = None) -> Failure:
    return Failure(normalize_fault(fault, transform))
