"""Result primitives returned by every execution entry point.

A result is either a ``Success`` carrying the producer's value or a
``Failure`` carrying the normalized error. The variant is authoritative:
``Success(None)`` is a success even though its ``data`` is ``None``.
"""

from __future__ import annotations

import dataclasses
import typing

from awesome.errors import UnwrapError

T = typing.TypeVar("T")


@dataclasses.dataclass(frozen=True, slots=True)
class Success(typing.Generic[T]):
    """A completed call and its value."""

    data: T

    @property
    def error(self) -> None:
        return None

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.data

    def to_dict(self) -> dict[str, typing.Any]:
        return {"data": self.data, "error": None}


@dataclasses.dataclass(frozen=True, slots=True)
class Failure:
    """A faulted call and its normalized error."""

    error: typing.Any

    @property
    def data(self) -> None:
        return None

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def is_err(self) -> bool:
        return True

    def unwrap(self) -> typing.NoReturn:
        """Raise the stored error, or ``UnwrapError`` if it is not an exception."""
        if isinstance(self.error, BaseException):
            raise self.error
        raise UnwrapError(self.error)

    def to_dict(self) -> dict[str, typing.Any]:
        return {"data": None, "error": self.error}


Result = Success[T] | Failure
