"""awesome: call functions that may raise and get a result back instead.

Public API:
    - execute_sync() / execute_async(): run a producer on the default wrapper
    - fetch(): request a URL and wrap the decoded JSON body
    - create_wrapper(): build a wrapper with its own default Options
    - Success / Failure / Result: the returned values
"""

from __future__ import annotations

import logging

from awesome.config import FetchConfig
from awesome.errors import (
    AwesomeError,
    ConfigurationError,
    InternalError,
    ResponseError,
    UnwrapError,
)
from awesome.options import FetchOptions, Options
from awesome.result import Failure, Result, Success
from awesome.wrapper import Wrapper, create_wrapper

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("awesome-result")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("awesome").addHandler(logging.NullHandler())

#: Process-wide wrapper with no default options.
default_wrapper: Wrapper = create_wrapper()

execute_sync = default_wrapper.execute_sync
execute_async = default_wrapper.execute_async
fetch = default_wrapper.fetch

__all__ = [
    "AwesomeError",
    "ConfigurationError",
    "Failure",
    "FetchConfig",
    "FetchOptions",
    "InternalError",
    "Options",
    "ResponseError",
    "Result",
    "Success",
    "UnwrapError",
    "Wrapper",
    "__version__",
    "create_wrapper",
    "default_wrapper",
    "execute_async",
    "execute_sync",
    "fetch",
]
