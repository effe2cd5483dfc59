"""Public surface tests: the default wrapper and module-level entry points."""

from __future__ import annotations

import importlib
import logging

import pytest

import awesome
from awesome import Failure, Success, Wrapper
from tests.conftest import MOCK_DATA

pytestmark = pytest.mark.unit


def test_default_wrapper_has_no_default_options() -> None:
    assert isinstance(awesome.default_wrapper, Wrapper)
    assert awesome.default_wrapper.default_options is None
    assert awesome.default_wrapper.fetch_config is None


def test_module_level_entry_points_share_default_wrapper() -> None:
    assert awesome.execute_sync.__self__ is awesome.default_wrapper
    assert awesome.execute_async.__self__ is awesome.default_wrapper
    assert awesome.fetch.__self__ is awesome.default_wrapper


def test_module_level_execute_sync() -> None:
    assert awesome.execute_sync(lambda: MOCK_DATA) == Success(MOCK_DATA)


@pytest.mark.asyncio
async def test_module_level_execute_async_scenarios() -> None:
    async def ok() -> str:
        return MOCK_DATA

    async def bad() -> str:
        raise RuntimeError("Async Error")

    assert await awesome.execute_async(ok) == Success(MOCK_DATA)
    result = await awesome.execute_async(
        bad, awesome.Options(transform=lambda e: {"message": str(e)})
    )
    assert result == Failure({"message": "Async Error"})


def test_wrapper_is_immutable() -> None:
    with pytest.raises(AttributeError):
        awesome.default_wrapper.default_options = awesome.Options()  # type: ignore[misc]


def test_library_logger_has_null_handler() -> None:
    handlers = logging.getLogger("awesome").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)


def test_version_is_a_string() -> None:
    assert isinstance(awesome.__version__, str)


def test_all_names_resolve() -> None:
    for name in awesome.__all__:
        assert hasattr(awesome, name), name


def test_http_submodule_stays_importable_beside_fetch_entry_point() -> None:
    module = importlib.import_module("awesome._http")

    assert callable(module.request_json)
    assert awesome.fetch is not module
