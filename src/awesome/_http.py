"""HTTP convenience call composed on top of ``Wrapper.execute_async``.

``request_json`` raises on failure; wrappers turn those faults into results
through the usual classification policy. A non-2xx status is raised as
``ResponseError``, transport failures surface as ``httpx.RequestError``.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from awesome.config import FetchConfig
from awesome.errors import ResponseError
from awesome.options import FetchOptions

logger = logging.getLogger(__name__)

_DEFAULT_HEADERS: dict[str, str] = {"Content-Type": "application/json"}


def _build_headers(config: FetchConfig, fetch_options: FetchOptions) -> dict[str, str]:
    return {
        **_DEFAULT_HEADERS,
        **(config.headers or {}),
        **(fetch_options.headers or {}),
    }


async def request_json(
    url: str,
    fetch_options: FetchOptions | None = None,
    config: FetchConfig | None = None,
) -> Any:
    """Send one request and return the decoded JSON body.

    Returns ``None`` for an empty 2xx body (e.g. 204 No Content). When
    ``fetch_options.response_model`` is set the body is validated into it.

    Raises:
        ResponseError: The server answered with a non-2xx status.
        httpx.RequestError: The request could not be completed.
        pydantic.ValidationError: The body does not match ``response_model``.
    """
    fetch_options = fetch_options or FetchOptions()
    config = config or FetchConfig()
    timeout = fetch_options.timeout_s or config.timeout_s

    client_kwargs: dict[str, Any] = {"timeout": timeout, "transport": config.transport}
    if config.base_url:
        client_kwargs["base_url"] = config.base_url

    async with httpx.AsyncClient(**client_kwargs) as client:
        response = await client.request(
            fetch_options.method,
            url,
            params=dict(fetch_options.params) if fetch_options.params else None,
            json=dict(fetch_options.body) if fetch_options.body is not None else None,
            headers=_build_headers(config, fetch_options),
        )

    logger.debug(
        "%s %s -> %s", fetch_options.method, response.request.url, response.status_code
    )
    if not response.is_success:
        raise ResponseError(
            f"{fetch_options.method} {response.request.url} failed with status "
            f"{response.status_code}",
            hint=response.reason_phrase or None,
            status_code=response.status_code,
            method=fetch_options.method,
            url=str(response.request.url),
        )

    if not response.content:
        return None
    payload = response.json()
    if fetch_options.response_model is not None:
        return fetch_options.response_model.model_validate(payload)
    return payload
