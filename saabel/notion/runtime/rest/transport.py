"""REST transport: one HTTP exchange mapped onto the library's error taxonomy."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from ...core.exceptions import APIError, NetworkError, ResponseDecodeError
from ..retry.rate_limit import RateLimitState
from .http_client import HTTPClient, HTTPResponse, ResponseHook

logger = logging.getLogger(__name__)


def _query_value(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def _clean_query(params: dict[str, Any] | None) -> dict[str, Any] | None:
    if not params:
        return None
    return {k: _query_value(v) for k, v in params.items() if v is not None}


def rate_limit_hook(response: aiohttp.ClientResponse) -> float | None:
    """Throttle once the window is spent on a successful response.

    429 responses are left to the retry engine, which already waits out
    their Retry-After.
    """
    if response.status == 429:
        return None
    state = RateLimitState.from_headers(response.headers)
    if state is None or not state.is_rate_limited:
        return None
    return state.suggested_delay()


class RESTTransport:
    """Thin wrapper delegating to HTTPClient and raising typed errors.

    Every call makes exactly one HTTP request; retrying is the caller's job.
    """

    def __init__(
        self,
        base_url: str,
        *,
        headers: dict[str, str] | None = None,
        timeout: float = 30.0,
        connect_timeout: float | None = None,
        throttle_on_rate_limit: bool = True,
    ) -> None:
        self._http = HTTPClient(
            base_url=base_url,
            timeout=timeout,
            connect_timeout=connect_timeout,
            headers=headers,
        )
        if throttle_on_rate_limit:
            self._http.add_response_hook(rate_limit_hook)

    def add_response_hook(self, hook: ResponseHook) -> None:
        self._http.add_response_hook(hook)

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json_body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Send one request and return the decoded JSON body.

        Raises:
            NetworkError: Connection failure or timeout
            APIError: Non-2xx status, with code, message and Retry-After parsed
            ResponseDecodeError: 2xx response whose body is not JSON
        """
        method = method.upper()
        logger.debug("Sending request", extra={"method": method, "path": path})
        try:
            response = await self._http.request(
                method, path, params=_clean_query(params), json=json_body, headers=headers
            )
        except (aiohttp.ClientError, TimeoutError) as exc:
            raise NetworkError(f"{method} {path} failed: {str(exc) or type(exc).__name__}", cause=exc) from exc

        if not response.ok:
            raise _api_error(method, path, response)

        try:
            return response.json()
        except (UnicodeDecodeError, ValueError) as exc:
            raise ResponseDecodeError(
                f"{method} {path}: response body is not valid JSON",
                response.status,
                code="invalid_json",
                details=response.text()[:500],
            ) from exc

    async def get(
        self, path: str, params: dict[str, Any] | None = None, headers: dict[str, str] | None = None
    ) -> Any:
        return await self.request("GET", path, params=params, headers=headers)

    async def post(
        self, path: str, json_body: Any = None, headers: dict[str, str] | None = None
    ) -> Any:
        return await self.request("POST", path, json_body=json_body, headers=headers)

    async def patch(
        self, path: str, json_body: Any = None, headers: dict[str, str] | None = None
    ) -> Any:
        return await self.request("PATCH", path, json_body=json_body, headers=headers)

    async def delete(self, path: str, headers: dict[str, str] | None = None) -> Any:
        return await self.request("DELETE", path, headers=headers)

    async def close(self) -> None:
        await self._http.close()


def _api_error(method: str, path: str, response: HTTPResponse) -> APIError:
    rate_limit = RateLimitState.from_headers(response.headers)
    retry_after = rate_limit.retry_after if rate_limit else None

    code: str | None = None
    details: str | None = None
    try:
        payload = response.json()
    except (UnicodeDecodeError, ValueError):
        payload = None
    if isinstance(payload, dict):
        code = payload.get("code")
        details = payload.get("message")
    elif response.body:
        details = response.text()[:500]

    message = f"{method} {path} returned HTTP {response.status}"
    if details:
        message = f"{message}: {details}"
    elif response.reason:
        message = f"{message} {response.reason}"

    return APIError(
        message,
        response.status,
        code=code,
        details=details,
        retry_after=retry_after,
        rate_limit=rate_limit,
    )
