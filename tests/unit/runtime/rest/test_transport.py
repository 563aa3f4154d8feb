"""Precise unit tests for RESTTransport.

Tests focus on HTTPClient delegation and mapping of failures onto the
exception hierarchy.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from saabel.notion.core import APIError, NetworkError, ResponseDecodeError
from saabel.notion.runtime.rest import HTTPResponse, RESTTransport, rate_limit_hook


@pytest.fixture
def transport():
    t = RESTTransport(base_url="https://api.notion.com/v1", headers={"Authorization": "Bearer x"})
    t._http.request = AsyncMock()
    return t


class TestRESTTransport:
    """Test RESTTransport wrapper."""

    def test_init(self):
        """Test RESTTransport initialization."""
        transport = RESTTransport(base_url="https://api.notion.com/v1", timeout=12.0)
        assert transport._http.base_url == "https://api.notion.com/v1"
        assert transport._http.timeout.total == 12.0
        assert rate_limit_hook in transport._http._response_hooks

    def test_throttle_hook_optional(self):
        """Test the rate limit hook can be switched off."""
        transport = RESTTransport(base_url="https://api.notion.com/v1", throttle_on_rate_limit=False)
        assert transport._http._response_hooks == []

    def test_add_response_hook(self):
        """Test hooks are forwarded to the HTTP client."""
        transport = RESTTransport(base_url="https://api.notion.com/v1")
        hook = MagicMock()
        transport.add_response_hook(hook)
        assert hook in transport._http._response_hooks

    @pytest.mark.asyncio
    async def test_get_decodes_json(self, transport):
        """Test get returns the decoded JSON body."""
        transport._http.request.return_value = HTTPResponse(200, {}, b'{"object": "page"}')

        result = await transport.get("/pages/abc", params={"filter_properties": "title"})

        assert result == {"object": "page"}
        transport._http.request.assert_awaited_once_with(
            "GET", "/pages/abc", params={"filter_properties": "title"}, json=None, headers=None
        )

    @pytest.mark.asyncio
    async def test_query_params_cleaned(self, transport):
        """Test None params are dropped and bools lowered."""
        transport._http.request.return_value = HTTPResponse(200, {}, b"{}")

        await transport.get("/users", params={"start_cursor": None, "page_size": 100, "archived": False})

        assert transport._http.request.call_args.kwargs["params"] == {"page_size": 100, "archived": "false"}

    @pytest.mark.asyncio
    async def test_post_and_patch_send_body(self, transport):
        """Test post and patch send the JSON body."""
        transport._http.request.return_value = HTTPResponse(200, {}, b'{"ok": true}')

        await transport.post("/pages", json_body={"a": 1})
        await transport.patch("/pages/abc", json_body={"b": 2})

        calls = transport._http.request.await_args_list
        assert calls[0].args == ("POST", "/pages")
        assert calls[0].kwargs["json"] == {"a": 1}
        assert calls[1].args == ("PATCH", "/pages/abc")

    @pytest.mark.asyncio
    async def test_error_status_maps_to_api_error(self, transport):
        """Test a non-2xx status raises APIError with code and details."""
        body = b'{"object": "error", "status": 400, "code": "validation_error", "message": "body failed validation"}'
        transport._http.request.return_value = HTTPResponse(400, {}, body, "Bad Request")

        with pytest.raises(APIError) as exc_info:
            await transport.post("/pages", json_body={})

        error = exc_info.value
        assert error.status_code == 400
        assert error.code == "validation_error"
        assert error.details == "body failed validation"
        assert "body failed validation" in str(error)
        assert error.retry_after is None

    @pytest.mark.asyncio
    async def test_rate_limited_response_carries_retry_after(self, transport):
        """Test a 429 error carries Retry-After and rate limit state."""
        headers = {"Retry-After": "5", "X-RateLimit-Remaining": "0"}
        body = b'{"code": "rate_limited", "message": "slow down"}'
        transport._http.request.return_value = HTTPResponse(429, headers, body)

        with pytest.raises(APIError) as exc_info:
            await transport.get("/users")

        assert exc_info.value.is_rate_limited
        assert exc_info.value.retry_after == 5.0
        assert exc_info.value.rate_limit.remaining == 0

    @pytest.mark.asyncio
    async def test_non_json_error_body(self, transport):
        """Test a plain-text error body becomes the details."""
        transport._http.request.return_value = HTTPResponse(502, {}, b"<html>bad gateway</html>", "Bad Gateway")

        with pytest.raises(APIError) as exc_info:
            await transport.get("/users")

        assert exc_info.value.is_server_error
        assert exc_info.value.code is None
        assert "bad gateway" in exc_info.value.details

    @pytest.mark.asyncio
    async def test_undecodable_success_body(self, transport):
        """Test an undecodable 2xx body raises ResponseDecodeError."""
        transport._http.request.return_value = HTTPResponse(200, {}, b"not json")

        with pytest.raises(ResponseDecodeError) as exc_info:
            await transport.get("/users")

        assert exc_info.value.status_code == 200

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [aiohttp.ClientConnectionError("refused"), aiohttp.ServerDisconnectedError(), TimeoutError()],
    )
    async def test_connection_failures_map_to_network_error(self, transport, error):
        """Test aiohttp and timeout failures raise NetworkError."""
        transport._http.request.side_effect = error

        with pytest.raises(NetworkError) as exc_info:
            await transport.get("/users")

        assert exc_info.value.cause is error
        assert exc_info.value.__cause__ is error

    @pytest.mark.asyncio
    async def test_close_delegates_to_http_client(self):
        """Test close() closes the HTTP client."""
        transport = RESTTransport(base_url="https://api.notion.com/v1")
        transport._http.close = AsyncMock()

        await transport.close()

        transport._http.close.assert_awaited_once()


class TestRateLimitHook:
    """Test rate_limit_hook throttle decisions."""

    def _response(self, status, headers):
        response = MagicMock()
        response.status = status
        response.headers = headers
        return response

    def test_spent_window_throttles(self):
        """Test an exhausted budget returns a throttle delay."""
        delay = rate_limit_hook(self._response(200, {"X-RateLimit-Remaining": "0", "Retry-After": "3"}))
        assert delay == 3.0

    def test_budget_left_does_not_throttle(self):
        """Test remaining budget means no throttle."""
        assert rate_limit_hook(self._response(200, {"X-RateLimit-Remaining": "40"})) is None
        assert rate_limit_hook(self._response(200, {})) is None

    def test_429_left_to_retry_engine(self):
        """Test the hook leaves 429 responses to the retry engine."""
        assert rate_limit_hook(self._response(429, {"Retry-After": "3", "X-RateLimit-Remaining": "0"})) is None
