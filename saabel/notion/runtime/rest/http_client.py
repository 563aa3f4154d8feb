"""Async HTTP client wrapper over aiohttp."""

from __future__ import annotations

import asyncio
import inspect
import json
import logging
import math
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

import aiohttp

logger = logging.getLogger(__name__)

ResponseHook = Callable[[aiohttp.ClientResponse], "float | None | Awaitable[float | None]"]


@dataclass(frozen=True)
class HTTPResponse:
    """Status, headers and raw body of one completed response."""

    status: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""
    reason: str | None = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def json(self) -> Any:
        return json.loads(self.body.decode("utf-8"))

    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class HTTPClient:
    """Async HTTP client with lazy session, response hooks and throttling.

    Response hooks see every response before the body is returned. A hook
    may return a delay in seconds; the next request waits that long.
    Status codes are not interpreted here.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = 30.0,
        *,
        connect_timeout: float | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/") if base_url else base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout, connect=connect_timeout)
        self.headers = dict(headers or {})
        self._session: aiohttp.ClientSession | None = None
        self._response_hooks: list[ResponseHook] = []
        self._throttle_until: float | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout, headers=self.headers)
        return self._session

    def add_response_hook(self, hook: ResponseHook) -> None:
        self._response_hooks.append(hook)

    def set_throttle(self, delay: float) -> None:
        """Hold the next request for ``delay`` seconds; never shortens a window."""
        if not math.isfinite(delay) or delay <= 0:
            return
        until = time.monotonic() + delay
        if self._throttle_until is None or until > self._throttle_until:
            self._throttle_until = until

    async def _wait_for_throttle(self) -> None:
        """Sleep until the throttle window closes.

        The deadline is shared by every request in flight and is only
        cleared once it has passed.
        """
        while self._throttle_until is not None:
            remaining = self._throttle_until - time.monotonic()
            if remaining <= 0:
                self._throttle_until = None
                return
            logger.debug("Throttling request", extra={"delay": remaining})
            await asyncio.sleep(remaining)

    async def _run_hooks(self, response: aiohttp.ClientResponse) -> None:
        for hook in self._response_hooks:
            try:
                delay = hook(response)
                if inspect.isawaitable(delay):
                    delay = await delay
            except Exception:
                logger.warning("Response hook failed", exc_info=True)
                continue
            if delay:
                self.set_throttle(float(delay))

    def _url(self, url: str) -> str:
        if self.base_url and not url.startswith(("http://", "https://")):
            return f"{self.base_url}/{url.lstrip('/')}"
        return url

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> HTTPResponse:
        """Send one request and read the whole body.

        Raises:
            aiohttp.ClientError: Connection or protocol failure
            TimeoutError: The request timed out
        """
        await self._wait_for_throttle()
        async with self.session.request(
            method.upper(), self._url(url), params=params, json=json, headers=headers
        ) as response:
            body = await response.read()
            await self._run_hooks(response)
            return HTTPResponse(
                status=response.status,
                headers=dict(response.headers),
                body=body,
                reason=response.reason,
            )

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
