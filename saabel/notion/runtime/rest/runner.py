"""REST request runner using endpoint specs and response adapters."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ...models.pagination import PaginatedResponse, PaginationRequest
from ..pagination import PageFetcher, PaginationConfig, Paginator
from ..retry import RetryConfig, RetryExecutor
from ..retry.executors import Sleep
from .transport import RESTTransport


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    method: str  # "GET" | "POST" | "PATCH" | "DELETE"
    build_path: Callable[[dict[str, Any]], str]
    build_query: Callable[[dict[str, Any]], dict[str, Any]] | None = None
    build_body: Callable[[dict[str, Any]], dict[str, Any]] | None = None
    build_headers: Callable[[dict[str, Any]], dict[str, str]] | None = None
    # Cursor and page size go in the query for GET, in the body otherwise
    paginated: bool = False


class ResponseAdapter:
    def parse(self, response: Any, params: dict[str, Any]) -> Any:
        return response


class PageAdapter(ResponseAdapter):
    """Parses a list response into a PaginatedResponse of raw objects."""

    def parse(self, response: Any, params: dict[str, Any]) -> PaginatedResponse[Any]:
        return PaginatedResponse[Any].model_validate(response)


class RestRunner:
    """Runs endpoint specs through the transport with retry.

    Every ``run`` is one logical request: the retry engine may issue several
    transport calls for it, each rebuilt from the same spec and params.
    """

    def __init__(
        self,
        transport: RESTTransport,
        *,
        retry_config: RetryConfig | None = None,
        sleep: Sleep | None = None,
    ) -> None:
        self._t = transport
        self._retry = RetryExecutor(retry_config, sleep=sleep)

    @property
    def retry_config(self) -> RetryConfig:
        return self._retry.config

    async def _send(
        self, spec: RestEndpointSpec, params: dict[str, Any], page: PaginationRequest | None
    ) -> Any:
        path = spec.build_path(params)
        query = spec.build_query(params) if spec.build_query else None
        body = spec.build_body(params) if spec.build_body else None
        headers = spec.build_headers(params) if spec.build_headers else None

        if page is not None:
            if spec.method.upper() == "GET":
                query = {**(query or {}), **page.to_params()}
            else:
                body = {**(body or {}), **page.to_params()}

        return await self._t.request(spec.method, path, params=query, json_body=body, headers=headers)

    async def run(
        self,
        *,
        spec: RestEndpointSpec,
        adapter: ResponseAdapter,
        params: dict[str, Any],
        page: PaginationRequest | None = None,
    ) -> Any:
        data = await self._retry.execute(lambda: self._send(spec, params, page), operation=spec.id)
        return adapter.parse(data, params)

    def page_fetcher(
        self,
        *,
        spec: RestEndpointSpec,
        params: dict[str, Any],
        adapter: ResponseAdapter | None = None,
        page_size: int | None = None,
    ) -> PageFetcher:
        """Fetcher for the pagination engine; each page is retried on its own."""
        if not spec.paginated:
            raise ValueError(f"Endpoint {spec.id!r} is not paginated")
        adapter = adapter or PageAdapter()
        first = PaginationRequest() if page_size is None else PaginationRequest(page_size=page_size)

        async def fetch(cursor: str | None) -> Any:
            return await self.run(spec=spec, adapter=adapter, params=params, page=first.next_page(cursor))

        return fetch

    def paginate(
        self,
        *,
        spec: RestEndpointSpec,
        params: dict[str, Any],
        config: PaginationConfig | None = None,
        adapter: ResponseAdapter | None = None,
    ) -> Paginator[Any]:
        config = config or PaginationConfig()
        fetch = self.page_fetcher(spec=spec, params=params, adapter=adapter, page_size=config.page_size)
        return Paginator(fetch, config=config, operation=spec.id)
