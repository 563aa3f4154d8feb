"""High-level NotionClient facade.

Architecture:
    NotionClient wires the three execution layers together for each call:

    - writes are passed through RequestValidator.validate_or_fix first, so a
      request the server would reject is repaired or refused before any I/O
    - every transport call goes through the retry engine (RestRunner)
    - list endpoints are driven by the pagination engine, each page retried
      on its own

Example:
    >>> async with NotionClient(config_from_env()) as client:
    ...     page = await client.create_page(request)
    ...     async for row in client.iter_database(database_id):
    ...         print(row["id"])
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import AsyncIterator
from typing import Any

from ..config import NotionConfig
from ..models.pagination import PaginatedResponse, PaginationRequest
from ..models.requests import (
    AppendBlockChildrenRequest,
    CreateDatabaseRequest,
    CreatePageRequest,
    UpdatePageRequest,
)
from ..runtime.pagination import PaginationConfig, Paginator
from ..runtime.rest import PageAdapter, ResponseAdapter, RESTTransport, RestEndpointSpec, RestRunner
from ..runtime.retry import RetryConfig
from ..runtime.retry.executors import Sleep
from ..validation import RequestValidator, ValidationConfig
from . import endpoints

logger = logging.getLogger(__name__)

_RAW = ResponseAdapter()
_PAGE = PageAdapter()


class NotionClient:
    """Validated, retried and paginated access to the API.

    Args:
        config: Connection settings
        retry_config: Retry policy for every transport call (default: BALANCED)
        validation_config: Auto-split versus strict validation of writes
        pagination_config: Page size and page cap for list traversals
        transport: Pre-built transport (the client then does not close it)
        sleep: Backoff wait, injectable for tests
    """

    def __init__(
        self,
        config: NotionConfig,
        *,
        retry_config: RetryConfig | None = None,
        validation_config: ValidationConfig | None = None,
        pagination_config: PaginationConfig | None = None,
        transport: RESTTransport | None = None,
        sleep: Sleep | None = None,
    ) -> None:
        self._config = config
        self._owns_transport = transport is None
        self._transport = transport or RESTTransport(
            config.base_url,
            headers=config.headers(),
            timeout=config.request_timeout,
            connect_timeout=config.connect_timeout,
        )
        self._runner = RestRunner(self._transport, retry_config=retry_config, sleep=sleep)
        self._validator = RequestValidator(validation_config)
        self._pagination = pagination_config or PaginationConfig()
        self._closed = False

    @property
    def config(self) -> NotionConfig:
        return self._config

    @property
    def validator(self) -> RequestValidator:
        return self._validator

    # --- Single requests -------------------------------------------------

    async def retrieve_page(self, page_id: str) -> dict[str, Any]:
        return await self._runner.run(spec=endpoints.RETRIEVE_PAGE, adapter=_RAW, params={"page_id": page_id})

    async def create_page(self, request: CreatePageRequest) -> dict[str, Any]:
        """Validate (auto-fixing oversize text when enabled) and create a page.

        Raises:
            ValidationError: The request violates limits that cannot be fixed
        """
        return await self._write(endpoints.CREATE_PAGE, request, {})

    async def update_page(self, page_id: str, request: UpdatePageRequest) -> dict[str, Any]:
        return await self._write(endpoints.UPDATE_PAGE, request, {"page_id": page_id})

    async def create_database(self, request: CreateDatabaseRequest) -> dict[str, Any]:
        return await self._write(endpoints.CREATE_DATABASE, request, {})

    async def append_block_children(
        self, block_id: str, request: AppendBlockChildrenRequest
    ) -> dict[str, Any]:
        return await self._write(endpoints.APPEND_BLOCK_CHILDREN, request, {"block_id": block_id})

    async def _write(self, spec: RestEndpointSpec, request: Any, params: dict[str, Any]) -> dict[str, Any]:
        request = self._validator.validate_or_fix(request)
        return await self._runner.run(
            spec=spec,
            adapter=_RAW,
            params={**params, "body": request.to_payload()},
        )

    async def query_database(
        self,
        database_id: str,
        *,
        filter: dict[str, Any] | None = None,
        sorts: list[dict[str, Any]] | None = None,
        start_cursor: str | None = None,
        page_size: int | None = None,
    ) -> PaginatedResponse[Any]:
        """Fetch a single page of database results."""
        page = PaginationRequest(
            start_cursor=start_cursor,
            page_size=page_size or self._pagination.page_size,
        )
        return await self._runner.run(
            spec=endpoints.QUERY_DATABASE,
            adapter=_PAGE,
            params={"database_id": database_id, "filter": filter, "sorts": sorts},
            page=page,
        )

    # --- Paginated traversals --------------------------------------------

    def _paginator(
        self, spec: RestEndpointSpec, params: dict[str, Any], max_pages: int | None
    ) -> Paginator[Any]:
        config = self._pagination
        if max_pages is not None:
            config = dataclasses.replace(config, max_pages=max_pages)
        return self._runner.paginate(spec=spec, params=params, config=config)

    def iter_database(
        self,
        database_id: str,
        *,
        filter: dict[str, Any] | None = None,
        sorts: list[dict[str, Any]] | None = None,
        max_pages: int | None = None,
    ) -> AsyncIterator[dict[str, Any]]:
        """Lazily yield every row matching the query, page by page."""
        params = {"database_id": database_id, "filter": filter, "sorts": sorts}
        return self._paginator(endpoints.QUERY_DATABASE, params, max_pages).items()

    async def query_database_all(
        self,
        database_id: str,
        *,
        filter: dict[str, Any] | None = None,
        sorts: list[dict[str, Any]] | None = None,
        max_pages: int | None = None,
    ) -> list[dict[str, Any]]:
        params = {"database_id": database_id, "filter": filter, "sorts": sorts}
        return await self._paginator(endpoints.QUERY_DATABASE, params, max_pages).collect_all()

    def iter_block_children(self, block_id: str, *, max_pages: int | None = None) -> AsyncIterator[dict[str, Any]]:
        return self._paginator(endpoints.LIST_BLOCK_CHILDREN, {"block_id": block_id}, max_pages).items()

    async def list_block_children_all(self, block_id: str, *, max_pages: int | None = None) -> list[dict[str, Any]]:
        return await self._paginator(endpoints.LIST_BLOCK_CHILDREN, {"block_id": block_id}, max_pages).collect_all()

    def iter_search(
        self,
        query: str | None = None,
        *,
        filter: dict[str, Any] | None = None,
        sort: dict[str, Any] | None = None,
        max_pages: int | None = None,
    ) -> AsyncIterator[dict[str, Any]]:
        params = {"query": query, "filter": filter, "sort": sort}
        return self._paginator(endpoints.SEARCH, params, max_pages).items()

    async def search_all(
        self,
        query: str | None = None,
        *,
        filter: dict[str, Any] | None = None,
        sort: dict[str, Any] | None = None,
        max_pages: int | None = None,
    ) -> list[dict[str, Any]]:
        params = {"query": query, "filter": filter, "sort": sort}
        return await self._paginator(endpoints.SEARCH, params, max_pages).collect_all()

    def iter_users(self, *, max_pages: int | None = None) -> AsyncIterator[dict[str, Any]]:
        return self._paginator(endpoints.LIST_USERS, {}, max_pages).items()

    async def list_users_all(self, *, max_pages: int | None = None) -> list[dict[str, Any]]:
        return await self._paginator(endpoints.LIST_USERS, {}, max_pages).collect_all()

    # --- Lifecycle -------------------------------------------------------

    async def close(self) -> None:
        """Close the transport if this client created it. Idempotent."""
        if self._closed:
            return
        self._closed = True
        if self._owns_transport:
            await self._transport.close()
        logger.debug("NotionClient closed")

    async def __aenter__(self) -> NotionClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
