"""Cursor pagination over a page fetcher.

All three traversals share one discipline: the first call gets no cursor,
call k+1 gets exactly the ``next_cursor`` of page k, and traversal stops as
soon as a page reports ``has_more = False``. The lazy variants are async
generators that only fetch the next page once the consumer has taken
everything before it, so they suspend only at page boundaries.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import aclosing
from time import perf_counter
from typing import Any, Generic, TypeVar

from ...core.exceptions import UnexpectedError
from ..retry import RetryConfig, RetryExecutor
from ..retry.executors import Sleep
from .definitions import PageFetcher, PaginatedPage, PaginatedResult, PaginationConfig
from .telemetry import log_page_fetched, log_pagination_complete, log_pagination_error

T = TypeVar("T")


def _continuation(page: PaginatedPage[Any], page_index: int) -> str:
    cursor = page.next_cursor
    if not cursor:
        raise UnexpectedError(f"Page {page_index} reports has_more without a next_cursor")
    return cursor


async def iterate_pages(
    fetch: PageFetcher,
    *,
    max_pages: int | None = None,
    operation: str = "paginate",
) -> AsyncIterator[PaginatedPage[Any]]:
    """Lazily yield whole pages, metadata intact.

    Args:
        fetch: Async callable returning the page at a cursor
        max_pages: Stop after this many pages (None = until ``has_more`` is false)
        operation: Label used in log events

    Yields:
        Pages in server order

    Raises:
        UnexpectedError: A page claims more results but carries no cursor
        Exception: Whatever ``fetch`` raises, after earlier pages were yielded
    """
    cursor: str | None = None
    page_index = 0
    items_seen = 0

    while True:
        if max_pages is not None and page_index >= max_pages:
            log_pagination_complete(operation=operation, pages=page_index, items=items_seen, truncated=True)
            return

        started = perf_counter()
        try:
            page = await fetch(cursor)
        except Exception as e:
            log_pagination_error(
                operation=operation,
                page_index=page_index,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise

        result_count = len(page.results)
        items_seen += result_count
        log_page_fetched(
            operation=operation,
            page_index=page_index,
            result_count=result_count,
            has_more=page.has_more,
            latency_ms=(perf_counter() - started) * 1000.0,
        )

        yield page
        page_index += 1

        if not page.has_more:
            log_pagination_complete(operation=operation, pages=page_index, items=items_seen)
            return
        cursor = _continuation(page, page_index - 1)


async def iterate_items(
    fetch: PageFetcher,
    *,
    max_pages: int | None = None,
    operation: str = "paginate",
) -> AsyncIterator[Any]:
    """Lazily yield individual items across pages.

    Forward-only and single-pass; one consumer per generator.
    """
    async with aclosing(iterate_pages(fetch, max_pages=max_pages, operation=operation)) as pages:
        async for page in pages:
            for item in page.results:
                yield item


async def collect_all(
    fetch: PageFetcher,
    *,
    max_pages: int | None = None,
    operation: str = "paginate",
) -> list[Any]:
    """Eagerly drain every page and concatenate results in order.

    Calls ``fetch`` exactly once per page. Loads everything into memory; use
    ``iterate_items`` for large result sets.
    """
    items: list[Any] = []
    async with aclosing(iterate_pages(fetch, max_pages=max_pages, operation=operation)) as pages:
        async for page in pages:
            items.extend(page.results)
    return items


def with_retry(
    fetch: PageFetcher,
    config: RetryConfig | None = None,
    *,
    sleep: Sleep | None = None,
    operation: str = "paginate",
) -> PageFetcher:
    """Wrap ``fetch`` so every page fetch goes through the retry engine.

    The cursor is bound per call, so a retried page re-sends the same cursor.
    """
    executor = RetryExecutor(config, sleep=sleep)

    async def fetch_with_retry(cursor: str | None) -> Any:
        return await executor.execute(lambda: fetch(cursor), operation=operation)

    return fetch_with_retry


class Paginator(Generic[T]):
    """Pagination over one endpoint with optional retry and page limit.

    Example:
        >>> paginator = Paginator(fetch_page, retry_config=RetryConfig.BALANCED)
        >>> async for page in paginator.items():
        ...     print(page["id"])
    """

    def __init__(
        self,
        fetch: PageFetcher,
        *,
        retry_config: RetryConfig | None = None,
        config: PaginationConfig | None = None,
        operation: str = "paginate",
        sleep: Sleep | None = None,
    ) -> None:
        self._config = config or PaginationConfig()
        self._operation = operation
        if retry_config is not None:
            fetch = with_retry(fetch, retry_config, sleep=sleep, operation=operation)
        self._fetch = fetch

    @property
    def config(self) -> PaginationConfig:
        return self._config

    def items(self) -> AsyncIterator[T]:
        return iterate_items(self._fetch, max_pages=self._config.max_pages, operation=self._operation)

    def pages(self) -> AsyncIterator[PaginatedPage[T]]:
        return iterate_pages(self._fetch, max_pages=self._config.max_pages, operation=self._operation)

    async def collect_all(self) -> list[T]:
        return await collect_all(self._fetch, max_pages=self._config.max_pages, operation=self._operation)

    async def collect(self) -> PaginatedResult[T]:
        """Drain pages and report whether the result is complete."""
        result: PaginatedResult[T] = PaginatedResult()
        async with aclosing(self.pages()) as pages:
            async for page in pages:
                result.items.extend(page.results)
                result.total_pages += 1
                result.has_more = page.has_more
                result.final_cursor = page.next_cursor if page.has_more else None
        return result
