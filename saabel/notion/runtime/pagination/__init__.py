"""Cursor pagination layer.

Architecture:
    The pagination layer consists of:
    - definitions.py: Page protocol, fetcher type, PaginationConfig, PaginatedResult
    - paginator.py: collect_all, iterate_items, iterate_pages, with_retry, Paginator
    - telemetry.py: Structured logging

Usage:
    Any async callable ``fetch(cursor) -> page`` can be paginated::

        async for item in iterate_items(with_retry(fetch, RetryConfig())):
            ...
"""

from __future__ import annotations

from .definitions import PageFetcher, PaginatedPage, PaginatedResult, PaginationConfig
from .paginator import Paginator, collect_all, iterate_items, iterate_pages, with_retry

__all__ = [
    "PageFetcher",
    "PaginatedPage",
    "PaginatedResult",
    "PaginationConfig",
    "Paginator",
    "collect_all",
    "iterate_items",
    "iterate_pages",
    "with_retry",
]
