"""Execution runtime: retry, pagination and REST transport."""

from .pagination import Paginator, collect_all, iterate_items, iterate_pages
from .rest import RESTTransport, RestRunner
from .retry import RetryConfig, RetryExecutor, execute_with_retry

__all__ = [
    "Paginator",
    "RESTTransport",
    "RestRunner",
    "RetryConfig",
    "RetryExecutor",
    "collect_all",
    "execute_with_retry",
    "iterate_items",
    "iterate_pages",
]
