"""Structured logging for pagination."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_page_fetched(
    *,
    operation: str,
    page_index: int,
    result_count: int,
    has_more: bool,
    latency_ms: float | None = None,
) -> None:
    logger.debug(
        "page_fetched",
        extra={
            "operation": operation,
            "page_index": page_index,
            "result_count": result_count,
            "has_more": has_more,
            "latency_ms": latency_ms,
        },
    )


def log_pagination_complete(*, operation: str, pages: int, items: int, truncated: bool = False) -> None:
    """Log the end of a pagination run.

    Args:
        operation: Operation identifier
        pages: Pages fetched
        items: Items seen across those pages
        truncated: Whether a page limit stopped the run before the last page
    """
    logger.info(
        "pagination_complete",
        extra={
            "operation": operation,
            "pages": pages,
            "items": items,
            "truncated": truncated,
        },
    )


def log_pagination_error(
    *,
    operation: str,
    page_index: int,
    error_type: str,
    error_message: str,
) -> None:
    logger.error(
        "pagination_error",
        extra={
            "operation": operation,
            "page_index": page_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
