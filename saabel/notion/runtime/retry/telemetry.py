"""Structured logging for retry operations."""

from __future__ import annotations

import logging

from ...core.enums import RetryDisposition

logger = logging.getLogger(__name__)


def log_retry_scheduled(
    *,
    operation: str,
    attempt: int,
    max_retries: int,
    delay: float,
    disposition: RetryDisposition,
    error: BaseException,
    honoured_retry_after: bool,
) -> None:
    """Log a retry about to wait and re-attempt.

    Args:
        operation: Operation identifier (e.g. "POST /pages")
        attempt: Zero-based index of the attempt that failed
        max_retries: Configured retry budget
        delay: Seconds the engine will wait
        disposition: Why the failure is retryable
        error: The failure
        honoured_retry_after: Whether the delay came from a server hint
    """
    logger.info(
        "retry_scheduled",
        extra={
            "operation": operation,
            "attempt": attempt + 1,
            "max_retries": max_retries,
            "delay_s": round(delay, 3),
            "disposition": disposition.value,
            "error_type": type(error).__name__,
            "error_message": str(error),
            "retry_after": honoured_retry_after,
        },
    )


def log_retry_exhausted(
    *,
    operation: str,
    calls_made: int,
    disposition: RetryDisposition,
    error: BaseException,
    cumulative_delay: float,
) -> None:
    logger.warning(
        "retry_exhausted",
        extra={
            "operation": operation,
            "calls_made": calls_made,
            "disposition": disposition.value,
            "error_type": type(error).__name__,
            "error_message": str(error),
            "cumulative_delay_s": round(cumulative_delay, 3),
        },
    )


def log_retry_non_retryable(*, operation: str, attempt: int, error: BaseException) -> None:
    logger.debug(
        "retry_non_retryable",
        extra={
            "operation": operation,
            "attempt": attempt,
            "error_type": type(error).__name__,
            "error_message": str(error),
        },
    )


def log_retry_succeeded(*, operation: str, calls_made: int, cumulative_delay: float) -> None:
    logger.debug(
        "retry_succeeded",
        extra={
            "operation": operation,
            "calls_made": calls_made,
            "cumulative_delay_s": round(cumulative_delay, 3),
        },
    )
