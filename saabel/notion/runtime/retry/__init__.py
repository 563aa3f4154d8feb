"""Retry and backoff layer for transport calls.

Architecture:
    The retry layer consists of:
    - definitions.py: Retry policy (RetryConfig) and per-call state
    - backoff.py: Pure delay computation and failure classification
    - rate_limit.py: Rate limit header parsing (RateLimitState)
    - executors.py: The retry loop (RetryExecutor, execute_with_retry)
    - telemetry.py: Structured logging

Usage:
    Wrap any zero-argument coroutine factory that performs one transport
    call::

        page = await execute_with_retry(lambda: transport.get("/pages/abc"), config)
"""

from __future__ import annotations

from .backoff import classify_error, compute_delay, retry_after_hint
from .definitions import RetryAttemptState, RetryConfig
from .executors import RetryExecutor, execute_with_retry
from .rate_limit import RateLimitState, parse_retry_after

__all__ = [
    "RetryConfig",
    "RetryAttemptState",
    "RetryExecutor",
    "RateLimitState",
    "classify_error",
    "compute_delay",
    "execute_with_retry",
    "parse_retry_after",
    "retry_after_hint",
]
