"""Backoff computation and failure classification.

Both functions are pure: the only randomness comes from the ``rng``
argument, so callers can pin it in tests.
"""

from __future__ import annotations

import math
import random
from typing import Protocol

import aiohttp

from ...core.enums import RetryDisposition
from ...core.exceptions import APIError, NetworkError, RateLimitError, ResponseDecodeError
from .definitions import RetryConfig

# 2**62 * any sane base delay already exceeds every max_delay
_MAX_EXPONENT = 62


class UniformSource(Protocol):
    def uniform(self, a: float, b: float) -> float: ...


def compute_delay(
    config: RetryConfig,
    attempt: int,
    *,
    rng: UniformSource | None = None,
    retry_after: float | None = None,
) -> float:
    """Calculate the wait before retrying after failed attempt ``attempt``.

    Args:
        config: Retry policy
        attempt: Zero-based index of the attempt that just failed
        rng: Source of uniform randomness for jitter (default: ``random``)
        retry_after: Server-provided retry-after hint in seconds, if any

    Returns:
        Delay in seconds. A honoured (finite) retry-after hint is returned as is;
        otherwise the result lies in ``[0, max_delay]``.
    """
    if attempt < 0:
        raise ValueError("attempt must be non-negative")

    if retry_after is not None and config.respect_retry_after and math.isfinite(retry_after):
        return max(0.0, float(retry_after))

    growth = 2 ** min(attempt, _MAX_EXPONENT) if config.strategy.is_exponential else 1
    delay = min(config.max_delay, config.base_delay * growth)

    if config.strategy.uses_jitter and config.jitter_factor > 0:
        source = rng if rng is not None else random
        factor = source.uniform(1.0 - config.jitter_factor, 1.0 + config.jitter_factor)
        delay = min(config.max_delay, max(0.0, delay * factor))

    return delay


def classify_error(error: BaseException) -> RetryDisposition:
    """Decide whether a failed attempt may be retried.

    429 responses, 5xx responses and connection-level failures are
    transient. Every other API error and any decode failure is final.
    """
    if isinstance(error, ResponseDecodeError):
        return RetryDisposition.NOT_RETRYABLE
    if isinstance(error, RateLimitError):
        return RetryDisposition.RATE_LIMITED
    if isinstance(error, APIError):
        if error.is_rate_limited:
            return RetryDisposition.RATE_LIMITED
        if error.is_server_error:
            return RetryDisposition.SERVER_ERROR
        return RetryDisposition.NOT_RETRYABLE
    if isinstance(error, (NetworkError, aiohttp.ClientConnectionError, ConnectionError, TimeoutError)):
        return RetryDisposition.NETWORK
    return RetryDisposition.NOT_RETRYABLE


def retry_after_hint(error: BaseException) -> float | None:
    """Server retry-after hint carried by ``error``, if any and finite."""
    if not isinstance(error, APIError):
        return None
    hint = error.retry_after
    if hint is None and error.rate_limit is not None:
        hint = error.rate_limit.retry_after
    if hint is None or not math.isfinite(hint):
        return None
    return hint
