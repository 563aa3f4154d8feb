"""Retry execution loop.

This module provides the RetryExecutor class that drives one attempt
factory through the retry state machine, sleeping between attempts
according to the configured backoff.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

from ...core.enums import RetryDisposition, RetryState
from ...core.exceptions import RateLimitError
from .backoff import UniformSource, classify_error, compute_delay, retry_after_hint
from .definitions import RetryAttemptState, RetryConfig
from .telemetry import (
    log_retry_exhausted,
    log_retry_non_retryable,
    log_retry_scheduled,
    log_retry_succeeded,
)

T = TypeVar("T")

Sleep = Callable[[float], Awaitable[None]]


class RetryExecutor:
    """Executes an attempt factory with retry and backoff.

    The executor holds only immutable configuration; each ``execute`` call
    creates its own RetryAttemptState, so one executor can serve any number
    of concurrent calls.
    """

    def __init__(
        self,
        config: RetryConfig | None = None,
        *,
        sleep: Sleep | None = None,
        rng: UniformSource | None = None,
    ) -> None:
        """Initialize retry executor.

        Args:
            config: Retry policy (default: RetryConfig.BALANCED)
            sleep: Awaitable used for backoff waits (default: asyncio.sleep)
            rng: Randomness source for jitter (default: the random module)
        """
        self._config = config or RetryConfig.BALANCED
        self._sleep = sleep or asyncio.sleep
        self._rng = rng

    @property
    def config(self) -> RetryConfig:
        return self._config

    async def execute(
        self,
        attempt: Callable[[], Awaitable[T]],
        *,
        operation: str = "request",
    ) -> T:
        """Run ``attempt`` until it succeeds, fails for good, or retries run out.

        Each pass calls ``attempt()`` exactly once. Cancellation of the
        surrounding task propagates out of a pending backoff wait without
        issuing another attempt.

        Args:
            attempt: Zero-argument coroutine factory performing one transport call
            operation: Label used in log events

        Returns:
            The first successful result

        Raises:
            RateLimitError: Retries exhausted on a rate-limited (429) failure
            Exception: The non-retryable failure, or the last retryable failure
                once retries are exhausted
        """
        config = self._config
        state = RetryAttemptState()
        state.transition(RetryState.ATTEMPTING)

        while True:
            try:
                result = await attempt()
            except Exception as exc:
                state.last_error = exc
                disposition = classify_error(exc)

                if not disposition.retryable:
                    state.transition(RetryState.NON_RETRYABLE_FAILURE)
                    log_retry_non_retryable(operation=operation, attempt=state.attempt, error=exc)
                    raise

                hint = retry_after_hint(exc)
                if disposition is RetryDisposition.RATE_LIMITED and hint is not None:
                    state.last_retry_after = hint

                if state.attempt >= config.max_retries:
                    state.transition(RetryState.EXHAUSTED)
                    log_retry_exhausted(
                        operation=operation,
                        calls_made=state.calls_made,
                        disposition=disposition,
                        error=exc,
                        cumulative_delay=state.cumulative_delay,
                    )
                    if disposition is RetryDisposition.RATE_LIMITED:
                        raise RateLimitError(retry_after=state.last_retry_after) from exc
                    raise

                delay = compute_delay(config, state.attempt, rng=self._rng, retry_after=hint)
                state.next_delay = delay
                state.transition(RetryState.RETRYING)
                log_retry_scheduled(
                    operation=operation,
                    attempt=state.attempt,
                    max_retries=config.max_retries,
                    delay=delay,
                    disposition=disposition,
                    error=exc,
                    honoured_retry_after=hint is not None and config.respect_retry_after,
                )

                await self._sleep(delay)

                state.cumulative_delay += delay
                state.attempt += 1
                state.transition(RetryState.ATTEMPTING)
                continue

            state.transition(RetryState.SUCCESS)
            if state.attempt:
                log_retry_succeeded(
                    operation=operation,
                    calls_made=state.calls_made,
                    cumulative_delay=state.cumulative_delay,
                )
            return result


async def execute_with_retry(
    attempt: Callable[[], Awaitable[T]],
    config: RetryConfig | None = None,
    *,
    sleep: Sleep | None = None,
    rng: UniformSource | None = None,
    operation: str = "request",
) -> T:
    """Functional shortcut for ``RetryExecutor(config).execute(attempt)``."""
    executor = RetryExecutor(config, sleep=sleep, rng=rng)
    return await executor.execute(attempt, operation=operation)
