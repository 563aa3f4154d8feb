"""Retry configuration and per-call attempt state.

This module defines the immutable policy shared by every call and the
ephemeral state owned by a single in-flight call.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ...core.enums import BackoffStrategy, RetryState

_TRANSITIONS: dict[RetryState, frozenset[RetryState]] = {
    RetryState.IDLE: frozenset({RetryState.ATTEMPTING}),
    RetryState.ATTEMPTING: frozenset(
        {
            RetryState.SUCCESS,
            RetryState.NON_RETRYABLE_FAILURE,
            RetryState.RETRYING,
            RetryState.EXHAUSTED,
        }
    ),
    RetryState.RETRYING: frozenset({RetryState.ATTEMPTING}),
    RetryState.SUCCESS: frozenset(),
    RetryState.NON_RETRYABLE_FAILURE: frozenset(),
    RetryState.EXHAUSTED: frozenset(),
}


@dataclass(frozen=True)
class RetryConfig:
    """Retry policy for transport calls.

    Instances are immutable and may be shared by any number of concurrent
    calls.

    Attributes:
        strategy: Delay curve (fixed, exponential, exponential with jitter)
        max_retries: Retries after the first attempt (0 disables retrying)
        base_delay: Delay in seconds before the first retry
        max_delay: Upper bound in seconds for any computed delay
        jitter_factor: Relative jitter width in [0, 1] (jitter strategy only)
        respect_retry_after: Let a server Retry-After hint replace the computed delay

    Examples:
        # Three retries at 1s, 2s, 4s (+/-10%)
        RetryConfig()

        # Fixed half-second spacing, no jitter
        RetryConfig(strategy=BackoffStrategy.FIXED, base_delay=0.5, max_delay=0.5)
    """

    strategy: BackoffStrategy = BackoffStrategy.EXPONENTIAL_JITTER
    max_retries: int = 3
    base_delay: float = 1.0
    max_delay: float = 30.0
    jitter_factor: float = 0.1
    respect_retry_after: bool = True

    CONSERVATIVE: ClassVar[RetryConfig]
    BALANCED: ClassVar[RetryConfig]
    AGGRESSIVE: ClassVar[RetryConfig]
    DISABLED: ClassVar[RetryConfig]

    def __post_init__(self) -> None:
        """Validate retry configuration."""
        if self.max_retries < 0:
            raise ValueError("max_retries must be non-negative")
        if self.base_delay <= 0:
            raise ValueError("base_delay must be positive")
        if self.max_delay < self.base_delay:
            raise ValueError("max_delay must be >= base_delay")
        if not 0.0 <= self.jitter_factor <= 1.0:
            raise ValueError("jitter_factor must be between 0.0 and 1.0")


RetryConfig.CONSERVATIVE = RetryConfig(
    max_retries=2,
    base_delay=2.0,
    max_delay=60.0,
    jitter_factor=0.2,
)
RetryConfig.BALANCED = RetryConfig()
RetryConfig.AGGRESSIVE = RetryConfig(
    max_retries=5,
    base_delay=0.5,
    max_delay=15.0,
    jitter_factor=0.05,
)
RetryConfig.DISABLED = RetryConfig(max_retries=0)


@dataclass
class RetryAttemptState:
    """State of one retried call. Never shared between calls.

    Attributes:
        attempt: Zero-based index of the current (or last) attempt
        last_error: Most recent failure, if any
        next_delay: Delay scheduled before the next attempt
        cumulative_delay: Total seconds spent waiting so far
        last_retry_after: Most recent server retry-after hint seen on a 429
        state: Current lifecycle state
    """

    attempt: int = 0
    last_error: BaseException | None = None
    next_delay: float | None = None
    cumulative_delay: float = 0.0
    last_retry_after: float | None = None
    state: RetryState = RetryState.IDLE

    @property
    def calls_made(self) -> int:
        if self.state is RetryState.IDLE:
            return 0
        return self.attempt + 1

    def transition(self, new_state: RetryState) -> None:
        if new_state not in _TRANSITIONS[self.state]:
            raise RuntimeError(f"Illegal retry state transition {self.state.value} -> {new_state.value}")
        self.state = new_state
