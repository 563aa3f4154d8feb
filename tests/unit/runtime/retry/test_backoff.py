"""Unit tests for backoff computation and failure classification."""

from __future__ import annotations

import random

import aiohttp
import pytest

from saabel.notion.core import (
    APIError,
    BackoffStrategy,
    NetworkError,
    RateLimitError,
    ResponseDecodeError,
    RetryDisposition,
)
from saabel.notion.runtime.retry import RateLimitState, RetryConfig, classify_error, compute_delay, retry_after_hint


class _Fixed:
    """Uniform source that always returns one end of the range."""

    def __init__(self, upper: bool) -> None:
        self.upper = upper

    def uniform(self, a: float, b: float) -> float:
        return b if self.upper else a


class TestComputeDelay:
    """Test compute_delay across strategies."""

    def test_exponential_doubles_until_cap(self):
        """Test exponential delays double until max_delay caps them."""
        config = RetryConfig(strategy=BackoffStrategy.EXPONENTIAL, base_delay=1.0, max_delay=10.0)
        delays = [compute_delay(config, n) for n in range(6)]
        assert delays == [1.0, 2.0, 4.0, 8.0, 10.0, 10.0]

    @pytest.mark.parametrize("strategy", list(BackoffStrategy))
    @pytest.mark.parametrize("base_delay,max_delay", [(0.1, 0.1), (0.5, 3.0), (1.0, 60.0), (2.0, 5.0)])
    def test_never_exceeds_max_delay(self, strategy, base_delay, max_delay):
        """Test no strategy ever waits longer than max_delay."""
        config = RetryConfig(strategy=strategy, base_delay=base_delay, max_delay=max_delay, jitter_factor=1.0)
        rng = random.Random(7)
        for attempt in range(40):
            assert 0.0 <= compute_delay(config, attempt, rng=rng) <= max_delay

    @pytest.mark.parametrize("base_delay,max_delay", [(0.25, 1.0), (1.0, 30.0), (3.0, 100.0)])
    def test_exponential_is_non_decreasing(self, base_delay, max_delay):
        """Test un-jittered exponential delays never shrink."""
        config = RetryConfig(strategy=BackoffStrategy.EXPONENTIAL, base_delay=base_delay, max_delay=max_delay)
        delays = [compute_delay(config, n) for n in range(20)]
        assert delays == sorted(delays)
        assert delays[-1] == max_delay

    def test_fixed_strategy_is_constant(self):
        """Test the fixed strategy waits base_delay every time."""
        config = RetryConfig(strategy=BackoffStrategy.FIXED, base_delay=0.5, max_delay=5.0)
        assert {compute_delay(config, n) for n in range(5)} == {0.5}

    def test_jitter_stays_within_factor_and_cap(self):
        """Test jittered delays lie in [d*(1-j), min(max, d*(1+j))]."""
        config = RetryConfig(base_delay=1.0, max_delay=30.0, jitter_factor=0.1)
        rng = random.Random(42)
        for attempt in range(8):
            nominal = min(30.0, 2.0**attempt)
            for _ in range(50):
                delay = compute_delay(config, attempt, rng=rng)
                assert nominal * 0.9 - 1e-9 <= delay <= min(30.0, nominal * 1.1) + 1e-9

    def test_jitter_is_reclamped_to_max_delay(self):
        """Test jitter cannot push a delay past max_delay."""
        config = RetryConfig(base_delay=1.0, max_delay=8.0, jitter_factor=0.5)
        assert compute_delay(config, 3, rng=_Fixed(upper=True)) == 8.0
        assert compute_delay(config, 3, rng=_Fixed(upper=False)) == 4.0

    def test_retry_after_overrides_computed_delay(self):
        """Test a server hint replaces the curve, even above max_delay."""
        config = RetryConfig(max_delay=2.0)
        assert compute_delay(config, 0, retry_after=5.0) == 5.0
        assert compute_delay(config, 0, retry_after=-1.0) == 0.0

    def test_non_finite_retry_after_uses_curve(self):
        """Test an infinite or NaN hint is ignored in favour of the backoff curve."""
        config = RetryConfig(strategy=BackoffStrategy.EXPONENTIAL, base_delay=1.0, max_delay=30.0)
        assert compute_delay(config, 2, retry_after=float("inf")) == 4.0
        assert compute_delay(config, 2, retry_after=float("nan")) == 4.0

    def test_retry_after_ignored_when_disabled(self):
        """Test the hint is ignored when respect_retry_after is off."""
        config = RetryConfig(strategy=BackoffStrategy.EXPONENTIAL, respect_retry_after=False)
        assert compute_delay(config, 1, retry_after=5.0) == 2.0

    def test_huge_attempt_does_not_overflow(self):
        """Test very large attempt numbers stay at max_delay."""
        config = RetryConfig(strategy=BackoffStrategy.EXPONENTIAL, max_delay=30.0)
        assert compute_delay(config, 10_000) == 30.0

    def test_negative_attempt_rejected(self):
        """Test a negative attempt index raises ValueError."""
        with pytest.raises(ValueError):
            compute_delay(RetryConfig(), -1)


class TestClassifyError:
    """Test retryable versus final failures."""

    @pytest.mark.parametrize(
        ("error", "expected"),
        [
            (APIError("slow down", 429), RetryDisposition.RATE_LIMITED),
            (RateLimitError(), RetryDisposition.RATE_LIMITED),
            (APIError("oops", 500), RetryDisposition.SERVER_ERROR),
            (APIError("bad gateway", 502), RetryDisposition.SERVER_ERROR),
            (APIError("unavailable", 503), RetryDisposition.SERVER_ERROR),
            (NetworkError(), RetryDisposition.NETWORK),
            (aiohttp.ServerDisconnectedError(), RetryDisposition.NETWORK),
            (ConnectionResetError(), RetryDisposition.NETWORK),
            (TimeoutError(), RetryDisposition.NETWORK),
            (APIError("bad request", 400), RetryDisposition.NOT_RETRYABLE),
            (APIError("unauthorized", 401), RetryDisposition.NOT_RETRYABLE),
            (APIError("not found", 404), RetryDisposition.NOT_RETRYABLE),
            (ResponseDecodeError("garbage", 200), RetryDisposition.NOT_RETRYABLE),
            (ValueError("bug"), RetryDisposition.NOT_RETRYABLE),
        ],
    )
    def test_classification(self, error, expected):
        """Test each failure maps to its retry disposition."""
        assert classify_error(error) is expected


class TestRetryAfterHint:
    """Test retry_after_hint extraction."""

    def test_reads_error_field(self):
        """Test the hint comes from APIError.retry_after."""
        assert retry_after_hint(APIError("x", 429, retry_after=3.0)) == 3.0

    def test_falls_back_to_rate_limit_state(self):
        """Test the hint falls back to the rate limit state."""
        error = APIError("x", 429, rate_limit=RateLimitState(retry_after=7.0))
        assert retry_after_hint(error) == 7.0

    def test_non_finite_hint_dropped(self):
        """Test an infinite hint on the error is not reported."""
        assert retry_after_hint(APIError("slow", 429, retry_after=float("inf"))) is None

    def test_none_for_other_errors(self):
        """Test errors without a hint report None."""
        assert retry_after_hint(NetworkError()) is None
        assert retry_after_hint(APIError("x", 500)) is None
