"""Unit tests for core enums."""

import pytest

from saabel.notion.core import BackoffStrategy, RetryDisposition, RetryState, ViolationType


@pytest.mark.parametrize(
    ("strategy", "exponential", "jitter"),
    [
        (BackoffStrategy.FIXED, False, False),
        (BackoffStrategy.EXPONENTIAL, True, False),
        (BackoffStrategy.EXPONENTIAL_JITTER, True, True),
    ],
)
def test_backoff_strategy_flags(strategy, exponential, jitter):
    """Test BackoffStrategy helper properties."""
    assert strategy.is_exponential is exponential
    assert strategy.uses_jitter is jitter


def test_backoff_strategy_from_string():
    """Test BackoffStrategy parses from its value."""
    assert BackoffStrategy("exponential_jitter") is BackoffStrategy.EXPONENTIAL_JITTER


def test_retry_state_terminal_states():
    """Test which retry states are terminal."""
    terminal = {s for s in RetryState if s.is_terminal}
    assert terminal == {RetryState.SUCCESS, RetryState.NON_RETRYABLE_FAILURE, RetryState.EXHAUSTED}


def test_retry_disposition_retryable():
    """Test which dispositions are retryable."""
    assert RetryDisposition.RATE_LIMITED.retryable
    assert RetryDisposition.SERVER_ERROR.retryable
    assert RetryDisposition.NETWORK.retryable
    assert not RetryDisposition.NOT_RETRYABLE.retryable


def test_violation_type_split_into_errors_and_warnings():
    """Test every violation type is exactly one of error or warning."""
    warnings = {v for v in ViolationType if v.is_warning}
    assert warnings == {
        ViolationType.CONTENT_NEAR_LIMIT,
        ViolationType.ARRAY_NEAR_LIMIT,
        ViolationType.PAYLOAD_NEAR_LIMIT,
    }
    for v in ViolationType:
        assert v.is_error != v.is_warning
