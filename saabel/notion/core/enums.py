"""Core enumerations shared by the request execution layers.

Architecture:
    This module defines the closed value sets used by the retry engine, the
    validator and the exception hierarchy. Keeping them in one place gives
    every layer the same vocabulary and lets callers dispatch on them
    exhaustively.

Key Types:
    - BackoffStrategy: Shape of the delay curve between retry attempts
    - RetryState: States of a single retried call
    - RetryDisposition: Classification of a failed attempt
    - ErrorKind: Discriminant carried by every library exception
    - ViolationType: Validation error/warning taxonomy
"""

from __future__ import annotations

from enum import Enum


class BackoffStrategy(str, Enum):
    """Delay curve applied between retry attempts."""

    FIXED = "fixed"
    EXPONENTIAL = "exponential"
    EXPONENTIAL_JITTER = "exponential_jitter"

    @property
    def is_exponential(self) -> bool:
        return self is not BackoffStrategy.FIXED

    @property
    def uses_jitter(self) -> bool:
        return self is BackoffStrategy.EXPONENTIAL_JITTER


class RetryState(str, Enum):
    """Lifecycle of one retried call.

    IDLE -> ATTEMPTING -> {SUCCESS, NON_RETRYABLE_FAILURE, RETRYING, EXHAUSTED};
    RETRYING always leads back to ATTEMPTING.
    """

    IDLE = "idle"
    ATTEMPTING = "attempting"
    RETRYING = "retrying"
    SUCCESS = "success"
    NON_RETRYABLE_FAILURE = "non_retryable_failure"
    EXHAUSTED = "exhausted"

    @property
    def is_terminal(self) -> bool:
        return self in (
            RetryState.SUCCESS,
            RetryState.NON_RETRYABLE_FAILURE,
            RetryState.EXHAUSTED,
        )


class RetryDisposition(str, Enum):
    """How the retry engine treats a failed attempt."""

    RATE_LIMITED = "rate_limited"
    SERVER_ERROR = "server_error"
    NETWORK = "network"
    NOT_RETRYABLE = "not_retryable"

    @property
    def retryable(self) -> bool:
        return self is not RetryDisposition.NOT_RETRYABLE


class ErrorKind(str, Enum):
    """Discriminant of the closed error taxonomy."""

    NETWORK = "network"
    API = "api"
    RATE_LIMIT = "rate_limit"
    VALIDATION = "validation"
    UNEXPECTED = "unexpected"


class ViolationType(str, Enum):
    """Kinds of request validation findings.

    Error-class members block sending in strict mode; warning-class members
    never do.
    """

    CONTENT_TOO_LONG = "content_too_long"
    ARRAY_TOO_LARGE = "array_too_large"
    PAYLOAD_TOO_LARGE = "payload_too_large"
    INVALID_URL = "invalid_url"
    INVALID_EMAIL = "invalid_email"
    INVALID_PHONE = "invalid_phone"
    CONTENT_NEAR_LIMIT = "content_near_limit"
    ARRAY_NEAR_LIMIT = "array_near_limit"
    PAYLOAD_NEAR_LIMIT = "payload_near_limit"

    @property
    def is_warning(self) -> bool:
        return self in _WARNING_TYPES

    @property
    def is_error(self) -> bool:
        return not self.is_warning


_WARNING_TYPES = frozenset(
    {
        ViolationType.CONTENT_NEAR_LIMIT,
        ViolationType.ARRAY_NEAR_LIMIT,
        ViolationType.PAYLOAD_NEAR_LIMIT,
    }
)
