"""Core components."""

from . import limits
from .enums import (
    BackoffStrategy,
    ErrorKind,
    RetryDisposition,
    RetryState,
    ViolationType,
)
from .exceptions import (
    APIError,
    NetworkError,
    NotionError,
    RateLimitError,
    ResponseDecodeError,
    UnexpectedError,
    ValidationError,
)

__all__ = [
    "limits",
    "BackoffStrategy",
    "ErrorKind",
    "RetryDisposition",
    "RetryState",
    "ViolationType",
    "NotionError",
    "NetworkError",
    "APIError",
    "ResponseDecodeError",
    "RateLimitError",
    "ValidationError",
    "UnexpectedError",
]
