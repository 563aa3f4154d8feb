"""Custom exception hierarchy.

Every exception carries a ``kind`` discriminant so callers can dispatch on
the closed taxonomy without isinstance chains::

    match err.kind:
        case ErrorKind.RATE_LIMIT: ...
        case ErrorKind.VALIDATION: ...
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from .enums import ErrorKind

if TYPE_CHECKING:
    from ..runtime.retry.rate_limit import RateLimitState
    from ..validation.models import ValidationResult, ValidationViolation


class NotionError(Exception):
    """Base exception for all library errors."""

    kind: ClassVar[ErrorKind] = ErrorKind.UNEXPECTED


class NetworkError(NotionError):
    """Transport-level failure (connection refused, reset, timeout, DNS)."""

    kind = ErrorKind.NETWORK

    def __init__(self, message: str = "Network error occurred", cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class APIError(NotionError):
    """Error response returned by the API."""

    kind = ErrorKind.API

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        *,
        code: str | None = None,
        details: str | None = None,
        retry_after: float | None = None,
        rate_limit: RateLimitState | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.details = details
        self.retry_after = retry_after
        self.rate_limit = rate_limit

    @property
    def is_rate_limited(self) -> bool:
        return self.status_code == 429

    @property
    def is_server_error(self) -> bool:
        return self.status_code is not None and 500 <= self.status_code <= 599


class ResponseDecodeError(APIError):
    """Response body could not be decoded. Never retried."""


class RateLimitError(APIError):
    """Rate limit still exceeded after the retry budget was spent."""

    kind = ErrorKind.RATE_LIMIT

    def __init__(self, message: str = "Rate limit exceeded", retry_after: float | None = None) -> None:
        if retry_after is not None:
            message = f"{message} (retry after {retry_after:g} seconds)"
        super().__init__(message, status_code=429, code="rate_limited", retry_after=retry_after)


class ValidationError(NotionError):
    """Outbound request violates API limits and was not sent.

    Raised only by the strict send path. ``result`` holds every violation
    found, not just the first.
    """

    kind = ErrorKind.VALIDATION

    def __init__(self, result: ValidationResult, message: str = "Request validation failed") -> None:
        super().__init__(f"{message}\n{result.summary()}")
        self.result = result

    @property
    def violations(self) -> list[ValidationViolation]:
        return list(self.result.violations)


class UnexpectedError(NotionError):
    """Condition outside the documented failure modes."""

    kind = ErrorKind.UNEXPECTED

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(f"Unexpected error: {message}")
        self.cause = cause
