"""Saabel Notion - Resilient async client core for the Notion API."""

__version__ = "0.1.0"

from .bootstrap import config_from_env
from .clients import NotionClient
from .config import NotionConfig
from .core import (
    APIError,
    BackoffStrategy,
    ErrorKind,
    NetworkError,
    NotionError,
    RateLimitError,
    ResponseDecodeError,
    RetryState,
    UnexpectedError,
    ValidationError,
    ViolationType,
    limits,
)
from .models import (
    AppendBlockChildrenRequest,
    BlockRequest,
    CreateDatabaseRequest,
    CreatePageRequest,
    PaginatedResponse,
    PaginationRequest,
    Parent,
    RichText,
    RichTextBuilder,
    TitleProperty,
    UpdatePageRequest,
)
from .runtime.pagination import (
    PaginatedResult,
    PaginationConfig,
    Paginator,
    collect_all,
    iterate_items,
    iterate_pages,
    with_retry,
)
from .runtime.rest import RESTTransport
from .runtime.retry import (
    RateLimitState,
    RetryConfig,
    RetryExecutor,
    compute_delay,
    execute_with_retry,
)
from .validation import (
    AutoFixResult,
    RequestValidator,
    ValidationConfig,
    ValidationResult,
    ValidationViolation,
    split_text,
)

__all__ = [
    "__version__",
    # Config
    "NotionConfig",
    "config_from_env",
    # Client
    "NotionClient",
    "RESTTransport",
    # Retry
    "BackoffStrategy",
    "RateLimitState",
    "RetryConfig",
    "RetryExecutor",
    "RetryState",
    "compute_delay",
    "execute_with_retry",
    # Pagination
    "PaginatedResponse",
    "PaginatedResult",
    "PaginationConfig",
    "PaginationRequest",
    "Paginator",
    "collect_all",
    "iterate_items",
    "iterate_pages",
    "with_retry",
    # Validation
    "AutoFixResult",
    "RequestValidator",
    "ValidationConfig",
    "ValidationResult",
    "ValidationViolation",
    "ViolationType",
    "split_text",
    "limits",
    # Models
    "AppendBlockChildrenRequest",
    "BlockRequest",
    "CreateDatabaseRequest",
    "CreatePageRequest",
    "Parent",
    "RichText",
    "RichTextBuilder",
    "TitleProperty",
    "UpdatePageRequest",
    # Exceptions
    "NotionError",
    "NetworkError",
    "APIError",
    "ResponseDecodeError",
    "RateLimitError",
    "ValidationError",
    "UnexpectedError",
    "ErrorKind",
]
