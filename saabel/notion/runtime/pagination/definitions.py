"""Pagination contracts and configuration."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from ...core import limits

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class PaginatedPage(Protocol[T_co]):
    """Any page exposing ``results``, ``next_cursor`` and ``has_more``.

    ``PaginatedResponse`` satisfies it, as does any user type with the same
    three attributes.
    """

    @property
    def results(self) -> Sequence[T_co]: ...

    @property
    def next_cursor(self) -> str | None: ...

    @property
    def has_more(self) -> bool: ...


PageFetcher = Callable[[str | None], Awaitable[Any]]
"""Fetches the page starting at ``cursor`` (None for the first page)."""


@dataclass(frozen=True)
class PaginationConfig:
    """Pagination behaviour for list endpoints.

    Attributes:
        page_size: Items requested per page (1..100)
        max_pages: Stop after this many pages (None = follow the cursor to the end)
    """

    page_size: int = limits.DEFAULT_PAGE_SIZE
    max_pages: int | None = None

    def __post_init__(self) -> None:
        if self.page_size <= 0:
            raise ValueError("page_size must be positive")
        if self.page_size > limits.MAX_PAGE_SIZE:
            raise ValueError(f"page_size cannot exceed {limits.MAX_PAGE_SIZE}")
        if self.max_pages is not None and self.max_pages <= 0:
            raise ValueError("max_pages must be positive")


@dataclass
class PaginatedResult(Generic[T]):
    """Result of draining a paginated endpoint.

    Attributes:
        items: All items in server order
        total_pages: Number of pages fetched
        final_cursor: Cursor for the next unfetched page, if the drain was cut short
        has_more: Whether the server still had results when the drain stopped
    """

    items: list[T] = field(default_factory=list)
    total_pages: int = 0
    final_cursor: str | None = None
    has_more: bool = False

    @property
    def total_items(self) -> int:
        return len(self.items)

    @property
    def is_complete(self) -> bool:
        return not self.has_more
