"""Cursor pagination wire models."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core import limits

T = TypeVar("T")


class PaginatedResponse(BaseModel, Generic[T]):
    """One page of a cursor-paginated list response.

    ``next_cursor`` is only meaningful while ``has_more`` is true; use
    ``effective_cursor`` to read it.
    """

    results: list[T] = Field(default_factory=list)
    next_cursor: str | None = None
    has_more: bool = False
    type: str | None = None
    object_type: str | None = Field(default=None, alias="object")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def effective_cursor(self) -> str | None:
        return self.next_cursor if self.has_more else None

    @property
    def is_last_page(self) -> bool:
        return not self.has_more

    @property
    def result_count(self) -> int:
        return len(self.results)


class PaginationRequest(BaseModel):
    """Cursor and page size sent with a list request."""

    start_cursor: str | None = None
    page_size: int = limits.DEFAULT_PAGE_SIZE

    model_config = ConfigDict(frozen=True)

    @field_validator("page_size")
    @classmethod
    def validate_page_size(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("Page size must be positive")
        if v > limits.MAX_PAGE_SIZE:
            raise ValueError(f"Page size cannot exceed {limits.MAX_PAGE_SIZE}")
        return v

    def next_page(self, cursor: str | None) -> PaginationRequest:
        return self.model_copy(update={"start_cursor": cursor})

    def to_params(self) -> dict[str, Any]:
        """Query/body fields; the cursor is omitted on the first page."""
        return self.model_dump(exclude_none=True)
