"""Server-imposed request and response limits.

Values follow https://developers.notion.com/reference/request-limits and
should be updated when the API changes them.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

# Payload
MAX_BLOCK_ELEMENTS = 1000
MAX_PAYLOAD_SIZE_BYTES = 500 * 1024

# Content (character counts as the server measures them, UTF-16 code units)
MAX_RICH_TEXT_LENGTH = 2000
MAX_URL_LENGTH = 2000
MAX_EQUATION_LENGTH = 1000
MAX_EMAIL_LENGTH = 200
MAX_PHONE_LENGTH = 200

# Collections
MAX_ARRAY_ELEMENTS = 100
MAX_MULTI_SELECT_OPTIONS = 100
MAX_RELATION_PAGES = 100
MAX_PEOPLE_USERS = 100

# Responses
DEFAULT_PAGE_SIZE = 100
MAX_PAGE_SIZE = 100

# Fraction of a limit at which a near-limit warning is reported
NEAR_LIMIT_RATIO = 0.9


def text_length(text: str) -> int:
    """Length of ``text`` in UTF-16 code units."""
    return len(text.encode("utf-16-le")) // 2


def is_rich_text_too_long(text: str) -> bool:
    return text_length(text) > MAX_RICH_TEXT_LENGTH


def is_url_too_long(url: str) -> bool:
    return text_length(url) > MAX_URL_LENGTH


def is_array_too_large(size: int, limit: int = MAX_ARRAY_ELEMENTS) -> bool:
    return size > limit


def is_payload_too_large(size_bytes: int) -> bool:
    return size_bytes > MAX_PAYLOAD_SIZE_BYTES


def is_near_limit(value: int, limit: int) -> bool:
    """True when ``value`` is within the warning band but not over ``limit``."""
    return limit * NEAR_LIMIT_RATIO <= value <= limit


def chunk_array(items: Sequence[T], max_size: int = MAX_ARRAY_ELEMENTS) -> list[list[T]]:
    """Split ``items`` into consecutive batches of at most ``max_size``."""
    if max_size <= 0:
        raise ValueError("max_size must be positive")
    return [list(items[i : i + max_size]) for i in range(0, len(items), max_size)]
