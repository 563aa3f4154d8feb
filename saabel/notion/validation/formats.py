"""Format checks for URL, email and phone values."""

from __future__ import annotations

import re
from urllib.parse import urlsplit

_EMAIL_RE = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s.]+")
_PHONE_RE = re.compile(r"\+?[0-9 ().\-]+")
_MIN_PHONE_DIGITS = 3


def is_valid_url(url: str) -> bool:
    """Absolute http(s) URL with a host."""
    try:
        parts = urlsplit(url)
    except ValueError:
        return False
    return parts.scheme in ("http", "https") and bool(parts.netloc) and not any(c.isspace() for c in url)


def is_valid_email(email: str) -> bool:
    return bool(_EMAIL_RE.fullmatch(email))


def is_valid_phone(phone: str) -> bool:
    if not _PHONE_RE.fullmatch(phone):
        return False
    return sum(c.isdigit() for c in phone) >= _MIN_PHONE_DIGITS
