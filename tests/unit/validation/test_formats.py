"""Unit tests for URL, email and phone format checks."""

import pytest

from saabel.notion.validation import is_valid_email, is_valid_phone, is_valid_url


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("https://www.notion.so/page", True),
        ("http://example.com/a?b=c#d", True),
        ("ftp://example.com/file", False),
        ("example.com", False),
        ("https://", False),
        ("https://exa mple.com", False),
        ("", False),
    ],
)
def test_is_valid_url(url, expected):
    """Test URL format checks."""
    assert is_valid_url(url) is expected


@pytest.mark.parametrize(
    ("email", "expected"),
    [
        ("user@example.com", True),
        ("first.last+tag@sub.example.org", True),
        ("user@example", False),
        ("user example@example.com", False),
        ("@example.com", False),
        ("user@@example.com", False),
        ("user@example.com\n", False),
    ],
)
def test_is_valid_email(email, expected):
    """Test email format checks."""
    assert is_valid_email(email) is expected


@pytest.mark.parametrize(
    ("phone", "expected"),
    [
        ("+1 (555) 010-9999", True),
        ("555.0100", True),
        ("12", False),
        ("call me", False),
        ("+44 20 7946 0958 ext", False),
        ("5550100\n", False),
        ("555 0100\n", False),
    ],
)
def test_is_valid_phone(phone, expected):
    """Test phone format checks."""
    assert is_valid_phone(phone) is expected
