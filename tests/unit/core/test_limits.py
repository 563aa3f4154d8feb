"""Unit tests for API limit constants and helpers."""

import pytest

from saabel.notion.core import limits


def test_text_length_counts_utf16_units():
    """Test characters outside the BMP count as two units."""
    assert limits.text_length("abc") == 3
    assert limits.text_length("é") == 1
    assert limits.text_length("\U0001f600") == 2
    assert limits.text_length("") == 0


def test_rich_text_limit_boundary():
    """Test the rich text limit boundary."""
    assert not limits.is_rich_text_too_long("a" * 2000)
    assert limits.is_rich_text_too_long("a" * 2001)
    # 1000 emoji are 2000 units
    assert not limits.is_rich_text_too_long("\U0001f600" * 1000)
    assert limits.is_rich_text_too_long("\U0001f600" * 1000 + "a")


def test_url_and_array_and_payload_limits():
    """Test URL, array and payload limit helpers."""
    assert limits.is_url_too_long("https://x.io/" + "a" * 2000)
    assert not limits.is_array_too_large(100)
    assert limits.is_array_too_large(101)
    assert limits.is_array_too_large(3, limit=2)
    assert not limits.is_payload_too_large(500 * 1024)
    assert limits.is_payload_too_large(500 * 1024 + 1)


def test_is_near_limit_band():
    """Test the near-limit band."""
    assert not limits.is_near_limit(1799, 2000)
    assert limits.is_near_limit(1800, 2000)
    assert limits.is_near_limit(2000, 2000)
    assert not limits.is_near_limit(2001, 2000)


def test_chunk_array():
    """Test batches preserve order and respect the maximum size."""
    batches = limits.chunk_array(list(range(250)))
    assert [len(b) for b in batches] == [100, 100, 50]
    assert [x for b in batches for x in b] == list(range(250))
    assert limits.chunk_array([]) == []


def test_chunk_array_rejects_non_positive_size():
    """Test chunk_array rejects a size below one."""
    with pytest.raises(ValueError, match="max_size"):
        limits.chunk_array([1, 2], max_size=0)
