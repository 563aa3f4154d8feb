"""Lossless splitting of oversize rich text.

The server measures text in UTF-16 code units, so a character outside the
Basic Multilingual Plane counts as two. Pieces are cut on code point
boundaries only (a surrogate pair is never separated) and, where the piece
would not become empty, never between a base character and the combining
marks, variation selectors or zero-width-joined characters that follow it.
"""

from __future__ import annotations

import unicodedata

from ..core import limits
from ..models.rich_text import RichText

_ZWJ = "\u200d"


def _units(char: str) -> int:
    return 2 if ord(char) > 0xFFFF else 1


def _is_extender(char: str) -> bool:
    if char == _ZWJ:
        return True
    if unicodedata.category(char) in ("Mn", "Mc", "Me"):
        return True
    # Emoji skin tone modifiers
    return 0x1F3FB <= ord(char) <= 0x1F3FF


def _attaches_to_previous(text: str, index: int) -> bool:
    return _is_extender(text[index]) or (index > 0 and text[index - 1] == _ZWJ)


def _safe_cut(text: str, start: int, end: int) -> int:
    """Move a cut at ``end`` back to the start of its character cluster."""
    cut = end
    while cut > start and _attaches_to_previous(text, cut):
        cut -= 1
    return cut if cut > start else end


def split_text(text: str, max_length: int = limits.MAX_RICH_TEXT_LENGTH) -> list[str]:
    """Split ``text`` into consecutive pieces of at most ``max_length`` units.

    ``"".join(split_text(t)) == t`` always holds. Text already within the
    limit comes back as a single piece.
    """
    if max_length < 2:
        raise ValueError("max_length must be at least 2 to hold any character")
    if limits.text_length(text) <= max_length:
        return [text]

    pieces: list[str] = []
    start = 0
    units = 0
    i = 0
    while i < len(text):
        width = _units(text[i])
        if units + width > max_length:
            cut = _safe_cut(text, start, i)
            pieces.append(text[start:cut])
            start = cut
            units = sum(_units(c) for c in text[start:i])
            continue
        units += width
        i += 1
    pieces.append(text[start:])
    return pieces


def split_rich_text(segment: RichText, max_length: int = limits.MAX_RICH_TEXT_LENGTH) -> list[RichText]:
    """Split one segment into segments within the limit, styling duplicated.

    Raises:
        ValueError: The segment is over the limit but is not plain text
            (equations and mentions cannot be split)
    """
    content = segment.content
    if limits.text_length(content) <= max_length:
        return [segment]
    if not segment.is_splittable:
        raise ValueError(
            f"{segment.type} content exceeds {max_length} characters and cannot be split"
        )
    return [segment.with_content(piece) for piece in split_text(content, max_length)]


def split_rich_text_array(
    segments: list[RichText], max_length: int = limits.MAX_RICH_TEXT_LENGTH
) -> list[RichText]:
    result: list[RichText] = []
    for segment in segments:
        result.extend(split_rich_text(segment, max_length))
    return result
