"""Block request model.

Blocks are modelled with one generic class: the block ``type`` selects the
wire key, text-bearing types carry ``rich_text``, media types carry a
``caption``, and anything type-specific (language, checked, url, ...) goes in
``attributes``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .rich_text import RichText

TEXT_BLOCK_TYPES = frozenset(
    {
        "paragraph",
        "heading_1",
        "heading_2",
        "heading_3",
        "bulleted_list_item",
        "numbered_list_item",
        "to_do",
        "toggle",
        "quote",
        "callout",
        "code",
    }
)

CAPTION_BLOCK_TYPES = frozenset({"code", "image", "video", "audio", "file", "pdf", "bookmark"})


def _segments(text: str | list[RichText]) -> list[RichText]:
    return [RichText.of(text)] if isinstance(text, str) else list(text)


class BlockRequest(BaseModel):
    """A block to create (page children or appended children)."""

    type: str
    rich_text: list[RichText] = Field(default_factory=list)
    caption: list[RichText] = Field(default_factory=list)
    attributes: dict[str, Any] = Field(default_factory=dict)
    children: list[BlockRequest] | None = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def paragraph(cls, text: str | list[RichText]) -> BlockRequest:
        return cls(type="paragraph", rich_text=_segments(text))

    @classmethod
    def heading(cls, level: int, text: str | list[RichText]) -> BlockRequest:
        if level not in (1, 2, 3):
            raise ValueError("Heading level must be 1, 2 or 3")
        return cls(type=f"heading_{level}", rich_text=_segments(text))

    @classmethod
    def bulleted_list_item(cls, text: str | list[RichText]) -> BlockRequest:
        return cls(type="bulleted_list_item", rich_text=_segments(text))

    @classmethod
    def numbered_list_item(cls, text: str | list[RichText]) -> BlockRequest:
        return cls(type="numbered_list_item", rich_text=_segments(text))

    @classmethod
    def to_do(cls, text: str | list[RichText], *, checked: bool = False) -> BlockRequest:
        return cls(type="to_do", rich_text=_segments(text), attributes={"checked": checked})

    @classmethod
    def quote(cls, text: str | list[RichText]) -> BlockRequest:
        return cls(type="quote", rich_text=_segments(text))

    @classmethod
    def code(cls, text: str | list[RichText], *, language: str = "plain text") -> BlockRequest:
        return cls(type="code", rich_text=_segments(text), attributes={"language": language})

    @classmethod
    def image(cls, url: str, caption: str | list[RichText] | None = None) -> BlockRequest:
        return cls(
            type="image",
            caption=_segments(caption) if caption else [],
            attributes={"type": "external", "external": {"url": url}},
        )

    @classmethod
    def divider(cls) -> BlockRequest:
        return cls(type="divider")

    def rich_text_fields(self) -> dict[str, list[RichText]]:
        """Rich text arrays carried by this block, keyed by field name."""
        fields: dict[str, list[RichText]] = {}
        if self.type in TEXT_BLOCK_TYPES:
            fields["rich_text"] = list(self.rich_text)
        if self.type in CAPTION_BLOCK_TYPES:
            fields["caption"] = list(self.caption)
        return fields

    def to_payload(self) -> dict[str, Any]:
        body: dict[str, Any] = dict(self.attributes)
        for name, segments in self.rich_text_fields().items():
            body[name] = [segment.to_payload() for segment in segments]
        if self.children:
            body["children"] = [child.to_payload() for child in self.children]
        return {"object": "block", "type": self.type, self.type: body}
