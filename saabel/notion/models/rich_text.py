"""Rich text data model.

A rich text value is an ordered array of segments; each segment is a run of
uniformly styled text, a mention, or an inline equation. The server limits
content length per segment, not per array.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class Annotations(BaseModel):
    """Styling applied to a rich text segment."""

    bold: bool = False
    italic: bool = False
    strikethrough: bool = False
    underline: bool = False
    code: bool = False
    color: str = "default"

    model_config = ConfigDict(frozen=True)


class Link(BaseModel):
    url: str

    model_config = ConfigDict(frozen=True)


class TextContent(BaseModel):
    content: str
    link: Link | None = None

    model_config = ConfigDict(frozen=True)


class Equation(BaseModel):
    expression: str

    model_config = ConfigDict(frozen=True)


class RichText(BaseModel):
    """One rich text segment."""

    type: Literal["text", "mention", "equation"] = "text"
    text: TextContent | None = None
    mention: dict[str, Any] | None = None
    equation: Equation | None = None
    annotations: Annotations = Field(default_factory=Annotations)
    plain_text: str | None = None
    href: str | None = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def of(
        cls,
        content: str,
        *,
        annotations: Annotations | None = None,
        link: str | None = None,
    ) -> RichText:
        """Create a text segment."""
        return cls(
            type="text",
            text=TextContent(content=content, link=Link(url=link) if link else None),
            annotations=annotations or Annotations(),
        )

    @classmethod
    def of_equation(cls, expression: str, *, annotations: Annotations | None = None) -> RichText:
        return cls(
            type="equation",
            equation=Equation(expression=expression),
            annotations=annotations or Annotations(),
        )

    @property
    def content(self) -> str:
        """Text the server counts against the per-segment limit."""
        if self.type == "text" and self.text is not None:
            return self.text.content
        if self.type == "equation" and self.equation is not None:
            return self.equation.expression
        return self.plain_text or ""

    @property
    def is_splittable(self) -> bool:
        return self.type == "text" and self.text is not None

    @property
    def link_url(self) -> str | None:
        if self.text is not None and self.text.link is not None:
            return self.text.link.url
        return self.href

    def with_content(self, content: str) -> RichText:
        """Copy of this text segment holding ``content``, styling untouched."""
        if self.text is None:
            raise ValueError(f"Cannot replace content of a {self.type} segment")
        update: dict[str, Any] = {"text": self.text.model_copy(update={"content": content})}
        if self.plain_text is not None:
            update["plain_text"] = content
        return self.model_copy(update=update)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


def plain_text(segments: list[RichText]) -> str:
    """Concatenated content of a rich text array."""
    return "".join(segment.content for segment in segments)
