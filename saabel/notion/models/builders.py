"""Fluent builder for rich text arrays.

Example:
    >>> segments = (RichTextBuilder()
    ...     .text("Read the ")
    ...     .link("docs", "https://developers.notion.com")
    ...     .text(" before ")
    ...     .bold("shipping")
    ...     .build())
"""

from __future__ import annotations

from .rich_text import Annotations, RichText


class RichTextBuilder:
    """Accumulates rich text segments in order.

    Every method returns the builder for chaining; ``build()`` returns a new
    list so the builder can keep growing afterwards.
    """

    def __init__(self) -> None:
        self._segments: list[RichText] = []

    def text(
        self,
        content: str,
        *,
        bold: bool = False,
        italic: bool = False,
        strikethrough: bool = False,
        underline: bool = False,
        code: bool = False,
        color: str = "default",
        link: str | None = None,
    ) -> RichTextBuilder:
        annotations = Annotations(
            bold=bold,
            italic=italic,
            strikethrough=strikethrough,
            underline=underline,
            code=code,
            color=color,
        )
        self._segments.append(RichText.of(content, annotations=annotations, link=link))
        return self

    def bold(self, content: str) -> RichTextBuilder:
        return self.text(content, bold=True)

    def italic(self, content: str) -> RichTextBuilder:
        return self.text(content, italic=True)

    def code(self, content: str) -> RichTextBuilder:
        return self.text(content, code=True)

    def link(self, content: str, url: str) -> RichTextBuilder:
        return self.text(content, link=url)

    def equation(self, expression: str) -> RichTextBuilder:
        self._segments.append(RichText.of_equation(expression))
        return self

    def build(self) -> list[RichText]:
        return list(self._segments)
