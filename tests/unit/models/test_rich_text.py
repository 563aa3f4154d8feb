"""Unit tests for rich text models and the builder."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from saabel.notion.models import Annotations, RichText, RichTextBuilder, plain_text


class TestRichText:
    """Test RichText segments."""

    def test_text_segment_payload(self):
        """Test text segment payload serialization."""
        segment = RichText.of("Hi", annotations=Annotations(bold=True), link="https://example.com")
        assert segment.to_payload() == {
            "type": "text",
            "text": {"content": "Hi", "link": {"url": "https://example.com"}},
            "annotations": {
                "bold": True,
                "italic": False,
                "strikethrough": False,
                "underline": False,
                "code": False,
                "color": "default",
            },
        }

    def test_content_by_type(self):
        """Test content for text, equation and mention segments."""
        assert RichText.of("abc").content == "abc"
        assert RichText.of_equation("E=mc^2").content == "E=mc^2"
        mention = RichText(type="mention", mention={"type": "user", "user": {"id": "u"}}, plain_text="@Ann")
        assert mention.content == "@Ann"
        assert not mention.is_splittable

    def test_with_content_keeps_styling(self):
        """Test with_content keeps annotations and link."""
        segment = RichText(
            type="text",
            text={"content": "old"},
            annotations=Annotations(italic=True),
            plain_text="old",
        )
        copy = segment.with_content("new")
        assert copy.content == "new"
        assert copy.plain_text == "new"
        assert copy.annotations.italic
        assert segment.content == "old"

    def test_with_content_rejects_equation(self):
        """Test with_content rejects non-text segments."""
        with pytest.raises(ValueError):
            RichText.of_equation("x").with_content("y")

    def test_models_are_frozen(self):
        """Test rich text models are frozen."""
        segment = RichText.of("x")
        with pytest.raises(PydanticValidationError):
            segment.type = "equation"

    def test_plain_text(self):
        """Test plain_text joins segment content."""
        assert plain_text([RichText.of("a"), RichText.of_equation("b"), RichText.of("c")]) == "abc"


class TestRichTextBuilder:
    """Test RichTextBuilder."""

    def test_fluent_chain(self):
        """Test a fluent builder chain."""
        segments = (
            RichTextBuilder()
            .text("Read ")
            .link("docs", "https://developers.notion.com")
            .bold("now")
            .italic("!")
            .code("x")
            .equation("a+b")
            .build()
        )
        assert plain_text(segments) == "Read docsnow!xa+b"
        assert segments[1].link_url == "https://developers.notion.com"
        assert segments[2].annotations.bold
        assert segments[3].annotations.italic
        assert segments[4].annotations.code
        assert segments[5].type == "equation"

    def test_build_returns_new_list(self):
        """Test build returns a fresh list each time."""
        builder = RichTextBuilder().text("a")
        first = builder.build()
        builder.text("b")
        assert len(first) == 1
        assert len(builder.build()) == 2
