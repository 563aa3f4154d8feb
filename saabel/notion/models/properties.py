"""Page property values sent in create/update requests."""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from .rich_text import RichText


class _PropertyValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    def to_payload(self) -> dict[str, Any]:
        payload = self.model_dump(mode="json", exclude_none=True)
        # An explicit null clears the value server-side
        payload.setdefault(payload["type"], None)
        return payload


class SelectOption(BaseModel):
    id: str | None = None
    name: str | None = None
    color: str | None = None

    model_config = ConfigDict(frozen=True)


class PageReference(BaseModel):
    id: str

    model_config = ConfigDict(frozen=True)


class UserReference(BaseModel):
    object: Literal["user"] = "user"
    id: str

    model_config = ConfigDict(frozen=True)


class TitleProperty(_PropertyValue):
    type: Literal["title"] = "title"
    title: list[RichText] = Field(default_factory=list)


class RichTextProperty(_PropertyValue):
    type: Literal["rich_text"] = "rich_text"
    rich_text: list[RichText] = Field(default_factory=list)


class NumberProperty(_PropertyValue):
    type: Literal["number"] = "number"
    number: float | None = None


class CheckboxProperty(_PropertyValue):
    type: Literal["checkbox"] = "checkbox"
    checkbox: bool = False


class SelectProperty(_PropertyValue):
    type: Literal["select"] = "select"
    select: SelectOption | None = None


class MultiSelectProperty(_PropertyValue):
    type: Literal["multi_select"] = "multi_select"
    multi_select: list[SelectOption] = Field(default_factory=list)


class RelationProperty(_PropertyValue):
    type: Literal["relation"] = "relation"
    relation: list[PageReference] = Field(default_factory=list)


class PeopleProperty(_PropertyValue):
    type: Literal["people"] = "people"
    people: list[UserReference] = Field(default_factory=list)


class UrlProperty(_PropertyValue):
    type: Literal["url"] = "url"
    url: str | None = None


class EmailProperty(_PropertyValue):
    type: Literal["email"] = "email"
    email: str | None = None


class PhoneNumberProperty(_PropertyValue):
    type: Literal["phone_number"] = "phone_number"
    phone_number: str | None = None


PropertyValue = Annotated[
    TitleProperty
    | RichTextProperty
    | NumberProperty
    | CheckboxProperty
    | SelectProperty
    | MultiSelectProperty
    | RelationProperty
    | PeopleProperty
    | UrlProperty
    | EmailProperty
    | PhoneNumberProperty,
    Field(discriminator="type"),
]
