"""Outbound request models for write endpoints."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .blocks import BlockRequest
from .properties import PropertyValue
from .rich_text import RichText


class Parent(BaseModel):
    """Where a page or database is created."""

    type: Literal["page_id", "database_id", "data_source_id", "workspace"]
    id: str | None = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _require_id(self) -> Parent:
        if self.type != "workspace" and not self.id:
            raise ValueError(f"Parent of type {self.type} requires an id")
        return self

    @classmethod
    def page(cls, page_id: str) -> Parent:
        return cls(type="page_id", id=page_id)

    @classmethod
    def database(cls, database_id: str) -> Parent:
        return cls(type="database_id", id=database_id)

    @classmethod
    def data_source(cls, data_source_id: str) -> Parent:
        return cls(type="data_source_id", id=data_source_id)

    def to_payload(self) -> dict[str, Any]:
        if self.type == "workspace":
            return {"type": "workspace", "workspace": True}
        return {"type": self.type, self.type: self.id}


class CreatePageRequest(BaseModel):
    parent: Parent
    properties: dict[str, PropertyValue] = Field(default_factory=dict)
    children: list[BlockRequest] | None = None
    icon: dict[str, Any] | None = None
    cover: dict[str, Any] | None = None

    model_config = ConfigDict(frozen=True)

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "parent": self.parent.to_payload(),
            "properties": {name: value.to_payload() for name, value in self.properties.items()},
        }
        if self.children is not None:
            payload["children"] = [block.to_payload() for block in self.children]
        if self.icon is not None:
            payload["icon"] = self.icon
        if self.cover is not None:
            payload["cover"] = self.cover
        return payload


class UpdatePageRequest(BaseModel):
    properties: dict[str, PropertyValue] | None = None
    archived: bool | None = None
    icon: dict[str, Any] | None = None
    cover: dict[str, Any] | None = None

    model_config = ConfigDict(frozen=True)

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if self.properties is not None:
            payload["properties"] = {name: value.to_payload() for name, value in self.properties.items()}
        if self.archived is not None:
            payload["archived"] = self.archived
        if self.icon is not None:
            payload["icon"] = self.icon
        if self.cover is not None:
            payload["cover"] = self.cover
        return payload


class CreateDatabaseRequest(BaseModel):
    parent: Parent
    title: list[RichText] = Field(default_factory=list)
    description: list[RichText] | None = None
    properties: dict[str, dict[str, Any]] = Field(default_factory=dict)
    is_inline: bool | None = None

    model_config = ConfigDict(frozen=True)

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "parent": self.parent.to_payload(),
            "title": [segment.to_payload() for segment in self.title],
            "properties": self.properties,
        }
        if self.description is not None:
            payload["description"] = [segment.to_payload() for segment in self.description]
        if self.is_inline is not None:
            payload["is_inline"] = self.is_inline
        return payload


class AppendBlockChildrenRequest(BaseModel):
    children: list[BlockRequest]
    after: str | None = None

    model_config = ConfigDict(frozen=True)

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"children": [block.to_payload() for block in self.children]}
        if self.after is not None:
            payload["after"] = self.after
        return payload


WriteRequest = CreatePageRequest | UpdatePageRequest | CreateDatabaseRequest | AppendBlockChildrenRequest
