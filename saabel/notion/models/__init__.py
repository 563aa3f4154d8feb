"""Request and response models.

Architecture:
    This module exports the Pydantic v2 models exchanged with the API. All
    models are immutable (frozen=True): the validator's auto-fix produces new
    requests instead of mutating the caller's.

Model Categories:
    - Rich text: RichText, Annotations, TextContent, Link, Equation
    - Properties: TitleProperty, RichTextProperty, MultiSelectProperty, ...
    - Blocks: BlockRequest
    - Requests: CreatePageRequest, UpdatePageRequest, CreateDatabaseRequest,
      AppendBlockChildrenRequest
    - Pagination: PaginatedResponse, PaginationRequest
"""

from .blocks import CAPTION_BLOCK_TYPES, TEXT_BLOCK_TYPES, BlockRequest
from .builders import RichTextBuilder
from .pagination import PaginatedResponse, PaginationRequest
from .properties import (
    CheckboxProperty,
    EmailProperty,
    MultiSelectProperty,
    NumberProperty,
    PageReference,
    PeopleProperty,
    PhoneNumberProperty,
    PropertyValue,
    RelationProperty,
    RichTextProperty,
    SelectOption,
    SelectProperty,
    TitleProperty,
    UrlProperty,
    UserReference,
)
from .requests import (
    AppendBlockChildrenRequest,
    CreateDatabaseRequest,
    CreatePageRequest,
    Parent,
    UpdatePageRequest,
    WriteRequest,
)
from .rich_text import Annotations, Equation, Link, RichText, TextContent, plain_text

__all__ = [
    "Annotations",
    "AppendBlockChildrenRequest",
    "BlockRequest",
    "CAPTION_BLOCK_TYPES",
    "CheckboxProperty",
    "CreateDatabaseRequest",
    "CreatePageRequest",
    "EmailProperty",
    "Equation",
    "Link",
    "MultiSelectProperty",
    "NumberProperty",
    "PageReference",
    "PaginatedResponse",
    "PaginationRequest",
    "Parent",
    "PeopleProperty",
    "PhoneNumberProperty",
    "PropertyValue",
    "RelationProperty",
    "RichText",
    "RichTextBuilder",
    "RichTextProperty",
    "SelectOption",
    "SelectProperty",
    "TEXT_BLOCK_TYPES",
    "TextContent",
    "TitleProperty",
    "UpdatePageRequest",
    "UrlProperty",
    "UserReference",
    "WriteRequest",
    "plain_text",
]
