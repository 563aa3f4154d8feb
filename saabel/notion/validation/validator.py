"""Client-side request validation against server limits.

Architecture:
    RequestValidator walks an outbound request and reports every field that
    would make the server reject it (or that is close to doing so):

    - rich text segments longer than the per-segment limit
    - arrays (rich text, options, relations, people, blocks) over their cap
    - the serialized payload over the size cap
    - malformed URL, email and phone values

    ``validate`` is pure. ``auto_fix`` resolves the one auto-fixable case,
    oversize plain text, by splitting segments; ``validate_or_fix`` is the
    strict send path used before any request reaches the transport.

Field paths:
    Violations name fields by path, e.g. ``Name.title[0]``,
    ``children[3].paragraph.rich_text[1]`` or ``Website.url``. Auto-fix
    re-walks the request with the same paths, so a violation's ``field`` is
    enough to locate the segment to split.
"""

from __future__ import annotations

import json
from typing import Any, TypeVar

from ..core import limits
from ..core.enums import ViolationType
from ..core.exceptions import ValidationError
from ..models.blocks import BlockRequest
from ..models.properties import (
    EmailProperty,
    MultiSelectProperty,
    PeopleProperty,
    PhoneNumberProperty,
    RelationProperty,
    RichTextProperty,
    TitleProperty,
    UrlProperty,
)
from ..models.requests import (
    AppendBlockChildrenRequest,
    CreateDatabaseRequest,
    CreatePageRequest,
    UpdatePageRequest,
)
from ..models.rich_text import RichText
from .formats import is_valid_email, is_valid_phone, is_valid_url
from .models import AutoFixResult, ValidationConfig, ValidationResult, ValidationViolation
from .splitting import split_rich_text
from .telemetry import log_request_validated, log_text_auto_split, log_validation_failed

R = TypeVar("R")

_SPLIT_SUGGESTION = "Enable auto_split_long_text or split the text into several rich text segments"


def _is_text_fix(violation: ValidationViolation) -> bool:
    return violation.violation_type is ViolationType.CONTENT_TOO_LONG and violation.auto_fix_available


def payload_size(request: Any) -> int:
    """Size in bytes of the request body as it will be sent."""
    body = json.dumps(request.to_payload(), ensure_ascii=False, separators=(",", ":"))
    return len(body.encode("utf-8"))


class RequestValidator:
    """Validates write requests and repairs oversize text.

    Example:
        >>> validator = RequestValidator()
        >>> result = validator.validate(request)
        >>> if result.has_errors:
        ...     fix = validator.auto_fix(request, result)
    """

    def __init__(self, config: ValidationConfig | None = None) -> None:
        self._config = config or ValidationConfig.default()

    @property
    def config(self) -> ValidationConfig:
        return self._config

    # --- Validation ------------------------------------------------------

    def validate(self, request: Any) -> ValidationResult:
        """Check ``request`` against every limit. Pure, no I/O.

        Raises:
            TypeError: ``request`` is not a supported write request
        """
        violations: list[ValidationViolation] = []

        if isinstance(request, CreatePageRequest):
            violations.extend(self._check_properties(request.properties))
            if request.children is not None:
                violations.extend(self._check_blocks("children", request.children))
        elif isinstance(request, UpdatePageRequest):
            if request.properties is not None:
                violations.extend(self._check_properties(request.properties))
        elif isinstance(request, CreateDatabaseRequest):
            violations.extend(self._check_rich_text("title", request.title))
            if request.description is not None:
                violations.extend(self._check_rich_text("description", request.description))
        elif isinstance(request, AppendBlockChildrenRequest):
            violations.extend(self._check_blocks("children", request.children))
        else:
            raise TypeError(f"Unsupported request type: {type(request).__name__}")

        violations.extend(self._check_payload(request))

        result = ValidationResult(violations=violations)
        log_request_validated(request_type=type(request).__name__, result=result)
        return result

    def validate_blocks(self, field_name: str, blocks: list[BlockRequest]) -> ValidationResult:
        return ValidationResult(violations=self._check_blocks(field_name, blocks))

    def _check_properties(self, properties: dict[str, Any]) -> list[ValidationViolation]:
        violations: list[ValidationViolation] = []
        for name, value in properties.items():
            if isinstance(value, TitleProperty):
                violations.extend(self._check_rich_text(f"{name}.title", value.title))
            elif isinstance(value, RichTextProperty):
                violations.extend(self._check_rich_text(f"{name}.rich_text", value.rich_text))
            elif isinstance(value, MultiSelectProperty):
                violations.extend(
                    self._check_array(
                        f"{name}.multi_select",
                        len(value.multi_select),
                        limits.MAX_MULTI_SELECT_OPTIONS,
                        "Multi-select options",
                    )
                )
            elif isinstance(value, RelationProperty):
                violations.extend(
                    self._check_array(
                        f"{name}.relation",
                        len(value.relation),
                        limits.MAX_RELATION_PAGES,
                        "Related pages",
                    )
                )
            elif isinstance(value, PeopleProperty):
                violations.extend(
                    self._check_array(
                        f"{name}.people", len(value.people), limits.MAX_PEOPLE_USERS, "People"
                    )
                )
            elif isinstance(value, UrlProperty) and value.url is not None:
                violations.extend(self._check_url(f"{name}.url", value.url))
            elif isinstance(value, EmailProperty) and value.email is not None:
                violations.extend(self._check_email(f"{name}.email", value.email))
            elif isinstance(value, PhoneNumberProperty) and value.phone_number is not None:
                violations.extend(self._check_phone(f"{name}.phone_number", value.phone_number))
        return violations

    def _check_rich_text(self, prefix: str, segments: list[RichText]) -> list[ValidationViolation]:
        violations = self._check_array(prefix, len(segments), limits.MAX_ARRAY_ELEMENTS, "Rich text segments")

        for index, segment in enumerate(segments):
            field = f"{prefix}[{index}]"
            length = limits.text_length(segment.content)

            if segment.type == "equation":
                limit, label, fixable = limits.MAX_EQUATION_LENGTH, "Equation", False
            else:
                limit, label, fixable = limits.MAX_RICH_TEXT_LENGTH, "Rich text", segment.is_splittable

            if length > limit:
                violations.append(
                    ValidationViolation(
                        field=field,
                        violation_type=ViolationType.CONTENT_TOO_LONG,
                        message=f"{label} too long: {length} chars (max: {limit})",
                        current_value=length,
                        limit=limit,
                        auto_fix_available=fixable,
                        suggested_action=_SPLIT_SUGGESTION if fixable else f"Shorten the {label.lower()}",
                    )
                )
            elif limits.is_near_limit(length, limit):
                violations.append(
                    ValidationViolation(
                        field=field,
                        violation_type=ViolationType.CONTENT_NEAR_LIMIT,
                        message=f"{label} close to limit: {length} chars (max: {limit})",
                        current_value=length,
                        limit=limit,
                    )
                )

            if segment.link_url is not None:
                violations.extend(self._check_url(f"{field}.href", segment.link_url))

        return violations

    def _check_blocks(self, prefix: str, blocks: list[BlockRequest]) -> list[ValidationViolation]:
        violations: list[ValidationViolation] = []
        total = _count_blocks(blocks)
        if total > limits.MAX_BLOCK_ELEMENTS:
            violations.append(
                ValidationViolation(
                    field=prefix,
                    violation_type=ViolationType.ARRAY_TOO_LARGE,
                    message=f"Too many blocks in one request: {total} (max: {limits.MAX_BLOCK_ELEMENTS})",
                    current_value=total,
                    limit=limits.MAX_BLOCK_ELEMENTS,
                    suggested_action="Append the blocks in several requests",
                )
            )
        violations.extend(self._check_block_tree(prefix, blocks))
        return violations

    def _check_block_tree(self, prefix: str, blocks: list[BlockRequest]) -> list[ValidationViolation]:
        violations = self._check_array(prefix, len(blocks), limits.MAX_ARRAY_ELEMENTS, "Blocks")
        for index, block in enumerate(blocks):
            for field_name, segments in block.rich_text_fields().items():
                violations.extend(self._check_rich_text(f"{prefix}[{index}].{block.type}.{field_name}", segments))
            if block.children:
                violations.extend(self._check_block_tree(f"{prefix}[{index}].children", block.children))
        return violations

    def _check_array(self, field: str, size: int, limit: int, label: str) -> list[ValidationViolation]:
        if limits.is_array_too_large(size, limit):
            return [
                ValidationViolation(
                    field=field,
                    violation_type=ViolationType.ARRAY_TOO_LARGE,
                    message=f"{label} array too large: {size} items (max: {limit})",
                    current_value=size,
                    limit=limit,
                    suggested_action=f"Send at most {limit} items per request",
                )
            ]
        if size and limits.is_near_limit(size, limit):
            return [
                ValidationViolation(
                    field=field,
                    violation_type=ViolationType.ARRAY_NEAR_LIMIT,
                    message=f"{label} array close to limit: {size} items (max: {limit})",
                    current_value=size,
                    limit=limit,
                )
            ]
        return []

    def _check_url(self, field: str, url: str) -> list[ValidationViolation]:
        length = limits.text_length(url)
        if length > limits.MAX_URL_LENGTH:
            return [
                ValidationViolation(
                    field=field,
                    violation_type=ViolationType.CONTENT_TOO_LONG,
                    message=f"URL too long: {length} chars (max: {limits.MAX_URL_LENGTH})",
                    current_value=length,
                    limit=limits.MAX_URL_LENGTH,
                    suggested_action="Use a shorter URL",
                )
            ]
        if not is_valid_url(url):
            return [
                ValidationViolation(
                    field=field,
                    violation_type=ViolationType.INVALID_URL,
                    message=f"Invalid URL: {url!r}",
                    current_value=url,
                    suggested_action="Use an absolute http(s) URL",
                )
            ]
        return []

    def _check_email(self, field: str, email: str) -> list[ValidationViolation]:
        if len(email) > limits.MAX_EMAIL_LENGTH:
            return [
                ValidationViolation(
                    field=field,
                    violation_type=ViolationType.CONTENT_TOO_LONG,
                    message=f"Email too long: {len(email)} chars (max: {limits.MAX_EMAIL_LENGTH})",
                    current_value=len(email),
                    limit=limits.MAX_EMAIL_LENGTH,
                )
            ]
        if not is_valid_email(email):
            return [
                ValidationViolation(
                    field=field,
                    violation_type=ViolationType.INVALID_EMAIL,
                    message=f"Invalid email address: {email!r}",
                    current_value=email,
                )
            ]
        return []

    def _check_phone(self, field: str, phone: str) -> list[ValidationViolation]:
        if len(phone) > limits.MAX_PHONE_LENGTH:
            return [
                ValidationViolation(
                    field=field,
                    violation_type=ViolationType.CONTENT_TOO_LONG,
                    message=f"Phone number too long: {len(phone)} chars (max: {limits.MAX_PHONE_LENGTH})",
                    current_value=len(phone),
                    limit=limits.MAX_PHONE_LENGTH,
                )
            ]
        if not is_valid_phone(phone):
            return [
                ValidationViolation(
                    field=field,
                    violation_type=ViolationType.INVALID_PHONE,
                    message=f"Invalid phone number: {phone!r}",
                    current_value=phone,
                )
            ]
        return []

    def _check_payload(self, request: Any) -> list[ValidationViolation]:
        size = payload_size(request)
        limit = limits.MAX_PAYLOAD_SIZE_BYTES
        if limits.is_payload_too_large(size):
            return [
                ValidationViolation(
                    field="payload",
                    violation_type=ViolationType.PAYLOAD_TOO_LARGE,
                    message=f"Payload too large: {size} bytes (max: {limit})",
                    current_value=size,
                    limit=limit,
                    suggested_action="Send the content in several requests",
                )
            ]
        if limits.is_near_limit(size, limit):
            return [
                ValidationViolation(
                    field="payload",
                    violation_type=ViolationType.PAYLOAD_NEAR_LIMIT,
                    message=f"Payload close to limit: {size} bytes (max: {limit})",
                    current_value=size,
                    limit=limit,
                )
            ]
        return []

    # --- Auto-fix --------------------------------------------------------

    def auto_fix(self, request: R, result: ValidationResult) -> AutoFixResult[R]:
        """Split oversize text segments named by ``result``.

        Only CONTENT_TOO_LONG violations with ``auto_fix_available`` are acted
        on, and only when ``auto_split_long_text`` is enabled. Everything else
        is returned untouched in ``remaining_violations``. Runs once; the
        fixed request is not re-validated.
        """
        targets = {v.field for v in result.violations if _is_text_fix(v)}
        if not self._config.auto_split_long_text or not targets:
            return AutoFixResult[Any](
                fixed_request=request,
                remaining_violations=list(result.violations),
            )

        changes: list[tuple[str, int, int]] = []
        update: dict[str, Any] = {}

        if isinstance(request, (CreatePageRequest, UpdatePageRequest)) and request.properties:
            properties = self._fix_properties(request.properties, targets, changes)
            if properties is not None:
                update["properties"] = properties
        if isinstance(request, (CreatePageRequest, AppendBlockChildrenRequest)) and request.children:
            children = self._fix_blocks("children", request.children, targets, changes)
            if children is not None:
                update["children"] = children
        if isinstance(request, CreateDatabaseRequest):
            title = self._fix_rich_text("title", request.title, targets, changes)
            if title is not None:
                update["title"] = title
            if request.description is not None:
                description = self._fix_rich_text("description", request.description, targets, changes)
                if description is not None:
                    update["description"] = description

        fixed_request = request.model_copy(update=update) if update else request  # type: ignore[attr-defined]
        fixed_fields = {field for field, _, _ in changes}

        fixed: list[ValidationViolation] = []
        remaining: list[ValidationViolation] = []
        for violation in result.violations:
            if _is_text_fix(violation) and violation.field in fixed_fields:
                fixed.append(violation)
            else:
                remaining.append(violation)

        summary = []
        for field, original_length, segments in changes:
            log_text_auto_split(field=field, original_length=original_length, segments=segments)
            summary.append(f"Split {field} ({original_length} chars) into {segments} segments")

        return AutoFixResult[Any](
            fixed_request=fixed_request,
            fixed_violations=fixed,
            remaining_violations=remaining,
            changes_summary=summary,
        )

    def _fix_rich_text(
        self,
        prefix: str,
        segments: list[RichText],
        targets: set[str],
        changes: list[tuple[str, int, int]],
    ) -> list[RichText] | None:
        fixed: list[RichText] = []
        changed = False
        for index, segment in enumerate(segments):
            field = f"{prefix}[{index}]"
            if field not in targets:
                fixed.append(segment)
                continue
            pieces = split_rich_text(segment)
            changes.append((field, limits.text_length(segment.content), len(pieces)))
            fixed.extend(pieces)
            changed = True
        return fixed if changed else None

    def _fix_properties(
        self,
        properties: dict[str, Any],
        targets: set[str],
        changes: list[tuple[str, int, int]],
    ) -> dict[str, Any] | None:
        fixed = dict(properties)
        changed = False
        for name, value in properties.items():
            if isinstance(value, TitleProperty):
                title = self._fix_rich_text(f"{name}.title", value.title, targets, changes)
                if title is not None:
                    fixed[name] = value.model_copy(update={"title": title})
                    changed = True
            elif isinstance(value, RichTextProperty):
                rich_text = self._fix_rich_text(f"{name}.rich_text", value.rich_text, targets, changes)
                if rich_text is not None:
                    fixed[name] = value.model_copy(update={"rich_text": rich_text})
                    changed = True
        return fixed if changed else None

    def _fix_blocks(
        self,
        prefix: str,
        blocks: list[BlockRequest],
        targets: set[str],
        changes: list[tuple[str, int, int]],
    ) -> list[BlockRequest] | None:
        fixed: list[BlockRequest] = []
        changed = False
        for index, block in enumerate(blocks):
            update: dict[str, Any] = {}
            for field_name, segments in block.rich_text_fields().items():
                new_segments = self._fix_rich_text(
                    f"{prefix}[{index}].{block.type}.{field_name}", segments, targets, changes
                )
                if new_segments is not None:
                    update[field_name] = new_segments
            if block.children:
                children = self._fix_blocks(f"{prefix}[{index}].children", block.children, targets, changes)
                if children is not None:
                    update["children"] = children
            if update:
                block = block.model_copy(update=update)
                changed = True
            fixed.append(block)
        return fixed if changed else None

    # --- Strict send path --------------------------------------------------

    def validate_or_fix(self, request: R) -> R:
        """Return a request that is safe to send, or raise.

        With auto-split enabled, oversize text is split first and the request
        is rejected only if error-class violations remain. With auto-split
        disabled, any error-class violation rejects the request and the
        exception carries the full ``validate`` result. Warnings never block.

        Raises:
            ValidationError: Error-class violations that cannot be fixed
        """
        result = self.validate(request)
        if not result.has_errors:
            return request

        if self._config.auto_split_long_text:
            fix = self.auto_fix(request, result)
            if fix.has_remaining_errors:
                remaining = ValidationResult(violations=fix.remaining_violations)
                log_validation_failed(request_type=type(request).__name__, result=remaining)
                raise ValidationError(remaining)
            return fix.fixed_request

        log_validation_failed(request_type=type(request).__name__, result=result)
        raise ValidationError(result)

    def validate_blocks_or_raise(self, field_name: str, blocks: list[BlockRequest]) -> None:
        """Fail fast on block arrays; they are never auto-fixed.

        Raises:
            ValidationError: Any error-class violation in ``blocks``
        """
        result = self.validate_blocks(field_name, blocks)
        if result.has_errors:
            log_validation_failed(request_type="blocks", result=result)
            raise ValidationError(result)


def _count_blocks(blocks: list[BlockRequest]) -> int:
    return sum(1 + _count_blocks(block.children or []) for block in blocks)
