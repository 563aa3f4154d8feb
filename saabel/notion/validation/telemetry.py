"""Structured logging for request validation."""

from __future__ import annotations

import logging

from .models import ValidationResult

logger = logging.getLogger(__name__)


def log_request_validated(*, request_type: str, result: ValidationResult) -> None:
    logger.debug(
        "request_validated",
        extra={
            "request_type": request_type,
            "violations": len(result.violations),
            "errors": len(result.errors),
            "warnings": len(result.warnings),
        },
    )


def log_text_auto_split(*, field: str, original_length: int, segments: int) -> None:
    """Log one oversize rich text segment split into several.

    Args:
        field: Path of the split segment (e.g. "Name.title[0]")
        original_length: Length of the original content
        segments: Number of segments it became
    """
    logger.info(
        "text_auto_split",
        extra={
            "field": field,
            "original_length": original_length,
            "segments": segments,
        },
    )


def log_validation_failed(*, request_type: str, result: ValidationResult) -> None:
    logger.warning(
        "validation_failed",
        extra={
            "request_type": request_type,
            "errors": len(result.errors),
            "fields": [v.field for v in result.errors],
        },
    )
