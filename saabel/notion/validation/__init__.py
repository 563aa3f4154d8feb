"""Client-side request validation.

Architecture:
    - models.py: ValidationConfig, ValidationViolation, ValidationResult, AutoFixResult
    - validator.py: RequestValidator (validate, auto_fix, validate_or_fix)
    - splitting.py: Lossless UTF-16 aware text splitting
    - formats.py: URL, email and phone format checks
    - telemetry.py: Structured logging
"""

from __future__ import annotations

from .formats import is_valid_email, is_valid_phone, is_valid_url
from .models import AutoFixResult, ValidationConfig, ValidationResult, ValidationViolation
from .splitting import split_rich_text, split_rich_text_array, split_text
from .validator import RequestValidator, payload_size

__all__ = [
    "AutoFixResult",
    "RequestValidator",
    "ValidationConfig",
    "ValidationResult",
    "ValidationViolation",
    "is_valid_email",
    "is_valid_phone",
    "is_valid_url",
    "payload_size",
    "split_rich_text",
    "split_rich_text_array",
    "split_text",
]
