"""Validation configuration and result models."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import ViolationType

R = TypeVar("R")


class ValidationConfig(BaseModel):
    """Validation behaviour.

    ``auto_split_long_text`` selects auto-repair (split oversize rich text
    into several segments) versus strict failure. Splitting is used instead of
    truncation because the server limits each segment, not the whole array,
    so nothing has to be dropped.
    """

    auto_split_long_text: bool = True

    model_config = ConfigDict(frozen=True)

    @classmethod
    def default(cls) -> ValidationConfig:
        return cls()

    @classmethod
    def with_auto_split(cls) -> ValidationConfig:
        return cls(auto_split_long_text=True)

    @classmethod
    def without_auto_split(cls) -> ValidationConfig:
        return cls(auto_split_long_text=False)


class ValidationViolation(BaseModel):
    """A single limit or format violation."""

    field: str
    violation_type: ViolationType
    message: str
    current_value: Any = None
    limit: Any = None
    auto_fix_available: bool = False
    suggested_action: str | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_error(self) -> bool:
        return self.violation_type.is_error

    @property
    def is_warning(self) -> bool:
        return self.violation_type.is_warning

    def detailed_message(self) -> str:
        parts = [self.message]
        if self.current_value is not None and self.limit is not None:
            parts.append(f" (current: {self.current_value}, limit: {self.limit})")
        if self.auto_fix_available:
            parts.append(" - Auto-fix available")
        if self.suggested_action:
            parts.append(f" - Suggested: {self.suggested_action}")
        return "".join(parts)


class ValidationResult(BaseModel):
    """Ordered violations found in one request."""

    violations: list[ValidationViolation] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def is_valid(self) -> bool:
        return not self.violations

    @property
    def has_errors(self) -> bool:
        return any(v.is_error for v in self.violations)

    @property
    def has_warnings(self) -> bool:
        return any(v.is_warning for v in self.violations)

    @property
    def errors(self) -> list[ValidationViolation]:
        return [v for v in self.violations if v.is_error]

    @property
    def warnings(self) -> list[ValidationViolation]:
        return [v for v in self.violations if v.is_warning]

    def get_violations(self, violation_type: ViolationType) -> list[ValidationViolation]:
        return [v for v in self.violations if v.violation_type is violation_type]

    def get_violations_for_field(self, field: str) -> list[ValidationViolation]:
        return [v for v in self.violations if v.field == field]

    def summary(self) -> str:
        """Human-readable summary of all violations."""
        if self.is_valid:
            return "No validation violations found"

        lines = ["Validation Summary:"]
        if errors := len(self.errors):
            lines.append(f"  Errors: {errors}")
        if warnings := len(self.warnings):
            lines.append(f"  Warnings: {warnings}")
        lines.append("")
        lines.extend(f"  {v.violation_type.name}: {v.detailed_message()}" for v in self.violations)
        return "\n".join(lines)


class AutoFixResult(BaseModel, Generic[R]):
    """Outcome of one auto-fix pass.

    Attributes:
        fixed_request: The repaired request (the original if nothing was fixed)
        fixed_violations: Violations the pass resolved
        remaining_violations: Violations carried over unchanged
        changes_summary: One line per change made
    """

    fixed_request: R
    fixed_violations: list[ValidationViolation] = Field(default_factory=list)
    remaining_violations: list[ValidationViolation] = Field(default_factory=list)
    changes_summary: list[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def was_fully_fixed(self) -> bool:
        return not self.remaining_violations

    @property
    def has_remaining_errors(self) -> bool:
        return any(v.is_error for v in self.remaining_violations)
