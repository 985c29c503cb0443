"""Boundary types for the external document validator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Protocol, Tuple


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    message: str
    line: Optional[int] = None
    column: Optional[int] = None

    def describe(self) -> str:
        if self.line and self.column:
            return f"{self.message} (line {self.line}, column {self.column})"
        return self.message


@dataclass(frozen=True, slots=True)
class ValidationResult:
    issues: Tuple[ValidationIssue, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return not self.issues


class DocumentValidator(Protocol):
    """Checks full document text; structural rules live outside this package."""

    def validate(self, text: str) -> ValidationResult:
        ...


class AcceptAllValidator:
    """Default validator used when the host does not provide one."""

    def validate(self, text: str) -> ValidationResult:
        del text
        return ValidationResult()


def format_validation_errors(issues: Iterable[ValidationIssue]) -> str:
    return "\n".join(issue.describe() for issue in issues)


__all__ = [
    "AcceptAllValidator",
    "DocumentValidator",
    "ValidationIssue",
    "ValidationResult",
    "format_validation_errors",
]
