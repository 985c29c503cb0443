"""Document records, the in-memory library, and the validator boundary."""

from .library import DEFAULT_TITLE, DocumentLibrary, DocumentNotFoundError
from .models import Document, Paragraph, paragraphs_from_segments
from .validation import (
    AcceptAllValidator,
    DocumentValidator,
    ValidationIssue,
    ValidationResult,
    format_validation_errors,
)

__all__ = [
    "DEFAULT_TITLE",
    "AcceptAllValidator",
    "Document",
    "DocumentLibrary",
    "DocumentNotFoundError",
    "DocumentValidator",
    "Paragraph",
    "ValidationIssue",
    "ValidationResult",
    "format_validation_errors",
    "paragraphs_from_segments",
]
