"""Textual host for the segment engine."""

from .controller import (
    DOCUMENT_EVENTS,
    SESSION_EVENTS,
    TextualSegmentAdapter,
    TextualUIHooks,
)

__all__ = [
    "DOCUMENT_EVENTS",
    "SESSION_EVENTS",
    "TextualSegmentAdapter",
    "TextualUIHooks",
]
