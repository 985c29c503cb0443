"""Editing session tying a segment store to keys, suggestions, and validation."""

from .session import NO_SUGGESTION, EditingSession, SessionBus

__all__ = ["EditingSession", "NO_SUGGESTION", "SessionBus"]
