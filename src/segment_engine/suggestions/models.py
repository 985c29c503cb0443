"""Suggestion records and the provider boundary."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

PREVIEW_CHARS = 50


@dataclass(frozen=True, slots=True)
class Suggestion:
    """Rewrite proposal anchored to a segment's original line range."""

    original: str
    rewritten: str
    line_start: int
    line_end: int


class SuggestionProvider(Protocol):
    """Produces a rewrite for one paragraph of text."""

    def suggest(self, text: str) -> str:
        ...


class PlaceholderSuggestionProvider:
    """Stand-in used until a real rewrite backend is wired in."""

    def __init__(self, *, preview_chars: int = PREVIEW_CHARS) -> None:
        self.preview_chars = preview_chars

    def suggest(self, text: str) -> str:
        return f'AI suggestion for: "{text[: self.preview_chars]}..."'


__all__ = [
    "PlaceholderSuggestionProvider",
    "Suggestion",
    "SuggestionProvider",
]
