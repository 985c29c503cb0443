"""Rewrite suggestions tied to segment line ranges."""

from .engine import accept_suggestion, generate_suggestions
from .models import PlaceholderSuggestionProvider, Suggestion, SuggestionProvider

__all__ = [
    "PlaceholderSuggestionProvider",
    "Suggestion",
    "SuggestionProvider",
    "accept_suggestion",
    "generate_suggestions",
]
