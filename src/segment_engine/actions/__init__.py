"""Editing verbs bound to keys by the default keymap."""

from .results import ActionResult
from .navigation import cursor_down, cursor_up, keep_original, take_suggestion
from .suggestions import accept_selected_suggestion, cycle_suggestion

__all__ = [
    "ActionResult",
    "accept_selected_suggestion",
    "cursor_down",
    "cursor_up",
    "cycle_suggestion",
    "keep_original",
    "take_suggestion",
]
