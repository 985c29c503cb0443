"""Built-in keymap for segment-by-segment review."""

from __future__ import annotations

from segment_engine import actions

from .models import ActionRef, Binding
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="segment.cursor_up",
        handler=actions.cursor_up,
        description="Move to the previous segment",
    ),
    ActionRef(
        id="segment.cursor_down",
        handler=actions.cursor_down,
        description="Move to the next segment",
    ),
    ActionRef(
        id="segment.keep_original",
        handler=actions.keep_original,
        description="Keep the original text of the current segment",
    ),
    ActionRef(
        id="segment.take_suggestion",
        handler=actions.take_suggestion,
        description="Take the suggestion for the current segment and advance",
    ),
    ActionRef(
        id="suggestion.cycle",
        handler=actions.cycle_suggestion,
        description="Select the next suggestion",
    ),
    ActionRef(
        id="suggestion.accept",
        handler=actions.accept_selected_suggestion,
        description="Apply the selected suggestion",
    ),
)

DEFAULT_BINDINGS: tuple[Binding, ...] = (
    Binding.for_key("review.up", "up", "segment.cursor_up"),
    Binding.for_key("review.down", "down", "segment.cursor_down"),
    Binding.for_key("review.left", "left", "segment.keep_original"),
    Binding.for_key("review.right", "right", "segment.take_suggestion"),
    Binding.for_key("review.tab", "tab", "suggestion.cycle"),
    Binding.for_key("review.enter", "enter", "suggestion.accept"),
)


def load_default_keymaps(registry: KeymapRegistry) -> KeymapRegistry:
    """Register the default actions and bindings, replacing earlier copies."""

    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=True)
    for binding in DEFAULT_BINDINGS:
        registry.register_binding(binding, replace=True)
    return registry


__all__ = ["DEFAULT_ACTIONS", "DEFAULT_BINDINGS", "load_default_keymaps"]
