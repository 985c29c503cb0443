"""Editing session: one store plus selection, suggestions, and key dispatch."""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, Set

from segment_engine.actions import ActionResult
from segment_engine.documents import (
    AcceptAllValidator,
    DocumentValidator,
    ValidationResult,
)
from segment_engine.keymaps import KeyInput, KeymapRegistry, load_default_keymaps
from segment_engine.runtime import telemetry
from segment_engine.store import Segment, SegmentStore
from segment_engine.suggestions import (
    PlaceholderSuggestionProvider,
    Suggestion,
    SuggestionProvider,
    accept_suggestion,
    generate_suggestions,
)

NO_SUGGESTION = -1


class SessionBus:
    """Minimal event bus letting hosts observe session changes."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


class EditingSession:
    """Single-writer owner of a ``SegmentStore`` and its review state.

    Suggestions are regenerated and the text revalidated whenever a working
    copy changes through the session.
    """

    def __init__(
        self,
        store: Optional[SegmentStore] = None,
        *,
        provider: Optional[SuggestionProvider] = None,
        validator: Optional[DocumentValidator] = None,
        registry: Optional[KeymapRegistry] = None,
        bus: Optional[SessionBus] = None,
        load_defaults: bool = True,
    ) -> None:
        self.store = store if store is not None else SegmentStore("")
        self.provider = provider or PlaceholderSuggestionProvider()
        self.validator = validator or AcceptAllValidator()
        self.bus = bus or SessionBus()
        self.registry = registry or KeymapRegistry(
            logger_name="segment_engine.keymaps"
        )
        if load_defaults and registry is None:
            load_default_keymaps(self.registry)
        self.selected_segments: Set[str] = set()
        self.suggestions: List[Suggestion] = []
        self.selected_suggestion = NO_SUGGESTION
        self.validation = ValidationResult()
        self.refresh_suggestions()

    # key dispatch

    def handle_key(self, key: KeyInput) -> ActionResult:
        token = key.token
        binding = self.registry.lookup(token)
        if binding is None:
            return ActionResult(consumed=False, status="unbound")
        action = self.registry.get_action(binding.action_id)
        with telemetry.span(
            "session::dispatch",
            logger_name="segment_engine.session",
            component="session",
            metadata={"token": token, "action": action.id},
        ) as handle:
            result = action(self)
            handle.add_metadata("status", result.status)
        return result

    # cursor

    def move_cursor_up(self) -> bool:
        return self._after_move(self.store.move_cursor_up())

    def move_cursor_down(self) -> bool:
        return self._after_move(self.store.move_cursor_down())

    def move_cursor_to(self, index: int) -> bool:
        return self._after_move(self.store.move_cursor_to(index))

    def _after_move(self, moved: bool) -> bool:
        if moved:
            self.bus.emit("cursor.moved", self.store.get_cursor_position())
        return moved

    # segment choices

    def select_segment(self, segment_id: str, text: str) -> Optional[Segment]:
        """Write ``text`` into the segment's working copy and mark it chosen."""

        segment = self.store.get_segment_by_id(segment_id)
        if segment is None:
            return None
        self.store.update_working_copy(segment_id, text)
        self.selected_segments.add(segment_id)
        self.bus.emit("segment.selected", segment_id)
        self._text_changed()
        return segment

    def replace_store(self, store: SegmentStore) -> None:
        """Swap in a store for new content; per-document state starts over."""

        self.store = store
        self.selected_segments = set()
        self.bus.emit("store.replaced", store.name)
        self._text_changed()

    # suggestions

    def refresh_suggestions(self) -> List[Suggestion]:
        self.suggestions = generate_suggestions(
            self.store.get_segments(), self.provider
        )
        self.selected_suggestion = 0 if self.suggestions else NO_SUGGESTION
        return self.suggestions

    def current_suggestion(self) -> Optional[Suggestion]:
        if 0 <= self.selected_suggestion < len(self.suggestions):
            return self.suggestions[self.selected_suggestion]
        return None

    def cycle_suggestion(self) -> int:
        if not self.suggestions:
            return self.selected_suggestion
        if self.selected_suggestion < len(self.suggestions) - 1:
            self.selected_suggestion += 1
        else:
            self.selected_suggestion = 0
        return self.selected_suggestion

    def accept_suggestion(self, suggestion: Suggestion) -> Optional[Segment]:
        segment = accept_suggestion(self.store, suggestion)
        if segment is None:
            return None
        self.bus.emit("suggestion.accepted", segment.id)
        self._text_changed()
        return segment

    # validation

    def validate(self) -> ValidationResult:
        self.validation = self.validator.validate(self.store.get_full_working_text())
        self.bus.emit("validation.updated", self.validation)
        return self.validation

    def _text_changed(self) -> None:
        self.refresh_suggestions()
        self.validate()


__all__ = ["EditingSession", "SessionBus", "NO_SUGGESTION"]
