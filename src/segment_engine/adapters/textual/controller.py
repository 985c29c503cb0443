"""Textual adapter that pushes session state into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from segment_engine.actions import ActionResult
from segment_engine.documents import DocumentLibrary, ValidationResult
from segment_engine.keymaps import KeyInput
from segment_engine.session import EditingSession
from segment_engine.store import DEFAULT_FADE_LENGTH, StoreMirror

SESSION_EVENTS = (
    "cursor.moved",
    "segment.selected",
    "suggestion.accepted",
    "store.replaced",
    "validation.updated",
)

# Events after which the library copy of the open document is re-derived.
DOCUMENT_EVENTS = ("segment.selected", "suggestion.accepted")


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_segments: Callable[[StoreMirror], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    # Optional realtime log callback for debug lines
    log: Callable[[str], None] = _noop


class TextualSegmentAdapter:
    """Bridges an ``EditingSession`` and its bus to a Textual-friendly surface."""

    def __init__(
        self,
        session: EditingSession,
        hooks: TextualUIHooks,
        *,
        fade_length: int = DEFAULT_FADE_LENGTH,
        library: Optional[DocumentLibrary] = None,
        doc_id: Optional[str] = None,
    ) -> None:
        if (library is None) != (doc_id is None):
            raise ValueError("`library` and `doc_id` must be given together.")
        self.session = session
        self.hooks = hooks
        self.fade_length = fade_length
        self.library = library
        self.doc_id = doc_id
        self._issue: Optional[str] = None
        self._subscribe_events()
        self.refresh()

    def pull_store(self) -> StoreMirror:
        store = self.session.store
        return store.mirror(
            fade_length=self.fade_length,
            attributes={
                "store": store.name,
                "selected": ",".join(sorted(self.session.selected_segments)),
            },
        )

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> ActionResult:
        """Translate a Textual key event into a KeyInput and dispatch it."""

        normalized_modifiers = tuple(str(mod).lower() for mod in modifiers)
        self._log_state("key ->", key=key, text=text, mods=normalized_modifiers)
        result = self.session.handle_key(
            KeyInput(key=key, text=text, modifiers=normalized_modifiers)
        )
        status = self._issue or result.message or result.status
        if status:
            self.hooks.update_status(status)
        self.refresh()
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
        )
        return result

    def focus_segment(self, segment_id: str) -> bool:
        """Move the cursor onto ``segment_id``, e.g. after a click."""

        index = self.session.store.index_of(segment_id)
        moved = self.session.move_cursor_to(index)
        self._log_state("focus ->", segment=segment_id, moved=moved)
        self.refresh()
        return moved

    def refresh(self) -> None:
        self.hooks.update_segments(self.pull_store())

    def _subscribe_events(self) -> None:
        for event in SESSION_EVENTS:
            self.session.bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )
        if self.library is not None:
            for event in DOCUMENT_EVENTS:
                self.session.bus.subscribe(event, self._sync_document)

    def _sync_document(self, _payload: object | None) -> None:
        if self.library is None or self.doc_id is None:
            return
        self.library.update(
            self.doc_id, self.session.store, self.session.selected_segments
        )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        if name == "validation.updated" and isinstance(payload, ValidationResult):
            self._show_validation(payload)
        self.hooks.handle_event(name, payload)

    def _show_validation(self, result: ValidationResult) -> None:
        # The first issue holds the status line until the text validates again.
        issue = result.issues[0].describe() if result.issues else None
        if issue is not None:
            self.hooks.update_status(issue)
        elif self._issue is not None:
            self.hooks.update_status("")
        self._issue = issue

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        store = self.session.store
        return {
            "store": store.name,
            "cursor": store.get_cursor_position(),
            "segments": len(store),
            "modified": len(store.modified_segments()),
            "suggestion": self.session.selected_suggestion,
            "keymap": self.session.registry.revision(),
        }


__all__ = [
    "DOCUMENT_EVENTS",
    "SESSION_EVENTS",
    "TextualSegmentAdapter",
    "TextualUIHooks",
]
