from __future__ import annotations

from typing import List, Tuple

from segment_engine.documents import ValidationIssue, ValidationResult
from segment_engine.keymaps import KeyInput
from segment_engine.session import NO_SUGGESTION, EditingSession
from segment_engine.store import SegmentStore


class FlagTodoValidator:
    def validate(self, text: str) -> ValidationResult:
        if "TODO" in text:
            return ValidationResult((ValidationIssue("TODO left in text", 1, 1),))
        return ValidationResult()


def make_session(text: str = "A\n\nB\n\nC", **kwargs) -> EditingSession:
    return EditingSession(SegmentStore(text), **kwargs)


def press(session: EditingSession, key: str):
    return session.handle_key(KeyInput(key=key))


def test_arrow_keys_move_cursor() -> None:
    session = make_session()

    result = press(session, "down")
    assert result.consumed and result.status == "ok"
    assert session.store.get_cursor_position() == 1

    press(session, "up")
    blocked = press(session, "up")
    assert blocked.status == "boundary"
    assert session.store.get_cursor_position() == 0


def test_right_takes_suggestion_and_advances() -> None:
    session = make_session()

    press(session, "right")

    first = session.store.get_segments()[0]
    assert first.working == 'AI suggestion for: "A..."'
    assert session.selected_segments == {"segment-0"}
    assert session.store.get_cursor_position() == 1


def test_right_on_last_segment_stays_put() -> None:
    session = make_session("A")

    press(session, "right")

    assert session.store.get_cursor_position() == 0
    assert session.store.get_segments()[0].is_modified


def test_left_restores_original() -> None:
    session = make_session()
    press(session, "right")
    press(session, "up")

    result = press(session, "left")

    assert result.message == "keep_original"
    assert session.store.get_segments()[0].working == "A"
    assert session.store.get_cursor_position() == 0
    assert "segment-0" in session.selected_segments


def test_tab_cycles_and_wraps() -> None:
    session = make_session()
    assert session.selected_suggestion == 0

    seen = []
    for _ in range(3):
        press(session, "tab")
        seen.append(session.selected_suggestion)

    assert seen == [1, 2, 0]


def test_enter_accepts_selected_suggestion() -> None:
    session = make_session()
    press(session, "tab")

    result = press(session, "enter")

    assert result.message == "suggestion_accepted"
    assert session.store.get_segments()[1].working == 'AI suggestion for: "B..."'
    assert session.selected_suggestion == 0


def test_empty_session_treats_keys_as_noops() -> None:
    session = EditingSession()

    assert session.selected_suggestion == NO_SUGGESTION
    assert press(session, "right").status == "noop"
    assert press(session, "left").status == "noop"
    assert press(session, "tab").consumed is False
    assert press(session, "enter").consumed is False
    assert press(session, "down").status == "boundary"


def test_unbound_key() -> None:
    session = make_session()

    result = session.handle_key(KeyInput(key="up", modifiers=("ctrl",)))

    assert result.consumed is False
    assert result.status == "unbound"


def test_select_segment_runs_validation_and_emits_events() -> None:
    session = make_session(validator=FlagTodoValidator())
    events: List[Tuple[str, object]] = []
    for name in ("segment.selected", "validation.updated", "cursor.moved"):
        session.bus.subscribe(
            name, lambda payload, name=name: events.append((name, payload))
        )

    session.select_segment("segment-1", "TODO")

    assert not session.validation.is_valid
    assert events[0] == ("segment.selected", "segment-1")
    assert events[1][0] == "validation.updated"

    session.select_segment("segment-1", "fine")
    assert session.validation.is_valid


def test_select_unknown_segment_is_ignored() -> None:
    session = make_session()

    assert session.select_segment("segment-9", "X") is None
    assert session.selected_segments == set()


def test_replace_store_resets_document_state() -> None:
    session = make_session()
    press(session, "right")
    replaced: List[object] = []
    session.bus.subscribe("store.replaced", replaced.append)

    session.replace_store(SegmentStore("New\n\nContent", name="doc-2"))

    assert session.selected_segments == set()
    assert [s.original for s in session.suggestions] == ["New", "Content"]
    assert replaced == ["doc-2"]


def test_move_cursor_to_emits_only_on_change() -> None:
    session = make_session()
    moves: List[object] = []
    session.bus.subscribe("cursor.moved", moves.append)

    assert session.move_cursor_to(2) is True
    assert session.move_cursor_to(5) is False

    assert moves == [2]
    assert session.store.get_current_segment().original == "C"
