"""Cursor and segment-choice actions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .results import ActionResult

if TYPE_CHECKING:
    from segment_engine.session import EditingSession


def _moved(moved: bool) -> ActionResult:
    if moved:
        return ActionResult(consumed=True)
    return ActionResult(consumed=True, status="boundary")


def cursor_up(session: "EditingSession") -> ActionResult:
    return _moved(session.move_cursor_up())


def cursor_down(session: "EditingSession") -> ActionResult:
    return _moved(session.move_cursor_down())


def keep_original(session: "EditingSession") -> ActionResult:
    """Restore the current segment's original text and mark it chosen."""

    segment = session.store.get_current_segment()
    if segment is None:
        return ActionResult(consumed=True, status="noop")
    session.select_segment(segment.id, segment.original)
    return ActionResult(consumed=True, message="keep_original")


def take_suggestion(session: "EditingSession") -> ActionResult:
    """Replace the current segment with a suggestion, then advance."""

    segment = session.store.get_current_segment()
    if segment is None:
        return ActionResult(consumed=True, status="noop")
    session.select_segment(segment.id, session.provider.suggest(segment.working))
    session.move_cursor_down()
    return ActionResult(consumed=True, message="take_suggestion")


__all__ = ["cursor_down", "cursor_up", "keep_original", "take_suggestion"]
