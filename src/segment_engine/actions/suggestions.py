"""Actions over the session's suggestion list."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .results import ActionResult

if TYPE_CHECKING:
    from segment_engine.session import EditingSession


def cycle_suggestion(session: "EditingSession") -> ActionResult:
    if not session.suggestions:
        return ActionResult(consumed=False, status="noop")
    session.cycle_suggestion()
    return ActionResult(
        consumed=True, message=f"suggestion:{session.selected_suggestion}"
    )


def accept_selected_suggestion(session: "EditingSession") -> ActionResult:
    suggestion = session.current_suggestion()
    if suggestion is None:
        return ActionResult(consumed=False, status="noop")
    if session.accept_suggestion(suggestion) is None:
        return ActionResult(consumed=True, status="unmatched")
    return ActionResult(consumed=True, message="suggestion_accepted")


__all__ = ["accept_selected_suggestion", "cycle_suggestion"]
