"""Deriving suggestions from segments and applying them to a store."""

from __future__ import annotations

from typing import Iterable, List, Optional

from segment_engine.runtime.telemetry import record_event
from segment_engine.store import Segment, SegmentStore

from .models import Suggestion, SuggestionProvider


def generate_suggestions(
    segments: Iterable[Segment], provider: SuggestionProvider
) -> List[Suggestion]:
    """One suggestion per segment, always computed from the original text."""

    return [
        Suggestion(
            original=segment.original,
            rewritten=provider.suggest(segment.original),
            line_start=segment.start_line,
            line_end=segment.end_line,
        )
        for segment in segments
    ]


def accept_suggestion(store: SegmentStore, suggestion: Suggestion) -> Optional[Segment]:
    """Write ``suggestion.rewritten`` into the segment starting at its line.

    Returns the updated segment, or ``None`` when the store has no segment
    starting on ``suggestion.line_start``.
    """

    segment = next(
        (s for s in store.get_segments() if s.start_line == suggestion.line_start),
        None,
    )
    if segment is None:
        record_event(
            "suggestion.unmatched",
            level="debug",
            data={"line_start": suggestion.line_start},
        )
        return None
    store.update_working_copy(segment.id, suggestion.rewritten)
    return segment


__all__ = ["accept_suggestion", "generate_suggestions"]
