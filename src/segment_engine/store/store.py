"""SegmentStore: segmentation, dual text state, cursor, and fade weights."""

from __future__ import annotations

from typing import Iterator, List, Optional, Sequence

from segment_engine.runtime import telemetry

from .opacity import DEFAULT_FADE_LENGTH, SegmentOpacity, compute_opacity
from .segment import Segment
from .segmentation import segment_text
from .sync import StoreMirror

ID_PREFIX = "segment-"
NO_CURSOR = -1
SEPARATOR = "\n\n"


class SegmentStore:
    """Owns the segments of one document and a cursor over them.

    Topology (segment count, order, ids) is fixed at construction; only the
    working copies and the cursor change afterwards. None of the operations
    raise: unknown ids are ignored and blocked cursor moves return ``False``.
    """

    def __init__(self, text: str, *, name: str = "default") -> None:
        self.name = name
        self._next_id = 0
        self._cursor = NO_CURSOR
        with telemetry.span(
            "store::segment",
            component="store",
            metadata={"store": name, "chars": len(text)},
        ) as handle:
            self._segments: List[Segment] = segment_text(text, self._allocate_id)
            handle.add_metadata("segments", len(self._segments))
        if self._segments:
            self._cursor = 0

    def _allocate_id(self) -> str:
        segment_id = f"{ID_PREFIX}{self._next_id}"
        self._next_id += 1
        return segment_id

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self._segments)

    # lookup

    def get_segments(self) -> Sequence[Segment]:
        return self._segments

    def get_segment_by_id(self, segment_id: str) -> Optional[Segment]:
        return next((s for s in self._segments if s.id == segment_id), None)

    def index_of(self, segment_id: str) -> int:
        for index, segment in enumerate(self._segments):
            if segment.id == segment_id:
                return index
        return NO_CURSOR

    def get_segment_by_line_number(self, line: int) -> Optional[Segment]:
        return next((s for s in self._segments if s.contains_line(line)), None)

    def modified_segments(self) -> List[Segment]:
        return [segment for segment in self._segments if segment.is_modified]

    # working copies

    def update_working_copy(self, segment_id: str, text: str) -> None:
        segment = self.get_segment_by_id(segment_id)
        if segment is None:
            self._log_unknown("update_working_copy", segment_id)
            return
        segment.working = text

    def reset_working_copy(self, segment_id: str) -> None:
        segment = self.get_segment_by_id(segment_id)
        if segment is None:
            self._log_unknown("reset_working_copy", segment_id)
            return
        segment.reset()

    def reset_all_working_copies(self) -> None:
        with telemetry.span(
            "store::reset_all", component="store", metadata={"store": self.name}
        ):
            for segment in self._segments:
                segment.reset()

    def get_full_working_text(self) -> str:
        return SEPARATOR.join(segment.working for segment in self._segments)

    def get_full_original_text(self) -> str:
        return SEPARATOR.join(segment.original for segment in self._segments)

    # cursor

    def get_cursor_position(self) -> int:
        return self._cursor

    @property
    def cursor_position(self) -> int:
        return self._cursor

    def get_current_segment(self) -> Optional[Segment]:
        if 0 <= self._cursor < len(self._segments):
            return self._segments[self._cursor]
        return None

    def move_cursor_down(self) -> bool:
        if self._cursor < len(self._segments) - 1:
            self._cursor += 1
            return True
        return False

    def move_cursor_up(self) -> bool:
        if self._cursor > 0:
            self._cursor -= 1
            return True
        return False

    def move_cursor_to(self, index: int) -> bool:
        if 0 <= index < len(self._segments):
            self._cursor = index
            return True
        return False

    # rendering support

    def get_segments_with_opacity(
        self, fade_length: int = DEFAULT_FADE_LENGTH, cursor: Optional[int] = None
    ) -> List[SegmentOpacity]:
        reference = self._cursor if cursor is None else cursor
        return compute_opacity(self._segments, reference, fade_length)

    def mirror(
        self,
        *,
        fade_length: int = DEFAULT_FADE_LENGTH,
        attributes: Optional[dict[str, str]] = None,
    ) -> StoreMirror:
        return StoreMirror(
            cursor=self._cursor,
            segments=self.get_segments_with_opacity(fade_length),
            working_text=self.get_full_working_text(),
            attributes=dict(attributes or {}),
        )

    def _log_unknown(self, operation: str, segment_id: str) -> None:
        telemetry.record_event(
            "store.unknown_segment",
            level="debug",
            data={"store": self.name, "operation": operation, "id": segment_id},
        )


__all__ = ["SegmentStore"]
