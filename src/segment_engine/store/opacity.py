"""Distance-based fade weights for segments following a cursor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from .segment import Segment

DEFAULT_FADE_LENGTH = 8
OPAQUE = 1.0
TRANSPARENT = 0.0


@dataclass(frozen=True, slots=True)
class SegmentOpacity:
    segment: Segment
    opacity: float


def fade_opacity(index: int, cursor: int, fade_length: int) -> float:
    """Opacity of the segment at ``index`` for a cursor at ``cursor``.

    Everything up to and including the cursor is opaque. Past it the weight
    decays linearly and reaches zero ``fade_length`` segments away. A
    non-positive ``fade_length`` leaves no fade band at all.
    """

    if index <= cursor:
        return OPAQUE
    if fade_length <= 0:
        return TRANSPARENT
    distance = index - cursor
    return max(TRANSPARENT, OPAQUE - distance / fade_length)


def compute_opacity(
    segments: Sequence[Segment], cursor: int, fade_length: int = DEFAULT_FADE_LENGTH
) -> List[SegmentOpacity]:
    return [
        SegmentOpacity(
            segment=segment, opacity=fade_opacity(index, cursor, fade_length)
        )
        for index, segment in enumerate(segments)
    ]


__all__ = [
    "DEFAULT_FADE_LENGTH",
    "SegmentOpacity",
    "compute_opacity",
    "fade_opacity",
]
