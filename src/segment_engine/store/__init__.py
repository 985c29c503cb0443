"""Segment store: segmentation, working copies, cursor, and fade weights."""

from .opacity import DEFAULT_FADE_LENGTH, SegmentOpacity, compute_opacity, fade_opacity
from .segment import Segment, count_lines
from .segmentation import BLANK_LINE_BOUNDARY, segment_text, split_paragraphs
from .store import SegmentStore
from .sync import StoreMirror, StoreSync

__all__ = [
    "BLANK_LINE_BOUNDARY",
    "DEFAULT_FADE_LENGTH",
    "Segment",
    "SegmentOpacity",
    "SegmentStore",
    "StoreMirror",
    "StoreSync",
    "compute_opacity",
    "count_lines",
    "fade_opacity",
    "segment_text",
    "split_paragraphs",
]
