"""Blank-line paragraph splitting and line-range bookkeeping."""

from __future__ import annotations

import re
from typing import Callable, List

from .segment import Segment, count_lines

BLANK_LINE_BOUNDARY = re.compile(r"\n\s*\n")
FIRST_LINE = 1
SEPARATOR_LINES = 1


def split_paragraphs(text: str) -> List[str]:
    """Split ``text`` at blank-line boundaries, dropping whitespace-only chunks.

    Kept chunks are returned untrimmed so internal line breaks and
    indentation survive verbatim.
    """

    return [chunk for chunk in BLANK_LINE_BOUNDARY.split(text) if chunk.strip()]


def segment_text(text: str, allocate_id: Callable[[], str]) -> List[Segment]:
    """Build segments for ``text``, asking ``allocate_id`` for each id in order.

    Line numbers assume exactly one separator line between paragraphs; the
    separator is also counted after the final paragraph.
    """

    segments: List[Segment] = []
    line = FIRST_LINE
    for chunk in split_paragraphs(text):
        segment = Segment.from_chunk(allocate_id(), chunk, line)
        segments.append(segment)
        line += count_lines(chunk) + SEPARATOR_LINES
    return segments


__all__ = [
    "BLANK_LINE_BOUNDARY",
    "count_lines",
    "segment_text",
    "split_paragraphs",
]
