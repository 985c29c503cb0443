"""Segment record: one independently editable paragraph."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Segment:
    """Paragraph with an immutable original and a mutable working copy.

    ``start_line``/``end_line`` are 1-based and inclusive, measured in the
    source document at segmentation time. They never follow edits made to
    ``working``.
    """

    id: str
    original: str
    working: str
    start_line: int
    end_line: int

    def __setattr__(self, name: str, value: object) -> None:
        if name == "original" and hasattr(self, "original"):
            raise AttributeError("Segment.original is read-only")
        object.__setattr__(self, name, value)

    @classmethod
    def from_chunk(cls, segment_id: str, chunk: str, start_line: int) -> "Segment":
        end_line = start_line + count_lines(chunk) - 1
        return cls(
            id=segment_id,
            original=chunk,
            working=chunk,
            start_line=start_line,
            end_line=end_line,
        )

    @property
    def is_modified(self) -> bool:
        return self.working != self.original

    @property
    def line_count(self) -> int:
        return self.end_line - self.start_line + 1

    def contains_line(self, line: int) -> bool:
        return self.start_line <= line <= self.end_line

    def reset(self) -> None:
        self.working = self.original


def count_lines(chunk: str) -> int:
    """Number of ``\\n``-delimited lines in ``chunk`` (at least one)."""

    return chunk.count("\n") + 1


__all__ = ["Segment", "count_lines"]
