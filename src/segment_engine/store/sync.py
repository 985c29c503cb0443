"""Adapter boundary types for handing store state to host widgets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol, Sequence

from .opacity import SegmentOpacity
from .segment import Segment


@dataclass(slots=True)
class StoreMirror:
    """Host-friendly snapshot of a store after its latest mutation."""

    cursor: int
    segments: Sequence[SegmentOpacity]
    working_text: str
    attributes: dict[str, str] = field(default_factory=dict)

    @property
    def current(self) -> Optional[Segment]:
        if 0 <= self.cursor < len(self.segments):
            return self.segments[self.cursor].segment
        return None


class StoreSync(Protocol):
    """Protocol describing how adapters read from the store layer."""

    def pull_store(self) -> StoreMirror:
        """Return the latest store snapshot that the host should render."""
        ...


__all__ = ["StoreMirror", "StoreSync"]
