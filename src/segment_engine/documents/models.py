"""Paragraph and document records derived from a segment store."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Collection, Dict, Iterable, List, Mapping

from segment_engine.store import Segment
from segment_engine.suggestions import SuggestionProvider

PARAGRAPH_SEPARATOR = "\n\n"
_REQUIRED_DOCUMENT_KEYS = ("id", "title")
_REQUIRED_PARAGRAPH_KEYS = ("id", "original", "current")


@dataclass(slots=True)
class Paragraph:
    id: str
    original: str
    current: str
    ai_suggested: str = ""
    is_selected: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "original": self.original,
            "current": self.current,
            "aiSuggested": self.ai_suggested,
            "isSelected": self.is_selected,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Paragraph":
        missing = [key for key in _REQUIRED_PARAGRAPH_KEYS if key not in payload]
        if missing:
            raise ValueError(f"Paragraph payload missing keys: {missing}")
        return cls(
            id=str(payload["id"]),
            original=str(payload["original"]),
            current=str(payload["current"]),
            ai_suggested=str(payload.get("aiSuggested", "")),
            is_selected=bool(payload.get("isSelected", False)),
        )


@dataclass(slots=True)
class Document:
    """Titled list of paragraphs plus its last modification time (UTC)."""

    id: str
    title: str
    paragraphs: List[Paragraph] = field(default_factory=list)
    last_modified: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def content(self) -> str:
        return PARAGRAPH_SEPARATOR.join(p.current for p in self.paragraphs)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "paragraphs": [paragraph.to_dict() for paragraph in self.paragraphs],
            "lastModified": self.last_modified.isoformat(),
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Document":
        missing = [key for key in _REQUIRED_DOCUMENT_KEYS if key not in payload]
        if missing:
            raise ValueError(f"Document payload missing keys: {missing}")
        raw_modified = payload.get("lastModified")
        return cls(
            id=str(payload["id"]),
            title=str(payload["title"]),
            paragraphs=[
                Paragraph.from_dict(item) for item in payload.get("paragraphs") or []
            ],
            last_modified=_parse_timestamp(raw_modified)
            if raw_modified
            else datetime.now(timezone.utc),
        )


def _parse_timestamp(raw: str) -> datetime:
    # JSON dates from browsers end in "Z"
    if raw.endswith("Z"):
        raw = raw[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid lastModified timestamp: {raw!r}") from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def paragraphs_from_segments(
    segments: Iterable[Segment],
    provider: SuggestionProvider,
    selected_ids: Collection[str] = (),
) -> List[Paragraph]:
    return [
        Paragraph(
            id=segment.id,
            original=segment.original,
            current=segment.working,
            ai_suggested=provider.suggest(segment.original),
            is_selected=segment.id in selected_ids,
        )
        for segment in segments
    ]


__all__ = ["Document", "Paragraph", "paragraphs_from_segments"]
