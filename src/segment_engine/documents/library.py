"""In-memory document collection that hands out segment stores."""

from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import (
    Any,
    Callable,
    Collection,
    Dict,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Tuple,
)

from segment_engine.runtime.telemetry import span
from segment_engine.store import SegmentStore
from segment_engine.suggestions import PlaceholderSuggestionProvider, SuggestionProvider

from .models import Document, paragraphs_from_segments

DEFAULT_TITLE = "Untitled Document"


class DocumentNotFoundError(KeyError):
    """Raised when a document id is not part of the library."""

    def __init__(self, doc_id: str) -> None:
        super().__init__(f"Document '{doc_id}' not found")
        self.doc_id = doc_id


def _timestamp_id() -> str:
    return str(int(time.time() * 1000))


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DocumentLibrary:
    """Ordered set of documents; each load builds a fresh ``SegmentStore``."""

    def __init__(
        self,
        *,
        provider: Optional[SuggestionProvider] = None,
        id_factory: Callable[[], str] = _timestamp_id,
        clock: Callable[[], datetime] = _utcnow,
        logger_name: Optional[str] = None,
    ) -> None:
        self.provider = provider or PlaceholderSuggestionProvider()
        self._id_factory = id_factory
        self._clock = clock
        self._logger_name = logger_name
        self._documents: Dict[str, Document] = {}

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(self._documents.values())

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._documents

    def get(self, doc_id: str) -> Document:
        try:
            return self._documents[doc_id]
        except KeyError:
            raise DocumentNotFoundError(doc_id) from None

    def create(
        self, content: str, title: str = DEFAULT_TITLE
    ) -> Tuple[Document, SegmentStore]:
        with span(
            "documents::create",
            logger_name=self._logger_name,
            component="documents",
            metadata={"title": title},
        ) as handle:
            doc_id = self._unique_id()
            store = SegmentStore(content, name=doc_id)
            document = Document(
                id=doc_id,
                title=title,
                paragraphs=paragraphs_from_segments(
                    store.get_segments(), self.provider
                ),
                last_modified=self._clock(),
            )
            self._documents[doc_id] = document
            handle.add_metadata("doc_id", doc_id)
            return document, store

    def load(self, doc_id: str) -> SegmentStore:
        """Build a store from the document's current paragraph texts."""

        document = self.get(doc_id)
        return SegmentStore(document.content, name=doc_id)

    def update(
        self, doc_id: str, store: SegmentStore, selected_ids: Collection[str] = ()
    ) -> Document:
        """Re-derive the document's paragraphs from ``store``."""

        with span(
            "documents::update",
            logger_name=self._logger_name,
            component="documents",
            metadata={"doc_id": doc_id},
        ):
            document = self.get(doc_id)
            document.paragraphs = paragraphs_from_segments(
                store.get_segments(), self.provider, selected_ids
            )
            document.last_modified = self._clock()
            return document

    def dump(self) -> List[Dict[str, Any]]:
        return [document.to_dict() for document in self._documents.values()]

    def restore(self, payloads: Iterable[Mapping[str, Any]]) -> None:
        """Replace the library contents with previously dumped documents."""

        documents = [Document.from_dict(payload) for payload in payloads]
        self._documents = {document.id: document for document in documents}

    def _unique_id(self) -> str:
        base = self._id_factory()
        candidate = base
        suffix = 1
        while candidate in self._documents:
            candidate = f"{base}-{suffix}"
            suffix += 1
        return candidate


__all__ = ["DEFAULT_TITLE", "DocumentLibrary", "DocumentNotFoundError"]
