from __future__ import annotations

from datetime import datetime, timezone

import pytest

from segment_engine.documents import (
    Document,
    DocumentLibrary,
    DocumentNotFoundError,
    Paragraph,
    ValidationIssue,
    format_validation_errors,
)

FIXED_TIME = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)


def make_library(*ids: str) -> DocumentLibrary:
    pool = iter(ids or ("doc",) * 10)
    return DocumentLibrary(id_factory=lambda: next(pool), clock=lambda: FIXED_TIME)


def test_create_derives_paragraphs() -> None:
    library = make_library("doc-1")

    document, store = library.create("Alpha\n\nBeta", "Notes")

    assert document.id == "doc-1"
    assert document.title == "Notes"
    assert document.last_modified == FIXED_TIME
    assert [p.id for p in document.paragraphs] == ["segment-0", "segment-1"]
    assert document.paragraphs[0].ai_suggested == 'AI suggestion for: "Alpha..."'
    assert not any(p.is_selected for p in document.paragraphs)
    assert store.name == "doc-1"
    assert len(library) == 1 and "doc-1" in library


def test_create_defaults_title_and_avoids_id_collisions() -> None:
    library = make_library()

    first, _ = library.create("A")
    second, _ = library.create("B")

    assert first.title == "Untitled Document"
    assert (first.id, second.id) == ("doc", "doc-1")


def test_update_and_load_round_trip_working_text() -> None:
    library = make_library("doc-1")
    document, store = library.create("Alpha\n\nBeta")
    store.update_working_copy("segment-0", "Gamma")

    library.update(document.id, store, {"segment-0"})

    assert document.content == "Gamma\n\nBeta"
    assert document.paragraphs[0].original == "Alpha"
    assert [p.is_selected for p in document.paragraphs] == [True, False]

    reloaded = library.load(document.id)
    assert reloaded.get_full_original_text() == "Gamma\n\nBeta"
    assert reloaded.get_cursor_position() == 0


def test_unknown_document_raises() -> None:
    library = make_library()

    with pytest.raises(DocumentNotFoundError) as excinfo:
        library.load("missing")

    assert excinfo.value.doc_id == "missing"
    assert isinstance(excinfo.value, KeyError)


def test_document_dict_uses_camel_case_keys() -> None:
    document = Document(
        id="1",
        title="T",
        paragraphs=[Paragraph(id="segment-0", original="a", current="b")],
        last_modified=FIXED_TIME,
    )

    payload = document.to_dict()

    assert payload == {
        "id": "1",
        "title": "T",
        "paragraphs": [
            {
                "id": "segment-0",
                "original": "a",
                "current": "b",
                "aiSuggested": "",
                "isSelected": False,
            }
        ],
        "lastModified": "2024-05-01T12:30:00+00:00",
    }
    assert Document.from_dict(payload) == document


def test_document_from_browser_payload() -> None:
    document = Document.from_dict(
        {"id": "1", "title": "T", "lastModified": "2024-05-01T12:30:00.000Z"}
    )

    assert document.paragraphs == []
    assert document.last_modified == FIXED_TIME


def test_document_from_incomplete_payload() -> None:
    with pytest.raises(ValueError):
        Document.from_dict({"title": "no id"})
    with pytest.raises(ValueError):
        Document.from_dict({"id": "1", "title": "T", "paragraphs": [{"id": "p"}]})
    with pytest.raises(ValueError):
        Document.from_dict({"id": "1", "title": "T", "lastModified": "yesterday"})


def test_dump_and_restore() -> None:
    library = make_library("a", "b")
    library.create("One")
    library.create("Two\n\nThree")

    restored = make_library()
    restored.restore(library.dump())

    assert [d.id for d in restored] == ["a", "b"]
    assert restored.get("b").content == "Two\n\nThree"


def test_format_validation_errors() -> None:
    issues = [
        ValidationIssue("Multiple h1 headings found.", line=3, column=1),
        ValidationIssue("Document is empty"),
    ]

    assert format_validation_errors(issues) == (
        "Multiple h1 headings found. (line 3, column 1)\nDocument is empty"
    )
