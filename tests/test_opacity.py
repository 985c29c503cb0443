from __future__ import annotations

import pytest

from segment_engine.store import SegmentStore, fade_opacity


def opacities(store: SegmentStore, *args, **kwargs) -> list[float]:
    return [entry.opacity for entry in store.get_segments_with_opacity(*args, **kwargs)]


def test_linear_fade_after_cursor() -> None:
    store = SegmentStore("A\n\nB\n\nC\n\nD\n\nE")

    assert opacities(store, fade_length=2, cursor=1) == [1, 1, 0.5, 0, 0]


def test_defaults_to_store_cursor_and_fade_of_eight() -> None:
    store = SegmentStore("A\n\nB\n\nC")

    assert opacities(store) == pytest.approx([1.0, 0.875, 0.75])

    store.move_cursor_down()
    assert opacities(store) == pytest.approx([1.0, 1.0, 0.875])


def test_pairs_keep_segment_order() -> None:
    store = SegmentStore("A\n\nB\n\nC")

    pairs = store.get_segments_with_opacity()

    assert [entry.segment for entry in pairs] == list(store.get_segments())


def test_opacity_is_pure() -> None:
    store = SegmentStore("A\n\nB\n\nC")

    first = opacities(store, 2, 0)
    second = opacities(store, 2, 0)

    assert first == second
    assert store.get_cursor_position() == 0


def test_segments_far_from_cursor_are_transparent() -> None:
    store = SegmentStore("\n\n".join("P" * 12))

    values = opacities(store, fade_length=4, cursor=0)

    assert values[:5] == pytest.approx([1.0, 0.75, 0.5, 0.25, 0.0])
    assert all(value == 0 for value in values[4:])


def test_explicit_cursor_before_first_segment() -> None:
    store = SegmentStore("A\n\nB")

    assert opacities(store, fade_length=2, cursor=-1) == [0.5, 0]


def test_non_positive_fade_length_has_no_fade_band() -> None:
    assert fade_opacity(0, 0, 0) == 1.0
    assert fade_opacity(1, 0, 0) == 0.0
    assert fade_opacity(3, 0, -5) == 0.0
