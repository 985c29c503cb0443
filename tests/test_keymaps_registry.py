from __future__ import annotations

import pytest

from segment_engine.actions import ActionResult
from segment_engine.keymaps import (
    ActionRef,
    Binding,
    KeyInput,
    KeymapConflictError,
    KeymapRegistry,
    KeyStroke,
    load_default_keymaps,
)


def make_action(action_id: str = "segment.test") -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: ActionResult(True))


def make_binding(
    *, binding_id: str, key: str = "down", action_id: str = "segment.test"
) -> Binding:
    return Binding.for_key(binding_id, key, action_id)


def test_key_stroke_normalizes_tokens() -> None:
    stroke = KeyStroke.parse("Shift+Ctrl+Up")

    assert stroke.key == "up"
    assert stroke.modifiers == ("ctrl", "shift")
    assert stroke.token == "ctrl+shift+up"
    assert KeyInput("UP", modifiers=("SHIFT", "ctrl")).token == stroke.token


def test_key_stroke_rejects_empty_key() -> None:
    with pytest.raises(ValueError):
        KeyStroke(" ")


def test_action_ref_requires_callable() -> None:
    with pytest.raises(TypeError):
        ActionRef(id="bad", handler="not callable")  # type: ignore[arg-type]


def test_register_binding_success() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    binding = make_binding(binding_id="review.down")

    registry.register_binding(binding)

    assert registry.stats().binding_count == 1
    assert list(registry.iter_bindings()) == [binding]
    assert registry.lookup("down") == binding
    assert registry.lookup("up") is None


def test_register_binding_conflict_detection() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="review.down"))

    with pytest.raises(KeymapConflictError) as excinfo:
        registry.register_binding(make_binding(binding_id="review.down.duplicate"))

    assert excinfo.value.existing.id == "review.down"


def test_register_binding_replace_overrides_key() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="first"))

    registry.register_binding(make_binding(binding_id="second"), replace=True)

    assert registry.lookup("down").id == "second"
    assert registry.stats().binding_count == 1


def test_rebinding_same_id_to_new_key() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="move"))

    with pytest.raises(ValueError):
        registry.register_binding(make_binding(binding_id="move", key="j"))

    registry.register_binding(make_binding(binding_id="move", key="j"), replace=True)
    assert registry.lookup("down") is None
    assert registry.lookup("j").id == "move"


def test_binding_requires_registered_action() -> None:
    registry = KeymapRegistry()

    with pytest.raises(KeyError):
        registry.register_binding(make_binding(binding_id="orphan"))


def test_duplicate_action_requires_replace() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    with pytest.raises(ValueError):
        registry.register_action(make_action())

    registry.register_action(make_action(), replace=True)
    assert registry.stats().action_count == 1


def test_unregister_binding_bumps_revision() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="review.down"))
    revision = registry.revision()

    removed = registry.unregister_binding("review.down")

    assert removed is not None and removed.id == "review.down"
    assert registry.revision() == revision + 1
    assert registry.lookup("down") is None
    assert registry.unregister_binding("review.down") is None


def test_load_default_keymaps() -> None:
    registry = load_default_keymaps(KeymapRegistry())

    stats = registry.stats()
    assert stats.action_count == 6
    assert stats.binding_count == 6
    assert stats.tokens == ("down", "enter", "left", "right", "tab", "up")
    assert registry.lookup("right").action_id == "segment.take_suggestion"

    load_default_keymaps(registry)
    assert registry.stats().binding_count == 6
