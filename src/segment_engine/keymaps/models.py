"""Dataclasses describing key input, bindings, and action metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Iterable, Mapping, Optional, Tuple

from segment_engine.actions.results import ActionResult


def _normalize_modifiers(modifiers: Iterable[str]) -> Tuple[str, ...]:
    values = tuple(m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


def make_token(key: str, modifiers: Iterable[str] = ()) -> str:
    normalized = _normalize_modifiers(modifiers)
    key = key.strip().lower()
    if normalized:
        return "+".join(normalized + (key,))
    return key


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """Single normalized key press."""

    key: str
    modifiers: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.key.strip():
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "key", self.key.strip().lower())
        object.__setattr__(self, "modifiers", _normalize_modifiers(self.modifiers))

    @property
    def token(self) -> str:
        return make_token(self.key, self.modifiers)

    @classmethod
    def parse(cls, token: str) -> "KeyStroke":
        *modifiers, key = token.split("+")
        return cls(key=key, modifiers=tuple(modifiers))


@dataclass(slots=True)
class KeyInput:
    """Key event as delivered by a host adapter."""

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None

    @property
    def token(self) -> str:
        return make_token(self.key, self.modifiers)


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Callable metadata used during binding execution."""

    id: str
    handler: Callable[..., ActionResult]
    description: str = ""
    metadata: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def __call__(self, *args: object, **kwargs: object) -> ActionResult:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates one key stroke with an action."""

    id: str
    stroke: KeyStroke
    action_id: str
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")

    @property
    def token(self) -> str:
        return self.stroke.token

    @classmethod
    def for_key(
        cls, binding_id: str, key: str, action_id: str, description: str = ""
    ) -> "Binding":
        return cls(
            id=binding_id,
            stroke=KeyStroke.parse(key),
            action_id=action_id,
            description=description,
        )


__all__ = [
    "ActionRef",
    "ActionResult",
    "Binding",
    "KeyInput",
    "KeyStroke",
    "make_token",
]
