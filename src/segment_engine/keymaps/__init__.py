"""Declarative keymap registry and default bindings."""

from .models import ActionRef, ActionResult, Binding, KeyInput, KeyStroke, make_token
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats
from .defaults import load_default_keymaps

__all__ = [
    "ActionRef",
    "ActionResult",
    "Binding",
    "KeyInput",
    "KeyStroke",
    "KeymapConflictError",
    "KeymapRegistry",
    "RegistryStats",
    "load_default_keymaps",
    "make_token",
]
