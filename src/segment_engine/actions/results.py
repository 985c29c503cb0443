"""Result type shared by every action handler."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class ActionResult:
    """Outcome of dispatching one key."""

    consumed: bool
    status: str = "ok"
    message: Optional[str] = None


__all__ = ["ActionResult"]
