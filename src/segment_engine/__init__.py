"""Paragraph segmentation and dual-copy text model for editor hosts."""

__all__ = [
    "adapters",
    "documents",
    "keymaps",
    "runtime",
    "session",
    "store",
    "suggestions",
]

__version__ = "0.1.0"
