"""Executable Textual app for reviewing a document segment by segment."""

from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Sequence, Tuple

from textual import events
from textual.app import App, ComposeResult
from textual.containers import VerticalScroll
from textual.message import Message
from textual.widgets import Footer, Header, Static

from segment_engine.documents import DocumentLibrary
from segment_engine.runtime import telemetry
from segment_engine.session import EditingSession
from segment_engine.store import DEFAULT_FADE_LENGTH, StoreMirror

from .controller import TextualSegmentAdapter, TextualUIHooks

SAMPLE_TEXT = """# Segment review

Each paragraph is its own segment. Use the arrow keys to move between them.

Left keeps the original paragraph, right takes the suggestion and moves on.

Paragraphs further below the cursor fade out."""


@dataclass
class UIState:
    store_name: str = ""


class SegmentView(Static):
    """One rendered segment; clicking it moves the cursor there."""

    class Selected(Message):
        def __init__(self, segment_id: str) -> None:
            super().__init__()
            self.segment_id = segment_id

    def __init__(self, segment_id: str, text: str) -> None:
        super().__init__(text, markup=False, classes="segment")
        self.segment_id = segment_id

    def on_click(self) -> None:
        self.post_message(self.Selected(self.segment_id))


class SegmentEditorApp(App[None]):
    """Minimal Textual UI rendering segments with their fade weights."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#segments {
		height: 1fr;
		border: round $accent;
		padding: 0 1;
	}

	.segment {
		margin: 0 0 1 0;
		padding: 0 1;
	}

	.segment.current {
		background: $boost;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        text: str,
        *,
        title: str = "Untitled Document",
        fade_length: int = DEFAULT_FADE_LENGTH,
    ) -> None:
        super().__init__()
        self._text = text
        self._doc_title = title
        self._fade_length = fade_length
        self._state = UIState()
        self.library = DocumentLibrary()
        self.session: EditingSession | None = None
        self.adapter: TextualSegmentAdapter | None = None
        self._segment_widgets: Dict[str, SegmentView] = {}
        self._log = telemetry.get_logger("segment_engine.textual")

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield VerticalScroll(id="segments")
        yield Static("", id="status-line")
        yield Footer()

    def on_mount(self) -> None:
        document, store = self.library.create(self._text, self._doc_title)
        self.session = EditingSession(store)
        hooks = TextualUIHooks(
            update_segments=self._update_segments,
            update_status=self._update_status,
            log=self._log_line,
        )
        self.adapter = TextualSegmentAdapter(
            self.session,
            hooks,
            fade_length=self._fade_length,
            library=self.library,
            doc_id=document.id,
        )

    async def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        normalized = self._normalize_key(event)
        if normalized is None:
            return
        key, text, modifiers = normalized
        result = self.adapter.handle_textual_key(key, text=text, modifiers=modifiers)
        if result.consumed:
            event.stop()

    def _update_segments(self, mirror: StoreMirror) -> None:
        container = self.query_one("#segments", VerticalScroll)
        store_name = mirror.attributes.get("store", "")
        if store_name != self._state.store_name:
            container.remove_children()
            self._segment_widgets = {}
            self._state.store_name = store_name

        for index, entry in enumerate(mirror.segments):
            segment = entry.segment
            widget = self._segment_widgets.get(segment.id)
            if widget is None:
                widget = SegmentView(segment.id, segment.working)
                self._segment_widgets[segment.id] = widget
                container.mount(widget)
            else:
                widget.update(segment.working)
            widget.styles.opacity = entry.opacity
            widget.set_class(index == mirror.cursor, "current")
            if index == mirror.cursor:
                widget.scroll_visible()

    def on_segment_view_selected(self, message: SegmentView.Selected) -> None:
        if self.adapter:
            self.adapter.focus_segment(message.segment_id)

    def _update_status(self, status: str) -> None:
        self.query_one("#status-line", Static).update(status)

    def _log_line(self, line: str) -> None:
        self._log.debug(line)

    @staticmethod
    def _normalize_key(
        event: events.Key,
    ) -> Optional[Tuple[str, Optional[str], Tuple[str, ...]]]:
        key = event.key
        if key in {"ctrl+c", "ctrl+q"}:
            return None
        parts = key.split("+")
        return (parts[-1], event.character, tuple(parts[:-1]))


def _env_int(key: str, fallback: int) -> int:
    value = os.environ.get(key)
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Review a document segment by segment."
    )
    parser.add_argument(
        "path",
        nargs="?",
        help="Text file to open ('-' reads stdin; default: a built-in sample)",
    )
    parser.add_argument(
        "--title",
        default=None,
        help="Document title (default: the file name)",
    )
    parser.add_argument(
        "--fade-length",
        type=int,
        default=_env_int("SEGMENT_ENGINE_FADE_LENGTH", DEFAULT_FADE_LENGTH),
        help="Segments below the cursor before a full fade (default: 8)",
    )
    parser.add_argument(
        "--log-preset",
        choices=("development", "production", "performance"),
        default=None,
        help="Telemetry preset to apply before starting",
    )
    return parser.parse_args(argv)


def _read_source(path: Optional[str]) -> Tuple[str, str]:
    if path is None:
        return SAMPLE_TEXT, "Sample Document"
    if path == "-":
        return sys.stdin.read(), "stdin"
    source = Path(path)
    return source.read_text(encoding="utf-8"), source.name


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)
    text, default_title = _read_source(args.path)
    app = SegmentEditorApp(
        text, title=args.title or default_title, fade_length=args.fade_length
    )
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
