"""Executable Textual app that hosts the editor."""

from __future__ import annotations

import argparse
import os
from typing import Any, Dict, Optional, Sequence

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.widget import Widget

from kilo_engine.render import Frame, FrameRow
from kilo_engine.runtime import telemetry
from kilo_engine.session import EditorSession
from kilo_engine.syntax import HighlightClass

from .controller import (
    TextualKiloAdapter,
    TextualUIHooks,
    create_default_manager,
    normalize_key,
)

HIGHLIGHT_STYLES: Dict[HighlightClass, str] = {
    HighlightClass.NORMAL: "",
    HighlightClass.COMMENT: "cyan",
    HighlightClass.BLOCK_COMMENT: "cyan",
    HighlightClass.KEYWORD1: "yellow",
    HighlightClass.KEYWORD2: "green",
    HighlightClass.STRING: "magenta",
    HighlightClass.NUMBER: "red",
    HighlightClass.MATCH: "blue",
}


class EditorView(Widget, can_focus=True):
    """Paints the latest :class:`Frame` as styled rich text."""

    DEFAULT_CSS = """
    EditorView {
        height: 1fr;
        width: 1fr;
        padding: 0;
    }
    """

    def __init__(self) -> None:
        super().__init__(id="editor-view")
        self.frame: Optional[Frame] = None

    def show(self, frame: Frame) -> None:
        self.frame = frame
        self.refresh()

    def render(self) -> Text:
        frame = self.frame
        if frame is None:
            return Text("")

        result = Text(no_wrap=True, overflow="crop")
        cursor_y, cursor_x = frame.cursor
        for y, row in enumerate(frame.rows):
            self._append_row(result, row, cursor_x if y == cursor_y else None)
            result.append("\n")
        result.append(frame.status_bar(), style="reverse")
        result.append("\n")
        result.append(frame.message_bar(), style="reverse")
        return result

    @staticmethod
    def _append_row(result: Text, row: FrameRow, cursor_x: Optional[int]) -> None:
        styles = [HIGHLIGHT_STYLES.get(klass, "") for klass in row.highlight]
        text = row.text
        col = 0
        # Batch consecutive characters sharing a style
        while col < len(text):
            if col == cursor_x:
                result.append(text[col], style=f"reverse {styles[col]}".strip())
                col += 1
                continue
            end = col + 1
            while end < len(text) and styles[end] == styles[col] and end != cursor_x:
                end += 1
            result.append(text[col:end], style=styles[col])
            col = end
        if cursor_x is not None and cursor_x >= len(text):
            result.append(" " * (cursor_x - len(text)))
            result.append(" ", style="reverse")


class KiloApp(App[None], inherit_bindings=False):
    """Full-screen editor embedding one :class:`EditorSession`."""

    CSS = """
    Screen {
        layout: vertical;
        overflow: hidden;
    }
    """

    BINDINGS = [("ctrl+c", "quit", "Quit")]
    ENABLE_COMMAND_PALETTE = False

    def __init__(self, filename: Optional[str] = None) -> None:
        super().__init__()
        self._filename = filename
        self.session: EditorSession | None = None
        self.adapter: TextualKiloAdapter | None = None
        self._view = EditorView()

    def compose(self) -> ComposeResult:
        yield self._view

    def on_mount(self) -> None:
        self.session = EditorSession.open(self._filename)
        manager = create_default_manager(self.session)
        hooks = TextualUIHooks(
            update_frame=self._view.show,
            handle_event=self._handle_event,
            log=self._log_line,
        )
        self.session.resize(self.size.height, self.size.width)
        self.adapter = TextualKiloAdapter(manager, hooks)
        self._view.focus()
        self.set_interval(0.5, self._expire_status)

    def _expire_status(self) -> None:
        if self.adapter:
            self.adapter.refresh()

    def on_resize(self, event: events.Resize) -> None:
        if self.adapter:
            self.adapter.resize(event.size.height, event.size.width)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter or event.key == "ctrl+c":
            return
        key = normalize_key(event.key, event.character)
        self.adapter.handle_textual_key(key.key, text=key.text, modifiers=key.modifiers)
        event.prevent_default()
        event.stop()

    def _log_line(self, line: str) -> None:
        telemetry.record_event(
            "adapter.trace",
            level="debug",
            data={"line": line},
            logger_name="kilo_engine.adapters.textual",
        )

    def _handle_event(self, name: str, payload: Any | None) -> None:
        del payload
        if name == "session.quit":
            self.exit()


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="kilo-engine", description="Small terminal text editor."
    )
    parser.add_argument("filename", nargs="?", help="File to open or create")
    parser.add_argument(
        "--log-preset",
        choices=("development", "production", "performance"),
        default=os.environ.get("KILO_ENGINE_LOG_PRESET"),
        help="telelog preset (default: configured from KILO_ENGINE_* variables)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    # The app owns the terminal, so console logging stays off unless asked for.
    os.environ.setdefault("KILO_ENGINE_DISABLE_CONSOLE", "1")
    telemetry.configure(preset=args.log_preset)
    KiloApp(filename=args.filename).run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
