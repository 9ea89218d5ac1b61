"""Executable Textual app that hosts a tinyvi session."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence, Tuple

try:  # pragma: no cover - imported only when the app is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Static
    from rich.text import Text
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use tinyvi.adapters.textual.app"
    ) from exc

from tinyvi.buffer import BufferMirror
from tinyvi.config import EditorConfig
from tinyvi.modes import ModalController
from tinyvi.runtime import telemetry
from tinyvi.session import EditorSession

from .controller import TextualEditorAdapter, TextualUIHooks

NormalizedKey = Tuple[str, Optional[str], Tuple[str, ...]]

_NAMED_KEYS = {
    "escape": "ESC",
    "enter": "ENTER",
    "return": "ENTER",
    "backspace": "BACKSPACE",
    "ctrl+h": "BACKSPACE",
}


def create_controller(
    path: Optional[str] = None, *, config: Optional[EditorConfig] = None
) -> ModalController:
    """Open ``path`` (or an empty buffer) behind the standard modes."""

    session = EditorSession.open(path, config=config or EditorConfig.from_env())
    return ModalController.create(session)


@dataclass
class UIState:
    buffer_text: Text = field(default_factory=Text)
    status_text: str = ""
    command_text: str = ""


class TinyviApp(App[None]):
    """Minimal Textual UI: buffer view, status line and command line."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		padding: 0 1;
		content-align: left top;
		overflow: auto;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}

	#command-line {
		height: 1;
		background: $surface-darken-2;
		padding: 0 1;
	}
	"""

    BINDINGS = [("ctrl+q", "quit", "Quit")]

    def __init__(
        self,
        path: Optional[str] = None,
        *,
        config: Optional[EditorConfig] = None,
    ) -> None:
        super().__init__()
        self._state = UIState()
        self._path = path
        self._config = config
        self.controller: ModalController | None = None
        self.adapter: TextualEditorAdapter | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None
        self._command_widget: Static | None = None

    def compose(self) -> ComposeResult:
        self._buffer_widget = Static("", id="buffer-view")
        self._status_widget = Static("", id="status-line")
        self._command_widget = Static("", id="command-line")
        yield self._buffer_widget
        yield self._status_widget
        yield self._command_widget

    async def on_mount(self) -> None:
        self.controller = create_controller(self._path, config=self._config)
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
            show_command=self._show_command,
            handle_event=self._handle_event,
            log=self._log_line,
        )
        self.adapter = TextualEditorAdapter(self.controller, hooks)

    async def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        normalized = self._normalize_key(event)
        if normalized is None:
            return
        key, text, modifiers = normalized
        self.adapter.handle_textual_key(key, text=text, modifiers=modifiers)
        event.stop()
        if not self.adapter.running:
            self.exit()

    def _update_buffer(self, mirror: BufferMirror) -> None:
        self._state.buffer_text = render_buffer(mirror)
        self._state.status_text = render_status(mirror)
        if self._buffer_widget:
            self._buffer_widget.update(self._state.buffer_text)
        if self._status_widget:
            self._status_widget.update(self._state.status_text)

    def _update_status(self, status: str) -> None:
        # the status widget is painted from the mirror; this only traces
        self._log_line(f"status: {status}")

    def _show_command(self, command: str) -> None:
        self._state.command_text = command
        if self._command_widget:
            self._command_widget.update(command)

    def _handle_event(self, name: str, payload: Any | None) -> None:
        if name in {"session.quit", "session.suspend"}:
            self.exit()

    def _log_line(self, line: str) -> None:
        telemetry.record_event("ui.trace", level="debug", data={"line": line})

    @staticmethod
    def _normalize_key(event: events.Key) -> Optional[NormalizedKey]:
        return normalize_key(event.key, event.character)


def normalize_key(key: str, character: Optional[str]) -> Optional[NormalizedKey]:
    """Map a Textual key name to ``(key, text, modifiers)``."""

    if key == "ctrl+q":
        return None
    named = _NAMED_KEYS.get(key)
    if named:
        return (named, None, ())
    if key.startswith("ctrl+"):
        return (key[len("ctrl+"):], None, ("ctrl",))
    if character and character.isprintable():
        return (character, character, ())
    return None


def render_buffer(mirror: BufferMirror) -> Text:
    """Buffer text with the character under the cursor in reverse video."""

    line, column = mirror.cursor
    rendered = Text()
    for index, text in enumerate(mirror.lines):
        if index:
            rendered.append("\n")
        if index != line:
            rendered.append(text)
            continue
        rendered.append(text[:column])
        # past the end of the line the cursor sits on a blank cell
        rendered.append(text[column : column + 1] or " ", style="reverse")
        rendered.append(text[column + 1 :])
    return rendered


def render_status(mirror: BufferMirror) -> str:
    """Mode, file and position, followed by the last message if any."""

    if mirror.status:
        return f"{mirror.status_line}  {mirror.status}"
    return mirror.status_line


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Edit a file with tinyvi.")
    parser.add_argument("path", nargs="?", help="File to open")
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write telemetry to this file (default: $TINYVI_LOG_FILE)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Telemetry level: debug, info, warning or error",
    )
    parser.add_argument(
        "--undo-limit",
        type=int,
        default=None,
        help="Maximum undo history depth (default: unbounded)",
    )
    parser.add_argument(
        "--keep-redo",
        action="store_true",
        help="Keep the redo stack when a new edit is made",
    )
    parser.add_argument(
        "--report-unknown",
        action="store_true",
        help="Show a status message for unknown commands",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> EditorConfig:
    config = EditorConfig.from_env()
    if args.undo_limit is not None:
        config.undo_limit = args.undo_limit if args.undo_limit > 0 else None
    if args.keep_redo:
        config.clear_redo_on_edit = False
    if args.report_unknown:
        config.report_unknown_commands = True
    return config


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.log_file or args.log_level:
        telemetry.configure(log_file=args.log_file, level=args.log_level)
    app = TinyviApp(args.path, config=build_config(args))
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
