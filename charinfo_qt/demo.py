"""Small PyQt6 editor window running the char-info mode."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QApplication, QMainWindow, QPlainTextEdit

from charinfo_mode import plugin
from charinfo_mode.host import DEFAULT_DISPLAY_LIST, DisplayListRegistry, default_status_line
from charinfo_mode.preferences import Preferences, anchor_from_option
from charinfo_qt.editor_host import QtEditorHost
from charinfo_qt.status_line import StatusLineWidget
from charinfo_qt.timers import ActivityFilter, QtAfterBridge

SAMPLE_TEXT = "Hello, world!\nna\u00efve caf\u00e9 \u2014 \u00bd \u00d7 \u03c0 \u2248 1.57\n\u200b zero width space, \U0001F600 emoji\n"
TOGGLE_SHORTCUT = "Ctrl+Shift+U"


def _default_config_dir() -> Path:
    return Path.home() / ".config" / "charinfo-mode"


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Open a scratch editor with the char-info mode enabled")
    parser.add_argument("file", nargs="?", type=Path, help="Text file to open (defaults to a sample buffer)")
    parser.add_argument("--config-dir", type=Path, default=_default_config_dir(), help="Directory holding charinfo_settings.json")
    parser.add_argument("--delay", type=float, help="Idle delay in seconds before the codepoint refreshes")
    parser.add_argument("--anchor", help="Insert after this element: append, none, eval:<key>, or a literal string")
    parser.add_argument("--disabled", action="store_true", help="Start with the mode switched off")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser.parse_args(list(argv))


class DemoWindow(QMainWindow):
    def __init__(self, host: QtEditorHost, registry: DisplayListRegistry, list_name: str) -> None:
        super().__init__()
        self.editor = QPlainTextEdit(self)
        self.editor.setObjectName("*scratch*")
        self.setCentralWidget(self.editor)
        host.add_surface(self.editor)
        self.status_line = StatusLineWidget(registry, list_name, surface_fn=host.selected_surface, parent=self)
        self.status_line.register_providers(host.builtin_providers())
        self.statusBar().addWidget(self.status_line, 1)
        host.add_refresh_listener(self.status_line.refresh)

        toggle_action = QAction("Toggle char-info mode", self)
        toggle_action.setShortcut(QKeySequence(TOGGLE_SHORTCUT))
        toggle_action.triggered.connect(lambda _checked=False: plugin.toggle_mode())
        self.addAction(toggle_action)
        self.resize(720, 420)

    def load_text(self, path: Optional[Path]) -> None:
        if path is None:
            self.editor.setPlainText(SAMPLE_TEXT)
            return
        self.editor.setPlainText(path.read_text(encoding="utf-8", errors="replace"))
        self.editor.setDocumentTitle(path.name)
        self.setWindowTitle(str(path))


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    app = QApplication.instance() or QApplication(sys.argv[:1])

    registry = DisplayListRegistry({DEFAULT_DISPLAY_LIST: default_status_line()})
    host = QtEditorHost()
    window = DemoWindow(host, registry, DEFAULT_DISPLAY_LIST)
    try:
        window.load_text(args.file)
    except OSError as exc:
        print(f"Unable to read {args.file}: {exc}", file=sys.stderr)
        return 1

    def _configure(preferences: Preferences) -> None:
        if args.delay is not None:
            preferences.idle_delay = args.delay
        if args.anchor is not None:
            preferences.set_anchor(anchor_from_option(args.anchor))
        if args.disabled:
            preferences.enable_on_start = False
        if args.debug:
            preferences.debug_logging = True
        preferences.display_list = DEFAULT_DISPLAY_LIST

    bridge = QtAfterBridge(app)
    mode = plugin.plugin_start(
        host,
        registry,
        args.config_dir,
        after=bridge.after,
        after_cancel=bridge.cancel,
        configure=_configure,
    )
    window.status_line.register_providers(mode.providers())
    activity = ActivityFilter(mode.timers.notify_activity, app)
    app.installEventFilter(activity)
    app.aboutToQuit.connect(plugin.plugin_stop)

    window.show()
    window.status_line.refresh()
    return app.exec()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
