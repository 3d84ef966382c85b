"""PyQt6 implementation of the editor host contract."""
from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional

from PyQt6 import sip
from PyQt6.QtGui import QTextDocument
from PyQt6.QtWidgets import QApplication, QPlainTextEdit, QWidget

from charinfo_mode.describe import describe_char
from charinfo_mode.logging_utils import get_logger
from charinfo_mode.rendering import Provider
from charinfo_qt.describe_dialog import CharDescriptionDialog

PARAGRAPH_SEPARATOR = "\u2029"


def _is_high_surrogate(char: str) -> bool:
    return len(char) == 1 and "\ud800" <= char <= "\udbff"


def _is_low_surrogate(char: str) -> bool:
    return len(char) == 1 and "\udc00" <= char <= "\udfff"


def char_at(document: QTextDocument, position: int) -> Optional[str]:
    """Character at a UTF-16 document position, joining surrogate pairs.

    The trailing block separator Qt keeps at the end of every document is not
    a character of the text, so the end of the buffer yields None.
    """
    last = document.characterCount() - 1
    if position < 0 or position >= last:
        return None
    char = document.characterAt(position)
    if not char:
        return None
    if char == PARAGRAPH_SEPARATOR:
        return "\n"
    if _is_high_surrogate(char) and position + 1 < last:
        low = document.characterAt(position + 1)
        if _is_low_surrogate(low):
            return (char + low).encode("utf-16-le", "surrogatepass").decode("utf-16-le")
    return char


class QtEditorHost:
    """Tracks QPlainTextEdit surfaces and exposes them to the char-info mode."""

    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or get_logger("qt")
        self._surfaces: List[QPlainTextEdit] = []
        self._selected: Optional[QPlainTextEdit] = None
        self._refresh_listeners: List[Callable[[], None]] = []
        self.open_dialogs: List[CharDescriptionDialog] = []
        app = QApplication.instance()
        if app is not None:
            app.focusChanged.connect(self._on_focus_changed)

    # Surfaces ------------------------------------------------------------

    def add_surface(self, editor: QPlainTextEdit) -> QPlainTextEdit:
        if editor not in self._surfaces:
            self._surfaces.append(editor)
            editor.cursorPositionChanged.connect(self.refresh_status)
            editor.destroyed.connect(lambda _obj=None, ed=editor: self._forget(ed))
        if self._selected is None:
            self._selected = editor
        return editor

    def remove_surface(self, editor: QPlainTextEdit) -> None:
        self._forget(editor)

    def _forget(self, editor: QPlainTextEdit) -> None:
        if editor in self._surfaces:
            self._surfaces.remove(editor)
        if self._selected is editor:
            self._selected = self._surfaces[-1] if self._surfaces else None

    def _on_focus_changed(self, _old: Optional[QWidget], new: Optional[QWidget]) -> None:
        if isinstance(new, QPlainTextEdit) and new in self._surfaces:
            self._selected = new

    # EditorHost ----------------------------------------------------------

    def selected_surface(self) -> Optional[QPlainTextEdit]:
        editor = self._selected
        if editor is None or not self.surface_alive(editor):
            return None
        return editor

    def surface_alive(self, surface: object) -> bool:
        if not isinstance(surface, QPlainTextEdit):
            return False
        if sip.isdeleted(surface):
            return False
        return surface in self._surfaces

    def char_at_cursor(self, surface: object) -> Optional[str]:
        if not self.surface_alive(surface):
            return None
        cursor = surface.textCursor()
        return char_at(surface.document(), cursor.position())

    def describe_char(self, surface: object) -> Optional[CharDescriptionDialog]:
        char = self.char_at_cursor(surface)
        if not char:
            self._logger.debug("Nothing to describe at the end of the buffer")
            return None
        cursor = surface.textCursor()
        description = describe_char(
            char,
            position=cursor.position(),
            line=cursor.blockNumber() + 1,
            column=cursor.positionInBlock(),
        )
        dialog = CharDescriptionDialog(description, surface.window())
        dialog.finished.connect(lambda _result, dlg=dialog: self._dialog_closed(dlg))
        self.open_dialogs.append(dialog)
        dialog.show()
        return dialog

    def _dialog_closed(self, dialog: CharDescriptionDialog) -> None:
        if dialog in self.open_dialogs:
            self.open_dialogs.remove(dialog)

    def add_refresh_listener(self, listener: Callable[[], None]) -> None:
        self._refresh_listeners.append(listener)

    def refresh_status(self) -> None:
        for listener in list(self._refresh_listeners):
            try:
                listener()
            except Exception as exc:
                self._logger.debug("Status refresh failed: %s", exc, exc_info=exc)

    # Stock status-line providers ----------------------------------------

    def builtin_providers(self) -> Dict[str, Provider]:
        return {
            "modified": self._render_modified,
            "buffer_name": self._render_buffer_name,
            "position": self._render_position,
            "modes": self._render_modes,
        }

    def _render_modified(self) -> Optional[str]:
        editor = self.selected_surface()
        if editor is None:
            return None
        return "**" if editor.document().isModified() else "--"

    def _render_buffer_name(self) -> Optional[str]:
        editor = self.selected_surface()
        if editor is None:
            return None
        return editor.documentTitle() or editor.objectName() or "*scratch*"

    def _render_position(self) -> Optional[str]:
        editor = self.selected_surface()
        if editor is None:
            return None
        cursor = editor.textCursor()
        return f"L{cursor.blockNumber() + 1} C{cursor.positionInBlock()}"

    def _render_modes(self) -> str:
        return "(Text)"
