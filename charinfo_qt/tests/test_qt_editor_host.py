from __future__ import annotations

import pytest
from PyQt6.QtGui import QTextCursor, QTextDocument
from PyQt6.QtWidgets import QPlainTextEdit

from charinfo_qt.describe_dialog import CharDescriptionDialog
from charinfo_qt.editor_host import QtEditorHost, char_at


def _move_cursor(editor: QPlainTextEdit, position: int) -> None:
    cursor = editor.textCursor()
    cursor.setPosition(position, QTextCursor.MoveMode.MoveAnchor)
    editor.setTextCursor(cursor)


@pytest.mark.pyqt_required
def test_char_at_reads_text_and_newlines(qt_app):
    document = QTextDocument("ab\ncd")

    assert char_at(document, 0) == "a"
    assert char_at(document, 2) == "\n"
    assert char_at(document, 4) == "d"
    assert char_at(document, 5) is None
    assert char_at(document, -1) is None


@pytest.mark.pyqt_required
def test_char_at_joins_surrogate_pairs(qt_app):
    document = QTextDocument("x\U0001F600y")

    assert char_at(document, 1) == "\U0001F600"
    assert char_at(document, 3) == "y"


@pytest.mark.pyqt_required
def test_empty_document_has_no_char(qt_app):
    assert char_at(QTextDocument(""), 0) is None


@pytest.mark.pyqt_required
def test_host_tracks_surfaces_and_cursor(qt_app):
    host = QtEditorHost()
    editor = QPlainTextEdit()
    try:
        editor.setPlainText("héllo")
        host.add_surface(editor)
        _move_cursor(editor, 1)

        assert host.selected_surface() is editor
        assert host.surface_alive(editor)
        assert host.char_at_cursor(editor) == "é"
        assert host.surface_alive("not a surface") is False

        host.remove_surface(editor)
        assert host.selected_surface() is None
        assert host.surface_alive(editor) is False
        assert host.char_at_cursor(editor) is None
    finally:
        editor.close()


@pytest.mark.pyqt_required
def test_refresh_listeners_follow_cursor_moves(qt_app):
    host = QtEditorHost()
    editor = QPlainTextEdit()
    calls: list[str] = []
    try:
        editor.setPlainText("abc")
        host.add_surface(editor)
        host.add_refresh_listener(lambda: calls.append("refresh"))

        _move_cursor(editor, 2)

        assert calls
    finally:
        editor.close()


@pytest.mark.pyqt_required
def test_describe_char_opens_dialog(qt_app):
    host = QtEditorHost()
    editor = QPlainTextEdit()
    try:
        editor.setPlainText("a½")
        host.add_surface(editor)
        _move_cursor(editor, 1)

        dialog = host.describe_char(editor)

        assert isinstance(dialog, CharDescriptionDialog)
        assert dialog.description.code == "U+00BD"
        assert dialog.value_labels["name"].text() == "VULGAR FRACTION ONE HALF"
        assert dialog.value_labels["position"].text() == "1 (line 1, column 1)"
        assert host.open_dialogs == [dialog]
        dialog.reject()
        assert host.open_dialogs == []
    finally:
        editor.close()


@pytest.mark.pyqt_required
def test_describe_at_end_of_buffer_does_nothing(qt_app):
    host = QtEditorHost()
    editor = QPlainTextEdit()
    try:
        editor.setPlainText("a")
        host.add_surface(editor)
        _move_cursor(editor, 1)

        assert host.describe_char(editor) is None
        assert host.open_dialogs == []
    finally:
        editor.close()


@pytest.mark.pyqt_required
def test_builtin_providers(qt_app):
    host = QtEditorHost()
    editor = QPlainTextEdit()
    try:
        editor.setPlainText("one\ntwo")
        editor.setObjectName("notes.txt")
        host.add_surface(editor)
        _move_cursor(editor, 6)
        providers = host.builtin_providers()

        assert providers["position"]() == "L2 C2"
        assert providers["buffer_name"]() == "notes.txt"
        assert providers["modes"]() == "(Text)"
        assert providers["modified"]() in {"**", "--"}
    finally:
        editor.close()
