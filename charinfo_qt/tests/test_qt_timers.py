from __future__ import annotations

import pytest
from PyQt6.QtCore import QCoreApplication, QEvent, QObject
from PyQt6.QtTest import QTest

from charinfo_qt.timers import ActivityFilter, QtAfterBridge


@pytest.mark.pyqt_required
def test_after_fires_once_and_forgets_timer(qt_app):
    bridge = QtAfterBridge()
    calls: list[str] = []

    bridge.after(5, lambda: calls.append("fired"))
    assert bridge.pending_count == 1
    QTest.qWait(50)

    assert calls == ["fired"]
    assert bridge.pending_count == 0


@pytest.mark.pyqt_required
def test_cancel_prevents_callback(qt_app):
    bridge = QtAfterBridge()
    calls: list[str] = []

    handle = bridge.after(5, lambda: calls.append("fired"))
    bridge.cancel(handle)
    bridge.cancel(handle)
    bridge.cancel("not a timer")
    QTest.qWait(50)

    assert calls == []
    assert bridge.pending_count == 0


@pytest.mark.pyqt_required
def test_activity_filter_reports_input_events(qt_app):
    calls: list[str] = []
    activity = ActivityFilter(lambda: calls.append("activity"))
    target = QObject()

    assert activity.eventFilter(target, QEvent(QEvent.Type.Wheel)) is False
    assert activity.eventFilter(target, QEvent(QEvent.Type.Paint)) is False
    assert calls == ["activity"]
    QCoreApplication.processEvents()
