from .editor_host import QtEditorHost, char_at
from .status_line import StatusLineWidget
from .timers import ActivityFilter, QtAfterBridge

__all__ = ["ActivityFilter", "QtAfterBridge", "QtEditorHost", "StatusLineWidget", "char_at"]
