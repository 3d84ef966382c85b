from __future__ import annotations

from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QDialog, QDialogButtonBox, QFormLayout, QLabel, QVBoxLayout, QWidget

from charinfo_mode.describe import CharDescription


class CharDescriptionDialog(QDialog):
    """Read-only inspector listing the Unicode properties of one character."""

    def __init__(self, description: CharDescription, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.description = description
        self.setWindowTitle(f"Describe {description.code}")
        self.setAttribute(Qt.WidgetAttribute.WA_DeleteOnClose)

        layout = QVBoxLayout(self)
        glyph = QLabel(description.display_char or description.code, self)
        glyph_font = QFont(glyph.font())
        glyph_font.setPointSizeF(max(glyph_font.pointSizeF(), 9.0) * 3)
        glyph.setFont(glyph_font)
        glyph.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(glyph)

        form = QFormLayout()
        self.value_labels: dict[str, QLabel] = {}
        for label, value in description.rows():
            value_label = QLabel(value, self)
            value_label.setTextFormat(Qt.TextFormat.PlainText)
            value_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
            form.addRow(f"{label}:", value_label)
            self.value_labels[label] = value_label
        layout.addLayout(form)

        buttons = QDialogButtonBox(QDialogButtonBox.StandardButton.Close, self)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)
