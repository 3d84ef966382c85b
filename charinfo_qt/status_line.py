from __future__ import annotations

import html
import logging
from typing import Callable, Dict, List, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QWidget

from charinfo_mode.host import DisplayListRegistry
from charinfo_mode.logging_utils import get_logger
from charinfo_mode.rendering import Provider, RenderedSegment, render_display_list, render_plain

CLICK_HREF = "segment:activate"


def segment_html(segment: RenderedSegment) -> str:
    """Rich text for a segment, with its link span turned into an anchor."""
    text = segment.text
    start, end = segment.link_span if segment.link_span is not None else (0, len(text))
    start = max(0, min(start, len(text)))
    end = max(start, min(end, len(text)))
    return "{}<a href=\"{}\">{}</a>{}".format(
        html.escape(text[:start]).replace(" ", "&nbsp;"),
        CLICK_HREF,
        html.escape(text[start:end]),
        html.escape(text[end:]).replace(" ", "&nbsp;"),
    )


class StatusLineWidget(QWidget):
    """Renders a named display list from the registry as a row of labels."""

    def __init__(
        self,
        registry: DisplayListRegistry,
        list_name: str,
        *,
        surface_fn: Callable[[], Optional[object]],
        parent: Optional[QWidget] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        super().__init__(parent)
        self._registry = registry
        self._list_name = list_name
        self._surface_fn = surface_fn
        self._logger = logger or get_logger("status")
        self._providers: Dict[str, Provider] = {}
        self._segments: List[RenderedSegment] = []
        self.labels: List[QLabel] = []
        self._layout = QHBoxLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)
        self._layout.setSpacing(0)
        self._layout.addStretch(1)

    def register_providers(self, providers: Dict[str, Provider]) -> None:
        self._providers.update(providers)

    def plain_text(self) -> str:
        return render_plain(self._segments)

    def refresh(self) -> None:
        elements = self._registry.lookup(self._list_name) or []
        segments = render_display_list(elements, self._providers, logger=self._logger)
        if segments == self._segments and self.labels:
            return
        self._segments = segments
        for label in self.labels:
            self._layout.removeWidget(label)
            label.deleteLater()
        self.labels = []
        for index, segment in enumerate(segments):
            label = self._build_label(segment)
            self._layout.insertWidget(index, label)
            self.labels.append(label)

    def _build_label(self, segment: RenderedSegment) -> QLabel:
        label = QLabel(self)
        if segment.on_click is None:
            label.setTextFormat(Qt.TextFormat.PlainText)
            label.setText(segment.text)
        else:
            label.setTextFormat(Qt.TextFormat.RichText)
            label.setText(segment_html(segment))
            label.setTextInteractionFlags(Qt.TextInteractionFlag.LinksAccessibleByMouse)
            label.linkActivated.connect(lambda _href, seg=segment: self._activate(seg))
        if segment.tooltip:
            label.setToolTip(segment.tooltip)
        return label

    def _activate(self, segment: RenderedSegment) -> None:
        if segment.on_click is None:
            return
        segment.on_click(self._surface_fn())
