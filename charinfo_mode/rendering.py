from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Mapping, Optional, Tuple, Union

from charinfo_mode.host import EvalDirective

ClickFn = Callable[[object], None]


@dataclass(frozen=True)
class RenderedSegment:
    """One piece of rendered status line text.

    ``link_span`` limits the clickable part of ``text``; None means all of it.
    """

    text: str
    tooltip: Optional[str] = None
    on_click: Optional[ClickFn] = None
    link_span: Optional[Tuple[int, int]] = None


ProviderResult = Union[RenderedSegment, str, None]
Provider = Callable[[], ProviderResult]


def render_display_list(
    elements: Iterable[Any],
    providers: Mapping[str, Provider],
    *,
    logger: Optional[logging.Logger] = None,
) -> List[RenderedSegment]:
    """Evaluate a display list into segments, dropping empty ones."""
    segments: List[RenderedSegment] = []
    for element in elements:
        if isinstance(element, EvalDirective):
            provider = providers.get(element.key)
            if provider is None:
                continue
            try:
                result = provider()
            except Exception as exc:
                if logger is not None:
                    logger.debug("Status provider %s failed: %s", element.key, exc, exc_info=exc)
                continue
        elif element is None:
            continue
        else:
            result = element if isinstance(element, str) else str(element)
        if result is None:
            continue
        segment = result if isinstance(result, RenderedSegment) else RenderedSegment(text=str(result))
        if segment.text:
            segments.append(segment)
    return segments


def render_plain(segments: Iterable[RenderedSegment]) -> str:
    return "".join(segment.text for segment in segments)
