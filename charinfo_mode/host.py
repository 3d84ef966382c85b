"""Host editor contract and the named display-list variables the mode mutates."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol


@dataclass(frozen=True)
class EvalDirective:
    """Display-list element meaning "render the provider registered under ``key`` here"."""

    key: str


class EditorHost(Protocol):
    """What the mode needs from the editor it runs inside."""

    def selected_surface(self) -> Optional[object]:
        ...

    def char_at_cursor(self, surface: object) -> Optional[str]:
        ...

    def surface_alive(self, surface: object) -> bool:
        ...

    def describe_char(self, surface: object) -> None:
        ...

    def refresh_status(self) -> None:
        ...


class DisplayListRegistry:
    """Process-wide variables holding display lists, looked up by name."""

    def __init__(self, initial: Optional[Dict[str, List[Any]]] = None) -> None:
        self._lists: Dict[str, List[Any]] = dict(initial or {})

    def bind(self, name: str, elements: List[Any]) -> List[Any]:
        self._lists[name] = elements
        return elements

    def unbind(self, name: str) -> None:
        self._lists.pop(name, None)

    def lookup(self, name: Optional[str]) -> Optional[List[Any]]:
        if not name:
            return None
        return self._lists.get(name)


DEFAULT_DISPLAY_LIST = "status_line_format"


def default_status_line() -> List[Any]:
    """Stock status line a fresh host binds under ``DEFAULT_DISPLAY_LIST``."""
    return [
        " ",
        EvalDirective("modified"),
        " ",
        EvalDirective("buffer_name"),
        "  ",
        EvalDirective("position"),
        "  ",
        EvalDirective("modes"),
    ]
