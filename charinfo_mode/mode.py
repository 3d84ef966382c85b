"""Lifecycle of the char-info minor mode."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from charinfo_mode.char_lookup import lookup_cursor_char
from charinfo_mode.display_list import CHAR_INFO_ELEMENT, insert_char_info, remove_char_info
from charinfo_mode.formatter import EMPTY_CHAR_INFO, CharInfoText, format_char_info
from charinfo_mode.host import DisplayListRegistry, EditorHost
from charinfo_mode.idle_timers import AfterCancelFn, AfterFn, IdleTimers
from charinfo_mode.logging_utils import get_logger
from charinfo_mode.preferences import Preferences
from charinfo_mode.rendering import Provider, RenderedSegment

_UNSET: Any = object()


@dataclass
class CharInfoState:
    """Current status string and timer registration owned by one mode instance."""

    info: CharInfoText = EMPTY_CHAR_INFO
    enabled: bool = False
    timers: Optional[IdleTimers] = field(default=None, repr=False, compare=False)

    @property
    def text(self) -> str:
        return self.info.text

    @property
    def timer_handle(self) -> object | None:
        if self.timers is None:
            return None
        return self.timers.handle

    def clear(self) -> None:
        self.info = EMPTY_CHAR_INFO
        self.enabled = False


def _mode_argument_enables(arg: Any, currently_enabled: bool) -> bool:
    if arg is None:
        return not currently_enabled
    if isinstance(arg, bool):
        return arg
    if isinstance(arg, (int, float)):
        return arg > 0
    if isinstance(arg, str):
        token = arg.strip().lower()
        if token in {"toggle", ""}:
            return not currently_enabled
        if token in {"on", "enable", "true", "yes"}:
            return True
        if token in {"off", "disable", "false", "no"}:
            return False
        try:
            return int(token) > 0
        except ValueError:
            return True
    return True


class CharInfoMode:
    """Shows the codepoint under the cursor in the host status line."""

    def __init__(
        self,
        host: EditorHost,
        registry: DisplayListRegistry,
        preferences: Preferences,
        *,
        after: AfterFn,
        after_cancel: AfterCancelFn,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._host = host
        self._registry = registry
        self._preferences = preferences
        self._logger = logger or get_logger("mode")
        self.timers = IdleTimers(after=after, after_cancel=after_cancel, logger=self._logger.debug)
        self.state = CharInfoState(timers=self.timers)

    @property
    def enabled(self) -> bool:
        return self.state.enabled

    @property
    def preferences(self) -> Preferences:
        return self._preferences

    # Activation ----------------------------------------------------------

    def enable(self) -> None:
        was_enabled = self.state.enabled
        # Insert first so a failing anchor predicate leaves the mode untouched.
        inserted = self.insert_element()
        self.timers.start(self.update, self._preferences.idle_delay)
        self.state.enabled = True
        self._logger.debug(
            "Char-info mode enabled: delay=%.2fs list=%s inserted=%s restarted=%s",
            self._preferences.idle_delay,
            self._preferences.display_list,
            inserted is not None,
            was_enabled,
        )
        self._host.refresh_status()

    def disable(self) -> None:
        self.timers.stop()
        self.state.clear()
        self.remove_element()
        self._logger.debug("Char-info mode disabled")
        self._host.refresh_status()

    def toggle(self, arg: Any = None) -> bool:
        """Minor-mode style toggle: None flips, positive enables, zero or negative disables."""
        if _mode_argument_enables(arg, self.state.enabled):
            self.enable()
        else:
            self.disable()
        return self.state.enabled

    # Display list --------------------------------------------------------

    def target_list(self, display_list: Optional[List[Any]] = None) -> Optional[List[Any]]:
        if display_list is not None:
            return display_list
        return self._registry.lookup(self._preferences.display_list)

    def insert_element(self, display_list: Optional[List[Any]] = None, anchor: Any = _UNSET) -> Optional[List[Any]]:
        target = self.target_list(display_list)
        if anchor is _UNSET:
            anchor = self._preferences.anchor
        if target is None:
            self._logger.debug("Display list %r is unbound; nothing to insert into", self._preferences.display_list)
        return insert_char_info(target, anchor)

    def remove_element(self, display_list: Optional[List[Any]] = None) -> Optional[List[Any]]:
        return remove_char_info(self.target_list(display_list))

    # Idle update and rendering ------------------------------------------

    def update(self) -> None:
        if not self.state.enabled:
            return
        char, name = lookup_cursor_char(self._host)
        info = format_char_info(char, name)
        if info == self.state.info:
            return
        self.state.info = info
        self._host.refresh_status()

    def render(self) -> Optional[RenderedSegment]:
        info = self.state.info
        if info.empty:
            return None
        return RenderedSegment(
            text=info.text,
            tooltip=info.help_echo,
            on_click=self.activate,
            link_span=info.code_span,
        )

    def providers(self) -> Dict[str, Provider]:
        return {CHAR_INFO_ELEMENT.key: self.render}

    def activate(self, surface: object) -> None:
        """Click handler: describe the char at the cursor of a still-live surface."""
        if surface is None or not self._host.surface_alive(surface):
            self._logger.debug("Ignoring char-info click from a surface that is gone")
            return
        self._host.describe_char(surface)
