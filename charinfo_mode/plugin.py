"""Primary entry point the host editor calls to load the char-info mode."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Optional

from charinfo_mode.host import DisplayListRegistry, EditorHost
from charinfo_mode.idle_timers import AfterCancelFn, AfterFn
from charinfo_mode.logging_utils import configure_logger
from charinfo_mode.mode import CharInfoMode
from charinfo_mode.preferences import Preferences
from charinfo_mode.version import __version__

PLUGIN_NAME = "charinfo-mode"
PLUGIN_VERSION = __version__


class _PluginRuntime:
    """Encapsulates plugin state so host globals stay tidy."""

    def __init__(self, mode: CharInfoMode, logger: logging.Logger) -> None:
        self.mode = mode
        self._logger = logger

    def start(self) -> None:
        if self.mode.preferences.enable_on_start:
            self.mode.enable()
        self._logger.info("%s %s loaded (enabled=%s)", PLUGIN_NAME, PLUGIN_VERSION, self.mode.enabled)

    def stop(self) -> None:
        if self.mode.enabled:
            self.mode.disable()
        self._logger.info("%s stopped", PLUGIN_NAME)


_runtime: Optional[_PluginRuntime] = None


def plugin_start(
    host: EditorHost,
    registry: DisplayListRegistry,
    config_dir: str | Path,
    *,
    after: AfterFn,
    after_cancel: AfterCancelFn,
    configure: Optional[Callable[[Preferences], None]] = None,
) -> CharInfoMode:
    """Load preferences, configure logging and start the mode.

    ``configure`` may adjust the loaded preferences before the mode starts.
    Restarting replaces the old runtime.
    """
    global _runtime
    if _runtime is not None:
        _runtime.stop()
        _runtime = None
    preferences = Preferences(Path(config_dir))
    if configure is not None:
        configure(preferences)
    logger = configure_logger(
        debug=preferences.debug_logging,
        log_to_file=preferences.log_to_file,
        retention=preferences.log_retention,
    )
    mode = CharInfoMode(host, registry, preferences, after=after, after_cancel=after_cancel, logger=logger)
    _runtime = _PluginRuntime(mode, logger)
    _runtime.start()
    return mode


def plugin_stop() -> None:
    global _runtime
    runtime = _runtime
    _runtime = None
    if runtime is not None:
        runtime.stop()


def toggle_mode(arg: Any = None) -> bool:
    """Activation command; returns the new enabled state (False when not loaded)."""
    if _runtime is None:
        return False
    return _runtime.mode.toggle(arg)


def current_mode() -> Optional[CharInfoMode]:
    return _runtime.mode if _runtime is not None else None
