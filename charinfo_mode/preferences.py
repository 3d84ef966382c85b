"""Preferences management for the char-info mode."""
from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from charinfo_mode.display_list import (
    APPEND_ALWAYS,
    AnchorSpec,
    LiteralAnchor,
    PredicateAnchor,
    coerce_anchor,
)
from charinfo_mode.host import DEFAULT_DISPLAY_LIST, EvalDirective
from charinfo_mode.idle_timers import DEFAULT_IDLE_DELAY

PREFERENCES_FILE = "charinfo_settings.json"
IDLE_DELAY_ENV_VAR = "CHARINFO_IDLE_DELAY"
DEBUG_ENV_VAR = "CHARINFO_DEBUG"
IDLE_DELAY_MIN = 0.05
IDLE_DELAY_MAX = 60.0
LOG_RETENTION_MAX = 20
DEFAULT_ANCHOR = LiteralAnchor(EvalDirective("position"))


def _env_flag(name: str) -> bool:
    value = os.getenv(name)
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _coerce_delay(raw: Any, default: float = DEFAULT_IDLE_DELAY) -> float:
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return default
    if value != value:  # NaN
        return default
    return max(IDLE_DELAY_MIN, min(value, IDLE_DELAY_MAX))


def anchor_from_json(raw: Any) -> Optional[AnchorSpec]:
    """Decode the persisted anchor: ``true``, ``{"eval": key}``, a literal, or ``null``."""
    if isinstance(raw, Mapping):
        key = raw.get("eval")
        if isinstance(key, str) and key:
            return LiteralAnchor(EvalDirective(key))
        if "literal" in raw:
            return LiteralAnchor(raw.get("literal"))
        return None
    if isinstance(raw, list):
        return None
    return coerce_anchor(raw)


def anchor_to_json(anchor: Optional[AnchorSpec]) -> Any:
    if anchor is None:
        return None
    if anchor is APPEND_ALWAYS:
        return True
    if isinstance(anchor, LiteralAnchor):
        value = anchor.value
        if isinstance(value, EvalDirective):
            return {"eval": value.key}
        if isinstance(value, bool):
            return {"literal": value}
        if isinstance(value, (str, int, float)):
            return value
        return {"literal": str(value)}
    # Predicates only exist in code and cannot be persisted.
    return None


@dataclass
class Preferences:
    """Simple JSON-backed preferences store."""

    config_dir: Path
    idle_delay: float = DEFAULT_IDLE_DELAY
    display_list: str = DEFAULT_DISPLAY_LIST
    anchor: Optional[AnchorSpec] = DEFAULT_ANCHOR
    enable_on_start: bool = True
    debug_logging: bool = False
    log_to_file: bool = False
    log_retention: int = 5

    def __post_init__(self) -> None:
        self.config_dir = Path(self.config_dir)
        self._path = self.config_dir / PREFERENCES_FILE
        self._load()
        self._apply_env_overrides()

    @property
    def path(self) -> Path:
        return self._path

    # Persistence ---------------------------------------------------------

    def _load(self) -> None:
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return
        except (OSError, json.JSONDecodeError):
            return
        if not isinstance(data, dict):
            return
        self.idle_delay = _coerce_delay(data.get("idle_delay", DEFAULT_IDLE_DELAY))
        display_list = data.get("display_list", DEFAULT_DISPLAY_LIST)
        self.display_list = str(display_list).strip() if display_list else DEFAULT_DISPLAY_LIST
        if "anchor" in data:
            self.anchor = anchor_from_json(data.get("anchor"))
        self.enable_on_start = bool(data.get("enable_on_start", True))
        self.debug_logging = bool(data.get("debug_logging", False))
        self.log_to_file = bool(data.get("log_to_file", False))
        try:
            retention = int(data.get("log_retention", 5))
        except (TypeError, ValueError):
            retention = 5
        self.log_retention = max(1, min(retention, LOG_RETENTION_MAX))

    def _apply_env_overrides(self) -> None:
        raw_delay = os.getenv(IDLE_DELAY_ENV_VAR)
        if raw_delay:
            self.idle_delay = _coerce_delay(raw_delay, self.idle_delay)
        if _env_flag(DEBUG_ENV_VAR):
            self.debug_logging = True

    def save(self) -> None:
        payload: Dict[str, Any] = {
            "idle_delay": float(self.idle_delay),
            "display_list": str(self.display_list or DEFAULT_DISPLAY_LIST),
            "anchor": anchor_to_json(self.anchor),
            "enable_on_start": bool(self.enable_on_start),
            "debug_logging": bool(self.debug_logging),
            "log_to_file": bool(self.log_to_file),
            "log_retention": int(self.log_retention),
        }
        if isinstance(self.anchor, PredicateAnchor):
            payload.pop("anchor")
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    def set_anchor(self, raw: Any) -> Optional[AnchorSpec]:
        self.anchor = coerce_anchor(raw)
        return self.anchor


def anchor_from_option(token: Optional[str]) -> Any:
    """Parse a command-line anchor: ``append``, ``none``, ``eval:<key>`` or a literal string."""
    if token is None:
        return DEFAULT_ANCHOR
    value = token.strip()
    lowered = value.lower()
    if lowered in {"append", "end", "true"}:
        return APPEND_ALWAYS
    if lowered in {"none", "off", "false"}:
        return None
    if lowered.startswith("eval:") and len(value) > 5:
        return LiteralAnchor(EvalDirective(value[5:]))
    return LiteralAnchor(value)
