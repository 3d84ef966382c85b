from __future__ import annotations

import logging
import os
import tempfile
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOGGER_NAME = "CharInfo.Mode"
LOG_TAG = "charinfo-mode"
LOG_DIR_ENV_VAR = "CHARINFO_LOG_DIR"
PROPAGATE_ENV_VAR = "CHARINFO_PROPAGATE_LOGS"
LOG_FILENAME = "charinfo-mode.log"


def _env_truthy(name: str) -> bool:
    value = os.environ.get(name)
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


def resolve_logs_dir(log_dir_name: str = "charinfo-mode") -> Path:
    """
    Resolve the directory to store mode logs.

    Strategy:
    - Use CHARINFO_LOG_DIR if set.
    - Fall back to XDG state/cache locations, then `cwd/logs/<log_dir_name>`.
    - Final fallback: tempdir/<log_dir_name>.
    """
    candidates = []

    env_override = os.environ.get(LOG_DIR_ENV_VAR)
    if env_override:
        try:
            candidates.append(Path(env_override).expanduser())
        except Exception:
            pass

    state_home = Path(os.environ.get("XDG_STATE_HOME", Path.home() / ".local" / "state"))
    cache_home = Path(os.environ.get("XDG_CACHE_HOME", Path.home() / ".cache"))
    candidates.append(state_home / "logs")
    candidates.append(cache_home / "logs")
    candidates.append(Path.cwd() / "logs")

    for base in candidates:
        try:
            target = base / log_dir_name
            target.mkdir(parents=True, exist_ok=True)
            return target
        except Exception:
            continue

    temp_fallback = Path(tempfile.gettempdir()) / log_dir_name
    temp_fallback.mkdir(parents=True, exist_ok=True)
    return temp_fallback


def build_rotating_file_handler(
    log_dir: Path,
    filename: str = LOG_FILENAME,
    *,
    retention: int = 5,
    max_bytes: int = 256 * 1024,
    formatter: Optional[logging.Formatter] = None,
) -> logging.Handler:
    """Construct a rotating file handler with sane defaults."""
    retention = max(1, retention)
    backup_count = max(0, retention - 1)
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_dir / filename,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    if formatter is not None:
        handler.setFormatter(formatter)
    return handler


def resolve_log_level(debug_enabled: bool) -> int:
    return logging.DEBUG if debug_enabled else logging.INFO


def build_formatter() -> logging.Formatter:
    return logging.Formatter(f"[%(asctime)s] [{LOG_TAG}] %(levelname)s %(message)s", "%H:%M:%S")


def configure_logger(
    *,
    debug: bool = False,
    log_to_file: bool = False,
    retention: int = 5,
    log_dir: Optional[Path] = None,
) -> logging.Logger:
    """Configure the mode logger once; later calls only adjust level and file output."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolve_log_level(debug))
    if not any(getattr(handler, "_charinfo_stream", False) for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler._charinfo_stream = True  # type: ignore[attr-defined]
        handler.setFormatter(build_formatter())
        logger.addHandler(handler)
    file_handlers = [handler for handler in logger.handlers if getattr(handler, "_charinfo_file", False)]
    if log_to_file and not file_handlers:
        try:
            file_handler = build_rotating_file_handler(
                log_dir or resolve_logs_dir(),
                retention=retention,
                formatter=build_formatter(),
            )
        except OSError as exc:
            logger.warning("Unable to open log file: %s", exc)
        else:
            file_handler._charinfo_file = True  # type: ignore[attr-defined]
            logger.addHandler(file_handler)
    elif not log_to_file:
        for handler in file_handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.propagate = _env_truthy(PROPAGATE_ENV_VAR)
    return logger


def get_logger(suffix: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(f"{LOGGER_NAME}.{suffix}" if suffix else LOGGER_NAME)
