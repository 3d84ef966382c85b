from __future__ import annotations

import time
from typing import Callable, Optional

AfterFn = Callable[[int, Callable[[], None]], object]
AfterCancelFn = Callable[[object], None]
LoggerFn = Callable[[str, object], None] | Callable[[str], None]

DEFAULT_IDLE_DELAY = 1.0
MIN_IDLE_DELAY_MS = 10


def _noop_log(message: str, *args: object) -> None:
    return None


class IdleTimers:
    """Owns the single repeating idle registration used by the mode.

    The callback fires once the host has been idle for ``delay`` seconds. It
    fires again only after the next ``notify_activity`` followed by another
    idle period.
    """

    def __init__(
        self,
        *,
        after: AfterFn,
        after_cancel: AfterCancelFn,
        time_source: Callable[[], float] = time.monotonic,
        logger: Optional[LoggerFn] = None,
    ) -> None:
        self._after = after
        self._after_cancel = after_cancel
        self._time = time_source
        self._logger = logger or _noop_log

        self.idle_delay_ms = self._clamp_delay(DEFAULT_IDLE_DELAY)
        self._handle: object | None = None
        self._callback: Callable[[], None] | None = None
        self._armed = False
        self._last_activity_ts: float = 0.0
        self.fire_count = 0

    @property
    def active(self) -> bool:
        return self._callback is not None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    @property
    def handle(self) -> object | None:
        """Handle of the live registration, None once it fired or was cancelled."""
        return self._handle

    @property
    def last_activity(self) -> float:
        return self._last_activity_ts

    def start(self, callback: Callable[[], None], delay_seconds: float = DEFAULT_IDLE_DELAY) -> object:
        self.stop()
        self._callback = callback
        self.idle_delay_ms = self._clamp_delay(delay_seconds)
        self._armed = True
        self._last_activity_ts = self._time()
        self._handle = self._after(self.idle_delay_ms, self._run_idle)
        self._log("Idle timer started: delay=%dms", self.idle_delay_ms)
        return self._handle

    def stop(self) -> None:
        self._callback = None
        self._armed = False
        self._cancel_pending()

    def notify_activity(self) -> None:
        """Restart the idle countdown; call on every user input event."""
        if self._callback is None:
            return
        self._last_activity_ts = self._time()
        self._cancel_pending()
        self._armed = True
        self._handle = self._after(self.idle_delay_ms, self._run_idle)

    def _cancel_pending(self) -> None:
        handle = self._handle
        self._handle = None
        if handle is not None:
            try:
                self._after_cancel(handle)
            except Exception:
                pass

    def _run_idle(self) -> None:
        self._handle = None
        callback = self._callback
        if callback is None or not self._armed:
            return
        self._armed = False
        self.fire_count += 1
        try:
            callback()
        except Exception as exc:
            self._log("Idle callback failed: %s", exc, exc_info=exc)

    @staticmethod
    def _clamp_delay(seconds: float) -> int:
        try:
            value = float(seconds)
        except (TypeError, ValueError):
            value = DEFAULT_IDLE_DELAY
        return max(MIN_IDLE_DELAY_MS, int(round(value * 1000)))

    def _log(self, message: str, *args: object, **kwargs: object) -> None:
        try:
            self._logger(message, *args, **kwargs)
        except TypeError:
            try:
                self._logger(message % args if args else message)
            except Exception:
                pass
        except Exception:
            pass
