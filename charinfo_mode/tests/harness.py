"""Test doubles shared by the char-info mode tests."""
from __future__ import annotations

from typing import Optional


class TimeStub:
    def __init__(self, value: float = 0.0) -> None:
        self.value = value

    def now(self) -> float:
        return self.value


class AfterHarness:
    def __init__(self) -> None:
        self.scheduled: list[tuple[str, int, object]] = []
        self.cancelled: list[object] = []

    def after(self, ms: int, cb) -> str:
        handle = f"h{len(self.scheduled) + 1}"
        self.scheduled.append((handle, ms, cb))
        return handle

    def cancel(self, handle: object) -> None:
        self.cancelled.append(handle)

    def run(self, handle: str) -> None:
        for h, _ms, cb in list(self.scheduled):
            if h == handle:
                cb()
                return
        raise AssertionError(f"Handle {handle} not found")

    def run_latest(self) -> None:
        self.run(self.scheduled[-1][0])


class FakeHost:
    def __init__(self, text: str = "abc", cursor: int = 0) -> None:
        self.text = text
        self.cursor = cursor
        self.surface: Optional[str] = "main"
        self.live = {"main"}
        self.refreshes = 0
        self.described: list[object] = []

    def selected_surface(self) -> Optional[str]:
        return self.surface

    def char_at_cursor(self, surface: object) -> Optional[str]:
        if surface not in self.live or self.cursor >= len(self.text):
            return None
        return self.text[self.cursor]

    def surface_alive(self, surface: object) -> bool:
        return surface in self.live

    def describe_char(self, surface: object) -> None:
        self.described.append(surface)

    def refresh_status(self) -> None:
        self.refreshes += 1
