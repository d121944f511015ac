from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, List


@dataclass
class ManualHandle:
    due: float
    callback: Callable[[], Any]
    cancelled: bool = False
    fired: bool = False

    def cancel(self) -> None:
        self.cancelled = True


@dataclass
class ManualTimer:
    """timer facility whose clock only moves when a test advances it"""
    current: float = 0.0
    handles: List[ManualHandle] = field(default_factory=list)

    def now(self) -> float:
        return self.current

    def schedule(self, wait_ms: float, callback: Callable[[], Any]) -> ManualHandle:
        handle = ManualHandle(self.current + wait_ms, callback)
        self.handles.append(handle)
        return handle

    @property
    def pending(self) -> List[ManualHandle]:
        return [h for h in self.handles if not h.cancelled and not h.fired]

    def advance(self, ms: float) -> None:
        """move the clock forward, firing due callbacks in order"""
        target = self.current + ms
        while True:
            due = [h for h in self.pending if h.due <= target]
            if not due:
                break
            handle = min(due, key=lambda h: h.due)
            self.current = max(self.current, handle.due)
            handle.fired = True
            handle.callback()
        self.current = target
