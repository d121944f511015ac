from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol

logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class TimerFacility(Protocol):
    """schedules callbacks after a delay and reports the current time in ms"""

    def schedule(self, wait_ms: float, callback: Callable[[], Any]) -> TimerHandle: ...

    def now(self) -> float: ...


@dataclass
class ThreadingTimer:
    """default timer facility backed by threading.Timer"""
    clock: Callable[[], float] = time.monotonic
    daemon: bool = True
    name_prefix: Optional[str] = "underbar-timer"

    def now(self) -> float:
        return self.clock() * 1000.0

    def schedule(self, wait_ms: float, callback: Callable[[], Any]) -> threading.Timer:
        timer = threading.Timer(max(wait_ms, 0.0) / 1000.0, callback)
        timer.daemon = self.daemon
        if self.name_prefix:
            timer.name = f"{self.name_prefix}-{timer.name}"
        timer.start()
        logger.debug(f"scheduled {callback!r} in {wait_ms:.1f}ms")
        return timer


# used by throttle and delay when no timer is passed in
DEFAULT_TIMER = ThreadingTimer()
