"""Frame timing."""

from __future__ import annotations

import time
from typing import Callable, Optional


class TimeManager:
    """Measures the time elapsed between successive updates."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._before: Optional[float] = None
        self.delta_time = 0.0

    def start(self) -> None:
        """Reset the reference point to now."""
        self._before = self._clock()

    def update(self) -> None:
        """Record the time since the previous update (or start)."""
        now = self._clock()
        if self._before is None:
            self._before = now
            self.delta_time = 0.0
            return
        self.delta_time = now - self._before
        self._before = now