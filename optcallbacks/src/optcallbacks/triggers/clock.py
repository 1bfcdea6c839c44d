"""
Wall-clock trigger.
"""

from __future__ import annotations

import time
from typing import Callable, Optional

from .base import Trigger


class TimeTrigger(Trigger):
    """
    Fires at most once every ``interval`` seconds.

    The first call only starts the clock and never fires. The state, value,
    counter and extra arguments are ignored.

    Args:
        interval: Minimum number of seconds between fires (positive)
        clock: Zero-argument function returning seconds (default: time.monotonic)
    """

    def __init__(self, interval: float, clock: Optional[Callable[[], float]] = None):
        if not interval > 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self.interval = interval
        self.clock = clock or time.monotonic
        self.last_fire_time: Optional[float] = None

    def fires(self, state, value, t, extra) -> bool:
        now = self.clock()
        if self.last_fire_time is None:
            self.last_fire_time = now
            return False
        if now - self.last_fire_time > self.interval:
            self.last_fire_time = now
            return True
        return False

    def reset(self) -> "TimeTrigger":
        self.last_fire_time = None
        return self

    def __repr__(self) -> str:
        return f"TimeTrigger({self.interval})"
