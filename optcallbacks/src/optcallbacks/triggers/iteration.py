"""
Iteration-count trigger.
"""

from __future__ import annotations

import operator

from .base import Trigger


class IterationTrigger(Trigger):
    """
    Fires every ``interval`` iterations.

    With a callback counter that grows by one per call, the trigger fires on
    iterations ``interval, 2 * interval, ...`` and never in between.

    Args:
        interval: Number of iterations between fires (positive integer,
            including numpy integers and 0-d integer tensors)
    """

    def __init__(self, interval: int):
        if isinstance(interval, bool):
            raise ValueError("interval must be an integer, got bool")
        try:
            interval = operator.index(interval)
        except TypeError:
            raise ValueError(f"interval must be an integer, got {type(interval).__name__}") from None
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self.interval = interval
        self.last_fire_t = 0

    def fires(self, state, value, t, extra) -> bool:
        if t - self.last_fire_t >= self.interval:
            self.last_fire_t = t
            return True
        return False

    def reset(self) -> "IterationTrigger":
        self.last_fire_t = 0
        return self

    def __repr__(self) -> str:
        return f"IterationTrigger({self.interval})"
