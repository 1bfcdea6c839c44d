"""
Progress logging action.
"""

from __future__ import annotations

import math
from typing import Callable, Optional

from .base import Action

HEADER = " eval   | current     | lowest      | highest     "
RULE = "_" * 49
HEADER_EVERY = 50


class LogProgress(Action):
    """
    Prints the current, lowest and highest objective value.

    A header is printed before the first line and then every 50 lines.

    Output:
         eval   | current     | lowest      | highest
        _________________________________________________
              5 |    0.460215 |    0.460215 |    0.460215
             10 |    0.162607 |    0.162607 |    0.460215

    Args:
        print_fn: Function to use for printing (default: print)
    """

    def __init__(self, print_fn: Optional[Callable[[str], None]] = None):
        self.print_fn = print_fn or print
        self.count = 0
        self.lowest = math.inf
        self.highest = -math.inf

    def __call__(self, state, value, t, extra):
        if self.count % HEADER_EVERY == 0:
            self.print_fn(HEADER)
            self.print_fn(RULE)
        self.count += 1

        value = float(value)
        # Ties replace the stored extreme
        if value <= self.lowest:
            self.lowest = value
        if value >= self.highest:
            self.highest = value

        self.print_fn("%7i | %11.6g | %11.6g | %11.6g" % (t, value, self.lowest, self.highest))

    def reset(self) -> "LogProgress":
        self.count = 0
        self.lowest = math.inf
        self.highest = -math.inf
        return self
