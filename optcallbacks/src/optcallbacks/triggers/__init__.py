"""
Triggers deciding when a callback action fires.
"""

from .base import FunctionTrigger, Trigger, as_triggers
from .clock import TimeTrigger
from .event import EventTrigger
from .iteration import IterationTrigger

__all__ = [
    "Trigger",
    "FunctionTrigger",
    "as_triggers",
    "IterationTrigger",
    "TimeTrigger",
    "EventTrigger",
]
