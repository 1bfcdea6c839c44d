"""
Named-event trigger.
"""

from __future__ import annotations

from typing import Hashable, Iterable, Union

from .base import Trigger


class EventTrigger(Trigger):
    """
    Fires once after one of its events has been received.

    ``trigger(event)`` latches the trigger when ``event`` is one of
    ``events``. The next ``fires`` call returns the latch and clears it.
    Receiving an event outside ``events`` clears a pending latch.

    Args:
        events: Recognized event labels (a single string is one label)

    Example:
        trig = EventTrigger(("start", "end"))
        trig.trigger("end")
        trig.fires(None, 0.0, 1, None)  # True
        trig.fires(None, 0.0, 2, None)  # False
    """

    def __init__(self, events: Union[Hashable, Iterable[Hashable]]):
        if isinstance(events, str) or not isinstance(events, Iterable):
            events = (events,)
        self.events = frozenset(events)
        self.latched = False

    def trigger(self, event: Hashable):
        self.latched = event in self.events

    def fires(self, state, value, t, extra) -> bool:
        if self.latched:
            self.latched = False
            return True
        return False

    def reset(self) -> "EventTrigger":
        self.latched = False
        return self

    def __repr__(self) -> str:
        return f"EventTrigger({sorted(map(str, self.events))})"
