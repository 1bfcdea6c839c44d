"""
Base trigger interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Hashable, Sequence, Tuple, Union


class Trigger(ABC):
    """
    Base class for triggers.

    A trigger is a stateful predicate consulted once per callback invocation.
    It may advance its own state while deciding. The default ``reset`` and
    ``trigger`` implementations are no-ops for triggers without such state.
    """

    @abstractmethod
    def fires(self, state: Any, value: Any, t: int, extra: Any) -> bool:
        """
        Decide whether the action should fire on this invocation.

        Args:
            state: Opaque optimization state
            value: Current objective value
            t: Callback iteration counter (already incremented)
            extra: Opaque user context

        Returns:
            True if the action should fire
        """
        pass

    def __call__(self, state: Any, value: Any, t: int, extra: Any) -> bool:
        return self.fires(state, value, t, extra)

    def reset(self) -> "Trigger":
        """Return the trigger to its construction-time state."""
        return self

    def trigger(self, event: Hashable):
        """Receive a named event."""
        pass


class FunctionTrigger(Trigger):
    """Adapts a plain predicate ``fn(state, value, t, extra)`` to a Trigger."""

    def __init__(self, fn: Callable[[Any, Any, int, Any], bool]):
        if not callable(fn):
            raise TypeError(f"Trigger must be callable, got {type(fn).__name__}")
        self.fn = fn

    def fires(self, state, value, t, extra) -> bool:
        return self.fn(state, value, t, extra)

    def __repr__(self) -> str:
        return f"FunctionTrigger({self.fn!r})"


TriggerLike = Union[Trigger, Callable[[Any, Any, int, Any], bool]]


def _as_trigger(trigger: TriggerLike) -> Trigger:
    if isinstance(trigger, Trigger):
        return trigger
    return FunctionTrigger(trigger)


def as_triggers(triggers: Union[TriggerLike, Sequence[TriggerLike]]) -> Tuple[Trigger, ...]:
    """
    Normalize one trigger or a sequence of triggers to a tuple.

    A single trigger becomes a tuple of length 1, so dispatch never has to
    branch on the single/many case.

    Raises:
        ValueError: If an empty sequence is given
        TypeError: If an element is neither a Trigger nor callable
    """
    if isinstance(triggers, (list, tuple)):
        if not triggers:
            raise ValueError("At least one trigger is required")
        return tuple(_as_trigger(trigger) for trigger in triggers)
    return (_as_trigger(triggers),)
