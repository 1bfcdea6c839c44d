"""
Base action interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Union


class Action(ABC):
    """
    Base class for callback actions.

    An action consumes ``(state, value, t, extra)`` for its side effect; the
    return value is ignored by the callback. Actions without resettable state
    inherit the no-op ``reset``.
    """

    @abstractmethod
    def __call__(self, state: Any, value: Any, t: int, extra: Any):
        """Run the action for iteration ``t``."""
        pass

    def reset(self) -> "Action":
        """Return the action to its construction-time state."""
        return self


class FunctionAction(Action):
    """Adapts a plain function ``fn(state, value, t, extra)`` to an Action."""

    def __init__(self, fn: Callable[[Any, Any, int, Any], Any]):
        if not callable(fn):
            raise TypeError(f"Action must be callable, got {type(fn).__name__}")
        self.fn = fn

    def __call__(self, state, value, t, extra):
        return self.fn(state, value, t, extra)

    def __repr__(self) -> str:
        return f"FunctionAction({self.fn!r})"


ActionLike = Union[Action, Callable[[Any, Any, int, Any], Any]]


def as_action(action: ActionLike) -> Action:
    """Wrap plain callables in a FunctionAction; Actions pass through."""
    if isinstance(action, Action):
        return action
    return FunctionAction(action)
