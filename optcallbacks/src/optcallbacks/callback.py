"""
Callback wrapper dispatching triggers to an action.
"""

from __future__ import annotations

from typing import Any, Callable, Hashable, Optional, Sequence, Tuple, Union

from .actions.base import Action, ActionLike, as_action
from .triggers.base import Trigger, TriggerLike, as_triggers

StopFn = Callable[[Any, Any, int, Any], bool]


def _never_stop(state, value, t, extra) -> bool:
    return False


class Callback:
    """
    Runs an action whenever one of its triggers fires.

    The optimization loop calls ``callback(state, value)`` once per
    iteration. Each call increments ``t``, asks every trigger (all of them,
    in order, so stateful triggers keep advancing), runs the action if any
    fired, and returns the stop predicate's answer to the loop.

    A Callback is not thread-safe. Invoking one instance from several
    threads at once races on the counter and on trigger/action state.

    Args:
        trigger: A trigger or a sequence of triggers (plain predicates
            ``fn(state, value, t, extra)`` are accepted)
        action: Action or function ``fn(state, value, t, extra)``
        t: Initial iteration counter (default: 0)
        extra: Opaque context passed to triggers, action and stop
        stop: Predicate ``fn(state, value, t, extra)`` telling the loop to
            stop (default: never)

    Example:
        callback = Callback(IterationTrigger(5), LogProgress())
        for step in range(n_iters):
            x = optimizer_step(x)
            if callback(x, objective(x)):
                break
    """

    def __init__(
        self,
        trigger: Union[TriggerLike, Sequence[TriggerLike]],
        action: ActionLike,
        t: int = 0,
        extra: Any = None,
        stop: Optional[StopFn] = None,
    ):
        self.triggers: Tuple[Trigger, ...] = as_triggers(trigger)
        self.action: Action = as_action(action)
        self.t = t
        self.extra = extra
        self.stop = stop or _never_stop

    def __call__(self, state: Any, value: Any) -> bool:
        self.t += 1

        # No short-circuit: every trigger must see every tick
        fired = [trig(state, value, self.t, self.extra) for trig in self.triggers]
        if any(fired):
            self.action(state, value, self.t, self.extra)

        return self.stop(state, value, self.t, self.extra)

    def reset(self) -> "Callback":
        """Reset triggers, action and iteration counter for a new run."""
        for trig in self.triggers:
            trig.reset()
        self.action.reset()
        self.t = 0
        return self

    def trigger(self, event: Hashable):
        """Send ``event`` to every trigger."""
        for trig in self.triggers:
            trig.trigger(event)

    def __repr__(self) -> str:
        return f"Callback(triggers={self.triggers!r}, action={self.action!r}, t={self.t})"


def reset(target: Any):
    """
    Reset a Callback, Trigger or Action.

    Tuples and lists are reset element-wise. Other objects are left alone.

    Returns:
        The reset target, or None when there was nothing to reset
    """
    if isinstance(target, (Callback, Trigger, Action)):
        return target.reset()
    if isinstance(target, (list, tuple)):
        return [reset(item) for item in target]
    return None


def trigger(target: Any, event: Hashable):
    """
    Send a named event to a Callback or Trigger.

    Example:
        callback = Callback(EventTrigger(("start", "end")), print_value)
        trigger(callback, "start")
        callback(None, 10.0)  # fires
        callback(None, 9.0)   # does not fire
    """
    if isinstance(target, (Callback, Trigger)):
        target.trigger(event)
