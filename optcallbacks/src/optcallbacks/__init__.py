"""
Trigger-driven callbacks for iterative optimization.

A Callback is called once per iteration by an optimization loop. It asks its
triggers whether to run its action, and reports a user stop condition back
to the loop.

Main components:
- Callback: Counter, triggers, action and stop predicate
- IterationTrigger / TimeTrigger / EventTrigger: When to fire
- LogProgress / CheckPointSaver / Evaluator: What to do
- reset / trigger: Reuse a callback, send named events
- OptimizationRunner: Reference torch loop driving a Callback

Example usage:
    from optcallbacks import (
        Callback, CheckPointSaver, EventTrigger, IterationTrigger, LogProgress, trigger
    )

    callback = Callback(IterationTrigger(5), LogProgress())
    for step in range(n_iters):
        x = optimizer_step(x)
        if callback(x, objective(x)):
            break

    # Checkpoint every 5 iterations and once more at the end
    saver = Callback((IterationTrigger(5), EventTrigger(("end",))), CheckPointSaver("run_checkpoints"))
    ...
    trigger(saver, "end")
    saver(x, objective(x))
"""

from .actions import Action, CheckPointSaver, Evaluator, FunctionAction, LogProgress, load_checkpoints
from .callback import Callback, reset, trigger
from .registry import create_callback, load_callback_config
from .runner import OptimizationRunner
from .state import OptimizationState
from .triggers import EventTrigger, FunctionTrigger, IterationTrigger, TimeTrigger, Trigger

__all__ = [
    # Callback
    "Callback",
    "reset",
    "trigger",
    # Triggers
    "Trigger",
    "FunctionTrigger",
    "IterationTrigger",
    "TimeTrigger",
    "EventTrigger",
    # Actions
    "Action",
    "FunctionAction",
    "LogProgress",
    "CheckPointSaver",
    "load_checkpoints",
    "Evaluator",
    # Configuration
    "create_callback",
    "load_callback_config",
    # Driver
    "OptimizationState",
    "OptimizationRunner",
]
