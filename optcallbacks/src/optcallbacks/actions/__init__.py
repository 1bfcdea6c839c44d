"""
Actions run by a callback when its triggers fire.
"""

from .base import Action, FunctionAction, as_action
from .checkpoint import CheckPointSaver, load_checkpoints
from .evaluator import Evaluator
from .logging import LogProgress

__all__ = [
    "Action",
    "FunctionAction",
    "as_action",
    "LogProgress",
    "CheckPointSaver",
    "load_checkpoints",
    "Evaluator",
]
