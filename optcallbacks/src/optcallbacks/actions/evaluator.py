"""
Auxiliary evaluation action.
"""

from __future__ import annotations

from typing import Any, Callable, List

import torch

from .base import Action


class Evaluator(Action):
    """
    Evaluates ``f(state)`` each time it fires and records the result.

    Results are kept in call order in ``evaluations``. The history is not
    cleared by ``reset``, so it accumulates across runs of the same callback.

    Args:
        f: Function of the optimization state
        label: Name of the evaluated quantity (default: "evaluation")
    """

    def __init__(self, f: Callable[[Any], Any], label: str = "evaluation"):
        self.f = f
        self.label = label
        self.evaluations: List[Any] = []

    def __call__(self, state, value, t, extra):
        self.evaluations.append(self.f(state))

    def to_tensor(self, dtype: torch.dtype = torch.float64) -> torch.Tensor:
        """Stack the recorded evaluations into a tensor."""
        if self.evaluations and isinstance(self.evaluations[0], torch.Tensor):
            return torch.stack([e.detach().to(dtype) for e in self.evaluations])
        return torch.tensor(self.evaluations, dtype=dtype)

    def __repr__(self) -> str:
        return f"Evaluator(label={self.label!r}, n={len(self.evaluations)})"
