"""
Optimization state passed to callbacks by the reference runner.
"""

from __future__ import annotations

from dataclasses import dataclass

import torch
from torch import Tensor


@dataclass
class OptimizationState:
    """
    Snapshot of one optimization iteration.

    Callbacks treat the state as opaque; this is only what OptimizationRunner
    hands them.

    Attributes:
        u: Current parameters (detached copy)
        objective: Objective value at ``u``
        iteration: Driver iteration, starting at 1
    """

    u: Tensor
    objective: float
    iteration: int = 0

    @classmethod
    def from_parameters(cls, param: Tensor, objective: float, iteration: int) -> "OptimizationState":
        """Snapshot a live parameter tensor."""
        return cls(u=param.detach().clone(), objective=float(objective), iteration=iteration)

    @property
    def device(self) -> torch.device:
        return self.u.device

    def to_dict(self) -> dict:
        """Convert to a plain dict, e.g. as a checkpoint transform."""
        return {"u": self.u.cpu(), "objective": self.objective, "iteration": self.iteration}
