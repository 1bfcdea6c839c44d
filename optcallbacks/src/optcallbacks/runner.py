"""
Reference optimization loop driving a Callback.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Type

import torch
from torch import Tensor
from tqdm import tqdm

from .callback import Callback
from .state import OptimizationState


class OptimizationRunner:
    """
    Minimizes ``objective(u)`` over one parameter tensor with a torch optimizer.

    After every optimizer step the runner calls ``callback(state, objective)``
    with an OptimizationState snapshot. A True return stops the loop.

    Attributes:
        objective: Function mapping the parameter tensor to a scalar tensor
        callback: Optional Callback invoked once per iteration
        optimizer_cls: torch.optim optimizer class (default: Adam)
        optimizer_kwargs: Keyword arguments for the optimizer (default: lr=0.01)
    """

    def __init__(
        self,
        objective: Callable[[Tensor], Tensor],
        callback: Optional[Callback] = None,
        optimizer_cls: Type[torch.optim.Optimizer] = torch.optim.Adam,
        optimizer_kwargs: Optional[Dict[str, Any]] = None,
    ):
        self.objective = objective
        self.callback = callback
        self.optimizer_cls = optimizer_cls
        self.optimizer_kwargs = optimizer_kwargs if optimizer_kwargs is not None else {"lr": 0.01}

    def run(
        self,
        u0: Tensor,
        n_iters: int,
        show_progress: bool = True,
        print_fn: Optional[Callable[[str], None]] = None,
    ) -> OptimizationState:
        """
        Run optimization for at most n_iters steps.

        Args:
            u0: Starting parameters (not modified)
            n_iters: Maximum number of optimizer steps
            show_progress: Whether to show tqdm progress bar
            print_fn: Function used to report an early stop (default: print)

        Returns:
            State after the last step
        """
        if n_iters <= 0:
            raise ValueError(f"n_iters must be positive, got {n_iters}")
        print_fn = print_fn or print

        param = u0.detach().clone().requires_grad_(True)
        optimizer = self.optimizer_cls([param], **self.optimizer_kwargs)

        def closure():
            optimizer.zero_grad()
            loss = self.objective(param)
            loss.backward()
            return loss

        iterator = range(1, n_iters + 1)
        if show_progress:
            iterator = tqdm(iterator, desc="Optimizing")

        state = OptimizationState.from_parameters(param, float("nan"), 0)
        try:
            for step in iterator:
                optimizer.step(closure)

                with torch.no_grad():
                    value = self.objective(param).item()
                state = OptimizationState.from_parameters(param, value, step)

                if show_progress:
                    iterator.set_postfix({"objective": f"{value:.4g}"})

                if self.callback is not None and self.callback(state, value):
                    if show_progress:
                        print_fn(f"\nStopped by callback at iteration {step}")
                    break
        finally:
            if show_progress:
                iterator.close()

        return state

    def reset(self):
        """Reset the callback before a new run."""
        if self.callback is not None:
            self.callback.reset()
