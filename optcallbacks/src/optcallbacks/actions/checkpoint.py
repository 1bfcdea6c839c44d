"""
Checkpoint action for persisting intermediate states.
"""

from __future__ import annotations

import os
import shutil
import tempfile
from typing import Any, Callable, Dict, Optional

import torch

from .base import Action

SUFFIX = ".pt"


def load_checkpoints(path: str) -> Dict[str, Any]:
    """
    Load every checkpoint written by a CheckPointSaver.

    Args:
        path: Checkpoint directory

    Returns:
        Dict mapping the iteration number (as a string) to the saved value
    """
    if not os.path.isdir(path):
        raise FileNotFoundError(f"Checkpoint directory not found: {path}")

    checkpoints = {}
    for filename in os.listdir(path):
        key, ext = os.path.splitext(filename)
        if ext != SUFFIX or not key.isdigit():
            continue
        checkpoints[key] = torch.load(os.path.join(path, filename), map_location="cpu", weights_only=False)
    return checkpoints


class CheckPointSaver(Action):
    """
    Saves ``transform(state)`` under the key ``str(t)`` each time it fires.

    The store is a directory holding one ``torch.save`` file per key
    (``<t>.pt``). Each call writes only its own entry to a fresh temporary
    file, syncs it and moves it into place, so a checkpoint is on disk
    before the call returns and no file handle stays open between calls.
    A failed write leaves no partial file behind.

    Args:
        path: Checkpoint directory (created on the first save)
        transform: Function applied to the state before saving (default: identity)
        overwrite: Delete an existing file or directory instead of raising (default: False)

    Raises:
        FileExistsError: If ``path`` exists and ``overwrite`` is False

    Example:
        saver = CheckPointSaver("run_checkpoints", transform=lambda s: s.u)
        callback = Callback((IterationTrigger(5), EventTrigger(("end",))), saver)
        ...
        load_checkpoints("run_checkpoints")["15"]
    """

    def __init__(
        self,
        path: str,
        transform: Optional[Callable[[Any], Any]] = None,
        overwrite: bool = False,
    ):
        path = os.fspath(path)
        if os.path.exists(path):
            if not overwrite:
                raise FileExistsError(
                    f"File {path} exists. Use `CheckPointSaver({path!r}, overwrite=True)` to overwrite"
                )
            if os.path.isdir(path):
                shutil.rmtree(path)
            else:
                os.remove(path)

        self.path = path
        self.transform = transform or (lambda state: state)

    def __call__(self, state, value, t, extra):
        self._write(str(t), self.transform(state))

    def _write(self, key: str, checkpoint: Any):
        """Write one entry to a temporary sibling, sync it and move it into place."""
        os.makedirs(self.path, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.path, prefix=f".{key}-", suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as f:
                torch.save(checkpoint, f)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, os.path.join(self.path, key + SUFFIX))
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def __repr__(self) -> str:
        return f"CheckPointSaver({self.path!r})"
