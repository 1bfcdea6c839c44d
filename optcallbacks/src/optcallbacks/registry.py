"""
Trigger and action registries for JSON/YAML configuration loading.
"""

from __future__ import annotations

import json
import os
from typing import Any, Callable, Dict, Generic, List, Type, TypeVar

from .actions import Action, CheckPointSaver, LogProgress
from .callback import Callback
from .triggers import EventTrigger, IterationTrigger, TimeTrigger, Trigger

T = TypeVar("T")


class Registry(Generic[T]):
    """
    Registry mapping type names to subclasses of ``base``.

    Enables creating triggers and actions from configuration by type name.
    Only types constructible from plain config values belong here.

    Attributes:
        kind: Name used in error messages ("trigger", "action")
        base: Class every registered type must derive from
    """

    def __init__(self, kind: str, base: Type[T]):
        self.kind = kind
        self.base = base
        self._registry: Dict[str, Type[T]] = {}

    def register(self, name: str, cls: Type[T]):
        """Register a type under ``name``."""
        if not (isinstance(cls, type) and issubclass(cls, self.base)):
            raise TypeError(f"{cls!r} is not a {self.base.__name__} subclass")
        self._registry[name] = cls

    def get(self, name: str) -> Type[T]:
        """Get a registered type by name."""
        if name not in self._registry:
            raise ValueError(f"Unknown {self.kind} type: {name}. Available: {list(self._registry.keys())}")
        return self._registry[name]

    def create(self, type_name: str, **kwargs) -> T:
        """Create an instance from type name and kwargs."""
        return self.get(type_name)(**kwargs)

    def list_available(self) -> List[str]:
        return list(self._registry.keys())


TriggerRegistry: Registry[Trigger] = Registry("trigger", Trigger)
ActionRegistry: Registry[Action] = Registry("action", Action)


def register_trigger(name: str) -> Callable:
    """Decorator to register a trigger type."""

    def decorator(cls: Type[Trigger]) -> Type[Trigger]:
        TriggerRegistry.register(name, cls)
        return cls

    return decorator


def register_action(name: str) -> Callable:
    """Decorator to register an action type."""

    def decorator(cls: Type[Action]) -> Type[Action]:
        ActionRegistry.register(name, cls)
        return cls

    return decorator


def _split_type(config: Dict[str, Any]):
    if "type" not in config:
        raise ValueError(f"Missing 'type' in config: {config}")
    kwargs = {k: v for k, v in config.items() if k != "type"}
    return config["type"], kwargs


def create_trigger(config: Dict[str, Any]) -> Trigger:
    """
    Create a trigger from a configuration dict.

    Expected config format:
    {"type": "IterationTrigger", "interval": 5}
    """
    type_name, kwargs = _split_type(config)
    return TriggerRegistry.create(type_name, **kwargs)


def create_action(config: Dict[str, Any]) -> Action:
    """
    Create an action from a configuration dict.

    Expected config format:
    {"type": "CheckPointSaver", "path": "run_checkpoints", "overwrite": true}
    """
    type_name, kwargs = _split_type(config)
    return ActionRegistry.create(type_name, **kwargs)


def create_callback(config: Dict[str, Any]) -> Callback:
    """
    Create a Callback from a configuration dict.

    Expected config format:
    {
        "triggers": [
            {"type": "IterationTrigger", "interval": 5},
            {"type": "EventTrigger", "events": ["end"]}
        ],
        "action": {"type": "LogProgress"},
        "t": 0  # optional
    }

    A single "trigger" mapping may be given instead of "triggers".
    """
    if "triggers" in config:
        triggers = [create_trigger(c) for c in config["triggers"]]
    elif "trigger" in config:
        triggers = create_trigger(config["trigger"])
    else:
        raise ValueError("Callback config needs 'trigger' or 'triggers'")

    if "action" not in config:
        raise ValueError("Callback config needs 'action'")
    action = create_action(config["action"])

    return Callback(triggers, action, t=config.get("t", 0))


def load_callback_config(path: str) -> Callback:
    """
    Load a Callback from a JSON or YAML file.

    Args:
        path: Path to config file (.json or .yaml/.yml)

    Returns:
        Configured Callback
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Callback config not found: {path}")

    ext = os.path.splitext(path)[1].lower()

    if ext == ".json":
        with open(path, "r") as f:
            data = json.load(f)
    elif ext in [".yaml", ".yml"]:
        import yaml

        with open(path, "r") as f:
            data = yaml.safe_load(f)
    else:
        raise ValueError(f"Unsupported file format: {ext}")

    return create_callback(data)


# Register built-in types
TriggerRegistry.register("IterationTrigger", IterationTrigger)
TriggerRegistry.register("TimeTrigger", TimeTrigger)
TriggerRegistry.register("EventTrigger", EventTrigger)
ActionRegistry.register("LogProgress", LogProgress)
ActionRegistry.register("CheckPointSaver", CheckPointSaver)
