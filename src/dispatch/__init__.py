from __future__ import annotations

from typing import Dict, Type

from .broadcast import BroadcastScheduler
from .interface import ElevatorSnapshot, PendingRequest, Scheduler

__all__ = [
    "BroadcastScheduler",
    "ElevatorSnapshot",
    "PendingRequest",
    "Scheduler",
    "get_scheduler",
]


SCHEDULER_REGISTRY: Dict[str, Type[Scheduler]] = {
    "broadcast": BroadcastScheduler,
}


def get_scheduler(name: str, **kwargs) -> Scheduler:
    cls = SCHEDULER_REGISTRY.get(name.lower())
    if cls is None:
        raise ValueError(f"Unknown scheduler '{name}'. Available: {', '.join(SCHEDULER_REGISTRY)}")
    try:
        return cls(**kwargs)
    except TypeError as exc:
        raise ValueError(f"Invalid options for scheduler '{name}': {', '.join(sorted(kwargs))}") from exc
