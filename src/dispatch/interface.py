from __future__ import annotations

from dataclasses import dataclass
from typing import List, Protocol, Sequence, Tuple


@dataclass(frozen=True)
class ElevatorSnapshot:
    """Lightweight view of an elevator for pickup assignment."""

    elevator_id: int
    position: int
    direction: str
    targets: Tuple[int, ...]
    load: int
    capacity: int


@dataclass(frozen=True)
class PendingRequest:
    """A hall call raised when a passenger starts waiting."""

    origin: int
    direction: int
    requested_at: int


class Scheduler(Protocol):
    """Strategy interface for handing hall calls to elevators."""

    def assign_pickup(
        self,
        elevator_state: Sequence[ElevatorSnapshot],
        request: PendingRequest,
    ) -> List[int]:
        """
        Return the ids of the elevators that should add ``request.origin``
        to their targets.

        Returning an empty list leaves the call unserved until a car
        happens to stop on that floor.
        """
        ...
