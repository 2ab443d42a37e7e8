from __future__ import annotations

from typing import List, Sequence

from .interface import ElevatorSnapshot, PendingRequest


class BroadcastScheduler:
    """Sends every hall call to every elevator.

    Whichever car arrives first boards the riders; the others clear the
    floor from their targets when they get there and find it empty.
    """

    def assign_pickup(
        self,
        elevator_state: Sequence[ElevatorSnapshot],
        request: PendingRequest,
    ) -> List[int]:
        return [elevator.elevator_id for elevator in elevator_state]
