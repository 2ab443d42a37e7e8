from __future__ import annotations

from bisect import insort
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence

from .passenger import Passenger


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    IDLE = "idle"


@dataclass
class Elevator:
    """A car that stops, boards and travels one floor per tick.

    ``targets`` holds every floor the car still has to visit, pickups
    included, kept sorted so direction selection never depends on
    container ordering.
    """

    elevator_id: int
    capacity: int = 5
    current_floor: int = 1
    direction: Direction = Direction.IDLE
    passengers: List[Passenger] = field(default_factory=list)
    targets: List[int] = field(default_factory=list)
    serviced: bool = False

    @property
    def available_space(self) -> int:
        return max(0, self.capacity - len(self.passengers))

    def begin_tick(self) -> None:
        self.serviced = False

    def assign_target(self, floor: int) -> None:
        if floor not in self.targets:
            insort(self.targets, floor)

    def stop_if_targeted(self) -> List[Passenger]:
        """Drop riders bound for this floor and clear it from the targets."""
        if self.current_floor not in self.targets:
            return []

        departing = [p for p in self.passengers if p.dest_floor == self.current_floor]
        if departing:
            self.passengers = [p for p in self.passengers if p.dest_floor != self.current_floor]
            self.serviced = True
        # Pickup-only stops clear the target too.
        self.targets.remove(self.current_floor)
        return departing

    def board(self, candidates: Sequence[Passenger]) -> List[Passenger]:
        boarding = list(candidates[: self.available_space])
        for passenger in boarding:
            self.passengers.append(passenger)
            self.assign_target(passenger.dest_floor)
        if boarding:
            self.serviced = True
        return boarding

    def next_target(self) -> Optional[int]:
        """Nearest target other than the current floor, lower floor on ties."""
        candidates = [floor for floor in self.targets if floor != self.current_floor]
        if not candidates:
            return None
        return min(candidates, key=lambda floor: (abs(floor - self.current_floor), floor))

    def update_direction(self) -> Direction:
        target = self.next_target()
        if target is None:
            self.direction = Direction.IDLE
        elif target > self.current_floor:
            self.direction = Direction.UP
        else:
            self.direction = Direction.DOWN
        return self.direction

    def move(self) -> None:
        if self.direction is Direction.UP:
            self.current_floor += 1
        elif self.direction is Direction.DOWN:
            self.current_floor -= 1
