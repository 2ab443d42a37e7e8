from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from dispatch import ElevatorSnapshot, PendingRequest, Scheduler, get_scheduler

from .config import ElevatorConstraints
from .elevator import Elevator
from .floor import Floor


@dataclass
class Building:
    """Container for floors and elevators with pluggable pickup assignment."""

    min_floor: int
    max_floor: int
    elevators: List[Elevator] = field(default_factory=list)
    elevator_constraints: ElevatorConstraints = field(default_factory=ElevatorConstraints)
    scheduler_name: str = "broadcast"
    scheduler_options: dict = field(default_factory=dict)
    scheduler: Scheduler = field(init=False)
    floors: Dict[int, Floor] = field(init=False)

    def __post_init__(self) -> None:
        self.floors = {n: Floor(n) for n in range(self.min_floor, self.max_floor + 1)}
        self.scheduler = get_scheduler(self.scheduler_name, **self.scheduler_options)
        self._apply_constraints()

    def get_floor(self, floor_number: int) -> Optional[Floor]:
        return self.floors.get(floor_number)

    def set_scheduler(self, name: str, **options) -> None:
        self.scheduler = get_scheduler(name, **options)
        self.scheduler_name = name
        self.scheduler_options = options

    def request_pickup(self, floor_number: int, direction: int, current_time: int) -> List[int]:
        request = PendingRequest(origin=floor_number, direction=direction, requested_at=current_time)
        assigned = self.scheduler.assign_pickup(self._snapshot_elevators(), request)
        for elevator_id in assigned:
            elevator = self._get_elevator(elevator_id)
            if elevator is None:
                continue
            elevator.assign_target(floor_number)
        return assigned

    def waiting_count(self) -> int:
        return sum(len(floor) for floor in self.floors.values())

    def onboard_count(self) -> int:
        return sum(len(elevator.passengers) for elevator in self.elevators)

    def snapshot(self) -> dict:
        return {
            "floors": {number: len(floor) for number, floor in self.floors.items()},
            "elevators": [
                {
                    "id": elevator.elevator_id,
                    "floor": elevator.current_floor,
                    "direction": elevator.direction.value,
                    "targets": list(elevator.targets),
                    "passenger_count": len(elevator.passengers),
                    "serviced": elevator.serviced,
                }
                for elevator in self.elevators
            ],
        }

    def _snapshot_elevators(self) -> List[ElevatorSnapshot]:
        return [
            ElevatorSnapshot(
                elevator_id=elevator.elevator_id,
                position=elevator.current_floor,
                direction=elevator.direction.value,
                targets=tuple(elevator.targets),
                load=len(elevator.passengers),
                capacity=elevator.capacity,
            )
            for elevator in self.elevators
        ]

    def _apply_constraints(self) -> None:
        for elevator in self.elevators:
            elevator.capacity = self.elevator_constraints.capacity

    def _get_elevator(self, elevator_id: int) -> Optional[Elevator]:
        for elevator in self.elevators:
            if elevator.elevator_id == elevator_id:
                return elevator
        return None
