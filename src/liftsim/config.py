from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Dict, List, Optional, Tuple


@dataclass
class ElevatorConstraints:
    """Physical constraints shared by every car in the bank."""

    capacity: int = 5


@dataclass
class SimulationConfig:
    min_floor: int = 1
    max_floor: int = 10
    elevator_count: int = 2
    start_floor: Optional[int] = None
    max_passengers: int = 40
    tick_cap: int = 200
    random_seed: Optional[int] = None
    scheduler: str = "broadcast"
    arrivals: Optional[List[Tuple[int, int]]] = None
    constraints: ElevatorConstraints = field(default_factory=ElevatorConstraints)

    @property
    def floor_range(self) -> range:
        return range(self.min_floor, self.max_floor + 1)

    @property
    def initial_floor(self) -> int:
        return self.min_floor if self.start_floor is None else self.start_floor

    def validate(self) -> None:
        if self.max_floor - self.min_floor < 1:
            raise ValueError("Building must have at least two floors")
        if self.elevator_count < 1:
            raise ValueError("Simulation requires at least one elevator")
        if self.constraints.capacity < 1:
            raise ValueError("Elevator capacity must be at least one")
        if self.max_passengers < 0:
            raise ValueError("Passenger quota cannot be negative")
        if self.tick_cap < 0:
            raise ValueError("Tick cap cannot be negative")
        if self.initial_floor not in self.floor_range:
            raise ValueError("Start floor must be within building range")
        if self.arrivals is not None:
            for start, dest in self.arrivals:
                if start not in self.floor_range or dest not in self.floor_range:
                    raise ValueError("Arrival floors must be within building range")
                if start == dest:
                    raise ValueError("Arrival destination cannot equal origin floor")
            if len(self.arrivals) < self.max_passengers:
                raise ValueError("Scripted arrivals must cover the passenger quota")

    @classmethod
    def from_dict(cls, data: Dict) -> "SimulationConfig":
        arrivals = data.get("arrivals")
        if arrivals is not None:
            arrivals = [(int(start), int(dest)) for start, dest in arrivals]
        default_quota = len(arrivals) if arrivals is not None else cls.max_passengers

        constraints = dict(data.get("constraints", {}))
        unknown = set(constraints) - {f.name for f in fields(ElevatorConstraints)}
        if unknown:
            raise ValueError(f"Unknown elevator constraint(s): {', '.join(sorted(unknown))}")

        cfg = cls(
            min_floor=data.get("min_floor", cls.min_floor),
            max_floor=data.get("max_floor", cls.max_floor),
            elevator_count=data.get("elevator_count", cls.elevator_count),
            start_floor=data.get("start_floor"),
            max_passengers=data.get("max_passengers", default_quota),
            tick_cap=data.get("tick_cap", cls.tick_cap),
            random_seed=data.get("random_seed"),
            scheduler=data.get("scheduler", cls.scheduler),
            arrivals=arrivals,
            constraints=ElevatorConstraints(**constraints),
        )
        cfg.validate()
        return cfg
