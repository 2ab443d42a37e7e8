"""Tick events published by :class:`liftsim.simulation.Simulation`.

Subscribers register through ``Simulation.on_event(kind, callback)``; the
``kind`` strings below are the registration keys, and ``"*"`` receives all.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import ClassVar, Tuple


@dataclass(frozen=True)
class SimulationEvent:
    kind: ClassVar[str] = "event"

    def to_dict(self) -> dict:
        data = asdict(self)
        data["type"] = self.kind
        return data


@dataclass(frozen=True)
class TickStarted(SimulationEvent):
    kind: ClassVar[str] = "tick"

    tick: int


@dataclass(frozen=True)
class PassengerGenerated(SimulationEvent):
    kind: ClassVar[str] = "generated"

    tick: int
    passenger_id: int
    start_floor: int
    dest_floor: int


@dataclass(frozen=True)
class ElevatorDropped(SimulationEvent):
    kind: ClassVar[str] = "dropped"

    tick: int
    elevator_id: int
    floor: int
    passenger_ids: Tuple[int, ...]


@dataclass(frozen=True)
class ElevatorBoarded(SimulationEvent):
    kind: ClassVar[str] = "boarded"

    tick: int
    elevator_id: int
    floor: int
    passenger_ids: Tuple[int, ...]


@dataclass(frozen=True)
class ElevatorMoved(SimulationEvent):
    kind: ClassVar[str] = "moved"

    tick: int
    elevator_id: int
    new_floor: int
    direction: str


@dataclass(frozen=True)
class ElevatorHeld(SimulationEvent):
    """Car serviced its floor this tick, so it did not travel."""

    kind: ClassVar[str] = "held"

    tick: int
    elevator_id: int
    floor: int


@dataclass(frozen=True)
class SimulationEnded(SimulationEvent):
    kind: ClassVar[str] = "ended"

    total_ticks: int
    completed: int
    generated: int
