from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from .building import Building
from .config import SimulationConfig
from .elevator import Direction, Elevator
from .events import (
    ElevatorBoarded,
    ElevatorDropped,
    ElevatorHeld,
    ElevatorMoved,
    PassengerGenerated,
    SimulationEnded,
    SimulationEvent,
    TickStarted,
)
from .generator import FloorPairGenerator, build_generator
from .passenger import Passenger

logger = logging.getLogger(__name__)

EventCallback = Callable[[SimulationEvent], None]


@dataclass
class MetricsSnapshot:
    time_step: int
    average_wait: float
    wait_p95: float
    average_ride: float
    ride_p95: float
    throughput: int


class MetricsTracker:
    def __init__(self) -> None:
        self.wait_times: List[int] = []
        self.ride_times: List[int] = []
        self.throughput: int = 0
        self._board_ticks: Dict[int, int] = {}

    def record_boarding(self, passenger: Passenger, time_step: int) -> None:
        self._board_ticks[passenger.passenger_id] = time_step
        self.wait_times.append(time_step - passenger.created_at_tick)

    def record_alighting(self, passenger: Passenger, time_step: int) -> None:
        board_tick = self._board_ticks.pop(passenger.passenger_id, None)
        if board_tick is not None:
            self.ride_times.append(time_step - board_tick)
        self.throughput += 1

    def _average(self, values: List[int]) -> float:
        if not values:
            return 0.0
        return sum(values) / len(values)

    def _percentile(self, values: List[int], percentile: float) -> float:
        if not values:
            return 0.0
        sorted_vals = sorted(values)
        k = (len(sorted_vals) - 1) * percentile
        f = math.floor(k)
        c = math.ceil(k)
        if f == c:
            return float(sorted_vals[int(k)])
        d0 = sorted_vals[int(f)] * (c - k)
        d1 = sorted_vals[int(c)] * (k - f)
        return float(d0 + d1)

    def snapshot(self, time_step: int) -> MetricsSnapshot:
        return MetricsSnapshot(
            time_step=time_step,
            average_wait=self._average(self.wait_times),
            wait_p95=self._percentile(self.wait_times, 0.95),
            average_ride=self._average(self.ride_times),
            ride_p95=self._percentile(self.ride_times, 0.95),
            throughput=self.throughput,
        )


@dataclass
class SimulationResult:
    total_ticks: int
    generated: int
    completed: int
    max_passengers: int
    metrics: MetricsSnapshot

    @property
    def incomplete(self) -> bool:
        return self.completed < self.max_passengers


class Simulation:
    """Tick-stepped dispatcher for a bank of elevators.

    Each tick runs, in order: passenger generation, stop then board for
    every car (creation order), direction update then movement for every
    car, and completion accounting. A car that stopped or boarded does not
    also move in the same tick.
    """

    def __init__(
        self,
        building: Building,
        config: SimulationConfig,
        generator: FloorPairGenerator,
    ) -> None:
        self.building = building
        self.config = config
        self.generator = generator
        self.current_time: int = 0
        self.total_generated: int = 0
        self.metrics = MetricsTracker()
        self.event_hooks: Dict[str, List[EventCallback]] = {}
        self._next_passenger_id = 1
        self._ended = False

    @property
    def completed(self) -> int:
        return self.total_generated - self.building.waiting_count() - self.building.onboard_count()

    @property
    def finished(self) -> bool:
        return self.completed >= self.config.max_passengers or self.current_time >= self.config.tick_cap

    def run(self) -> SimulationResult:
        logger.info(
            "Starting simulation: %d elevators, floors %d-%d, quota %d, tick cap %d",
            len(self.building.elevators),
            self.building.min_floor,
            self.building.max_floor,
            self.config.max_passengers,
            self.config.tick_cap,
        )
        while not self.finished:
            self.step()
        return self.finish()

    def finish(self) -> SimulationResult:
        """Close out a finished run and announce it once.

        Later calls return the result without emitting another
        ``SimulationEnded``.
        """
        result = self.result()
        if self._ended:
            return result
        self._ended = True
        self._emit(
            SimulationEnded(
                total_ticks=self.current_time,
                completed=result.completed,
                generated=result.generated,
            )
        )
        if result.incomplete:
            logger.warning(
                "Tick cap %d reached with %d of %d passengers delivered",
                self.config.tick_cap,
                result.completed,
                self.config.max_passengers,
            )
        return result

    def step(self) -> None:
        self._emit(TickStarted(tick=self.current_time))
        for elevator in self.building.elevators:
            elevator.begin_tick()

        self._generate_passenger()
        for elevator in self.building.elevators:
            self._service_floor(elevator)
        for elevator in self.building.elevators:
            self._advance(elevator)

        self.current_time += 1
        if self.finished:
            self.finish()

    def result(self) -> SimulationResult:
        return SimulationResult(
            total_ticks=self.current_time,
            generated=self.total_generated,
            completed=self.completed,
            max_passengers=self.config.max_passengers,
            metrics=self.metrics.snapshot(self.current_time),
        )

    def on_event(self, event: str, callback: EventCallback) -> None:
        self.event_hooks.setdefault(event, []).append(callback)

    def _generate_passenger(self) -> None:
        if self.total_generated >= self.config.max_passengers:
            return

        start, dest = self.generator.next_pair()
        floor = self.building.get_floor(start)
        if floor is None or self.building.get_floor(dest) is None:
            raise ValueError(f"Generated trip {start}->{dest} is outside the building")
        if start == dest:
            raise ValueError(f"Generated trip starts and ends on floor {start}")

        passenger = Passenger(
            passenger_id=self._next_passenger_id,
            start_floor=start,
            dest_floor=dest,
            created_at_tick=self.current_time,
        )
        self._next_passenger_id += 1
        floor.enqueue(passenger)
        self.total_generated += 1
        self.building.request_pickup(start, passenger.direction, self.current_time)
        self._emit(
            PassengerGenerated(
                tick=self.current_time,
                passenger_id=passenger.passenger_id,
                start_floor=start,
                dest_floor=dest,
            )
        )

    def _service_floor(self, elevator: Elevator) -> None:
        departing = elevator.stop_if_targeted()
        if departing:
            for passenger in departing:
                self.metrics.record_alighting(passenger, self.current_time)
            self._emit(
                ElevatorDropped(
                    tick=self.current_time,
                    elevator_id=elevator.elevator_id,
                    floor=elevator.current_floor,
                    passenger_ids=tuple(p.passenger_id for p in departing),
                )
            )

        floor = self.building.get_floor(elevator.current_floor)
        if floor is None or elevator.available_space <= 0 or not floor.has_waiting():
            return
        boarded = elevator.board(floor.dequeue_up_to(elevator.available_space))
        if not boarded:
            return
        for passenger in boarded:
            self.metrics.record_boarding(passenger, self.current_time)
        self._emit(
            ElevatorBoarded(
                tick=self.current_time,
                elevator_id=elevator.elevator_id,
                floor=elevator.current_floor,
                passenger_ids=tuple(p.passenger_id for p in boarded),
            )
        )

    def _advance(self, elevator: Elevator) -> None:
        direction = elevator.update_direction()
        if elevator.serviced:
            self._emit(
                ElevatorHeld(
                    tick=self.current_time,
                    elevator_id=elevator.elevator_id,
                    floor=elevator.current_floor,
                )
            )
            return
        if direction is Direction.IDLE:
            return
        elevator.move()
        self._emit(
            ElevatorMoved(
                tick=self.current_time,
                elevator_id=elevator.elevator_id,
                new_floor=elevator.current_floor,
                direction=direction.value,
            )
        )

    def _emit(self, event: SimulationEvent) -> None:
        for callback in self.event_hooks.get(event.kind, []):
            callback(event)
        for callback in self.event_hooks.get("*", []):
            callback(event)


def build_simulation(
    config: SimulationConfig,
    generator: Optional[FloorPairGenerator] = None,
) -> Simulation:
    """Wire a building, its elevators and a generator from ``config``."""
    config.validate()
    elevators = [
        Elevator(elevator_id=i, current_floor=config.initial_floor)
        for i in range(1, config.elevator_count + 1)
    ]
    building = Building(
        min_floor=config.min_floor,
        max_floor=config.max_floor,
        elevators=elevators,
        elevator_constraints=config.constraints,
        scheduler_name=config.scheduler,
    )
    return Simulation(
        building=building,
        config=config,
        generator=generator or build_generator(config),
    )
