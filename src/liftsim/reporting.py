from __future__ import annotations

import logging
from typing import List, Optional

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

logger = logging.getLogger(__name__)


def _ids(passenger_ids) -> str:
    return ", ".join(str(pid) for pid in passenger_ids)


def format_event(event: SimulationEvent) -> str:
    if isinstance(event, TickStarted):
        return f"==== tick {event.tick} ===="
    if isinstance(event, PassengerGenerated):
        return (
            f"tick {event.tick}: passenger {event.passenger_id} appears on floor "
            f"{event.start_floor} -> floor {event.dest_floor}"
        )
    if isinstance(event, ElevatorDropped):
        return f"elevator {event.elevator_id} drops [{_ids(event.passenger_ids)}] on floor {event.floor}"
    if isinstance(event, ElevatorBoarded):
        return f"elevator {event.elevator_id} boards [{_ids(event.passenger_ids)}] on floor {event.floor}"
    if isinstance(event, ElevatorMoved):
        return f"elevator {event.elevator_id} moves {event.direction} to floor {event.new_floor}"
    if isinstance(event, ElevatorHeld):
        return f"elevator {event.elevator_id} holds on floor {event.floor} while servicing"
    if isinstance(event, SimulationEnded):
        return (
            f"simulation ended after {event.total_ticks} ticks "
            f"({event.completed}/{event.generated} passengers delivered)"
        )
    return repr(event)


class EventLogger:
    """Event sink that renders each tick event as a log line.

    Optionally keeps the rendered lines, which the CLI writes to its
    JSON report.
    """

    def __init__(self, level: int = logging.INFO, keep_lines: bool = False) -> None:
        self.level = level
        self.lines: Optional[List[str]] = [] if keep_lines else None

    def __call__(self, event: SimulationEvent) -> None:
        line = format_event(event)
        if self.lines is not None:
            self.lines.append(line)
        logger.log(self.level, line)
