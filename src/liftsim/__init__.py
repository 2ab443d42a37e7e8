"""Tick-stepped simulation of a small elevator bank."""

import logging

from .building import Building
from .config import ElevatorConstraints, SimulationConfig
from .elevator import Direction, Elevator
from .floor import Floor
from .generator import (
    FloorPairGenerator,
    ScriptedFloorPairGenerator,
    UniformFloorPairGenerator,
    build_generator,
)
from .logging_config import configure_from_env, disable_logging, enable_console_logging
from .passenger import Passenger
from .reporting import EventLogger
from .simulation import MetricsSnapshot, Simulation, SimulationResult, build_simulation

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Building",
    "Direction",
    "Elevator",
    "ElevatorConstraints",
    "EventLogger",
    "Floor",
    "FloorPairGenerator",
    "MetricsSnapshot",
    "Passenger",
    "ScriptedFloorPairGenerator",
    "Simulation",
    "SimulationConfig",
    "SimulationResult",
    "UniformFloorPairGenerator",
    "build_generator",
    "build_simulation",
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
]
