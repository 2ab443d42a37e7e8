"""
Shared pytest fixtures for liftsim tests.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

import pytest

from liftsim import Simulation, SimulationConfig, build_simulation
from liftsim.config import ElevatorConstraints
from liftsim.events import SimulationEvent


@pytest.fixture
def make_simulation():
    """
    Factory for simulations driven by scripted trips.

    Example usage:
        def test_something(make_simulation):
            sim, events = make_simulation([(3, 7)])
            sim.run()
    """

    def factory(
        arrivals: Sequence[Tuple[int, int]],
        max_passengers: Optional[int] = None,
        elevator_count: int = 2,
        capacity: int = 5,
        tick_cap: int = 200,
    ) -> Tuple[Simulation, List[SimulationEvent]]:
        config = SimulationConfig(
            elevator_count=elevator_count,
            max_passengers=len(arrivals) if max_passengers is None else max_passengers,
            tick_cap=tick_cap,
            arrivals=list(arrivals),
            constraints=ElevatorConstraints(capacity=capacity),
        )
        simulation = build_simulation(config)
        events: List[SimulationEvent] = []
        simulation.on_event("*", events.append)
        return simulation, events

    return factory


@pytest.fixture
def reset_liftsim_logging():
    """Leave the liftsim logger silent again after the test."""
    yield
    logger = logging.getLogger("liftsim")
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
