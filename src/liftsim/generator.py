from __future__ import annotations

import random
from typing import Iterable, List, Optional, Protocol, Tuple

from .config import SimulationConfig


class FloorPairGenerator(Protocol):
    """Source of (start_floor, dest_floor) pairs for new passengers."""

    def next_pair(self) -> Tuple[int, int]:
        ...


class UniformFloorPairGenerator:
    """Draws start and destination uniformly, rejecting same-floor trips."""

    def __init__(
        self,
        min_floor: int,
        max_floor: int,
        random_state: Optional[random.Random] = None,
    ) -> None:
        if max_floor - min_floor < 1:
            raise ValueError("Floor range must span at least two floors")
        self.min_floor = min_floor
        self.max_floor = max_floor
        self.random = random_state or random.Random()

    def next_pair(self) -> Tuple[int, int]:
        start = self.random.randint(self.min_floor, self.max_floor)
        dest = self.random.randint(self.min_floor, self.max_floor)
        while dest == start:
            dest = self.random.randint(self.min_floor, self.max_floor)
        return start, dest


class ScriptedFloorPairGenerator:
    """Replays a fixed list of trips, e.g. from a scenario file."""

    def __init__(self, pairs: Iterable[Tuple[int, int]]) -> None:
        self.pairs: List[Tuple[int, int]] = list(pairs)
        self._index = 0

    def next_pair(self) -> Tuple[int, int]:
        if self._index >= len(self.pairs):
            raise ValueError(f"Scripted arrivals exhausted after {len(self.pairs)} passengers")
        pair = self.pairs[self._index]
        self._index += 1
        return pair


def build_generator(config: SimulationConfig) -> FloorPairGenerator:
    if config.arrivals is not None:
        return ScriptedFloorPairGenerator(config.arrivals)
    return UniformFloorPairGenerator(
        config.min_floor,
        config.max_floor,
        random.Random(config.random_seed),
    )
