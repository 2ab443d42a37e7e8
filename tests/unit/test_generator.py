from __future__ import annotations

import random

import pytest

from liftsim import SimulationConfig
from liftsim.generator import (
    ScriptedFloorPairGenerator,
    UniformFloorPairGenerator,
    build_generator,
)


class TestUniformFloorPairGenerator:

    def test_pairs_stay_in_range_and_never_repeat_floor(self):
        generator = UniformFloorPairGenerator(1, 10, random.Random(7))

        for _ in range(500):
            start, dest = generator.next_pair()
            assert 1 <= start <= 10
            assert 1 <= dest <= 10
            assert start != dest

    def test_same_seed_gives_same_sequence(self):
        first = UniformFloorPairGenerator(1, 10, random.Random(42))
        second = UniformFloorPairGenerator(1, 10, random.Random(42))

        assert [first.next_pair() for _ in range(20)] == [second.next_pair() for _ in range(20)]

    def test_two_floor_building_always_crosses(self):
        generator = UniformFloorPairGenerator(1, 2, random.Random(3))

        pairs = {generator.next_pair() for _ in range(50)}

        assert pairs <= {(1, 2), (2, 1)}

    def test_single_floor_range_is_rejected(self):
        with pytest.raises(ValueError):
            UniformFloorPairGenerator(4, 4)


class TestScriptedFloorPairGenerator:

    def test_replays_then_raises_when_exhausted(self):
        generator = ScriptedFloorPairGenerator([(3, 7), (9, 1)])

        assert generator.next_pair() == (3, 7)
        assert generator.next_pair() == (9, 1)
        with pytest.raises(ValueError, match="exhausted"):
            generator.next_pair()


def test_build_generator_prefers_scripted_arrivals():
    scripted = build_generator(SimulationConfig(arrivals=[(2, 5)], max_passengers=1))
    uniform = build_generator(SimulationConfig(random_seed=5))

    assert isinstance(scripted, ScriptedFloorPairGenerator)
    assert isinstance(uniform, UniformFloorPairGenerator)
    assert (uniform.min_floor, uniform.max_floor) == (1, 10)
