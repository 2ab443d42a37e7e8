from __future__ import annotations

import logging

from liftsim.events import (
    ElevatorBoarded,
    ElevatorDropped,
    ElevatorHeld,
    ElevatorMoved,
    PassengerGenerated,
    SimulationEnded,
    TickStarted,
)
from liftsim.reporting import EventLogger, format_event


class TestFormatEvent:

    def test_renders_each_event_kind(self):
        assert format_event(TickStarted(tick=4)) == "==== tick 4 ===="
        assert "passenger 9 appears on floor 3 -> floor 7" in format_event(
            PassengerGenerated(tick=0, passenger_id=9, start_floor=3, dest_floor=7)
        )
        assert format_event(
            ElevatorDropped(tick=7, elevator_id=1, floor=7, passenger_ids=(1, 4))
        ) == "elevator 1 drops [1, 4] on floor 7"
        assert format_event(
            ElevatorBoarded(tick=2, elevator_id=2, floor=3, passenger_ids=(5,))
        ) == "elevator 2 boards [5] on floor 3"
        assert format_event(
            ElevatorMoved(tick=1, elevator_id=1, new_floor=2, direction="up")
        ) == "elevator 1 moves up to floor 2"
        assert "holds on floor 3" in format_event(ElevatorHeld(tick=2, elevator_id=1, floor=3))
        assert "after 8 ticks (1/1" in format_event(
            SimulationEnded(total_ticks=8, completed=1, generated=1)
        )


class TestEventLogger:

    def test_logs_and_keeps_lines(self, caplog):
        sink = EventLogger(keep_lines=True)

        with caplog.at_level(logging.INFO, logger="liftsim"):
            sink(TickStarted(tick=0))
            sink(ElevatorHeld(tick=0, elevator_id=2, floor=5))

        assert sink.lines == [
            "==== tick 0 ====",
            "elevator 2 holds on floor 5 while servicing",
        ]
        assert "==== tick 0 ====" in caplog.messages

    def test_does_not_keep_lines_by_default(self):
        sink = EventLogger()
        sink(TickStarted(tick=0))

        assert sink.lines is None


def test_event_to_dict_carries_type():
    data = ElevatorDropped(tick=7, elevator_id=1, floor=7, passenger_ids=(1,)).to_dict()

    assert data == {
        "tick": 7,
        "elevator_id": 1,
        "floor": 7,
        "passenger_ids": (1,),
        "type": "dropped",
    }
