from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Passenger:
    """Represents a rider moving between floors."""

    passenger_id: int
    start_floor: int
    dest_floor: int
    created_at_tick: int

    @property
    def direction(self) -> int:
        """Return +1 for up, -1 for down."""
        return 1 if self.dest_floor > self.start_floor else -1
