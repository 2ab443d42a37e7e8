from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List

from .passenger import Passenger


@dataclass
class Floor:
    """A floor's waiting line. Arrival order is boarding order."""

    number: int
    waiting: Deque[Passenger] = field(default_factory=deque)

    def enqueue(self, passenger: Passenger) -> None:
        self.waiting.append(passenger)

    def has_waiting(self) -> bool:
        return bool(self.waiting)

    def dequeue_up_to(self, count: int) -> List[Passenger]:
        boarded: List[Passenger] = []
        while self.waiting and len(boarded) < count:
            boarded.append(self.waiting.popleft())
        return boarded

    def __len__(self) -> int:
        return len(self.waiting)
