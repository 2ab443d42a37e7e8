from __future__ import annotations

import asyncio
import contextlib
import json
import logging
from collections import deque
from dataclasses import asdict
from typing import Any, Deque, Dict, List, Optional, Set, Tuple

from fastapi import FastAPI, HTTPException, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from liftsim import Simulation, SimulationConfig, build_simulation
from liftsim.events import SimulationEvent

logger = logging.getLogger(__name__)


class AlgorithmSelection(BaseModel):
    name: str
    options: Dict[str, Any] = {}


class ResetRequest(BaseModel):
    min_floor: int = 1
    max_floor: int = 10
    elevator_count: int = 2
    start_floor: Optional[int] = None
    capacity: int = 5
    max_passengers: Optional[int] = None
    tick_cap: int = 200
    random_seed: Optional[int] = None
    scheduler: str = "broadcast"
    arrivals: Optional[List[Tuple[int, int]]] = None

    def to_config(self) -> SimulationConfig:
        data = self.model_dump(exclude_none=True)
        data["constraints"] = {"capacity": data.pop("capacity")}
        return SimulationConfig.from_dict(data)


class SimulationManager:
    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        tick_interval: float = 0.5,
        event_history: int = 1000,
    ) -> None:
        self.tick_interval = tick_interval
        self.events: Deque[dict] = deque(maxlen=event_history)
        self._tick_events: List[dict] = []
        self.clients: Set[WebSocket] = set()
        self._task: Optional[asyncio.Task] = None
        self._lock = asyncio.Lock()
        self.simulation = self._build(config or SimulationConfig())

    def _build(self, config: SimulationConfig) -> Simulation:
        simulation = build_simulation(config)
        simulation.on_event("*", self._record_event)
        self.events.clear()
        self._tick_events = []
        return simulation

    def _record_event(self, event: SimulationEvent) -> None:
        payload = event.to_dict()
        self.events.append(payload)
        self._tick_events.append(payload)

    async def start(self) -> None:
        if self._task is None:
            self._task = asyncio.create_task(self._run())

    async def stop(self) -> None:
        if self._task:
            self._task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._task
            self._task = None

    async def _run(self) -> None:
        while True:
            payload = None
            async with self._lock:
                if not self.simulation.finished:
                    payload = self._advance(1)
            if payload is not None:
                await self.broadcast(payload)
            await asyncio.sleep(self.tick_interval)

    def _advance(self, count: int) -> dict:
        self._tick_events = []
        steps = 0
        while steps < count and not self.simulation.finished:
            self.simulation.step()
            steps += 1
        if self.simulation.finished:
            self.simulation.finish()
            if steps:
                logger.info("Simulation finished at tick %d", self.simulation.current_time)
        state = self.current_state()
        state["steps"] = steps
        state["events"] = self._tick_events
        return state

    async def broadcast(self, payload: dict) -> None:
        message = json.dumps(payload)
        disconnected: Set[WebSocket] = set()
        for client in set(self.clients):
            try:
                await client.send_text(message)
            except WebSocketDisconnect:
                disconnected.add(client)
        for client in disconnected:
            await self.unregister(client)

    async def register(self, websocket: WebSocket) -> None:
        await websocket.accept()
        self.clients.add(websocket)
        await websocket.send_text(json.dumps(self.current_state()))

    async def unregister(self, websocket: WebSocket) -> None:
        if websocket in self.clients:
            self.clients.remove(websocket)
        with contextlib.suppress(Exception):
            await websocket.close()

    def current_state(self) -> dict:
        simulation = self.simulation
        metrics = asdict(simulation.metrics.snapshot(simulation.current_time))
        return {
            "time": simulation.current_time,
            "building": simulation.building.snapshot(),
            "metrics": metrics,
            "generated": simulation.total_generated,
            "completed": simulation.completed,
            "finished": simulation.finished,
            "scheduler": simulation.building.scheduler_name,
        }

    def recent_events(self, last_n: int) -> List[dict]:
        if last_n <= 0:
            return []
        return list(self.events)[-last_n:]

    async def reset(self, config: SimulationConfig) -> dict:
        async with self._lock:
            self.simulation = self._build(config)
            logger.info("Simulation reset: %d elevators, quota %d", config.elevator_count, config.max_passengers)
            return self.current_state()

    async def step(self, count: int) -> dict:
        async with self._lock:
            return self._advance(count)

    async def set_scheduler(self, name: str, options: Dict[str, Any]) -> dict:
        async with self._lock:
            self.simulation.building.set_scheduler(name, **options)
            return self.current_state()


manager = SimulationManager()
app = FastAPI(title="LiftBank Simulation API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def on_startup() -> None:
    await manager.start()


@app.on_event("shutdown")
async def on_shutdown() -> None:
    await manager.stop()


@app.get("/state")
async def get_state() -> dict:
    return manager.current_state()


@app.post("/reset")
async def reset_simulation(request: ResetRequest) -> dict:
    try:
        config = request.to_config()
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return await manager.reset(config)


@app.post("/step")
async def step_simulation(count: int = 1) -> dict:
    if count < 1:
        raise HTTPException(status_code=400, detail="count must be at least 1")
    return await manager.step(count)


@app.get("/events")
async def get_events(last_n: int = 100) -> List[dict]:
    return manager.recent_events(last_n)


@app.post("/algorithm")
async def set_algorithm(selection: AlgorithmSelection) -> dict:
    try:
        return await manager.set_scheduler(selection.name, selection.options)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))


@app.websocket("/ws/stream")
async def websocket_endpoint(websocket: WebSocket) -> None:
    await manager.register(websocket)
    try:
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        await manager.unregister(websocket)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("liftserver.app:app", host="0.0.0.0", port=8000, reload=False)
