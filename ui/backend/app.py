from __future__ import annotations

import json
import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, TypeAdapter

from ui.config import get_settings
from ui.schemas import HeatPoint

logger = logging.getLogger("urbanvitality.replay")


class ScenarioModel(BaseModel):
    green: float
    points: list[HeatPoint]


class SimulationResponse(BaseModel):
    green: float
    simulated_data: list[HeatPoint]


_POINTS = TypeAdapter(list[HeatPoint])
_SCENARIOS = TypeAdapter(list[ScenarioModel])


class ReplayStoreError(RuntimeError):
    pass


def _read_json(path: Path) -> Any:
    if not path.exists():
        raise ReplayStoreError(f"Missing recorded response: {path}")
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


@dataclass
class ReplayStore:
    """Recorded API responses: the baseline dataset and one dataset per green level."""

    baseline: list[HeatPoint]
    scenarios: dict[float, list[HeatPoint]] = field(default_factory=dict)

    @classmethod
    def from_dir(cls, directory: Path) -> ReplayStore:
        baseline = _POINTS.validate_python(_read_json(directory / "heat_data.json"))
        scenarios_path = directory / "scenarios.json"
        scenarios: dict[float, list[HeatPoint]] = {}
        if scenarios_path.exists():
            for s in _SCENARIOS.validate_python(_read_json(scenarios_path)):
                scenarios[float(s.green)] = s.points
        return cls(baseline=baseline, scenarios=scenarios)

    def scenario(self, green: float) -> list[HeatPoint] | None:
        return self.scenarios.get(float(green))


@asynccontextmanager
async def lifespan(app: FastAPI):
    replay_dir = Path(get_settings().replay_dir).resolve()
    app.state.store = ReplayStore.from_dir(replay_dir)
    logger.info(
        "Loaded %d baseline points and %d scenarios from %s",
        len(app.state.store.baseline),
        len(app.state.store.scenarios),
        replay_dir,
    )
    yield


app = FastAPI(title="UrbanVitality Replay API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)


def get_store() -> ReplayStore:
    store = getattr(app.state, "store", None)
    if store is None:
        raise HTTPException(status_code=503, detail="Replay store not initialized")
    return store


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/api/heat-data", response_model=list[HeatPoint])
def heat_data(store: ReplayStore = Depends(get_store)) -> list[HeatPoint]:
    return store.baseline


@app.get("/sim", response_model=SimulationResponse)
def simulate(green: float, store: ReplayStore = Depends(get_store)) -> SimulationResponse:
    points = store.scenario(green)
    if points is None:
        recorded = ", ".join(f"{g:g}" for g in sorted(store.scenarios)) or "none"
        raise HTTPException(
            status_code=404,
            detail=f"No recorded scenario for green={green:g} (recorded: {recorded})",
        )
    return SimulationResponse(green=green, simulated_data=points)


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    uvicorn.run(app, host="127.0.0.1", port=settings.replay_port)
