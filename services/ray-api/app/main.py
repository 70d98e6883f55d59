import os
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from ray_physics.config import PhysicsConfig
from ray_physics.constants import DEFAULT_MASS
from ray_physics.errors import InvalidConfiguration
from ray_physics.simulation import Simulation
from ray_physics.trails import TrailPolicy

MAX_FRAMES = int(os.getenv("RAY_API_MAX_FRAMES", "5000"))

app = FastAPI(title="Ray API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

config = PhysicsConfig.from_env()

class RayReq(BaseModel):
    x: float; y: float
    dx: float; dy: float

class TrailReq(BaseModel):
    kind: str = "unbounded"
    size: Optional[int] = None
    every: int = 1

class SimulateReq(BaseModel):
    mass: float = DEFAULT_MASS
    width: float = 800.0
    height: float = 600.0
    rays: Optional[List[RayReq]] = None
    frames: int = Field(default=120, ge=0, le=MAX_FRAMES)
    frame_seconds: float = Field(default=1.0 / 60.0, ge=0, allow_inf_nan=False)
    trail: TrailReq = TrailReq()

@app.post("/simulate")
def simulate(req: SimulateReq):
    rays = None if req.rays is None else [((r.x, r.y), (r.dx, r.dy)) for r in req.rays]
    try:
        policy = TrailPolicy(req.trail.kind, size=req.trail.size, every=req.trail.every)
        sim = Simulation(req.width, req.height, config, mass=req.mass, rays=rays, trail_policy=policy)
        snapshot = sim.run(req.frames, req.frame_seconds)
    except ValueError as exc:  # InvalidConfiguration included
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return snapshot.to_dict()
