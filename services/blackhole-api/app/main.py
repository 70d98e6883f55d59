from typing import Tuple

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from ray_physics.config import PhysicsConfig
from ray_physics.errors import InvalidConfiguration
from ray_physics.models import BlackHole

app = FastAPI(title="Black Hole API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

config = PhysicsConfig.from_env()

class BHReq(BaseModel):
    mass: float = Field(gt=0, allow_inf_nan=False)
    position: Tuple[float, float] = (0.0, 0.0)

@app.post("/derived")
def derived(req: BHReq):
    try:
        bh = BlackHole(req.position, req.mass, config)
    except InvalidConfiguration as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return {
        "mass": bh.mass,
        "position": bh.position,
        "schwarzschild_radius": bh.schwarzschild_radius,
        "visual_radius": bh.visual_radius,
    }
