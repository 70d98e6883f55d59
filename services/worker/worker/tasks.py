import logging
import os
from celery import Celery
from ray_physics.config import PhysicsConfig
from ray_physics.simulation import Simulation

log = logging.getLogger(__name__)

CELERY_BROKER_URL = os.getenv("CELERY_BROKER_URL", "redis://redis:6379/0")
CELERY_BACKEND_URL = os.getenv("CELERY_BACKEND_URL", "redis://redis:6379/1")

celery = Celery("bh", broker=CELERY_BROKER_URL, backend=CELERY_BACKEND_URL)

@celery.task
def simulate_task(mass, rays=None, frames=600, frame_seconds=1.0 / 60.0, width=800.0, height=600.0):
    """rays: list of [x, y, dx, dy]; ``None`` uses the default parallel column."""
    seeds = None if rays is None else [((x, y), (dx, dy)) for x, y, dx, dy in rays]
    sim = Simulation(width, height, PhysicsConfig.from_env(), mass=mass, rays=seeds)
    log.info("simulating %d rays for %d frames", len(sim.rays), frames)
    result = sim.run(frames, frame_seconds).to_dict()
    log.info("done: %d of %d rays still active", sim.active_rays, len(sim.rays))
    return result
