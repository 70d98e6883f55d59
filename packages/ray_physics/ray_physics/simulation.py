import logging
import math
from dataclasses import asdict, dataclass
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from .config import DEFAULT_CONFIG, PhysicsConfig
from .constants import DEFAULT_MASS
from .errors import InvalidConfiguration
from .models import BlackHole, LightRay, RayStatus, Vector
from .trails import Point, TrailPolicy

log = logging.getLogger(__name__)

RaySeed = Tuple[Vector, Vector]  # (position, direction)

def parallel_rays(count: int = 10, x: float = -350.0, spread: float = 400.0,
                  direction: Vector = (1.0, 0.0)) -> List[RaySeed]:
    if count < 1:
        return []
    if count == 1:
        return [((x, 0.0), direction)]
    spacing = spread / (count - 1)
    return [((x, -spread / 2.0 + i * spacing), direction) for i in range(count)]

@dataclass(frozen=True)
class RaySnapshot:
    position: Point
    direction: Point
    radius: float
    status: RayStatus
    steps: int
    path: Tuple[Point, ...]

@dataclass(frozen=True)
class SimulationSnapshot:
    center: Point
    black_hole_position: Point
    schwarzschild_radius: float
    visual_radius: float
    frame: int
    simulated_time: float
    rays: Tuple[RaySnapshot, ...]

    def to_dict(self) -> dict:
        data = asdict(self)
        for ray in data["rays"]:
            ray["status"] = ray["status"].value
        return data

class Simulation:
    """One black hole and the rays travelling around it, advanced frame by frame."""

    def __init__(self, width: float = 800.0, height: float = 600.0,
                 config: PhysicsConfig = DEFAULT_CONFIG,
                 mass: float = DEFAULT_MASS,
                 black_hole_position: Optional[Vector] = None,
                 rays: Optional[Iterable[RaySeed]] = None,
                 trail_policy: TrailPolicy = TrailPolicy()):
        if not (math.isfinite(width) and math.isfinite(height)) or width <= 0 or height <= 0:
            raise InvalidConfiguration(f"extent must be positive, got {width!r}x{height!r}")
        self.width, self.height = float(width), float(height)
        self.center: Point = (self.width / 2.0, self.height / 2.0)
        self.config = config
        self.trail_policy = trail_policy
        if black_hole_position is None:
            black_hole_position = self.center
        self.black_hole = BlackHole(black_hole_position, mass, config)
        self._rays: List[LightRay] = []
        self.frame = 0
        self.simulated_time = 0.0
        for position, direction in (parallel_rays() if rays is None else rays):
            self.add_ray(position, direction)
        log.info("simulation ready: %d rays, r_s=%.4g m (%.1f units)",
                 len(self._rays), self.black_hole.schwarzschild_radius, self.black_hole.visual_radius)

    @property
    def rays(self) -> Tuple[LightRay, ...]:
        return tuple(self._rays)

    def add_ray(self, position: Sequence[float], direction: Sequence[float]) -> LightRay:
        ray = LightRay(position, direction, self.config, self.trail_policy)
        self._rays.append(ray)
        return ray

    def step(self, elapsed: float) -> None:
        if not math.isfinite(elapsed) or elapsed < 0:
            raise ValueError(f"elapsed frame time must be finite and >= 0, got {elapsed!r}")
        dt = self.config.scale_time(elapsed)
        rs = self.black_hole.schwarzschild_radius
        for ray in self._rays:
            ray.advance(dt, rs)
        self.frame += 1
        self.simulated_time += dt

    def run(self, frames: int, frame_seconds: float = 1.0 / 60.0) -> SimulationSnapshot:
        for _ in range(frames):
            self.step(frame_seconds)
        return self.snapshot()

    def snapshot(self) -> SimulationSnapshot:
        bh = self.black_hole
        return SimulationSnapshot(
            center=self.center,
            black_hole_position=bh.position,
            schwarzschild_radius=bh.schwarzschild_radius,
            visual_radius=bh.visual_radius,
            frame=self.frame,
            simulated_time=self.simulated_time,
            rays=tuple(
                RaySnapshot(r.position, r.direction, r.radius, r.status, r.steps, r.path.points())
                for r in self._rays
            ),
        )

    def to_screen(self, point: Sequence[float]) -> Point:
        return (point[0] + self.center[0], point[1] + self.center[1])

    def render(self, draw: Callable[[SimulationSnapshot], None]) -> None:
        draw(self.snapshot())

    @property
    def active_rays(self) -> int:
        return sum(1 for r in self._rays if r.status is RayStatus.ACTIVE)
