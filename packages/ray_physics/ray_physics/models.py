import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence, Tuple

from . import integrators
from .config import DEFAULT_CONFIG, PhysicsConfig
from .constants import schwarzschild_radius
from .errors import InvalidConfiguration
from .trails import Trail, TrailPolicy

Vector = Tuple[float, float]

def as_point(name: str, value: Sequence[float]) -> Vector:
    try:
        x, y = (float(v) for v in value)
    except (TypeError, ValueError) as exc:
        raise InvalidConfiguration(f"{name} must be a pair of numbers, got {value!r}") from exc
    if not (math.isfinite(x) and math.isfinite(y)):
        raise InvalidConfiguration(f"{name} must be finite, got {value!r}")
    return x, y

@dataclass(frozen=True)
class BlackHole:
    position: Vector  # visual space
    mass: float  # kg
    config: PhysicsConfig = field(default=DEFAULT_CONFIG, repr=False)
    schwarzschild_radius: float = field(init=False)  # m

    def __post_init__(self):
        mass = float(self.mass)
        if not math.isfinite(mass) or mass <= 0.0:
            raise InvalidConfiguration(f"black hole mass must be finite and > 0, got {self.mass!r}")
        object.__setattr__(self, "mass", mass)
        object.__setattr__(self, "position", as_point("black hole position", self.position))
        object.__setattr__(self, "schwarzschild_radius",
                           schwarzschild_radius(mass, self.config.G, self.config.c))

    @property
    def visual_radius(self) -> float:
        return self.config.to_visual(self.schwarzschild_radius)

class RayStatus(str, Enum):
    ACTIVE = "active"
    ABSORBED = "absorbed"

@dataclass
class LightRay:
    """A photon in the black hole's frame (hole at the origin).

    ``position`` and ``direction`` live in visual space; ``radius``/``angle``
    and the rates are physical and re-derived from them every step.
    """
    position: Vector
    direction: Vector
    config: PhysicsConfig = field(default=DEFAULT_CONFIG, repr=False)
    trail_policy: TrailPolicy = field(default_factory=TrailPolicy, repr=False)
    radius: float = field(init=False)
    angle: float = field(init=False)
    radial_rate: float = field(init=False, default=0.0)
    angular_rate: float = field(init=False, default=0.0)
    status: RayStatus = field(init=False, default=RayStatus.ACTIVE)
    steps: int = field(init=False, default=0)
    path: Trail = field(init=False, repr=False)

    def __post_init__(self):
        self.position = as_point("ray position", self.position)
        dx, dy = as_point("ray direction", self.direction)
        norm = math.hypot(dx, dy)
        self.direction = (dx / norm, dy / norm) if norm > 0.0 else (0.0, 0.0)
        self.radius, self.angle = integrators.polar_state(self.position, self.config.vis_scale)
        if self.radius > 0.0:
            self.radial_rate, self.angular_rate = integrators.polar_rates(
                self.direction, self.radius, self.angle, self.config.c)
        self.path = self.trail_policy.make_trail()
        self.path.append(self.position)

    @property
    def absorbed(self) -> bool:
        return self.status is RayStatus.ABSORBED

    def mark_absorbed(self) -> None:
        self.status = RayStatus.ABSORBED

    def advance(self, dt: float, horizon_radius: float) -> None:
        integrators.advance(self, dt, horizon_radius)
