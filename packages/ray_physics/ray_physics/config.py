import math
import os
from dataclasses import dataclass, fields

from .constants import c, G, VIS_SCALE, TIME_MULTIPLIER
from .errors import InvalidConfiguration

ENV_PREFIX = "RAY_PHYSICS_"

def require_positive(name: str, value: float) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidConfiguration(f"{name} must be a number, got {value!r}") from exc
    if not math.isfinite(value) or value <= 0.0:
        raise InvalidConfiguration(f"{name} must be finite and > 0, got {value!r}")
    return value

@dataclass(frozen=True)
class PhysicsConfig:
    # visual = meters * vis_scale; dt = elapsed * time_multiplier
    c: float = c
    G: float = G
    vis_scale: float = VIS_SCALE
    time_multiplier: float = TIME_MULTIPLIER

    def __post_init__(self):
        for f in fields(self):
            object.__setattr__(self, f.name, require_positive(f.name, getattr(self, f.name)))

    def to_physical(self, visual: float) -> float:
        return visual / self.vis_scale

    def to_visual(self, meters: float) -> float:
        return meters * self.vis_scale

    def scale_time(self, elapsed: float) -> float:
        return elapsed * self.time_multiplier

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX, environ=None) -> "PhysicsConfig":
        environ = os.environ if environ is None else environ
        overrides = {}
        for f in fields(cls):
            raw = environ.get(prefix + f.name.upper())
            if raw is not None:
                overrides[f.name] = raw
        return cls(**overrides)

DEFAULT_CONFIG = PhysicsConfig()
