from .constants import c, G, VIS_SCALE, TIME_MULTIPLIER, schwarzschild_radius
from .config import PhysicsConfig, DEFAULT_CONFIG
from .errors import InvalidConfiguration
from .trails import Trail, TrailPolicy
from .models import BlackHole, LightRay, RayStatus
from .integrators import advance
from .simulation import Simulation, SimulationSnapshot, RaySnapshot, parallel_rays
__all__ = ["c","G","VIS_SCALE","TIME_MULTIPLIER","schwarzschild_radius",
           "PhysicsConfig","DEFAULT_CONFIG","InvalidConfiguration","Trail","TrailPolicy",
           "BlackHole","LightRay","RayStatus","advance",
           "Simulation","SimulationSnapshot","RaySnapshot","parallel_rays"]
