import logging
import math
from typing import TYPE_CHECKING, Tuple

if TYPE_CHECKING:
    from .models import LightRay

log = logging.getLogger(__name__)

Vector = Tuple[float, float]

# radii (m) at or below this are treated as the origin; r**4 would underflow
MIN_RADIUS = 1e-75

def polar_state(position: Vector, vis_scale: float) -> Tuple[float, float]:
    x, y = position
    return math.hypot(x, y) / vis_scale, math.atan2(y, x)

def polar_rates(direction: Vector, radius: float, angle: float, c: float) -> Tuple[float, float]:
    vx, vy = direction[0] * c, direction[1] * c
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    v_r = vx * cos_a + vy * sin_a
    v_phi = -vx * sin_a + vy * cos_a
    return v_r, v_phi / radius

def geodesic_accel(radius: float, radial_rate: float, angular_rate: float,
                   rs: float, c: float) -> Tuple[float, float]:
    r = radius
    r2 = r * r
    L = r2 * angular_rate / c
    c2 = c * c
    radial = (-(rs * c2) / (2.0 * r2)
              + (L * L * c2) / (r2 * r)
              - (3.0 * rs * L * L * c2) / (2.0 * r2 * r2))
    angular = (-2.0 / r) * radial_rate * angular_rate
    return radial, angular

def heading(radius: float, angle: float, radial_rate: float, angular_rate: float,
            fallback: Vector) -> Vector:
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    tangential = radius * angular_rate
    vx = radial_rate * cos_a - tangential * sin_a
    vy = radial_rate * sin_a + tangential * cos_a
    norm = math.hypot(vx, vy)
    if norm == 0.0 or not math.isfinite(norm):
        return fallback
    return vx / norm, vy / norm

def advance(ray: "LightRay", dt: float, horizon_radius: float) -> None:
    """Advance ``ray`` by ``dt`` simulated seconds (semi-implicit Euler).

    Absorbed rays, rays at the origin and steps that blow up to a
    non-finite radius or angle leave the ray untouched.
    """
    if ray.absorbed:
        return
    cfg = ray.config
    ray.radius, ray.angle = polar_state(ray.position, cfg.vis_scale)
    if ray.radius <= MIN_RADIUS:
        return
    if ray.radius < horizon_radius:
        ray.mark_absorbed()
        log.debug("ray absorbed at r=%.4g m (r_s=%.4g m) after %d steps",
                  ray.radius, horizon_radius, ray.steps)
        return

    radial_rate, angular_rate = polar_rates(ray.direction, ray.radius, ray.angle, cfg.c)
    radial_accel, angular_accel = geodesic_accel(
        ray.radius, radial_rate, angular_rate, horizon_radius, cfg.c)

    # rates first, then positions with the updated rates
    radial_rate += radial_accel * dt
    angular_rate += angular_accel * dt
    radius = ray.radius + radial_rate * dt
    angle = ray.angle + angular_rate * dt
    if not (math.isfinite(radius) and math.isfinite(angle)):
        log.debug("step of %.4g s from r=%.4g m diverged, skipped", dt, ray.radius)
        return

    ray.radial_rate, ray.angular_rate = radial_rate, angular_rate
    ray.radius, ray.angle = radius, angle
    ray.position = (radius * math.cos(angle) * cfg.vis_scale,
                    radius * math.sin(angle) * cfg.vis_scale)
    ray.direction = heading(radius, angle, radial_rate, angular_rate, ray.direction)
    ray.path.append(ray.position)
    ray.steps += 1
