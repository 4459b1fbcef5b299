# smoke.py
"""
Public entry point for the smoke effect.

draw_smoke() validates its arguments, advances an emitter by one tick and
draws every live particle onto a named surface. Either the whole tick runs or,
when validation fails, nothing happens and the emitter's pool is untouched.
"""
import logging
from typing import Optional

from constants import (
    DEFAULT_PRECISION, DEFAULT_WIND_DIRECTION, DEFAULT_WIND_SPEED, SMOKE_PARTICLE_RADIUS
)
from shapes import DrawStatus, SurfaceRegistry, draw_circle, resolve_surface
from simulation import SmokeEmitter
from utils import is_finite_number

# --- Data Contracts ---
#
# draw_smoke(emitter, surface_id, x, y, particles_per_tick, rise_slope,
#            rise_rate, wind_direction="left", wind_speed=0, precision=0.8,
#            registry=None) -> DrawStatus:
#   - Inputs:
#     - emitter: The SmokeEmitter whose pool is advanced.
#     - surface_id: Handle of a registered surface; its width bounds the smoke.
#     - x, y: Spawn origin.
#     - particles_per_tick: Non-negative count of new particles; fractions
#       round up, so 2.5 spawns 3.
#     - rise_slope: Non-zero ratio of rise to lateral wander.
#     - rise_rate: Rise distance per tick.
#     - wind_direction: "left" blows left, any other string blows right.
#     - wind_speed: Lateral shift per tick.
#     - precision: 1.0 for uniform motion, lower for more randomness.
#   - Outputs: DrawStatus.
#   - Side Effects: On OK, mutates emitter.pool and draws on the surface.


def _validate(emitter, x, y, particles_per_tick, rise_slope, rise_rate,
              wind_direction, wind_speed, precision) -> Optional[str]:
    if not isinstance(emitter, SmokeEmitter):
        return f"emitter is {type(emitter).__name__}"
    numeric = {
        "x": x, "y": y, "particles_per_tick": particles_per_tick,
        "rise_slope": rise_slope, "rise_rate": rise_rate,
        "wind_speed": wind_speed, "precision": precision,
    }
    for name, value in numeric.items():
        if not is_finite_number(value):
            return f"{name}={value!r} is not a finite number"
    if particles_per_tick < 0:
        return f"particles_per_tick={particles_per_tick!r} is negative"
    if rise_slope == 0:
        return "rise_slope must not be zero"
    if not isinstance(wind_direction, str):
        return f"wind_direction={wind_direction!r} is not a string"
    return None


def draw_smoke(emitter: SmokeEmitter, surface_id: str, x, y, particles_per_tick,
               rise_slope, rise_rate, wind_direction: str = DEFAULT_WIND_DIRECTION,
               wind_speed=DEFAULT_WIND_SPEED, precision=DEFAULT_PRECISION,
               registry: Optional[SurfaceRegistry] = None) -> DrawStatus:
    """
    Advances the smoke effect by one tick and renders it.

    Returns:
        DrawStatus: OK when the tick ran, otherwise the reason it did not.
    """
    problem = _validate(emitter, x, y, particles_per_tick, rise_slope, rise_rate,
                        wind_direction, wind_speed, precision)
    if problem is not None:
        logging.warning(f"draw_smoke: sanity check failed ({problem}).")
        return DrawStatus.INVALID_ARGUMENT

    status, surface = resolve_surface("draw_smoke", surface_id, registry)
    if not status:
        return status

    emitter.step(
        surface.get_width(), x, y, particles_per_tick, rise_slope, rise_rate,
        wind_direction=wind_direction, wind_speed=wind_speed, precision=precision
    )
    render_smoke(emitter, surface)
    return DrawStatus.OK


def render_smoke(emitter: SmokeEmitter, surface) -> int:
    """Draws every live particle of the emitter. Returns how many were drawn."""
    pool = emitter.pool
    drawn = 0
    for i in pool.live_indices():
        px, py = pool.positions[i]
        if draw_circle(surface, float(px), float(py), SMOKE_PARTICLE_RADIUS, tuple(int(c) for c in pool.colors[i])):
            drawn += 1
    return drawn
