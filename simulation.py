# simulation.py
"""
Handles the smoke particle update logic.

This module defines the SmokeEmitter class, which owns a particle pool and
advances it by one tick: it culls particles that left the surface, spawns new
ones at the origin, drifts the older ones upwards under wind, and inserts the
newcomers into free slots.
"""
import logging
import math
from typing import Optional

import numpy as np
from numba import jit

from constants import WIND_LEFT, WIND_RIGHT
from particle import SmokeParticlePool

# --- Data Contracts ---
#
# class SmokeEmitter:
#   - __init__(self, rng: Optional[np.random.Generator] = None, seed: Optional[int] = None):
#     - Inputs:
#       - rng: Any object with Generator-compatible random(size) and
#         integers(low, high, size) methods. Takes precedence over seed.
#       - seed: Seed for a fresh np.random.default_rng when rng is None.
#     - Side Effects: Creates an empty SmokeParticlePool.
#
#   - step(self, width, x, y, particles_per_tick, rise_slope, rise_rate,
#          wind_direction, wind_speed, precision) -> None:
#     - Inputs: Already validated finite numbers; rise_slope != 0;
#       particles_per_tick >= 0. A fractional count spawns ceil(count)
#       particles.
#     - Side Effects: Mutates self.pool.
#     - Invariants: Particles spawned in this step sit exactly at (x, y)
#       when the step returns. The pool capacity never shrinks.

@jit(nopython=True)
def _find_out_of_bounds_numba(positions, alive, width):
    """
    Numba-jitted scan for live particles that left the visible area.

    Only the left, right and top edges count; smoke never falls out of the
    bottom of the surface.
    """
    count = positions.shape[0]
    found = np.empty(count, dtype=np.int64)
    n_found = 0
    for i in range(count):
        if not alive[i]:
            continue
        x = positions[i, 0]
        y = positions[i, 1]
        if x < 0.0 or x > width or y < 0.0:
            found[n_found] = i
            n_found += 1
    return found[:n_found]


def random_colors(rng, count: int) -> np.ndarray:
    """Draws `count` RGB colors with each channel uniform in [0, 255]."""
    if count == 0:
        return np.zeros((0, 3), dtype=np.uint8)
    return np.asarray(rng.integers(0, 256, size=(count, 3))).astype(np.uint8)


def drift_factors(rng, count: int, precision: float) -> np.ndarray:
    """
    Random damping factors in (0, 1] for `count` particles.

    A factor is 1 - floor(r * (100 - precision*100)) / 100 for a uniform r,
    so a precision of 1.0 always yields 1.0 and lower precision lets the
    factor dip further below it.
    """
    spread = 100 - precision * 100
    return 1 - np.floor(np.asarray(rng.random(count)) * spread) / 100


class SmokeEmitter:
    """
    A single smoke source with its own particle pool.
    """
    def __init__(self, rng=None, seed: Optional[int] = None):
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.pool = SmokeParticlePool()
        self.tick = 0
        logging.debug(f"SmokeEmitter created (seed={seed}).")

    def cull(self, width: float) -> int:
        """Turns every particle outside [0, width] x [0, inf) into a tombstone."""
        out_of_bounds = _find_out_of_bounds_numba(
            self.pool.positions, self.pool.alive, np.float64(width)
        )
        self.pool.release(out_of_bounds)
        return out_of_bounds.shape[0]

    def drift(self, indices: np.ndarray, rise_slope: float, rise_rate: float,
              wind_direction: str, wind_speed: float, precision: float) -> None:
        """
        Moves the given particles one tick upwards with random lateral wander.

        Random values are drawn per pass, not per particle: every dx factor
        first, then every dy factor, then every direction coin. A scripted
        generator must supply them in that order.
        """
        count = indices.shape[0]
        if count == 0:
            return

        dx = (rise_rate / rise_slope) * drift_factors(self.rng, count, precision)
        dy = rise_rate * drift_factors(self.rng, count, precision)

        # Coin flip per particle for the lateral direction
        flip = np.asarray(self.rng.integers(0, 2, size=count)) % 2 == 0
        dx[flip] *= -1

        # Wind shifts the whole distribution instead of bounding it
        if wind_direction == WIND_LEFT:
            dx -= wind_speed
        else:
            dx += wind_speed

        self.pool.positions[indices, 0] += dx
        self.pool.positions[indices, 1] -= dy

    def step(self, width: float, x: float, y: float, particles_per_tick: float,
             rise_slope: float, rise_rate: float, wind_direction: str = WIND_LEFT,
             wind_speed: float = 0, precision: float = 0.8) -> None:
        """
        Executes one tick of the smoke effect.
        """
        if wind_direction not in (WIND_LEFT, WIND_RIGHT):
            logging.debug(f"Unrecognised wind direction {wind_direction!r}; blowing right.")

        # 1. Free the slots of particles that left the surface last tick
        culled = self.cull(width)

        # 2. Stage this tick's particles; they are not drifted until next tick
        spawn_count = math.ceil(particles_per_tick)
        new_positions = np.tile(np.array([x, y], dtype=np.float64), (spawn_count, 1))
        new_colors = random_colors(self.rng, spawn_count)

        # 3. Drift everything that was already in the pool
        self.drift(self.pool.live_indices(), rise_slope, rise_rate,
                   wind_direction, wind_speed, precision)

        # 4. Insert the staged particles into the earliest free slots
        self.pool.insert(new_positions, new_colors)

        self.tick += 1
        logging.debug(
            f"Smoke tick {self.tick}: culled {culled}, spawned {spawn_count}, "
            f"live {self.pool.live_count}/{self.pool.capacity}."
        )
