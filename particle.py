# particle.py
"""
Manages the state of the smoke particles owned by one emitter.

This module defines the SmokeParticlePool class, which stores particle data
(position, color, liveness) in NumPy arrays indexed by slot. Removed
particles leave a tombstone slot behind that the next spawn reuses, so the
arrays only grow when every slot is occupied.
"""
import heapq
import logging
from typing import List, NamedTuple, Optional, Tuple

import numpy as np

# --- Data Contracts ---
#
# class SmokeParticlePool:
#   - __init__(self):
#     - Side Effects: Creates empty state arrays.
#     - Invariants:
#       - self.positions is a NumPy array of shape (C, 2) of dtype float64.
#       - self.colors is a NumPy array of shape (C, 3) of dtype uint8.
#       - self.alive is a NumPy array of shape (C,) of dtype bool.
#       - C (capacity) never decreases.
#       - Every slot with alive == False is in the free heap exactly once.
#
#   - release(self, indices) -> None:
#     - Turns live slots into tombstones.
#
#   - insert(self, positions, colors) -> np.ndarray:
#     - Fills the lowest-numbered tombstones first, then appends.
#     - Returns the slot index used by each inserted particle, in order.


class SmokeParticle(NamedTuple):
    x: float
    y: float
    color: Tuple[int, int, int]


class SmokeParticlePool:
    """
    A slot-based container for smoke particles.
    """
    def __init__(self):
        self.positions = np.zeros((0, 2), dtype=np.float64)
        self.colors = np.zeros((0, 3), dtype=np.uint8)
        self.alive = np.zeros(0, dtype=np.bool_)
        # Min-heap of tombstone slots, so reuse always takes the earliest one.
        self._free: List[int] = []

    @property
    def capacity(self) -> int:
        return self.alive.shape[0]

    @property
    def live_count(self) -> int:
        return int(np.count_nonzero(self.alive))

    @property
    def free_count(self) -> int:
        return len(self._free)

    def live_indices(self) -> np.ndarray:
        """Slot indices of all live particles, in slot order."""
        return np.flatnonzero(self.alive)

    def release(self, indices) -> None:
        """
        Replaces the particles in the given slots with tombstones.

        Slots that are already tombstones are ignored.
        """
        for i in np.asarray(indices, dtype=np.int64):
            i = int(i)
            if not self.alive[i]:
                continue
            self.alive[i] = False
            heapq.heappush(self._free, i)

    def insert(self, positions: np.ndarray, colors: np.ndarray) -> np.ndarray:
        """
        Places new particles into the pool.

        Args:
            positions (np.ndarray): Shape (N, 2) spawn positions.
            colors (np.ndarray): Shape (N, 3) RGB colors.

        Returns:
            np.ndarray: The slot index assigned to each particle.
        """
        positions = np.asarray(positions, dtype=np.float64).reshape(-1, 2)
        colors = np.asarray(colors, dtype=np.uint8).reshape(-1, 3)
        count = positions.shape[0]
        if colors.shape[0] != count:
            raise ValueError(
                f"Got {count} positions but {colors.shape[0]} colors for insertion."
            )

        reused = min(count, len(self._free))
        slots = [heapq.heappop(self._free) for _ in range(reused)]

        grow_by = count - reused
        if grow_by > 0:
            start = self.capacity
            self._grow(grow_by)
            slots.extend(range(start, start + grow_by))
            logging.debug(f"Smoke pool grew by {grow_by} slots to {self.capacity}.")

        slots = np.array(slots, dtype=np.int64)
        self.positions[slots] = positions
        self.colors[slots] = colors
        self.alive[slots] = True
        return slots

    def _grow(self, extra: int) -> None:
        self.positions = np.concatenate([self.positions, np.zeros((extra, 2), dtype=np.float64)])
        self.colors = np.concatenate([self.colors, np.zeros((extra, 3), dtype=np.uint8)])
        self.alive = np.concatenate([self.alive, np.zeros(extra, dtype=np.bool_)])

    def slot(self, index: int) -> Optional[SmokeParticle]:
        """Returns the particle in a slot, or None for a tombstone."""
        if not self.alive[index]:
            return None
        x, y = self.positions[index]
        r, g, b = self.colors[index]
        return SmokeParticle(float(x), float(y), (int(r), int(g), int(b)))

    def slots(self) -> List[Optional[SmokeParticle]]:
        return [self.slot(i) for i in range(self.capacity)]

    def particles(self) -> List[SmokeParticle]:
        """All live particles in slot order."""
        return [self.slot(int(i)) for i in self.live_indices()]

    def __len__(self) -> int:
        return self.live_count
