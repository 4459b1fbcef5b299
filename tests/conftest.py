import os

# Headless SDL so the window tests run without a display.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np
import pygame
import pytest

from shapes import SurfaceRegistry


class ScriptedRng:
    """
    Generator stand-in that replays fixed values.

    random() hands out `uniforms` in order; integers() hands out `coins` in
    order, or the low bound repeated when no coins are scripted.
    """
    def __init__(self, uniforms=(), coins=()):
        self.uniforms = list(uniforms)
        self.coins = list(coins)

    def random(self, size):
        values = [self.uniforms.pop(0) for _ in range(size)]
        return np.array(values, dtype=np.float64)

    def integers(self, low, high, size):
        count = int(np.prod(size))
        if self.coins:
            values = [self.coins.pop(0) for _ in range(count)]
        else:
            values = [low] * count
        return np.array(values, dtype=np.int64).reshape(size)


@pytest.fixture
def registry():
    reg = SurfaceRegistry()
    reg.register("canvas", pygame.Surface((200, 200), pygame.SRCALPHA))
    return reg


@pytest.fixture
def surface(registry):
    return registry.lookup("canvas")


@pytest.fixture
def scripted_rng():
    return ScriptedRng
