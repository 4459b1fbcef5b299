# visualization.py
"""
Handles the demo window: a house with a smoking chimney, drawn with Pygame.
"""
import logging
from typing import Any, Dict, Optional

import pygame

from constants import (
    BACKGROUND_COLOR, DEFAULT_PRECISION, DEFAULT_SURFACE_ID, DEFAULT_WINDOW_HEIGHT,
    DEFAULT_WINDOW_WIDTH, DEFAULT_WIND_DIRECTION, DEFAULT_WIND_SPEED, FPS
)
from shapes import (
    SurfaceRegistry, DrawStatus, default_registry, draw_chimney, draw_door,
    draw_roof, draw_wall, draw_window
)
from simulation import SmokeEmitter
from smoke import draw_smoke
from utils import parse_color

# --- Data Contracts ---
#
# class Visualizer:
#   - __init__(self, vis_params: Dict[str, Any], house: Dict[str, Any],
#              smoke_params: Dict[str, Any], registry: Optional[SurfaceRegistry] = None):
#     - Inputs:
#       - vis_params: "width", "height", "fps", "surface_id", "background_color".
#       - house: Shape sections "wall", "roof", "chimney", "door" and a list
#         "windows"; each has x, y, width, height and its colors.
#       - smoke_params: "seed", "origin" [x, y], "particles_per_tick",
#         "rise_slope", "rise_rate", "wind_direction", "wind_speed", "precision".
#     - Side Effects: Initializes Pygame, opens a window and registers the
#       display surface under surface_id.
#     - Raises: ValueError if a required smoke parameter is missing.
#
#   - draw(self) -> bool:
#     - Outputs: False if the user has closed the window, True otherwise.
#     - Side Effects: Redraws the scene and advances the smoke by one tick.

REQUIRED_SMOKE_KEYS = ("origin", "particles_per_tick", "rise_slope", "rise_rate")

class Visualizer:
    """
    Renders the house scene and drives the chimney smoke.
    """
    def __init__(self, vis_params: Dict[str, Any], house: Dict[str, Any],
                 smoke_params: Dict[str, Any], registry: Optional[SurfaceRegistry] = None):
        missing = [key for key in REQUIRED_SMOKE_KEYS if key not in smoke_params]
        if missing:
            msg = f"Configuration error: smoke section is missing {', '.join(missing)}."
            logging.critical(msg)
            raise ValueError(msg)

        pygame.init()

        width = vis_params.get('width', DEFAULT_WINDOW_WIDTH)
        height = vis_params.get('height', DEFAULT_WINDOW_HEIGHT)
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(vis_params.get('caption', "Smoke Canvas"))
        self.clock = pygame.time.Clock()
        self.fps = vis_params.get('fps', FPS)

        background = vis_params.get('background_color')
        self.background = parse_color(background) if background is not None else None
        if self.background is None:
            if background is not None:
                logging.warning(f"Invalid background color {background!r}. Using default.")
            self.background = pygame.Color(BACKGROUND_COLOR)

        self.registry = registry if registry is not None else default_registry
        self.surface_id = vis_params.get('surface_id', DEFAULT_SURFACE_ID)
        self.registry.register(self.surface_id, self.screen)

        self.house = house
        self.smoke_params = smoke_params
        self.emitter = SmokeEmitter(seed=smoke_params.get('seed'))

        logging.info(f"Visualizer initialized with Pygame display ({width}x{height}).")

    def _draw_house(self) -> None:
        """Draws every configured house part, back to front."""
        sid, reg = self.surface_id, self.registry
        results = []
        # The chimney goes first so the roof covers its base.
        if 'chimney' in self.house:
            c = self.house['chimney']
            results.append(draw_chimney(sid, c['x'], c['y'], c['width'], c['height'],
                                        c['primary'], c['secondary'], registry=reg))
        if 'wall' in self.house:
            w = self.house['wall']
            results.append(draw_wall(sid, w['x'], w['y'], w['width'], w['height'],
                                     w['primary'], w['secondary'], registry=reg))
        if 'roof' in self.house:
            r = self.house['roof']
            results.append(draw_roof(sid, r['x'], r['y'], r['width'], r['height'],
                                     r['primary'], r['secondary'], registry=reg))
        for win in self.house.get('windows', []):
            results.append(draw_window(sid, win['x'], win['y'], win['width'], win['height'],
                                       win['panel_color'], win['frame_color'], registry=reg))
        if 'door' in self.house:
            d = self.house['door']
            results.append(draw_door(sid, d['x'], d['y'], d['width'], d['height'],
                                     d['panel_color'], d['frame_color'], d['knob_color'],
                                     registry=reg))

        failed = sum(1 for status in results if status is not DrawStatus.OK)
        if failed:
            logging.debug(f"{failed} house shapes were not drawn this frame.")

    def draw(self) -> bool:
        """
        Draws the scene and advances the smoke by one tick.

        Returns:
            bool: False if the demo should exit, True otherwise.
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logging.info("Quit event received. Shutting down visualizer.")
                return False

        self.screen.fill(self.background)
        self._draw_house()

        p = self.smoke_params
        origin_x, origin_y = p['origin']
        draw_smoke(
            self.emitter, self.surface_id, origin_x, origin_y,
            p['particles_per_tick'], p['rise_slope'], p['rise_rate'],
            wind_direction=p.get('wind_direction', DEFAULT_WIND_DIRECTION),
            wind_speed=p.get('wind_speed', DEFAULT_WIND_SPEED),
            precision=p.get('precision', DEFAULT_PRECISION),
            registry=self.registry
        )

        pygame.display.flip()
        self.clock.tick(self.fps)
        return True

    def close(self):
        """Releases the display surface and shuts down Pygame."""
        self.registry.unregister(self.surface_id)
        pygame.quit()
