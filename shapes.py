# shapes.py
"""
Primitive shape rendering on named pygame surfaces.

Every public function checks its arguments before drawing. A failed check is
logged with the name of the operation and nothing is drawn; the function
returns a DrawStatus instead of raising, so a render loop keeps running when
one shape is misconfigured.
"""
import enum
import logging
import math
from typing import Dict, Optional

import pygame

from constants import STROKE_WIDTH, DOOR_KNOB_OFFSET_RATIO, DOOR_KNOB_RADIUS_RATIO
from utils import is_finite_number, is_surface_handle, parse_color

# --- Data Contracts ---
#
# class SurfaceRegistry:
#   - register(self, surface_id: str, surface: pygame.Surface) -> None
#     - Raises ValueError for an empty handle or a non-Surface value.
#   - lookup(self, surface_id: str) -> Optional[pygame.Surface]
#     - Returns None if the handle is not registered.
#
# Drawing functions:
#   - Inputs: a surface handle (or a Surface for draw_circle), finite
#     coordinates/sizes and valid colors.
#   - Outputs: DrawStatus.OK, DrawStatus.INVALID_ARGUMENT or
#     DrawStatus.UNKNOWN_SURFACE.
#   - Side Effects: Pixels on the surface change only when OK is returned.


class DrawStatus(enum.Enum):
    """Outcome of a drawing call."""
    OK = "ok"
    INVALID_ARGUMENT = "invalid_argument"
    UNKNOWN_SURFACE = "unknown_surface"

    def __bool__(self):
        return self is DrawStatus.OK


class SurfaceRegistry:
    """
    Maps string handles to pygame surfaces.
    """
    def __init__(self):
        self._surfaces: Dict[str, pygame.Surface] = {}

    def register(self, surface_id: str, surface: pygame.Surface) -> None:
        if not is_surface_handle(surface_id):
            raise ValueError(f"Surface id must be a non-empty string, got {surface_id!r}.")
        if not isinstance(surface, pygame.Surface):
            raise ValueError(f"Cannot register {type(surface).__name__} as surface '{surface_id}'.")
        if surface_id in self._surfaces:
            logging.debug(f"Replacing surface registered as '{surface_id}'.")
        self._surfaces[surface_id] = surface
        logging.debug(f"Surface '{surface_id}' registered ({surface.get_width()}x{surface.get_height()}).")

    def unregister(self, surface_id: str) -> None:
        self._surfaces.pop(surface_id, None)

    def lookup(self, surface_id: str) -> Optional[pygame.Surface]:
        return self._surfaces.get(surface_id)

    def __contains__(self, surface_id) -> bool:
        return surface_id in self._surfaces


# Process-wide registry used when a caller does not pass its own.
default_registry = SurfaceRegistry()


def resolve_surface(operation: str, surface_id, registry: Optional[SurfaceRegistry] = None):
    """
    Looks up a surface handle for a drawing operation.

    Returns:
        Tuple[DrawStatus, Optional[pygame.Surface]]: OK and the surface, or
        the failure status and None. Failures are logged.
    """
    if not is_surface_handle(surface_id):
        logging.warning(f"{operation}: sanity check failed (surface id {surface_id!r}).")
        return DrawStatus.INVALID_ARGUMENT, None
    registry = registry if registry is not None else default_registry
    surface = registry.lookup(surface_id)
    if surface is None:
        logging.warning(f"{operation}: surface id '{surface_id}' does not exist.")
        return DrawStatus.UNKNOWN_SURFACE, None
    return DrawStatus.OK, surface


def _check_numbers(operation: str, **values) -> bool:
    for name, value in values.items():
        if not is_finite_number(value):
            logging.warning(f"{operation}: sanity check failed ({name}={value!r} is not a finite number).")
            return False
    return True


def _check_colors(operation: str, **values):
    colors = {}
    for name, value in values.items():
        color = parse_color(value)
        if color is None:
            logging.warning(f"{operation}: sanity check failed ({name}={value!r} is not a color).")
            return None
        colors[name] = color
    return colors


def clear(surface_id: str, registry: Optional[SurfaceRegistry] = None) -> DrawStatus:
    """Erases the entire surface to transparent black."""
    status, surface = resolve_surface("clear", surface_id, registry)
    if not status:
        return status
    surface.fill((0, 0, 0, 0))
    return DrawStatus.OK


def draw_circle(surface: pygame.Surface, x, y, radius, color) -> DrawStatus:
    """
    Draws a filled circle with no outline.

    Args:
        surface (pygame.Surface): The surface to draw on.
        x (float): x-coordinate of the centre.
        y (float): y-coordinate of the centre.
        radius (float): Circle radius, must not be negative.
        color: Color string or RGB sequence.
    """
    if not isinstance(surface, pygame.Surface):
        logging.warning(f"draw_circle: sanity check failed (surface is {type(surface).__name__}).")
        return DrawStatus.INVALID_ARGUMENT
    if not _check_numbers("draw_circle", x=x, y=y, radius=radius):
        return DrawStatus.INVALID_ARGUMENT
    if radius < 0:
        logging.warning(f"draw_circle: sanity check failed (negative radius {radius}).")
        return DrawStatus.INVALID_ARGUMENT
    colors = _check_colors("draw_circle", color=color)
    if colors is None:
        return DrawStatus.INVALID_ARGUMENT

    width, height = surface.get_size()
    nearest_x = min(max(x, 0), width)
    nearest_y = min(max(y, 0), height)
    if math.hypot(x - nearest_x, y - nearest_y) > radius:
        return DrawStatus.OK
    farthest = max(math.hypot(x - cx, y - cy) for cx in (0, width) for cy in (0, height))
    if radius >= farthest:
        surface.fill(colors["color"])
        return DrawStatus.OK

    try:
        pygame.draw.circle(surface, colors["color"], (x, y), radius)
    except (TypeError, OverflowError, ValueError) as e:
        logging.warning(f"draw_circle: circle at ({x}, {y}) with radius {radius} cannot be drawn: {e}")
        return DrawStatus.INVALID_ARGUMENT
    return DrawStatus.OK


def _visible_rect(surface: pygame.Surface, x, y, width, height):
    """
    Clips a rectangle to the surface plus a stroke-wide margin.

    Edges moved by the clip lie outside the surface, so their outline is never
    visible. Returns None when no part of the rectangle can show.
    """
    left, right = sorted((x, x + width))
    top, bottom = sorted((y, y + height))
    left = max(left, -STROKE_WIDTH)
    top = max(top, -STROKE_WIDTH)
    right = min(right, surface.get_width() + STROKE_WIDTH)
    bottom = min(bottom, surface.get_height() + STROKE_WIDTH)
    if right < left or bottom < top:
        return None
    return pygame.Rect(round(left), round(top), round(right - left), round(bottom - top))


def _outlined_rect(surface: pygame.Surface, x, y, width, height, fill_color, stroke_color) -> None:
    rect = _visible_rect(surface, x, y, width, height)
    if rect is None:
        return
    pygame.draw.rect(surface, fill_color, rect)
    pygame.draw.rect(surface, stroke_color, rect, STROKE_WIDTH)


def draw_rectangle_shape(surface_id: str, x, y, width, height, fill_color, stroke_color,
                         registry: Optional[SurfaceRegistry] = None,
                         operation: str = "draw_rectangle_shape") -> DrawStatus:
    """
    Draws a filled rectangle with a fixed-width outline.

    Windows, walls, roofs and chimneys are all this shape; the aliases below
    only change the name used in log messages.
    """
    if not _check_numbers(operation, x=x, y=y, width=width, height=height):
        return DrawStatus.INVALID_ARGUMENT
    colors = _check_colors(operation, fill_color=fill_color, stroke_color=stroke_color)
    if colors is None:
        return DrawStatus.INVALID_ARGUMENT
    status, surface = resolve_surface(operation, surface_id, registry)
    if not status:
        return status

    _outlined_rect(surface, x, y, width, height, colors["fill_color"], colors["stroke_color"])
    return DrawStatus.OK


def draw_window(surface_id, x, y, width, height, panel_color, frame_color, registry=None) -> DrawStatus:
    return draw_rectangle_shape(surface_id, x, y, width, height, panel_color, frame_color,
                                registry=registry, operation="draw_window")


def draw_wall(surface_id, x, y, width, height, primary, secondary, registry=None) -> DrawStatus:
    return draw_rectangle_shape(surface_id, x, y, width, height, primary, secondary,
                                registry=registry, operation="draw_wall")


def draw_roof(surface_id, x, y, width, height, primary, secondary, registry=None) -> DrawStatus:
    return draw_rectangle_shape(surface_id, x, y, width, height, primary, secondary,
                                registry=registry, operation="draw_roof")


def draw_chimney(surface_id, x, y, width, height, primary, secondary, registry=None) -> DrawStatus:
    return draw_rectangle_shape(surface_id, x, y, width, height, primary, secondary,
                                registry=registry, operation="draw_chimney")


def draw_door(surface_id: str, x, y, width, height, panel_color, frame_color, knob_color,
              registry: Optional[SurfaceRegistry] = None) -> DrawStatus:
    """
    Draws a door: an outlined rectangle plus a round knob.

    The knob is centred at (x + width/5, y + height/2) with radius width/10.
    """
    if not _check_numbers("draw_door", x=x, y=y, width=width, height=height):
        return DrawStatus.INVALID_ARGUMENT
    colors = _check_colors("draw_door", panel_color=panel_color,
                           frame_color=frame_color, knob_color=knob_color)
    if colors is None:
        return DrawStatus.INVALID_ARGUMENT
    knob_radius = abs(width) * DOOR_KNOB_RADIUS_RATIO
    status, surface = resolve_surface("draw_door", surface_id, registry)
    if not status:
        return status

    _outlined_rect(surface, x, y, width, height, colors["panel_color"], colors["frame_color"])
    return draw_circle(
        surface,
        x + width * DOOR_KNOB_OFFSET_RATIO,
        y + height / 2,
        knob_radius,
        colors["knob_color"]
    )
