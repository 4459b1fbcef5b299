# constants.py
"""
Application-level constants.

These values are static and do not change between runs. They describe the
drawing framework itself (stroke widths, particle size, fallback window size)
rather than a particular scene, which is configured in `config.json`.
"""

# Visualization settings
DEFAULT_WINDOW_WIDTH = 400
DEFAULT_WINDOW_HEIGHT = 300
FPS = 10 # One smoke tick per tenth of a second
BACKGROUND_COLOR = (135, 206, 235) # Sky Blue
DEFAULT_SURFACE_ID = "scene"

# --- Shape Rendering ---
# Outline width for every rectangle-based shape.
STROKE_WIDTH = 2
# A door knob sits one fifth of the way in, half way down.
DOOR_KNOB_OFFSET_RATIO = 1 / 5
DOOR_KNOB_RADIUS_RATIO = 1 / 10

# --- Smoke Effect ---
SMOKE_PARTICLE_RADIUS = 5
DEFAULT_WIND_DIRECTION = "left"
DEFAULT_WIND_SPEED = 0
# 1.0 = fully uniform motion, 0.0 = maximal randomness.
DEFAULT_PRECISION = 0.8
WIND_LEFT = "left"
WIND_RIGHT = "right"
