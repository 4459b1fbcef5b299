# utils.py
"""
Utility functions for the drawing framework.

This module provides helpers used across the renderer, the smoke engine and
the demo: logging setup, config loading, and the argument checks every
drawing call performs before touching a surface.
"""
import logging
import logging.handlers
import json
import math
import numbers
import os
from typing import Dict, Any

import pygame

# --- Data Contracts ---
#
# setup_logging(config: Dict[str, Any]) -> None:
#   - Inputs:
#     - config: A dictionary containing a "logging" key with "level",
#       "format", and "log_file" sub-keys.
#   - Outputs: None
#   - Side Effects: Configures the root Python logger. Creates a log
#     directory if it doesn't exist. Sets up a console handler and a
#     rotating file handler.
#
# is_finite_number(value: Any) -> bool:
#   - True for real, finite numbers. Booleans are rejected.
#
# parse_color(value: Any) -> Optional[pygame.Color]:
#   - Returns a pygame.Color for a valid color string ("#rrggbb", "red", ...)
#     or an RGB(A) sequence of 0-255 ints, None otherwise. Never raises.

def setup_logging(config: Dict[str, Any]) -> None:
    """
    Configures the logging system from a configuration dictionary.

    Sets up logging to both the console and a rotating file.
    """
    log_config = config.get('logging', {})
    log_level = log_config.get('level', 'INFO').upper()
    log_format = log_config.get('format', '%(asctime)s - %(levelname)s - %(message)s')
    log_file_path = log_config.get('log_file', 'logs/smoke_canvas.log')

    # Ensure the log directory exists
    log_dir = os.path.dirname(log_file_path)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    logger = logging.getLogger()
    logger.setLevel(log_level)

    # Clear existing handlers to avoid duplication
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(log_format)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # Rotates when the log reaches 1MB, keeps 5 backup logs.
    file_handler = logging.handlers.RotatingFileHandler(
        log_file_path, maxBytes=1024*1024, backupCount=5
    )
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    logging.info("Logging system initialized.")
    logging.debug(f"Log level set to {log_level}.")
    logging.debug(f"Log file path: {log_file_path}")

def load_config(path: str) -> Dict[str, Any]:
    """Loads a JSON configuration file."""
    logging.info(f"Loading configuration from {path}...")
    try:
        with open(path, 'r') as f:
            config = json.load(f)
        logging.info("Configuration loaded successfully.")
        return config
    except FileNotFoundError:
        logging.error(f"Configuration file not found at {path}.")
        raise
    except json.JSONDecodeError:
        logging.error(f"Error decoding JSON from {path}.")
        raise

def is_finite_number(value: Any) -> bool:
    """Returns True if value is a real, finite number (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value)

def is_surface_handle(value: Any) -> bool:
    """Returns True if value can name a surface in a registry."""
    return isinstance(value, str) and value != ""

def parse_color(value: Any):
    """
    Converts a color argument into a pygame.Color.

    Accepts anything pygame understands as a color name or hex string, and
    RGB/RGBA sequences of 0-255 integers such as the ones stored in config.

    Returns:
        Optional[pygame.Color]: The parsed color, or None if it is invalid.
    """
    if isinstance(value, pygame.Color):
        return pygame.Color(value)
    if isinstance(value, str):
        if not value:
            return None
        try:
            return pygame.Color(value)
        except ValueError:
            return None
    if isinstance(value, (tuple, list)) and len(value) in (3, 4):
        if all(isinstance(c, numbers.Integral) and not isinstance(c, bool) and 0 <= c <= 255 for c in value):
            return pygame.Color(*[int(c) for c in value])
    return None
