import logging
import math

import pygame
import pytest

from shapes import (
    DrawStatus, SurfaceRegistry, clear, draw_chimney, draw_circle, draw_door,
    draw_rectangle_shape, draw_roof, draw_wall, draw_window, resolve_surface
)

RED = (255, 0, 0)
BLUE = (0, 0, 255)
EMPTY = (0, 0, 0, 0)


def pixel(surface, x, y):
    return tuple(surface.get_at((x, y)))


def test_registry_lookup_returns_none_for_unknown_handle(registry):
    assert registry.lookup("missing") is None
    assert "canvas" in registry


def test_registry_rejects_bad_registrations():
    reg = SurfaceRegistry()
    with pytest.raises(ValueError):
        reg.register("", pygame.Surface((1, 1)))
    with pytest.raises(ValueError):
        reg.register("canvas", "not a surface")


def test_resolve_surface_distinguishes_failures(registry):
    assert resolve_surface("op", "canvas", registry)[0] is DrawStatus.OK
    assert resolve_surface("op", "nope", registry) == (DrawStatus.UNKNOWN_SURFACE, None)
    assert resolve_surface("op", "", registry) == (DrawStatus.INVALID_ARGUMENT, None)
    assert resolve_surface("op", 42, registry) == (DrawStatus.INVALID_ARGUMENT, None)


def test_clear_erases_whole_surface(registry, surface):
    surface.fill(RED)
    assert clear("canvas", registry=registry) is DrawStatus.OK
    assert pixel(surface, 0, 0) == EMPTY
    assert pixel(surface, 199, 199) == EMPTY


def test_clear_unknown_surface_logs_and_returns_status(registry, caplog):
    with caplog.at_level(logging.WARNING):
        assert clear("elsewhere", registry=registry) is DrawStatus.UNKNOWN_SURFACE
    assert "clear" in caplog.text


def test_draw_circle_fills_without_outline(surface):
    assert draw_circle(surface, 100, 100, 10, "#ff0000") is DrawStatus.OK
    assert pixel(surface, 100, 100)[:3] == RED
    assert pixel(surface, 100, 95)[:3] == RED
    assert pixel(surface, 100, 115) == EMPTY


@pytest.mark.parametrize("args", [
    (None, 10, 10, 5, "red"),
    ("canvas", 10, 10, 5, "red"),
])
def test_draw_circle_needs_a_surface(args):
    assert draw_circle(*args) is DrawStatus.INVALID_ARGUMENT


@pytest.mark.parametrize("x, y, radius, color", [
    (math.nan, 10, 5, "red"),
    (10, math.inf, 5, "red"),
    (10, 10, "5", "red"),
    (True, 10, 5, "red"),
    (10, 10, -1, "red"),
    (10, 10, 5, "not-a-color"),
    (10, 10, 5, ""),
    (10, 10, 5, None),
])
def test_draw_circle_rejects_bad_arguments_without_drawing(surface, caplog, x, y, radius, color):
    with caplog.at_level(logging.WARNING):
        assert draw_circle(surface, x, y, radius, color) is DrawStatus.INVALID_ARGUMENT
    assert "draw_circle: sanity check failed" in caplog.text
    assert pygame.mask.from_surface(surface).count() == 0


def test_draw_circle_accepts_rgb_sequences(surface):
    assert draw_circle(surface, 50, 50, 4, (0, 0, 255)) is DrawStatus.OK
    assert pixel(surface, 50, 50)[:3] == BLUE


def test_rectangle_has_fill_and_two_pixel_outline(registry, surface):
    status = draw_rectangle_shape("canvas", 20, 20, 60, 40, "#ff0000", "#0000ff", registry=registry)
    assert status is DrawStatus.OK
    assert pixel(surface, 50, 40)[:3] == RED
    assert pixel(surface, 20, 40)[:3] == BLUE
    assert pixel(surface, 21, 40)[:3] == BLUE
    assert pixel(surface, 22, 40)[:3] == RED
    assert pixel(surface, 50, 20)[:3] == BLUE
    assert pixel(surface, 10, 10) == EMPTY


def test_rectangle_with_negative_size_is_normalised(registry, surface):
    assert draw_rectangle_shape("canvas", 80, 60, -60, -40, "red", "blue", registry=registry) is DrawStatus.OK
    assert pixel(surface, 50, 40)[:3] == RED


@pytest.mark.parametrize("draw", [draw_window, draw_wall, draw_roof, draw_chimney])
def test_house_parts_are_outlined_rectangles(registry, surface, draw):
    assert draw("canvas", 20, 20, 60, 40, "red", "blue", registry=registry) is DrawStatus.OK
    assert pixel(surface, 50, 40)[:3] == RED
    assert pixel(surface, 20, 40)[:3] == BLUE


def test_house_part_logs_its_own_name(registry, caplog):
    with caplog.at_level(logging.WARNING):
        assert draw_chimney("canvas", 0, 0, "wide", 10, "red", "blue", registry=registry) is DrawStatus.INVALID_ARGUMENT
    assert "draw_chimney: sanity check failed" in caplog.text


def test_rectangle_on_unknown_surface(registry):
    status = draw_wall("garage", 0, 0, 10, 10, "red", "blue", registry=registry)
    assert status is DrawStatus.UNKNOWN_SURFACE


def test_door_draws_knob_at_fixed_offset(registry, surface):
    status = draw_door("canvas", 20, 20, 50, 100, "#ff0000", "#0000ff", "#00ff00", registry=registry)
    assert status is DrawStatus.OK
    # knob centre (20 + 50/5, 20 + 100/2), radius 50/10
    assert pixel(surface, 30, 70)[:3] == (0, 255, 0)
    assert pixel(surface, 30, 73)[:3] == (0, 255, 0)
    assert pixel(surface, 50, 70)[:3] == RED
    assert pixel(surface, 20, 50)[:3] == BLUE


def test_door_with_bad_knob_color_draws_nothing(registry, surface):
    status = draw_door("canvas", 20, 20, 50, 100, "red", "blue", 7, registry=registry)
    assert status is DrawStatus.INVALID_ARGUMENT
    assert pygame.mask.from_surface(surface).count() == 0


def test_draw_status_truthiness():
    assert DrawStatus.OK
    assert not DrawStatus.INVALID_ARGUMENT
    assert not DrawStatus.UNKNOWN_SURFACE


HUGE = 1e20


@pytest.mark.parametrize("draw", [draw_rectangle_shape, draw_window, draw_wall, draw_roof, draw_chimney])
@pytest.mark.parametrize("x, y, width, height", [
    (HUGE, 0, 10, 10),
    (-HUGE, 0, 10, 10),
    (0, HUGE, 10, 10),
    (10, 10, HUGE, HUGE),
    (1e308, 1e308, 1e308, 1e308),
    (-1e308, -1e308, -1e308, -1e308),
])
def test_rectangles_with_extreme_coordinates_do_not_raise(registry, draw, x, y, width, height):
    assert draw("canvas", x, y, width, height, "red", "blue", registry=registry) is DrawStatus.OK


def test_offscreen_rectangle_draws_nothing(registry, surface):
    assert draw_wall("canvas", HUGE, 0, 10, 10, "red", "blue", registry=registry) is DrawStatus.OK
    assert pygame.mask.from_surface(surface).count() == 0


def test_huge_rectangle_is_clipped_to_the_surface(registry, surface):
    status = draw_wall("canvas", -HUGE, 50, 2 * HUGE, 20, "red", "blue", registry=registry)
    assert status is DrawStatus.OK
    # left and right edges are far off-surface, so only the top/bottom outline shows
    assert pixel(surface, 0, 60)[:3] == RED
    assert pixel(surface, 199, 60)[:3] == RED
    assert pixel(surface, 100, 50)[:3] == BLUE
    assert pixel(surface, 100, 69)[:3] == BLUE
    assert pixel(surface, 100, 80) == EMPTY


def test_huge_rectangle_keeps_its_visible_edge(registry, surface):
    assert draw_roof("canvas", 20, 20, HUGE, HUGE, "red", "blue", registry=registry) is DrawStatus.OK
    assert pixel(surface, 20, 100)[:3] == BLUE
    assert pixel(surface, 100, 100)[:3] == RED
    assert pixel(surface, 199, 199)[:3] == RED


@pytest.mark.parametrize("x, y, radius", [
    (HUGE, 10, 5),
    (-HUGE, -HUGE, 5),
    (10, 10, HUGE),
    (1e308, 1e308, 1e308),
])
def test_circles_with_extreme_values_do_not_raise(surface, x, y, radius):
    assert draw_circle(surface, x, y, radius, "red") is DrawStatus.OK


def test_circle_covering_the_surface_fills_it(surface):
    assert draw_circle(surface, 100, 100, HUGE, "#0000ff") is DrawStatus.OK
    assert pixel(surface, 0, 0)[:3] == BLUE
    assert pixel(surface, 199, 199)[:3] == BLUE


def test_offscreen_circle_draws_nothing(surface):
    assert draw_circle(surface, -HUGE, 100, 10, "red") is DrawStatus.OK
    assert pygame.mask.from_surface(surface).count() == 0


@pytest.mark.parametrize("x, y, width, height", [
    (HUGE, HUGE, 50, 100),
    (0, 0, HUGE, HUGE),
    (-1e308, 0, 1e308, 1e308),
])
def test_doors_with_extreme_values_do_not_raise(registry, x, y, width, height):
    status = draw_door("canvas", x, y, width, height, "red", "blue", "green", registry=registry)
    assert status is DrawStatus.OK
