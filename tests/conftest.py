"""Shared synthetic images."""

from __future__ import annotations

import pytest

from shapelab.synth import (
    WHITE,
    blank_canvas,
    draw_disk,
    draw_polygon,
    draw_rect,
    regular_polygon,
    star_polygon,
    to_buffer,
)


@pytest.fixture
def white_image():
    return to_buffer(blank_canvas(100, 100))


@pytest.fixture
def circle_image():
    # solid r=40 disk centred in 200x200
    return to_buffer(draw_disk(blank_canvas(200, 200), 100, 100, 40))


@pytest.fixture
def triangle_image():
    tri = regular_polygon(100, 100, 60, 3, rotation_deg=37)
    return to_buffer(draw_polygon(blank_canvas(200, 200), tri))


@pytest.fixture
def star_image():
    star = star_polygon(100, 100, 70, 24, points=5)
    return to_buffer(draw_polygon(blank_canvas(200, 200), star))


@pytest.fixture
def triangle_outline_image():
    # 3px stroke: inner triangle shares the centre, circumradius 2*3 smaller
    canvas = draw_polygon(blank_canvas(200, 200), regular_polygon(100, 100, 60, 3, rotation_deg=37))
    draw_polygon(canvas, regular_polygon(100, 100, 54, 3, rotation_deg=37), colour=WHITE)
    return to_buffer(canvas)


@pytest.fixture
def star_outline_image():
    canvas = draw_polygon(blank_canvas(200, 200), star_polygon(100, 100, 70, 24, points=5))
    draw_polygon(canvas, star_polygon(100, 100, 60, 20, points=5), colour=WHITE)
    return to_buffer(canvas)


@pytest.fixture
def square_and_circle_image():
    canvas = blank_canvas(300, 200)
    draw_rect(canvas, 30, 70, 60, 60)
    draw_disk(canvas, 210, 100, 40)
    return to_buffer(canvas)


@pytest.fixture
def small_square_image():
    return to_buffer(draw_rect(blank_canvas(120, 120), 40, 40, 40, 40))
