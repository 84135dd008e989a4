# synth.py
# synthetic shape images: white canvas, solid dark shapes

from __future__ import annotations
from typing import List, Sequence, Tuple
import math
import numpy as np
from skimage.draw import disk, polygon as fill_polygon, rectangle

from .model import PixelBuffer

Point = Tuple[float, float]
BLACK = (0, 0, 0, 255)
WHITE = (255, 255, 255, 255)


def blank_canvas(width: int, height: int, colour=(255, 255, 255, 255)) -> np.ndarray:
    canvas = np.empty((height, width, 4), dtype=np.uint8)
    canvas[:, :] = colour
    return canvas

def regular_polygon(cx: float, cy: float, radius: float, sides: int, rotation_deg: float = 0.0) -> List[Point]:
    """Vertices (x, y) on a circle, first one straight up before rotation."""
    pts = []
    for k in range(sides):
        a = math.radians(rotation_deg) + 2 * math.pi * k / sides - math.pi / 2
        pts.append((cx + radius * math.cos(a), cy + radius * math.sin(a)))
    return pts

def star_polygon(cx: float, cy: float, outer: float, inner: float, points: int = 5,
                 rotation_deg: float = 0.0) -> List[Point]:
    """Alternating tip/notch vertices, first tip straight up before rotation."""
    pts = []
    for k in range(2 * points):
        r = outer if k % 2 == 0 else inner
        a = math.radians(rotation_deg) + math.pi * k / points - math.pi / 2
        pts.append((cx + r * math.cos(a), cy + r * math.sin(a)))
    return pts

def draw_polygon(canvas: np.ndarray, vertices: Sequence[Point], colour=BLACK) -> np.ndarray:
    xs = [p[0] for p in vertices]; ys = [p[1] for p in vertices]
    rr, cc = fill_polygon(ys, xs, shape=canvas.shape[:2])
    canvas[rr, cc] = colour
    return canvas

def draw_disk(canvas: np.ndarray, cx: float, cy: float, radius: float, colour=BLACK) -> np.ndarray:
    rr, cc = disk((cy, cx), radius, shape=canvas.shape[:2])
    canvas[rr, cc] = colour
    return canvas

def to_buffer(canvas: np.ndarray) -> PixelBuffer:
    return PixelBuffer.from_array(canvas)

def draw_rect(canvas: np.ndarray, x: int, y: int, width: int, height: int, colour=BLACK) -> np.ndarray:
    """Axis-aligned block covering x..x+width-1, y..y+height-1."""
    rr, cc = rectangle(start=(y, x), end=(y + height - 1, x + width - 1), shape=canvas.shape[:2])
    canvas[rr, cc] = colour
    return canvas
