# features.py
# shared geometry on integer point sequences: area, perimeter, bbox, hull ...

import math
from typing import Sequence, Tuple, List

from .model import BoundingBox, Point

XY = Tuple[float, float]


def round_half_up(v: float) -> int:
    return int(math.floor(v + 0.5))


# --- basic ---
def polygon_area(points: Sequence[XY]) -> float:
    """Shoelace over the closed cycle, unsigned."""
    n = len(points)
    s = 0.0
    for i in range(n):
        x0, y0 = points[i]; x1, y1 = points[(i + 1) % n]
        s += x0 * y1 - x1 * y0
    return abs(s) / 2


def perimeter(points: Sequence[XY]) -> float:
    n = len(points)
    per = 0.0
    for i in range(n):
        x0, y0 = points[i]; x1, y1 = points[(i + 1) % n]
        per += math.hypot(x1 - x0, y1 - y0)
    return per


def bounding_box(points: Sequence[XY]) -> BoundingBox:
    xs = [p[0] for p in points]; ys = [p[1] for p in points]
    x0, y0 = min(xs), min(ys)
    return BoundingBox(x=x0, y=y0, width=max(xs) - x0, height=max(ys) - y0)


def centroid(points: Sequence[XY]) -> Point:
    """Vertex mean, rounded half up."""
    n = len(points)
    return Point(x=round_half_up(sum(p[0] for p in points) / n),
                 y=round_half_up(sum(p[1] for p in points) / n))


def normalized_aspect(bbox: BoundingBox) -> float:
    """min(h/w, w/h); 1 for a zero-width box, 0 for a flat one."""
    if bbox.width <= 0:
        return 1.0
    ratio = bbox.height / bbox.width
    return min(ratio, 1 / ratio) if ratio > 0 else 0.0


def iou(a: BoundingBox, b: BoundingBox) -> float:
    ix = max(0, min(a.x + a.width, b.x + b.width) - max(a.x, b.x))
    iy = max(0, min(a.y + a.height, b.y + b.height) - max(a.y, b.y))
    inter = ix * iy
    union = a.area + b.area - inter
    return inter / union if union > 0 else 0.0


# --- lines & hulls ---
def cross(o: XY, a: XY, b: XY) -> float:
    return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])


def perpendicular_distance(p: XY, a: XY, b: XY) -> float:
    """Distance from p to the infinite line ab; point distance when a == b."""
    dx = b[0] - a[0]; dy = b[1] - a[1]
    norm = math.hypot(dx, dy)
    if norm == 0:
        return math.hypot(p[0] - a[0], p[1] - a[1])
    return abs(dy * p[0] - dx * p[1] + b[0] * a[1] - b[1] * a[0]) / norm


def convex_hull(points: Sequence[XY]) -> List[XY]:
    """Graham scan. Pivot = lowest y then lowest x; ties in angle by distance."""
    if len(points) < 3:
        return list(points)
    px, py = min(points, key=lambda p: (p[1], p[0]))

    def key(p):
        return (math.atan2(p[1] - py, p[0] - px), (p[0] - px) ** 2 + (p[1] - py) ** 2)

    ordered = sorted(points, key=key)
    hull = [ordered[0], ordered[1]]
    for p in ordered[2:]:
        while len(hull) > 1 and cross(hull[-2], hull[-1], p) <= 0:
            hull.pop()
        hull.append(p)
    return hull
