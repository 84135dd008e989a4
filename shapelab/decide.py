# decide.py
# Decision rules mapping one simplified polygon to (shape type, confidence).
# Raw geometry lives in features.py; gating thresholds are tuned here.

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple
import math

from .features import (
    centroid,
    convex_hull,
    normalized_aspect,
    polygon_area,
)
from .model import BoundingBox, ShapeType

# ---------------------------
# Tunable thresholds (one place)
# ---------------------------

@dataclass(frozen=True)
class Thresholds:
    # Solid (convex) polygons
    SOLID_CONVEXITY_MIN: float = 0.75
    # 4 vertices that are really a triangle
    QUAD_TRI_CIRC_MAX: float = 0.65
    QUAD_TRI_EXTENT_MAX: float = 0.60

    # 5 vertices that are really a rectangle
    SQUARELIKE_CIRC_MIN: float = 0.75
    SQUARELIKE_EXTENT_MIN: float = 0.95
    SQUARELIKE_ASPECT_MIN: float = 0.95
    RECTLIKE_EXTENT_MIN: float = 0.85
    RECTLIKE_CIRC_RANGE: Tuple[float, float] = (0.50, 0.80)
    ROTRECT_CIRC_RANGE: Tuple[float, float] = (0.50, 0.70)
    ROTRECT_CONVEXITY_MIN: float = 0.90
    ROTRECT_EXTENT_MAX: float = 0.70

    # Circle
    CIRCLE_CIRC_MIN: float = 0.75
    CIRCLE_EXTENT_MIN: float = 0.65

    # Star
    STAR_VERTICES: Tuple[int, int] = (8, 12)
    STAR_CONVEXITY_RANGE: Tuple[float, float] = (0.30, 0.75)
    STAR_RATIO_MIN: float = 1.15
    STAR_ALTERNATION_MIN: float = 0.5

    # Relaxed fallbacks
    LOOSE_CIRCLE_CIRC_MIN: float = 0.60
    LOOSE_CIRCLE_EXTENT_MIN: float = 0.55
    LOOSE_TRI_CONVEXITY_MIN: float = 0.60
    LOOSE_POLY_CONVEXITY_MIN: float = 0.65

T = Thresholds()

# ---------------------------
# Metrics
# ---------------------------

@dataclass(frozen=True)
class ShapeMetrics:
    vertices: int
    circularity: float    # 4*pi*A / P^2
    aspect: float         # normalised bbox aspect, <= 1
    convexity: float      # A / hull area
    extent: float         # A / bbox area


def shape_metrics(polygon: Sequence, area: float, perimeter: float, bbox: BoundingBox) -> ShapeMetrics:
    """`area` and `perimeter` come from the raw contour, `bbox` from the polygon."""
    circularity = 4 * math.pi * area / (perimeter * perimeter) if perimeter > 0 else 0.0
    hull_area = polygon_area(convex_hull(polygon))
    convexity = area / hull_area if hull_area > 0 else 0.0
    extent = area / bbox.area if bbox.area > 0 else 0.0
    return ShapeMetrics(len(polygon), circularity, normalized_aspect(bbox), convexity, extent)


def star_profile(polygon: Sequence) -> Tuple[float, float]:
    """(long/short radius ratio, fraction of vertices that are radial extrema)."""
    c = centroid(polygon)
    dist = [math.hypot(x - c.x, y - c.y) for x, y in polygon]
    n = len(dist)
    alternations = 0
    for i in range(n):
        prev, cur, nxt = dist[i - 1], dist[i], dist[(i + 1) % n]
        if (cur > prev and cur > nxt) or (cur < prev and cur < nxt):
            alternations += 1
    ordered = sorted(dist)
    short = ordered[n // 4] or 1
    long_ = ordered[3 * n // 4]
    return long_ / short, alternations / n


# ---------------------------
# Decision procedure
# ---------------------------

def classify_polygon(
    polygon: Sequence,
    area: float,
    perimeter: float,
    bbox: BoundingBox,
    t: Thresholds = T,
) -> Optional[Tuple[ShapeType, float]]:
    """Ordered rules: solid polygons, circle, star, relaxed fallbacks. None if nothing fits."""
    m = shape_metrics(polygon, area, perimeter, bbox)
    v, circ, conv, ext = m.vertices, m.circularity, m.convexity, m.extent

    if conv > t.SOLID_CONVEXITY_MIN:
        if v == 3:
            return ShapeType.TRIANGLE, min(0.95, 0.80 + 0.15 * conv)
        if v == 4:
            if circ < t.QUAD_TRI_CIRC_MAX and ext < t.QUAD_TRI_EXTENT_MAX:
                # triangle whose contour start added a fourth vertex
                return ShapeType.TRIANGLE, min(0.85, 0.70 + 0.15 * conv)
            return ShapeType.RECTANGLE, min(0.95, 0.80 + 0.15 * conv)
        if v == 5:
            square_like = circ > t.SQUARELIKE_CIRC_MIN and ext > t.SQUARELIKE_EXTENT_MIN and m.aspect > t.SQUARELIKE_ASPECT_MIN
            rect_like = ext > t.RECTLIKE_EXTENT_MIN and t.RECTLIKE_CIRC_RANGE[0] < circ < t.RECTLIKE_CIRC_RANGE[1]
            rotated_rect = (t.ROTRECT_CIRC_RANGE[0] < circ < t.ROTRECT_CIRC_RANGE[1]
                            and conv > t.ROTRECT_CONVEXITY_MIN and ext < t.ROTRECT_EXTENT_MAX)
            if square_like or rect_like or rotated_rect:
                return ShapeType.RECTANGLE, min(0.90, 0.75 + 0.15 * conv)
            return ShapeType.PENTAGON, min(0.95, 0.75 + 0.20 * conv)
        if v == 6:
            # one noise vertex on a pentagon
            return ShapeType.PENTAGON, min(0.88, 0.70 + 0.18 * conv)

    if circ > t.CIRCLE_CIRC_MIN and ext > t.CIRCLE_EXTENT_MIN:
        return ShapeType.CIRCLE, min(0.95, 0.70 + 0.25 * circ)

    lo_v, hi_v = t.STAR_VERTICES
    lo_c, hi_c = t.STAR_CONVEXITY_RANGE
    if lo_v <= v <= hi_v and lo_c <= conv <= hi_c:
        ratio, alternation = star_profile(polygon)
        if ratio > t.STAR_RATIO_MIN and alternation > t.STAR_ALTERNATION_MIN:
            return ShapeType.STAR, min(0.90, 0.60 + 0.20 * (ratio - 1) + 0.10 * alternation)

    if circ > t.LOOSE_CIRCLE_CIRC_MIN and ext > t.LOOSE_CIRCLE_EXTENT_MIN:
        return ShapeType.CIRCLE, 0.60
    if v == 3 and conv > t.LOOSE_TRI_CONVEXITY_MIN:
        return ShapeType.TRIANGLE, min(0.75, 0.55 + 0.20 * conv)
    if v == 4 and conv > t.LOOSE_POLY_CONVEXITY_MIN:
        return ShapeType.RECTANGLE, 0.60
    if v == 5 and conv > t.LOOSE_POLY_CONVEXITY_MIN:
        return ShapeType.PENTAGON, 0.60
    return None
