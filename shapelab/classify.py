# classify.py
# per-contour candidate search over RDP tolerances -> best DetectedShape

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Sequence
import logging

from .config import DetectorConfig, DEFAULT_CONFIG
from .decide import classify_polygon, Thresholds, T
from .features import (
    bounding_box,
    centroid,
    normalized_aspect,
    perimeter,
    polygon_area,
    round_half_up,
)
from .model import DetectedShape, ShapeType
from .simplify import approximate_polygon

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Candidate:
    type: ShapeType
    confidence: float
    polygon: List
    score: float


def vertex_bonus(n: int, config: DetectorConfig = DEFAULT_CONFIG) -> float:
    if n == 3: return config.bonus_3
    if n == 4: return config.bonus_4
    if n == 5: return config.bonus_5
    if 8 <= n <= 12: return config.bonus_8_12
    return 0.0


def contour_passes_filters(contour: Sequence, area: float, image_area: int,
                           config: DetectorConfig = DEFAULT_CONFIG) -> bool:
    if len(contour) < config.min_contour_points:
        return False
    lo, hi = config.area_bounds(image_area)
    if area < lo or area > hi:
        return False
    return normalized_aspect(bounding_box(contour)) >= config.min_aspect


def best_candidate(contour: Sequence, area: float, per: float,
                   config: DetectorConfig = DEFAULT_CONFIG, thresholds: Thresholds = T) -> Optional[Candidate]:
    """Highest-scoring classification over all tolerances; first maximum wins."""
    best: Optional[Candidate] = None
    best_score = 0.0
    for frac in config.epsilon_fractions:
        approx = approximate_polygon(contour, frac * per)
        if approx is None:
            continue
        hit = classify_polygon(approx, area, per, bounding_box(approx), thresholds)
        if hit is None:
            continue
        kind, conf = hit
        score = conf + vertex_bonus(len(approx), config)
        if score > best_score:
            best, best_score = Candidate(kind, conf, approx, score), score
    return best


def classify_contour(contour: Sequence, image_area: int,
                     config: DetectorConfig = DEFAULT_CONFIG, thresholds: Thresholds = T) -> Optional[DetectedShape]:
    """Gate the raw contour, pick its best candidate, report it if confident enough."""
    area = polygon_area(contour)
    if not contour_passes_filters(contour, area, image_area, config):
        return None
    cand = best_candidate(contour, area, perimeter(contour), config, thresholds)
    if cand is None or cand.confidence < config.min_confidence:
        return None
    logger.debug("contour of %d points -> %s %.2f (%d vertices)",
                 len(contour), cand.type.value, cand.confidence, len(cand.polygon))
    return DetectedShape(
        type=cand.type,
        confidence=cand.confidence,
        bounding_box=bounding_box(cand.polygon),
        center=centroid(cand.polygon),
        area=float(round_half_up(area)),
    )
