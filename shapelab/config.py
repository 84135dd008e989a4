# config.py
# pipeline tunables (one place); classifier thresholds live in decide.py

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class DetectorConfig:
    """Controls binarisation, contour gating, candidate search and NMS."""

    # Binariser: Otsu is trusted only when its foreground ratio is inside this open window
    otsu_ratio_min: float = 0.05
    otsu_ratio_max: float = 0.50
    fallback_threshold: int = 128

    # Contour gating
    min_contour_points: int = 10
    min_area_px: float = 50.0
    min_area_frac: float = 0.0005   # of image area
    max_area_frac: float = 0.90
    min_aspect: float = 0.15        # min(h/w, w/h) of the contour bbox

    # RDP tolerances as fractions of contour perimeter
    epsilon_fractions: Tuple[float, ...] = (
        0.008, 0.010, 0.012, 0.015, 0.020, 0.025, 0.030, 0.035, 0.040, 0.045, 0.050,
    )

    # Candidate score = confidence + bonus by vertex count
    bonus_3: float = 0.30
    bonus_4: float = 0.25
    bonus_5: float = 0.10
    bonus_8_12: float = 0.08
    min_confidence: float = 0.55

    # Duplicate suppression
    nms_iou: float = 0.5

    def area_bounds(self, image_area: int) -> Tuple[float, float]:
        lo = max(self.min_area_px, image_area * self.min_area_frac)
        return lo, image_area * self.max_area_frac


DEFAULT_CONFIG = DetectorConfig()
