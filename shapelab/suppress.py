# suppress.py
# greedy non-maximum suppression on bounding boxes

from typing import List, Sequence

from .features import iou
from .model import DetectedShape


def non_max_suppression(shapes: Sequence[DetectedShape], iou_threshold: float = 0.5) -> List[DetectedShape]:
    """Keep the most confident shape, drop everything overlapping it by more than
    `iou_threshold`, repeat. Equal confidences keep their input order."""
    remaining = sorted(shapes, key=lambda s: s.confidence, reverse=True)
    keep: List[DetectedShape] = []
    while remaining:
        best = remaining.pop(0)
        keep.append(best)
        remaining = [s for s in remaining if iou(best.bounding_box, s.bounding_box) <= iou_threshold]
    return keep
