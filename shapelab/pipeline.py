# pipeline.py
# Orchestration: pixel buffer -> gray -> mask -> contours -> shapes -> NMS

from __future__ import annotations
import logging
import numbers
import time
from typing import List

from .binarise import binarise, to_gray
from .classify import classify_contour
from .config import DetectorConfig, DEFAULT_CONFIG
from .contours import trace_contours
from .decide import Thresholds, T
from .model import DetectedShape, DetectionResult, InvalidImageError, PixelBuffer
from .suppress import non_max_suppression

logger = logging.getLogger(__name__)


def _dims(image) -> tuple[int, int]:
    w = getattr(image, "width", 0); h = getattr(image, "height", 0)
    return (int(w) if isinstance(w, numbers.Integral) else 0), (int(h) if isinstance(h, numbers.Integral) else 0)


class ShapeDetector:
    """Runs the full detection pipeline. Holds configuration only; every call
    allocates its own gray/binary/visited buffers."""

    def __init__(self, config: DetectorConfig | None = None, thresholds: Thresholds | None = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self.thresholds = thresholds or T

    def find_shapes(self, image: PixelBuffer) -> List[DetectedShape]:
        """Stages without the error boundary; raises on malformed input."""
        image.validate()
        gray = to_gray(image)
        fg, thr = binarise(gray, self.config)
        logger.debug("threshold %d, %d foreground pixels", thr, int(fg.sum()))
        contours = trace_contours(fg, self.config.min_contour_points)
        image_area = image.width * image.height
        shapes = []
        for contour in contours:
            shape = classify_contour(contour, image_area, self.config, self.thresholds)
            if shape is not None:
                shapes.append(shape)
        kept = non_max_suppression(shapes, self.config.nms_iou)
        logger.debug("%d contours, %d shapes, %d after suppression", len(contours), len(shapes), len(kept))
        return kept

    def detect(self, image: PixelBuffer) -> DetectionResult:
        start = time.perf_counter()
        width, height = _dims(image)
        try:
            shapes = self.find_shapes(image)
        except InvalidImageError as e:
            logger.warning("malformed image: %s", e)
            return DetectionResult.empty(width, height, (time.perf_counter() - start) * 1000)
        except Exception:
            logger.exception("detection failed on %dx%d image", width, height)
            return DetectionResult.empty(width, height, (time.perf_counter() - start) * 1000)
        elapsed = (time.perf_counter() - start) * 1000
        logger.info("detected %d shapes in %dx%d image in %.1fms", len(shapes), width, height, elapsed)
        return DetectionResult(shapes=tuple(shapes), processing_time_ms=elapsed,
                               image_width=width, image_height=height)


_default = ShapeDetector()


def detect(image: PixelBuffer) -> DetectionResult:
    return _default.detect(image)
