# shapelab/__init__.py

# Data model
from .model import (
    PixelBuffer,
    DetectedShape,
    DetectionResult,
    BoundingBox,
    Point,
    ShapeType,
    InvalidImageError,
)

# Configuration
from .config import DetectorConfig, DEFAULT_CONFIG
from .decide import Thresholds  # classifier cut-offs, passed to ShapeDetector

# Stages
from .binarise import to_gray, otsu, binarise
from .contours import trace_contours
from .features import (
    polygon_area,
    perimeter,
    bounding_box,
    centroid,
    convex_hull,
    perpendicular_distance,
    iou,
)
from .simplify import rdp, approximate_polygon
from .decide import classify_polygon
from .classify import classify_contour
from .suppress import non_max_suppression

# Pipeline
from .pipeline import ShapeDetector, detect

# I/O
from .io_save_load import load_rgba, save_json

# Synthetic images
from .synth import (
    blank_canvas,
    regular_polygon,
    star_polygon,
    draw_polygon,
    draw_disk,
    draw_rect,
    to_buffer,
)
