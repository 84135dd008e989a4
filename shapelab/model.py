# model.py
# pixel buffer in, detection result out

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple
import numpy as np


class InvalidImageError(ValueError):
    """Pixel buffer whose size does not match its declared dimensions."""


class ShapeType(str, Enum):
    # squares are reported as RECTANGLE
    CIRCLE = "circle"
    TRIANGLE = "triangle"
    RECTANGLE = "rectangle"
    PENTAGON = "pentagon"
    STAR = "star"


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class BoundingBox:
    x: int
    y: int
    width: int
    height: int

    @property
    def area(self) -> int:
        return self.width * self.height


@dataclass(frozen=True)
class PixelBuffer:
    """RGBA raster, row-major, 4 bytes per pixel."""
    width: int
    height: int
    pixels: bytes

    def validate(self) -> None:
        if not isinstance(self.width, (int, np.integer)) or not isinstance(self.height, (int, np.integer)):
            raise InvalidImageError(f"dimensions must be integers, got {self.width!r}x{self.height!r}")
        if self.width <= 0 or self.height <= 0:
            raise InvalidImageError(f"empty image {self.width}x{self.height}")
        expected = self.width * self.height * 4
        if self.pixels is None or len(self.pixels) != expected:
            got = None if self.pixels is None else len(self.pixels)
            raise InvalidImageError(f"expected {expected} RGBA bytes, got {got}")

    def rgba(self) -> np.ndarray:
        """(H, W, 4) uint8 view of the pixels."""
        self.validate()
        return np.frombuffer(bytes(self.pixels), dtype=np.uint8).reshape(self.height, self.width, 4)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> "PixelBuffer":
        """Accepts (H,W,4) RGBA, (H,W,3) RGB or (H,W) gray uint8 arrays."""
        arr = np.asarray(arr)
        if arr.ndim == 2:
            arr = np.repeat(arr[:, :, None], 3, axis=2)
        if arr.ndim != 3 or arr.shape[2] not in (3, 4):
            raise InvalidImageError(f"unsupported array shape {arr.shape}")
        if arr.shape[2] == 3:
            alpha = np.full(arr.shape[:2] + (1,), 255, dtype=np.uint8)
            arr = np.concatenate([arr.astype(np.uint8), alpha], axis=2)
        h, w = arr.shape[:2]
        return cls(width=int(w), height=int(h), pixels=np.ascontiguousarray(arr, dtype=np.uint8).tobytes())


@dataclass(frozen=True)
class DetectedShape:
    type: ShapeType
    confidence: float
    bounding_box: BoundingBox
    center: Point
    area: float

    def to_dict(self) -> dict:
        b = self.bounding_box
        return {
            "type": self.type.value,
            "confidence": float(self.confidence),
            "boundingBox": {"x": b.x, "y": b.y, "width": b.width, "height": b.height},
            "center": {"x": self.center.x, "y": self.center.y},
            "area": float(self.area),
        }


@dataclass(frozen=True)
class DetectionResult:
    shapes: Tuple[DetectedShape, ...] = ()
    processing_time_ms: float = 0.0
    image_width: int = 0
    image_height: int = 0

    @classmethod
    def empty(cls, width: int, height: int, elapsed_ms: float) -> "DetectionResult":
        return cls(shapes=(), processing_time_ms=elapsed_ms, image_width=width, image_height=height)

    def to_dict(self) -> dict:
        return {
            "shapes": [s.to_dict() for s in self.shapes],
            "processingTimeMs": float(self.processing_time_ms),
            "imageWidth": self.image_width,
            "imageHeight": self.image_height,
        }
