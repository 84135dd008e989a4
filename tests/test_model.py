"""Pixel buffer validation and result serialisation."""

import numpy as np
import pytest

from shapelab.model import (
    BoundingBox,
    DetectedShape,
    DetectionResult,
    InvalidImageError,
    PixelBuffer,
    Point,
    ShapeType,
)


def test_from_gray_array():
    img = PixelBuffer.from_array(np.zeros((2, 3), dtype=np.uint8))
    assert (img.width, img.height) == (3, 2)
    rgba = img.rgba()
    assert rgba.shape == (2, 3, 4)
    assert (rgba[:, :, 3] == 255).all()


def test_from_rgb_array():
    arr = np.full((4, 5, 3), 7, dtype=np.uint8)
    assert len(PixelBuffer.from_array(arr).pixels) == 4 * 5 * 4


@pytest.mark.parametrize("width,height,pixels", [
    (2, 2, b"\x00" * 15),
    (2, 2, None),
    (0, 0, b""),
    (2.0, 2, b"\x00" * 16),
])
def test_validate_rejects(width, height, pixels):
    with pytest.raises(InvalidImageError):
        PixelBuffer(width, height, pixels).validate()


def test_invalid_image_is_value_error():
    assert issubclass(InvalidImageError, ValueError)
    with pytest.raises(InvalidImageError):
        PixelBuffer.from_array(np.zeros((2, 2, 2), dtype=np.uint8))


def test_to_dict():
    shape = DetectedShape(ShapeType.CIRCLE, 0.9, BoundingBox(1, 2, 3, 4), Point(2, 4), 12.0)
    res = DetectionResult((shape,), 1.5, 10, 20)
    d = res.to_dict()
    assert set(d) == {"shapes", "processingTimeMs", "imageWidth", "imageHeight"}
    assert d["shapes"][0] == {
        "type": "circle",
        "confidence": 0.9,
        "boundingBox": {"x": 1, "y": 2, "width": 3, "height": 4},
        "center": {"x": 2, "y": 4},
        "area": 12.0,
    }
    assert DetectionResult.empty(10, 20, 0.1).shapes == ()
