"""Decision rules on hand-built polygons."""

import pytest

from shapelab.decide import Thresholds, classify_polygon, shape_metrics, star_profile
from shapelab.features import bounding_box, perimeter, polygon_area
from shapelab.model import ShapeType
from shapelab.synth import regular_polygon, star_polygon

SQUARE = [(0, 0), (50, 0), (50, 50), (0, 50)]


def _classify(poly, area=None, per=None, **kw):
    area = polygon_area(poly) if area is None else area
    per = perimeter(poly) if per is None else per
    return classify_polygon(poly, area, per, bounding_box(poly), **kw)


def test_triangle():
    kind, conf = _classify([(0, 0), (100, 0), (50, 86)])
    assert kind is ShapeType.TRIANGLE
    assert conf == pytest.approx(0.95)


def test_square_is_reported_as_rectangle():
    kind, conf = _classify(SQUARE, 2500, 200)
    assert kind is ShapeType.RECTANGLE
    assert conf == pytest.approx(0.95)
    assert "square" not in {t.value for t in ShapeType}


def test_square_with_closing_vertex():
    kind, conf = _classify(SQUARE + [(0, 1)], 2500, 200)
    assert kind is ShapeType.RECTANGLE
    assert conf == pytest.approx(0.90)


def test_four_vertex_triangle():
    # apex split in two by the contour start
    poly = [(0, 0), (100, 0), (51, 86), (50, 86)]
    kind, conf = _classify(poly, 4343, 300)
    assert kind is ShapeType.TRIANGLE
    assert conf == pytest.approx(0.85)


def test_regular_pentagon():
    kind, conf = _classify(regular_polygon(100, 100, 50, 5))
    assert kind is ShapeType.PENTAGON
    assert conf == pytest.approx(0.95)


def test_hexagon_counts_as_noisy_pentagon():
    kind, conf = _classify(regular_polygon(100, 100, 50, 6))
    assert kind is ShapeType.PENTAGON
    assert conf == pytest.approx(0.88)


def test_many_sided_polygon_is_a_circle():
    kind, conf = _classify(regular_polygon(100, 100, 50, 16))
    assert kind is ShapeType.CIRCLE
    assert 0.9 <= conf <= 0.95


def test_star():
    star = star_polygon(100, 100, 60, 24)
    ratio, alternation = star_profile(star)
    assert ratio == pytest.approx(2.5)
    assert alternation == 1.0
    kind, conf = _classify(star)
    assert kind is ShapeType.STAR
    assert conf == pytest.approx(0.90)


def test_loose_rectangle_fallback():
    # area well below the hull: not solid, still a plausible quad
    kind, conf = _classify(SQUARE, 1750, 400)
    assert kind is ShapeType.RECTANGLE
    assert conf == 0.60


def test_nothing_fits():
    assert _classify(SQUARE, 100, 200) is None


def test_metrics():
    m = shape_metrics(SQUARE, 2500, 200, bounding_box(SQUARE))
    assert m.vertices == 4
    assert m.convexity == pytest.approx(1.0)
    assert m.extent == pytest.approx(1.0)
    assert m.aspect == 1.0
    assert m.circularity == pytest.approx(0.785, abs=1e-3)


def test_thresholds_are_overridable():
    strict = Thresholds(SOLID_CONVEXITY_MIN=1.5, LOOSE_TRI_CONVEXITY_MIN=1.5)
    assert _classify([(0, 0), (100, 0), (50, 86)], t=strict) is None
