"""Tests for grayscale conversion and Otsu binarisation."""

import numpy as np
import pytest

from shapelab.binarise import binarise, foreground_ratio, otsu, to_gray
from shapelab.config import DetectorConfig
from shapelab.model import PixelBuffer


def test_to_gray_uses_luma_weights_and_ignores_alpha():
    rgba = np.array([[[255, 0, 0, 0], [0, 255, 0, 255], [0, 0, 255, 17], [255, 255, 255, 255]]], dtype=np.uint8)
    gray = to_gray(PixelBuffer.from_array(rgba))
    assert gray.dtype == np.float32
    assert gray.shape == (1, 4)
    assert gray[0, 0] == pytest.approx(76.245, rel=1e-5)
    assert gray[0, 1] == pytest.approx(149.685, rel=1e-5)
    assert gray[0, 2] == pytest.approx(29.07, rel=1e-5)
    assert gray[0, 3] == pytest.approx(255.0, rel=1e-5)


def test_otsu_two_levels_picks_first_maximum():
    gray = np.array([50.0] * 50 + [200.0] * 50, dtype=np.float32).reshape(10, 10)
    # every t in [50, 199] splits the same way; the first one wins
    assert otsu(gray) == 50


def test_two_level_image_falls_back_to_128():
    gray = np.array([50.0] * 50 + [200.0] * 50, dtype=np.float32).reshape(10, 10)
    # gray < 50 selects nothing, so the Otsu ratio is 0
    fg, thr = binarise(gray)
    assert thr == 128
    assert fg.sum() == 50
    assert np.array_equal(fg, gray < 128)


def test_otsu_threshold_used_when_ratio_is_plausible():
    gray = np.array([40.0] * 20 + [60.0] * 20 + [220.0] * 60, dtype=np.float32).reshape(10, 10)
    assert otsu(gray) == 60
    fg, thr = binarise(gray)
    assert thr == 60
    assert foreground_ratio(gray, thr) == pytest.approx(0.2)
    assert fg.sum() == 20


def test_uniform_image_has_no_foreground():
    gray = np.full((20, 20), 255.0, dtype=np.float32)
    assert otsu(gray) == 0
    fg, thr = binarise(gray)
    assert thr == 128
    assert not fg.any()


def test_ratio_window_is_configurable():
    gray = np.array([40.0] * 20 + [60.0] * 20 + [220.0] * 60, dtype=np.float32).reshape(10, 10)
    _, thr = binarise(gray, DetectorConfig(otsu_ratio_min=0.25))
    assert thr == 128
