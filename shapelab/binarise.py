# binarise.py
# grayscale & thresholding

import logging
import numpy as np

from .config import DetectorConfig, DEFAULT_CONFIG
from .model import PixelBuffer

logger = logging.getLogger(__name__)


def to_gray(image: PixelBuffer) -> np.ndarray:
    """Luma 0.299R + 0.587G + 0.114B, alpha ignored. float32 (H, W)."""
    rgba = image.rgba().astype(np.float64)
    gray = 0.299 * rgba[:, :, 0] + 0.587 * rgba[:, :, 1] + 0.114 * rgba[:, :, 2]
    return gray.astype(np.float32)


def _histogram(gray: np.ndarray) -> np.ndarray:
    # round half up, clamp to [0,255]
    bins = np.clip(np.floor(gray.astype(np.float64) + 0.5), 0, 255).astype(np.int64)
    return np.bincount(bins.ravel(), minlength=256).astype(np.float64)


def otsu(gray: np.ndarray) -> int:
    hist = _histogram(gray)
    total = gray.size
    if total == 0:
        return 0
    hist /= total
    max_val = int(np.nonzero(hist)[0].max())
    levels = np.arange(max_val + 1, dtype=np.float64)
    sum_total = float(np.dot(levels, hist[:max_val + 1]))
    w_total = float(hist[:max_val + 1].sum())
    w0 = s0 = 0.0; var_max = 0.0; thr = 0
    for t in range(max_val + 1):
        w0 += hist[t]; s0 += t * hist[t]
        w1 = w_total - w0
        mu0 = s0 / w0 if w0 > 0 else 0.0
        mu1 = (sum_total - s0) / w1 if w1 > 0 else 0.0
        var_between = w0 * w1 * (mu0 - mu1) ** 2
        if var_between > var_max: var_max, thr = var_between, t
    return thr


def foreground_ratio(gray: np.ndarray, threshold: float) -> float:
    if gray.size == 0:
        return 0.0
    return float(np.count_nonzero(gray < threshold)) / gray.size


def binarise(gray: np.ndarray, config: DetectorConfig = DEFAULT_CONFIG) -> tuple[np.ndarray, int]:
    """Dark = foreground. Falls back to a fixed threshold when Otsu picks a near-empty/near-full split."""
    thr = otsu(gray)
    ratio = foreground_ratio(gray, thr)
    if not (config.otsu_ratio_min < ratio < config.otsu_ratio_max):
        logger.debug("otsu threshold %d gives foreground ratio %.3f; using %d", thr, ratio, config.fallback_threshold)
        thr = config.fallback_threshold
    fg = gray < thr   # black = foreground
    return fg, thr
