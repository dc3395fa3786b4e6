"""Global binarization threshold by Otsu's method."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from .grayscale import Raster

HISTOGRAM_BINS = 256
# Returned for rasters with no pixels
EMPTY_THRESHOLD = 128


def histogram(raster: Raster) -> NDArray[np.int64]:
    """Count pixels per intensity value; always 256 entries."""
    return np.bincount(raster.pixels.ravel(), minlength=HISTOGRAM_BINS).astype(np.int64)


def otsu_threshold_from_histogram(hist: NDArray[np.int64]) -> int:
    """Pick the threshold maximizing between-class variance for a histogram.

    Candidates are scanned from 0 upward and only a strictly larger variance
    replaces the current best, so ties go to the lowest threshold. A histogram
    with a single populated bucket never yields a valid split and returns 0.

    Args:
        hist: 256 pixel counts indexed by intensity

    Returns:
        Threshold in 0..255
    """
    if len(hist) != HISTOGRAM_BINS:
        raise ValueError(f"histogram must have {HISTOGRAM_BINS} bins, got {len(hist)}")

    counts = [float(h) for h in hist]
    total = sum(counts)
    if total == 0:
        return EMPTY_THRESHOLD

    sum_total = sum(i * h for i, h in enumerate(counts))

    sum_b = 0.0
    w_b = 0.0
    max_var = -1.0
    threshold = 0

    for t, h in enumerate(counts):
        w_b += h
        if w_b == 0:
            continue
        w_f = total - w_b
        if w_f == 0:
            break
        sum_b += t * h

        m_b = sum_b / w_b
        m_f = (sum_total - sum_b) / w_f

        var_between = w_b * w_f * (m_b - m_f) * (m_b - m_f)
        if var_between > max_var:
            max_var = var_between
            threshold = t

    return threshold


def otsu_threshold(raster: Raster) -> int:
    """Compute the Otsu threshold of a grayscale raster (128 if it is empty)."""
    if raster.size == 0:
        return EMPTY_THRESHOLD
    return otsu_threshold_from_histogram(histogram(raster))
