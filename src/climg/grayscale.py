"""Single-channel rasters and luminance reduction."""

from __future__ import annotations

from dataclasses import dataclass

import cv2
import numpy as np
from numpy.typing import NDArray

from .errors import ImageDecodeError


@dataclass(frozen=True)
class Raster:
    """Read-only grid of 8-bit intensity samples, indexed ``pixels[y, x]``."""

    pixels: NDArray[np.uint8]

    def __post_init__(self) -> None:
        if self.pixels.ndim != 2:
            raise ValueError(f"Raster needs a 2D array, got shape {self.pixels.shape}")
        if self.pixels.dtype != np.uint8:
            raise ValueError(f"Raster needs uint8 samples, got {self.pixels.dtype}")
        pixels = np.array(self.pixels, copy=True)
        pixels.flags.writeable = False
        object.__setattr__(self, "pixels", pixels)

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    @property
    def size(self) -> int:
        return self.pixels.size


def to_grayscale(image: NDArray[np.uint8]) -> Raster:
    """Reduce a BGR, BGRA or single-channel image to luminance.

    Color input uses OpenCV's BT.601 weights (0.299 R + 0.587 G + 0.114 B),
    rounded to the nearest integer. Alpha is ignored.

    Args:
        image: Image in HWC (or HW) format, uint8

    Returns:
        Single-channel raster of the same width and height

    Raises:
        ImageDecodeError: If the sample type or channel count is unsupported
    """
    if image.dtype != np.uint8:
        raise ImageDecodeError(f"unsupported sample type {image.dtype}")

    if image.ndim == 2:
        gray = image
    elif image.ndim == 3 and image.shape[2] == 1:
        gray = image[:, :, 0]
    elif image.ndim == 3 and image.shape[2] == 3:
        gray = cv2.cvtColor(image, cv2.COLOR_BGR2GRAY)
    elif image.ndim == 3 and image.shape[2] == 4:
        gray = cv2.cvtColor(image, cv2.COLOR_BGRA2GRAY)
    else:
        raise ImageDecodeError(f"unsupported image shape {image.shape}")

    return Raster(gray)
