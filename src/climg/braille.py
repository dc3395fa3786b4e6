"""Braille pattern rasterizer using 2x4 dot cells."""

from __future__ import annotations

from collections.abc import Iterator

import numpy as np
from numpy.typing import NDArray

from .grayscale import Raster

BRAILLE_BASE = 0x2800
CELL_WIDTH = 2
CELL_HEIGHT = 4

# Bit weight of each dot, indexed [dy, dx] inside a cell
DOT_WEIGHTS: NDArray[np.uint16] = np.array(
    [
        [1 << 0, 1 << 3],
        [1 << 1, 1 << 4],
        [1 << 2, 1 << 5],
        [1 << 6, 1 << 7],
    ],
    dtype=np.uint16,
)


def braille_char(mask: int) -> str:
    """Return the Braille glyph for an 8-bit dot mask."""
    if not 0 <= mask <= 0xFF:
        raise ValueError(f"Braille mask out of range: {mask}")
    return chr(BRAILLE_BASE + mask)


def binarize(raster: Raster, threshold: int, invert: bool = False) -> NDArray[np.bool_]:
    """Mark samples that become dots.

    A sample is on when it is at or above the threshold, or strictly below it
    when ``invert`` is set.
    """
    if invert:
        return raster.pixels < threshold
    return raster.pixels >= threshold


def cell_masks(dots: NDArray[np.bool_]) -> NDArray[np.uint16]:
    """Pack a boolean dot image into one mask per 2x4 cell.

    The image is padded with off dots up to whole cells, so edge samples are
    never read past the border.

    Returns:
        Array of shape (ceil(h / 4), ceil(w / 2)) holding masks 0..255
    """
    height, width = dots.shape
    rows = -(-height // CELL_HEIGHT)
    cols = -(-width // CELL_WIDTH)

    padded = np.zeros((rows * CELL_HEIGHT, cols * CELL_WIDTH), dtype=np.uint16)
    padded[:height, :width] = dots

    cells = padded.reshape(rows, CELL_HEIGHT, cols, CELL_WIDTH)
    return (cells * DOT_WEIGHTS[np.newaxis, :, np.newaxis, :]).sum(axis=(1, 3), dtype=np.uint16)


def iter_braille_lines(raster: Raster, threshold: int, invert: bool = False) -> Iterator[str]:
    """Yield one line of Braille glyphs per four raster rows, top to bottom.

    Args:
        raster: Grayscale image to draw
        threshold: Binarization threshold 0..255
        invert: Draw dark samples instead of light ones

    Yields:
        Lines of ceil(width / 2) glyphs each
    """
    masks = cell_masks(binarize(raster, threshold, invert))
    for row in masks:
        yield "".join(chr(BRAILLE_BASE + int(mask)) for mask in row)


def render_braille(raster: Raster, threshold: int, invert: bool = False) -> str:
    """Render a raster to newline-separated Braille text."""
    return "\n".join(iter_braille_lines(raster, threshold, invert))
