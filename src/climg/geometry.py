"""Fit an image into the Braille sub-pixel grid of a terminal."""

from __future__ import annotations

import math
from typing import NamedTuple

from loguru import logger

from .errors import GeometryError
from .terminal import TerminalGeometry

# Each Braille glyph covers 2x4 sub-pixels
DOTS_PER_COLUMN = 2
DOTS_PER_ROW = 4


class TargetResolution(NamedTuple):
    width: int
    height: int


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def fit_resolution(
    source_width: int,
    source_height: int,
    geometry: TerminalGeometry,
    reserved_rows: int = 2,
    min_rows: int = 3,
) -> TargetResolution:
    """Compute the pixel size the image should be resampled to.

    The longer side of the image fills the matching side of the terminal's
    sub-pixel grid; the other side follows the source aspect ratio. If that
    overflows the grid, both sides are scaled down together.

    Args:
        source_width: Image width in pixels
        source_height: Image height in pixels
        geometry: Terminal size in character cells
        reserved_rows: Rows left free for the prompt
        min_rows: Terminal heights below this are clamped up to it

    Returns:
        Target (width, height) in pixels, each at least 1

    Raises:
        GeometryError: If either source dimension is not positive, or the
            clamped terminal leaves no usable rows
    """
    if source_width <= 0 or source_height <= 0:
        raise GeometryError(f"invalid image dimensions {source_width}x{source_height}")

    rows = geometry.rows
    if rows < min_rows:
        logger.warning("Terminal has {} rows, clamping to {}.", rows, min_rows)
        rows = min_rows

    grid_width = geometry.columns * DOTS_PER_COLUMN
    grid_height = (rows - reserved_rows) * DOTS_PER_ROW
    if grid_height <= 0:
        raise GeometryError(f"terminal of {rows} rows leaves no room after reserving {reserved_rows}")

    if source_width > source_height:
        target_width = grid_width
        target_height = round_half_away(target_width * source_height / source_width)
        if target_height > grid_height:
            scale = grid_height / target_height
            target_height = round_half_away(target_height * scale)
            target_width = round_half_away(target_width * scale)
    elif source_height > source_width:
        target_height = grid_height
        target_width = round_half_away(target_height * source_width / source_height)
        if target_width > grid_width:
            scale = grid_width / target_width
            target_height = round_half_away(target_height * scale)
            target_width = round_half_away(target_width * scale)
    else:
        target_width = target_height = min(grid_width, grid_height)

    target = TargetResolution(max(1, target_width), max(1, target_height))
    logger.debug(
        "Fit {}x{} into {}x{} grid -> {}x{}",
        source_width,
        source_height,
        grid_width,
        grid_height,
        target.width,
        target.height,
    )
    return target
