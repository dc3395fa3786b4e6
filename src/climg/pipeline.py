"""
climg Pipeline - From an image file to lines of Braille text.

Stages run in order: decode, fit to the terminal, resample, reduce to
grayscale, threshold, rasterize. Every failure before rasterization raises,
so no output is produced for an image that cannot be processed.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from loguru import logger

from .braille import iter_braille_lines
from .config import RenderConfig
from .geometry import fit_resolution
from .grayscale import to_grayscale
from .image_io import load_image, resample
from .otsu import otsu_threshold
from .terminal import TerminalGeometry, query_terminal_size


def resolve_geometry(config: RenderConfig) -> TerminalGeometry:
    """Query the terminal once, falling back to the configured size."""
    geometry = query_terminal_size()
    if geometry is None:
        geometry = config.fallback_geometry
        logger.debug("Using fallback terminal size {}x{}", geometry.columns, geometry.rows)
    return geometry


def render_image(
    path: str | Path,
    config: RenderConfig | None = None,
    geometry: TerminalGeometry | None = None,
) -> Iterator[str]:
    """Render an image file as Braille lines sized for the terminal.

    All processing happens before the first line is yielded.

    Args:
        path: Image file to render
        config: Rendering options, defaults to RenderConfig()
        geometry: Terminal size; queried from the terminal when omitted

    Returns:
        Iterator over the output lines, top to bottom

    Raises:
        ImageReadError: If the file cannot be read
        ImageDecodeError: If the file is not a decodable image
        GeometryError: If no usable target resolution exists
    """
    config = config or RenderConfig()
    if geometry is None:
        geometry = resolve_geometry(config)

    image = load_image(path)
    target = fit_resolution(
        image.shape[1],
        image.shape[0],
        geometry,
        reserved_rows=config.reserved_rows,
        min_rows=config.min_rows,
    )
    gray = to_grayscale(resample(image, target))

    if config.threshold is None:
        threshold = otsu_threshold(gray)
        logger.debug("Otsu threshold: {}", threshold)
    else:
        threshold = config.threshold
        logger.debug("Fixed threshold: {}", threshold)

    return iter_braille_lines(gray, threshold, invert=config.invert)


def render_image_to_text(
    path: str | Path,
    config: RenderConfig | None = None,
    geometry: TerminalGeometry | None = None,
) -> str:
    """Render an image file and return the Braille text as one string."""
    return "\n".join(render_image(path, config, geometry))
