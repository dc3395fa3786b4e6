"""climg - render images as Unicode Braille patterns in the terminal."""

from .braille import braille_char, iter_braille_lines, render_braille
from .config import RenderConfig
from .errors import ClimgError, GeometryError, ImageDecodeError, ImageReadError
from .geometry import TargetResolution, fit_resolution
from .grayscale import Raster, to_grayscale
from .otsu import otsu_threshold
from .pipeline import render_image, render_image_to_text
from .terminal import TerminalGeometry, query_terminal_size

__version__ = "0.1.0"
__all__ = [
    "ClimgError",
    "GeometryError",
    "ImageDecodeError",
    "ImageReadError",
    "Raster",
    "RenderConfig",
    "TargetResolution",
    "TerminalGeometry",
    "braille_char",
    "fit_resolution",
    "iter_braille_lines",
    "otsu_threshold",
    "query_terminal_size",
    "render_braille",
    "render_image",
    "render_image_to_text",
    "to_grayscale",
]
