"""Exception types raised by the climg rendering pipeline."""


class ClimgError(Exception):
    """Base class for all climg errors."""


class ImageReadError(ClimgError):
    """The image file could not be read (missing, unreadable, or a directory)."""


class ImageDecodeError(ClimgError):
    """The file content is not an image the codec can decode."""


class GeometryError(ClimgError):
    """Source or terminal dimensions cannot produce a usable target resolution."""
