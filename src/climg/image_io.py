"""Image decoding and resampling through OpenCV."""

from __future__ import annotations

from pathlib import Path

import cv2
from loguru import logger
import numpy as np
from numpy.typing import NDArray

from .errors import ImageDecodeError, ImageReadError
from .geometry import TargetResolution


def load_image(path: str | Path) -> NDArray[np.uint8]:
    """Read and decode an image file.

    The format is detected from the file content, so the extension does not
    matter. Alpha is dropped; 16-bit images are reduced to 8 bits.

    Args:
        path: Path to the image file

    Returns:
        BGR image (HWC format, uint8)

    Raises:
        ImageReadError: If the file cannot be read
        ImageDecodeError: If the content is not a decodable image
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise ImageReadError(f"{path}: {exc.strerror or exc}") from exc

    buffer = np.frombuffer(data, dtype=np.uint8)
    image = cv2.imdecode(buffer, cv2.IMREAD_COLOR) if buffer.size else None
    if image is None or image.size == 0:
        raise ImageDecodeError(f"{path}: unrecognized or corrupt image data")

    logger.debug("Decoded {} ({}x{})", path, image.shape[1], image.shape[0])
    return image


def resample(image: NDArray[np.uint8], target: TargetResolution) -> NDArray[np.uint8]:
    """Resize an image to the target resolution with a Lanczos filter."""
    return cv2.resize(image, (target.width, target.height), interpolation=cv2.INTER_LANCZOS4)
