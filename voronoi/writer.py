"""
PNG encoding for rendered buffers.
"""

import logging
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)


class ImageWriteError(RuntimeError):
    """Raised when the output image cannot be created or encoded."""

    def __init__(self, path: Path, reason: str):
        self.path = Path(path)
        super().__init__(f"Failed to write image to {self.path}: {reason}")


def save_png(buffer: np.ndarray, path: Union[str, Path]) -> Path:
    """
    Encode an RGBA buffer as PNG and write it to path.

    The parent directory must already exist. A file left half written by a
    failed encode is removed.

    Raises:
        ImageWriteError: If the file cannot be created or the buffer cannot be encoded
    """
    path = Path(path)
    created = False
    try:
        image = Image.fromarray(np.ascontiguousarray(buffer, dtype=np.uint8))
        with open(path, "wb") as f:
            created = True
            image.save(f, format="PNG")
    except (OSError, ValueError, TypeError) as e:
        logger.error(f"Could not write {path}: {e}")
        if created:
            path.unlink(missing_ok=True)
        raise ImageWriteError(path, str(e)) from e

    logger.info(f"Wrote {image.width}x{image.height} PNG to {path}")
    return path


def load_png(path: Union[str, Path]) -> np.ndarray:
    """Decode a PNG file into a (height, width, 4) uint8 RGBA buffer."""
    with Image.open(path) as image:
        return np.array(image.convert("RGBA"), dtype=np.uint8)
