# renderer/output.py
"""
Image output for quantized renders.

Supported formats:
    - PPM (plain-text P3), written directly
    - PNG and anything else Pillow can encode, chosen by file extension
"""
import logging
from pathlib import Path

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)


def write_ppm(pixels: np.ndarray, filepath) -> Path:
    """
    Write an (height, width, 3) integer image as a plain-text P3 PPM.

    Channel values are written as given; an unclamped render may contain
    values above 255.
    """
    pixels = np.asarray(pixels)
    height, width = pixels.shape[:2]
    path = Path(filepath)
    with path.open("w", encoding="ascii") as f:
        f.write(f"P3\n{width} {height}\n255\n")
        for row in pixels:
            for r, g, b in row:
                f.write(f"{int(r)} {int(g)} {int(b)}\n")
    return path


def write_image(pixels: np.ndarray, filepath) -> Path:
    """
    Save an (height, width, 3) 8-bit image, picking the encoder from the
    file extension.

    Raises:
        ValueError: If a non-PPM format is requested for pixels that are
            not uint8 (for example an unclamped render).
    """
    path = Path(filepath)
    if path.suffix.lower() == ".ppm":
        write_ppm(pixels, path)
    else:
        pixels = np.asarray(pixels)
        if pixels.dtype != np.uint8:
            raise ValueError(
                f"{path.suffix or 'this format'} output needs clamped 8-bit channels; "
                "write a .ppm to keep unclamped values")
        Image.fromarray(np.ascontiguousarray(pixels)).save(path)
    logger.info("Saved %s", path)
    return path
