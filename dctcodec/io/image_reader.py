"""Image reader: loads a pixel buffer and splits it into channel matrices."""

from pathlib import Path
from typing import Tuple

import numpy as np
from PIL import Image


def read_rgb_image(path: str) -> np.ndarray:
    """
    Read an image file as an RGB pixel buffer.

    Any mode Pillow can open (PNG, BMP, JPEG, ...) is converted to RGB.

    Args:
        path: Path to the image file

    Returns:
        (height, width, 3) uint8 array

    Raises:
        FileNotFoundError: If the file does not exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Image not found: {path}")

    with Image.open(path) as im:
        return np.array(im.convert('RGB'), dtype=np.uint8)


def image_to_channels(pixels: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Split a pixel buffer into red, green and blue sample matrices.

    Grayscale (h, w) input is replicated into all three channels and an
    alpha channel, if present, is dropped.

    Args:
        pixels: (h, w), (h, w, 3) or (h, w, 4) array

    Returns:
        Tuple of three (h, w) float64 matrices in [0, 255]
    """
    pixels = np.asarray(pixels)

    if pixels.ndim == 2:
        gray = pixels.astype(np.float64)
        return gray.copy(), gray.copy(), gray.copy()

    if pixels.ndim != 3 or pixels.shape[2] not in (3, 4):
        raise ValueError(f"Expected (h, w), (h, w, 3) or (h, w, 4) array, got {pixels.shape}")

    return tuple(pixels[:, :, c].astype(np.float64) for c in range(3))
