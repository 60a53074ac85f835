"""Image writer: reassembles channel matrices into a pixel buffer."""

from pathlib import Path

import numpy as np
from PIL import Image


def channels_to_image(red: np.ndarray, green: np.ndarray, blue: np.ndarray) -> np.ndarray:
    """
    Reassemble three channel matrices into an RGB pixel buffer.

    Each sample is rounded to the nearest integer, then clamped to [0, 255].

    Args:
        red, green, blue: (h, w) matrices of identical shape

    Returns:
        (h, w, 3) uint8 array
    """
    stacked = np.stack([np.asarray(c, dtype=np.float64) for c in (red, green, blue)], axis=-1)
    return np.clip(np.round(stacked), 0, 255).astype(np.uint8)


def write_rgb_image(pixels: np.ndarray, path: str, format: str = None) -> None:
    """
    Write an RGB pixel buffer to file.

    Args:
        pixels: (h, w, 3) uint8 array
        path: Output file path
        format: Pillow format name. Auto-detected from extension if None.

    Raises:
        ValueError: If the array is not an RGB buffer
    """
    pixels = np.asarray(pixels)
    if pixels.ndim != 3 or pixels.shape[2] != 3:
        raise ValueError(f"Expected (h, w, 3) array, got {pixels.shape}")

    path = Path(path)
    if format is None and not path.suffix:
        # Default to png
        path = path.with_suffix('.png')

    Image.fromarray(pixels.astype(np.uint8)).save(path, format=format)
