"""Row-major scan for converting 2D blocks to 1D arrays."""

import numpy as np

from ..constants import BLOCK_SIZE
from ..errors import DimensionMismatchError


def flatten_block(block: np.ndarray) -> np.ndarray:
    """
    Flatten an 8x8 block row by row.

    Args:
        block: 8x8 input block

    Returns:
        1D array of 64 elements in row-major order
    """
    block = np.asarray(block)
    if block.shape != (BLOCK_SIZE, BLOCK_SIZE):
        raise DimensionMismatchError(
            f"Expected {BLOCK_SIZE}x{BLOCK_SIZE} block, got {block.shape}")
    return block.reshape(-1)


def reshape_block(array, width: int = BLOCK_SIZE) -> np.ndarray:
    """
    Cut a flat sequence into rows of `width` values.

    Args:
        array: 1D sequence whose length is a multiple of width
        width: Row length (default: 8)

    Returns:
        2D int32 array with `width` columns
    """
    flat = np.asarray(array, dtype=np.int32)
    if flat.ndim != 1 or flat.size % width != 0:
        raise DimensionMismatchError(
            f"Cannot reshape {flat.size} values into rows of {width}")
    return flat.reshape(-1, width)
