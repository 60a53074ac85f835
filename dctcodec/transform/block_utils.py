"""Block processing utilities for the image codec."""

import numpy as np
from typing import List, Tuple

from ..constants import BLOCK_SIZE
from ..errors import DimensionMismatchError


def block_grid(width: int, height: int, block_size: int = BLOCK_SIZE) -> Tuple[int, int]:
    """
    Number of block rows and block columns covering a width x height image.

    Returns:
        Tuple of (n_blocks_h, n_blocks_w)
    """
    n_blocks_h = (height + block_size - 1) // block_size
    n_blocks_w = (width + block_size - 1) // block_size
    return n_blocks_h, n_blocks_w


def split_into_blocks(matrix: np.ndarray, width: int, height: int,
                      block_size: int = BLOCK_SIZE) -> List[np.ndarray]:
    """
    Split a channel matrix into non-overlapping blocks in raster order.

    Blocks overhanging the right or bottom edge are zero-padded. Only the
    top-left height x width region of the matrix is read.

    Args:
        matrix: 2D channel matrix, at least height x width
        width: Image width
        height: Image height
        block_size: Size of each block (default: 8)

    Returns:
        List of block_size x block_size float64 blocks, row-major order
    """
    matrix = np.asarray(matrix)
    if matrix.ndim != 2 or matrix.shape[0] < height or matrix.shape[1] < width:
        raise DimensionMismatchError(
            f"Matrix of shape {matrix.shape} cannot hold a {height}x{width} channel")

    n_blocks_h, n_blocks_w = block_grid(width, height, block_size)

    # Zero-pad to a whole number of blocks
    padded = np.zeros((n_blocks_h * block_size, n_blocks_w * block_size), dtype=np.float64)
    padded[:height, :width] = matrix[:height, :width]

    blocks = []
    for i in range(n_blocks_h):
        for j in range(n_blocks_w):
            y_start = i * block_size
            x_start = j * block_size
            blocks.append(padded[y_start:y_start + block_size,
                                 x_start:x_start + block_size].copy())

    return blocks


def merge_blocks(blocks: List[np.ndarray], width: int, height: int,
                 block_size: int = BLOCK_SIZE) -> np.ndarray:
    """
    Merge raster-ordered blocks back into a height x width matrix.

    Padding cells are discarded.

    Args:
        blocks: List of blocks in row-major order
        width: Image width
        height: Image height
        block_size: Size of each block (default: 8)

    Returns:
        Reconstructed float64 matrix of shape (height, width)

    Raises:
        DimensionMismatchError: If the block count or a block shape is wrong
    """
    n_blocks_h, n_blocks_w = block_grid(width, height, block_size)
    expected = n_blocks_h * n_blocks_w
    if len(blocks) != expected:
        raise DimensionMismatchError(
            f"Expected {expected} blocks for a {width}x{height} image, got {len(blocks)}")

    padded = np.zeros((n_blocks_h * block_size, n_blocks_w * block_size), dtype=np.float64)

    for idx, block in enumerate(blocks):
        block = np.asarray(block)
        if block.shape != (block_size, block_size):
            raise DimensionMismatchError(
                f"Block {idx} has shape {block.shape}, expected ({block_size}, {block_size})")
        i = idx // n_blocks_w
        j = idx % n_blocks_w
        y_start = i * block_size
        x_start = j * block_size
        padded[y_start:y_start + block_size,
               x_start:x_start + block_size] = block

    # Crop to original size
    return padded[:height, :width].copy()
