"""Tests for block decomposition and recombination."""

import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np
import pytest
from dctcodec.transform.block_utils import block_grid, split_into_blocks, merge_blocks
from dctcodec.errors import DimensionMismatchError


def test_block_grid():
    assert block_grid(64, 64) == (8, 8)
    assert block_grid(20, 9) == (2, 3)
    assert block_grid(1, 1) == (1, 1)
    assert block_grid(8, 16) == (2, 1)


def test_roundtrip_multiple_of_eight():
    """Exact recovery when width and height are multiples of 8."""
    matrix = np.random.default_rng(0).uniform(0, 255, (24, 40))
    blocks = split_into_blocks(matrix, 40, 24)
    assert len(blocks) == 3 * 5
    assert np.array_equal(merge_blocks(blocks, 40, 24), matrix)


def test_roundtrip_non_multiple():
    matrix = np.random.default_rng(1).uniform(0, 255, (13, 10))
    blocks = split_into_blocks(matrix, 10, 13)
    assert len(blocks) == 2 * 2
    recovered = merge_blocks(blocks, 10, 13)
    assert recovered.shape == (13, 10)
    assert np.array_equal(recovered, matrix)


def test_raster_order_and_zero_padding():
    height, width = 9, 20
    matrix = np.arange(height * width, dtype=float).reshape(height, width) + 1
    blocks = split_into_blocks(matrix, width, height)

    assert len(blocks) == 6
    assert all(b.shape == (8, 8) for b in blocks)

    # Left to right within the first block row
    assert np.array_equal(blocks[0], matrix[0:8, 0:8])
    assert np.array_equal(blocks[1], matrix[0:8, 8:16])

    # Right edge: 4 real columns, 4 padded
    assert np.array_equal(blocks[2][:, :4], matrix[0:8, 16:20])
    assert np.all(blocks[2][:, 4:] == 0.0)

    # Second block row holds a single real row
    assert np.array_equal(blocks[3][0, :], matrix[8, 0:8])
    assert np.all(blocks[3][1:, :] == 0.0)
    assert np.all(blocks[5][1:, :] == 0.0)
    assert np.all(blocks[5][:, 4:] == 0.0)


def test_merge_ignores_padding_cells():
    blocks = [np.full((8, 8), 7.0) for _ in range(4)]
    merged = merge_blocks(blocks, 12, 10)
    assert merged.shape == (10, 12)
    assert np.all(merged == 7.0)


def test_blocks_are_independent_copies():
    matrix = np.zeros((8, 8))
    blocks = split_into_blocks(matrix, 8, 8)
    blocks[0][0, 0] = 99
    assert matrix[0, 0] == 0


def test_merge_wrong_block_count():
    blocks = [np.zeros((8, 8)) for _ in range(3)]
    with pytest.raises(DimensionMismatchError):
        merge_blocks(blocks, 16, 16)


def test_merge_wrong_block_shape():
    blocks = [np.zeros((8, 8)), np.zeros((4, 4))]
    with pytest.raises(DimensionMismatchError):
        merge_blocks(blocks, 16, 8)


def test_split_matrix_too_small():
    with pytest.raises(DimensionMismatchError):
        split_into_blocks(np.zeros((4, 4)), 8, 8)


def test_dimension_mismatch_is_value_error():
    with pytest.raises(ValueError):
        merge_blocks([], 8, 8)
