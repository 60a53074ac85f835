"""Tests for the DCT engine."""

import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np
import pytest
from dctcodec.transform.dct import (
    create_dct_matrix, forward_dct_1d, inverse_dct_1d,
    forward_dct_block, inverse_dct_block, DCT_MATRIX_8,
)


def test_dct_matrix_orthogonality():
    """T @ T' and T' @ T should both be the identity."""
    T = create_dct_matrix(8)
    assert np.allclose(T @ T.T, np.eye(8), atol=1e-12)
    assert np.allclose(T.T @ T, np.eye(8), atol=1e-12)


def test_forward_1d_matches_definition():
    """Matrix form should equal the summation formula."""
    rng = np.random.default_rng(0)
    x = rng.uniform(0, 255, 8)
    N = len(x)
    expected = np.zeros(N)
    for k in range(N):
        total = sum(x[n] * np.cos(np.pi / (2 * N) * (2 * n + 1) * k) for n in range(N))
        scale = np.sqrt(1 / N) if k == 0 else np.sqrt(2 / N)
        expected[k] = scale * total
    assert np.allclose(forward_dct_1d(x), expected, atol=1e-10)


def test_inverse_1d_reverses_forward():
    rng = np.random.default_rng(1)
    for N in (4, 8, 16):
        x = rng.normal(size=N) * 100
        assert np.allclose(inverse_dct_1d(forward_dct_1d(x)), x, atol=1e-9)


def test_flat_row_dc_coefficient():
    """A row of 128s has DC 128 * sqrt(8) and no AC energy."""
    coeffs = forward_dct_1d(np.full(8, 128.0))
    assert coeffs[0] == pytest.approx(128 * np.sqrt(8), abs=1e-9)
    assert coeffs[0] == pytest.approx(362.0387, abs=1e-4)
    assert np.allclose(coeffs[1:], 0, atol=1e-9)


def test_flat_block_dc_coefficient():
    """Row pass then column pass: DC of a constant block is 8 * value."""
    coeffs = forward_dct_block(np.full((8, 8), 128.0))
    assert coeffs[0, 0] == pytest.approx(128 * 8, abs=1e-9)
    rest = coeffs.copy()
    rest[0, 0] = 0
    assert np.allclose(rest, 0, atol=1e-9)


@pytest.mark.parametrize("block", [
    np.random.default_rng(2).uniform(0, 255, (8, 8)),
    np.random.default_rng(3).normal(size=(8, 8)) * 1000,
    np.zeros((8, 8)),
    np.arange(64, dtype=float).reshape(8, 8),
    np.tile([[0, 255], [255, 0]], (4, 4)).astype(float),
])
def test_block_roundtrip(block):
    """Inverse2D(Forward2D(tile)) should recover the tile within 1e-9."""
    recovered = inverse_dct_block(forward_dct_block(block))
    assert np.abs(recovered - block).max() < 1e-9


def test_block_roundtrip_other_size():
    block = np.random.default_rng(4).uniform(0, 255, (4, 4))
    assert np.allclose(inverse_dct_block(forward_dct_block(block)), block, atol=1e-9)


def test_separable_order_matches_matrix_form():
    """Row-then-column equals T @ B @ T'."""
    block = np.random.default_rng(5).uniform(0, 255, (8, 8))
    T = DCT_MATRIX_8
    assert np.allclose(forward_dct_block(block), T @ block @ T.T, atol=1e-9)


def test_energy_preservation():
    """Parseval: orthonormal DCT preserves the sum of squares."""
    block = np.random.default_rng(6).uniform(-128, 127, (8, 8))
    coeffs = forward_dct_block(block)
    assert np.isclose(np.sum(block ** 2), np.sum(coeffs ** 2), rtol=1e-10)


def test_inputs_are_not_mutated():
    block = np.random.default_rng(7).uniform(0, 255, (8, 8))
    original = block.copy()
    coeffs = forward_dct_block(block)
    coeffs_copy = coeffs.copy()
    inverse_dct_block(coeffs)
    assert np.array_equal(block, original)
    assert np.array_equal(coeffs, coeffs_copy)


def test_precomputed_matrix_is_read_only():
    with pytest.raises(ValueError):
        DCT_MATRIX_8[0, 0] = 1.0
