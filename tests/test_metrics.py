"""Tests for size and quality metrics."""

import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np
import pytest
from dctcodec.codec import EncodedImage
from dctcodec.entropy import EOB
from dctcodec.metrics import (
    BYTES_PER_PAIR, calculate_raw_bytes, calculate_encoded_bytes,
    calculate_compression_ratio, calculate_space_savings, compression_report,
    calculate_rmse, calculate_psnr,
)


def test_raw_bytes():
    assert calculate_raw_bytes(64, 32) == 64 * 32 * 3
    assert calculate_raw_bytes(10, 10, channels=1) == 100


def test_encoded_bytes():
    encoded = EncodedImage(
        red=[[(0, 4), EOB], [EOB]],
        green=[[EOB], [EOB]],
        blue=[[(1, 1), (2, 2), EOB], [EOB]],
    )
    assert BYTES_PER_PAIR == 5
    assert encoded.pair_count() == 9
    assert calculate_encoded_bytes(encoded) == 45
    assert calculate_encoded_bytes(encoded.channels) == 45


def test_ratio_and_savings():
    assert calculate_compression_ratio(1000, 250) == pytest.approx(4.0)
    assert calculate_compression_ratio(1000, 0) == float('inf')
    assert calculate_space_savings(1000, 250) == pytest.approx(75.0)
    assert calculate_space_savings(0, 0) == 0.0


def test_compression_report():
    encoded = EncodedImage(red=[[EOB]], green=[[EOB]], blue=[[EOB]])
    report = compression_report(encoded, 8, 8)
    assert report['raw_bytes'] == 192
    assert report['encoded_bytes'] == 15
    assert report['pair_count'] == 3
    assert report['compression_ratio'] == pytest.approx(192 / 15)


def test_rmse_and_psnr():
    original = np.full((8, 8), 100, dtype=np.uint8)
    assert calculate_rmse(original, original) == 0.0
    assert calculate_psnr(original, original) == float('inf')

    shifted = original.astype(np.float64) + 5
    assert calculate_rmse(original, shifted) == pytest.approx(5.0)
    assert calculate_psnr(original, shifted) == pytest.approx(10 * np.log10(255 ** 2 / 25))
