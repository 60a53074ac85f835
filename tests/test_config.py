"""Tests for codec configuration."""

import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import dataclasses

import numpy as np
import pytest
from dctcodec.config import CodecConfig, DEFAULT_CONFIG
from dctcodec.codec import ImageEncoder
from dctcodec.constants import LUMINANCE_QUANT_TABLE, MAX_SKIP


def test_defaults():
    assert DEFAULT_CONFIG.rounding == 'truncate'
    assert DEFAULT_CONFIG.overflow == 'clamp'
    assert DEFAULT_CONFIG.max_skip == MAX_SKIP == 62
    assert DEFAULT_CONFIG.quant_table is LUMINANCE_QUANT_TABLE
    assert DEFAULT_CONFIG.max_workers is None


@pytest.mark.parametrize("kwargs", [
    {'rounding': 'floor'},
    {'overflow': 'wrap'},
    {'max_skip': 0},
    {'max_skip': 256},
    {'max_workers': 0},
])
def test_invalid_values(kwargs):
    with pytest.raises(ValueError):
        CodecConfig(**kwargs)


def test_config_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_CONFIG.rounding = 'round'
    config = CodecConfig(rounding='round')
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.max_skip = 10


def test_default_coders_do_not_share_mutations():
    encoder = ImageEncoder()
    with pytest.raises(dataclasses.FrozenInstanceError):
        encoder.config.rounding = 'round'

    channel = np.full((8, 8), 135.3)
    encoded = ImageEncoder().compress_image(channel, channel, channel)
    assert encoded.red[0][0] == (0, 67)
