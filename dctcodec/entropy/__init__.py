"""Entropy coding modules for the DCT block codec."""

from .scan import flatten_block, reshape_block
from .rle import RunLengthPair, rle_encode, rle_decode, flush_marker, EOB

__all__ = [
    'flatten_block',
    'reshape_block',
    'RunLengthPair',
    'rle_encode',
    'rle_decode',
    'flush_marker',
    'EOB',
]
