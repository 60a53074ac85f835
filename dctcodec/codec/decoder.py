"""Image Decoder - Integrates all decoding stages."""

from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..config import CodecConfig, DEFAULT_CONFIG
from ..constants import BLOCK_AREA, BLOCK_SIZE
from ..transform import inverse_dct_block, merge_blocks
from ..quantization import dequantize
from ..entropy import rle_decode, reshape_block
from ..metrics import compression_report
from .encoded_image import EncodedImage


class ImageDecoder:
    """
    Decoder for three-channel images.

    Pipeline (reverse of encoder), per channel:
    1. Run-length decode to 64 values
    2. Reshape into 8-wide rows
    3. Dequantization
    4. Inverse DCT
    5. Merge blocks, dropping padding
    """

    def __init__(self, config: Optional[CodecConfig] = None):
        self.config = config or DEFAULT_CONFIG
        self.last_stats = None

    def decode_block(self, pairs: Sequence[Sequence[int]]) -> np.ndarray:
        """Decode one tile's run-length pairs into an 8x8 spatial block."""
        flat = rle_decode(pairs, length=BLOCK_AREA, overflow=self.config.overflow)
        quant_block = reshape_block(flat, BLOCK_SIZE)
        dct_block = dequantize(quant_block, self.config.quant_table)
        return inverse_dct_block(dct_block)

    def decompress_channel(self, encoded_tiles: List[Sequence[Sequence[int]]],
                           width: int, height: int) -> np.ndarray:
        """
        Decode a single channel.

        Args:
            encoded_tiles: Per-tile pair lists in raster order
            width: Image width
            height: Image height

        Returns:
            Reconstructed float64 matrix (height x width), not clamped

        Raises:
            DimensionMismatchError: If the tile count does not fit width/height
        """
        blocks = [self.decode_block(pairs) for pairs in encoded_tiles]
        return merge_blocks(blocks, width, height)

    def recover_image(self, encoded: EncodedImage, width: int,
                      height: int) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Decode all three channels.

        The size report is stored in `last_stats`.

        Returns:
            Tuple of (red, green, blue) float64 matrices
        """
        if self.config.max_workers:
            with ThreadPoolExecutor(max_workers=self.config.max_workers) as pool:
                channels = list(pool.map(
                    lambda tiles: self.decompress_channel(tiles, width, height),
                    encoded.channels))
        else:
            channels = [self.decompress_channel(tiles, width, height)
                        for tiles in encoded.channels]

        self.last_stats = compression_report(encoded, width, height)
        return tuple(channels)
