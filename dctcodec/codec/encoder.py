"""Image Encoder - Integrates all encoding stages."""

from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

import numpy as np

from ..config import CodecConfig, DEFAULT_CONFIG
from ..errors import DimensionMismatchError
from ..transform import forward_dct_block, split_into_blocks
from ..quantization import quantize
from ..entropy import flatten_block, rle_encode, RunLengthPair
from ..metrics import compression_report
from .encoded_image import EncodedImage


class ImageEncoder:
    """
    Encoder for three-channel images.

    Pipeline, per channel:
    1. Split into 8x8 blocks (zero-padded at the edges)
    2. Forward DCT
    3. Quantization against the table
    4. Row-major flatten
    5. Run-length encoding
    """

    def __init__(self, config: Optional[CodecConfig] = None):
        self.config = config or DEFAULT_CONFIG
        self.last_stats = None

    def encode_block(self, block: np.ndarray) -> List[RunLengthPair]:
        """Encode one 8x8 spatial block into its run-length pairs."""
        dct_block = forward_dct_block(block)
        quant_block = quantize(dct_block, self.config.quant_table, self.config.rounding)
        return rle_encode(flatten_block(quant_block), max_skip=self.config.max_skip)

    def compress_channel(self, matrix: np.ndarray, width: int,
                         height: int) -> List[List[RunLengthPair]]:
        """
        Encode a single channel matrix.

        Args:
            matrix: 2D channel matrix (height x width)
            width: Image width
            height: Image height

        Returns:
            Per-tile pair lists in raster order
        """
        blocks = split_into_blocks(matrix, width, height)
        return [self.encode_block(block) for block in blocks]

    def compress_image(self, red: np.ndarray, green: np.ndarray, blue: np.ndarray,
                       width: Optional[int] = None,
                       height: Optional[int] = None) -> EncodedImage:
        """
        Encode three channel matrices.

        The size report is stored in `last_stats`.

        Args:
            red, green, blue: 2D channel matrices of identical shape
            width: Image width (default: taken from the matrices)
            height: Image height (default: taken from the matrices)

        Returns:
            EncodedImage with one tile list per channel
        """
        channels = [np.asarray(c) for c in (red, green, blue)]
        shapes = {c.shape for c in channels}
        if len(shapes) != 1:
            raise DimensionMismatchError(f"Channel shapes differ: {sorted(shapes)}")
        if height is None or width is None:
            height, width = channels[0].shape

        if self.config.max_workers:
            with ThreadPoolExecutor(max_workers=self.config.max_workers) as pool:
                encoded = list(pool.map(
                    lambda c: self.compress_channel(c, width, height), channels))
        else:
            encoded = [self.compress_channel(c, width, height) for c in channels]

        result = EncodedImage(*encoded)
        self.last_stats = compression_report(result, width, height)
        return result
