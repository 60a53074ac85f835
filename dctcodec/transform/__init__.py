"""Transform modules for the DCT block codec."""

from .dct import (
    create_dct_matrix,
    forward_dct_1d,
    inverse_dct_1d,
    forward_dct_block,
    inverse_dct_block,
)
from .block_utils import block_grid, split_into_blocks, merge_blocks

__all__ = [
    'create_dct_matrix',
    'forward_dct_1d',
    'inverse_dct_1d',
    'forward_dct_block',
    'inverse_dct_block',
    'block_grid',
    'split_into_blocks',
    'merge_blocks',
]
