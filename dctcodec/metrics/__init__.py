"""Size and quality metrics for the DCT block codec."""

from .quality import (
    BYTES_PER_PAIR,
    calculate_raw_bytes,
    calculate_encoded_bytes,
    calculate_compression_ratio,
    calculate_space_savings,
    compression_report,
    calculate_rmse,
    calculate_psnr,
)

__all__ = [
    'BYTES_PER_PAIR',
    'calculate_raw_bytes',
    'calculate_encoded_bytes',
    'calculate_compression_ratio',
    'calculate_space_savings',
    'compression_report',
    'calculate_rmse',
    'calculate_psnr',
]
