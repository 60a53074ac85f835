"""Size and quality metrics for codec evaluation."""

import numpy as np

from ..constants import NUM_CHANNELS

# One 8-bit unit plus two 16-bit units per emitted pair
BYTES_PER_PAIR = 1 + 2 * 2


def calculate_raw_bytes(width: int, height: int, channels: int = NUM_CHANNELS) -> int:
    """Size of the uncompressed image: one byte per sample."""
    return width * height * channels


def calculate_encoded_bytes(encoded) -> int:
    """
    Approximate size of an encoded image.

    Args:
        encoded: EncodedImage, or any iterable of channels of tiles of pairs

    Returns:
        BYTES_PER_PAIR times the number of pairs
    """
    channels = getattr(encoded, 'channels', encoded)
    pairs = sum(len(tile) for channel in channels for tile in channel)
    return pairs * BYTES_PER_PAIR


def calculate_compression_ratio(original_size: int, compressed_size: int) -> float:
    """
    Calculate compression ratio.

    Args:
        original_size: Size of original data in bytes
        compressed_size: Size of compressed data in bytes

    Returns:
        Compression ratio (original / compressed)
    """
    if compressed_size == 0:
        return float('inf')
    return original_size / compressed_size


def calculate_space_savings(original_size: int, compressed_size: int) -> float:
    """Percentage of the original size saved, (1 - compressed/original) * 100."""
    if original_size == 0:
        return 0.0
    return (1 - compressed_size / original_size) * 100


def compression_report(encoded, width: int, height: int) -> dict:
    """
    Raw vs encoded byte counts for an encoded image.

    Returns:
        Dictionary with raw_bytes, encoded_bytes, pair_count,
        compression_ratio and space_savings_percent
    """
    raw = calculate_raw_bytes(width, height)
    encoded_bytes = calculate_encoded_bytes(encoded)
    return {
        'raw_bytes': raw,
        'encoded_bytes': encoded_bytes,
        'pair_count': encoded_bytes // BYTES_PER_PAIR,
        'compression_ratio': calculate_compression_ratio(raw, encoded_bytes),
        'space_savings_percent': calculate_space_savings(raw, encoded_bytes),
    }


def calculate_rmse(original: np.ndarray, reconstructed: np.ndarray) -> float:
    """
    Calculate Root Mean Squared Error (RMSE).

    Args:
        original: Original image
        reconstructed: Reconstructed image

    Returns:
        RMSE value
    """
    diff = original.astype(np.float64) - reconstructed.astype(np.float64)
    mse = np.mean(diff ** 2)
    return float(np.sqrt(mse))


def calculate_psnr(original: np.ndarray, reconstructed: np.ndarray,
                   bit_depth: int = 8) -> float:
    """
    Calculate Peak Signal-to-Noise Ratio (PSNR).

    PSNR = 10 * log10(MAX^2 / MSE)

    where MAX = 2^bit_depth - 1

    Args:
        original: Original image
        reconstructed: Reconstructed image
        bit_depth: Bit depth of the image (default: 8)

    Returns:
        PSNR in dB
    """
    max_val = (1 << bit_depth) - 1

    diff = original.astype(np.float64) - reconstructed.astype(np.float64)
    mse = np.mean(diff ** 2)

    if mse == 0:
        return float('inf')

    return float(10 * np.log10((max_val ** 2) / mse))
