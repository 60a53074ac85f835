"""Table-driven quantization of 8x8 DCT coefficient blocks."""

import numpy as np

from ..constants import LUMINANCE_QUANT_TABLE, ROUND_TRUNCATE, ROUND_NEAREST


def quantize(coeffs: np.ndarray, table: np.ndarray = LUMINANCE_QUANT_TABLE,
             rounding: str = ROUND_TRUNCATE) -> np.ndarray:
    """
    Quantize DCT coefficients by elementwise division with the table.

    The default mode truncates toward zero, so quantized magnitudes are
    biased downward; 'round' rounds half to even instead.

    Args:
        coeffs: 8x8 DCT coefficient block
        table: 8x8 table of positive divisors
        rounding: 'truncate' or 'round'

    Returns:
        Quantized coefficients as int32
    """
    scaled = np.asarray(coeffs, dtype=np.float64) / table
    if rounding == ROUND_TRUNCATE:
        return np.trunc(scaled).astype(np.int32)
    elif rounding == ROUND_NEAREST:
        return np.round(scaled).astype(np.int32)
    else:
        raise ValueError(f"Unknown rounding mode: {rounding}")


def dequantize(quant_coeffs: np.ndarray,
               table: np.ndarray = LUMINANCE_QUANT_TABLE) -> np.ndarray:
    """
    Dequantize coefficients.

    Args:
        quant_coeffs: Quantized 8x8 coefficient block
        table: The table used to quantize

    Returns:
        Dequantized coefficients as float64
    """
    return np.asarray(quant_coeffs).astype(np.float64) * table


def quantization_error_bound(table: np.ndarray = LUMINANCE_QUANT_TABLE,
                             rounding: str = ROUND_TRUNCATE) -> np.ndarray:
    """
    Per-cell bound on |dequantize(quantize(c)) - c|.

    Truncation error is strictly below the divisor; rounding error is at
    most half of it.
    """
    table = np.asarray(table, dtype=np.float64)
    if rounding == ROUND_NEAREST:
        return table / 2
    return table
