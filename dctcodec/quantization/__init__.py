"""Quantization modules for the DCT block codec."""

from .table_quantizer import quantize, dequantize, quantization_error_bound

__all__ = [
    'quantize',
    'dequantize',
    'quantization_error_bound',
]
