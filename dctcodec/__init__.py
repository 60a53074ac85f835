"""Block DCT image codec: 8x8 DCT, table quantization and run-length coding."""

__version__ = '0.1.0'
