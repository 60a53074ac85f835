"""Constants for the DCT block codec."""

import struct

import numpy as np

# Magic number: 'DCTC' (DCT Codec container)
MAGIC = b'DCTC'
VERSION = 0x01

# Block size for DCT
BLOCK_SIZE = 8
BLOCK_AREA = BLOCK_SIZE * BLOCK_SIZE

# Number of color channels carried by an encoded image (R, G, B)
NUM_CHANNELS = 3

# Header format (Little-endian, 16 bytes total)
# 4s: Magic (4B), B: Version (1B), H: Width (2B), H: Height (2B)
# B: Channels (1B), B: Flags (1B), B: Max skip (1B), I: Data Length (4B)
HEADER_FORMAT = '<4sBHHBBBI'
HEADER_SIZE = struct.calcsize(HEADER_FORMAT)  # 16 bytes

# Run-length pair field widths
SKIP_BITS = 8
VALUE_BITS = 16
SKIP_MIN, SKIP_MAX = 0, (1 << SKIP_BITS) - 1
VALUE_MIN, VALUE_MAX = -(1 << (VALUE_BITS - 1)), (1 << (VALUE_BITS - 1)) - 1

# Longest zero run a single pair may skip; the next zero forces a (MAX_SKIP, 0) flush
MAX_SKIP = 62

# Entropy coding markers
MARKER_EOB = (0, 0)   # End of Block

# Standard JPEG luminance quantization table (ITU-T T.81, Annex K.1)
LUMINANCE_QUANT_TABLE = np.array([
    [16, 11, 10, 16, 24, 40, 51, 61],
    [12, 12, 14, 19, 26, 58, 60, 55],
    [14, 13, 16, 24, 40, 57, 69, 56],
    [14, 17, 22, 29, 51, 87, 80, 62],
    [18, 22, 37, 56, 68, 109, 103, 77],
    [24, 35, 55, 64, 81, 104, 113, 92],
    [49, 64, 78, 87, 103, 121, 120, 101],
    [72, 92, 95, 98, 112, 100, 103, 99],
], dtype=np.int32)
LUMINANCE_QUANT_TABLE.flags.writeable = False

# Rounding modes for quantization
ROUND_TRUNCATE = 'truncate'
ROUND_NEAREST = 'round'
ROUNDING_MODES = (ROUND_TRUNCATE, ROUND_NEAREST)

# Decode cursor overflow policies
OVERFLOW_CLAMP = 'clamp'
OVERFLOW_RAISE = 'raise'
OVERFLOW_POLICIES = (OVERFLOW_CLAMP, OVERFLOW_RAISE)

# Header flag bits
FLAG_ROUND_NEAREST = 0x01
