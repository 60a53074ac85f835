"""Bitstream reader/writer and the .dcc container for encoded images."""

import io
import struct
import zlib
from typing import List

from ..constants import (
    MAGIC, VERSION, HEADER_FORMAT, HEADER_SIZE, NUM_CHANNELS,
    SKIP_BITS, VALUE_BITS, MAX_SKIP, FLAG_ROUND_NEAREST,
)
from ..entropy.rle import RunLengthPair
from ..transform.block_utils import block_grid


class BitstreamWriter:
    """Bit-level writer for binary data."""

    def __init__(self, f):
        """
        Initialize bitstream writer.

        Args:
            f: File object opened in binary write mode
        """
        self.f = f
        self.accumulator = 0
        self.bit_count = 0

    def write_bit(self, bit: int) -> None:
        """Write a single bit."""
        self.accumulator = (self.accumulator << 1) | (bit & 1)
        self.bit_count += 1
        if self.bit_count == 8:
            self._flush_byte()

    def write_bits(self, value: int, num_bits: int) -> None:
        """Write multiple bits from value (MSB first)."""
        for i in range(num_bits - 1, -1, -1):
            bit = (value >> i) & 1
            self.write_bit(bit)

    def write_pair(self, pair: RunLengthPair) -> None:
        """Write an 8-bit skip and a 16-bit two's-complement value."""
        skip, value = pair
        self.write_bits(skip, SKIP_BITS)
        self.write_bits(value & ((1 << VALUE_BITS) - 1), VALUE_BITS)

    def _flush_byte(self) -> None:
        """Flush accumulated bits as a byte."""
        self.f.write(bytes([self.accumulator]))
        self.accumulator = 0
        self.bit_count = 0

    def flush(self) -> None:
        """Pad remaining bits with 0s to reach byte boundary."""
        if self.bit_count > 0:
            padding = 8 - self.bit_count
            self.accumulator = (self.accumulator << padding)
            self.f.write(bytes([self.accumulator]))
            self.accumulator = 0
            self.bit_count = 0


class BitstreamReader:
    """Bit-level reader for binary data."""

    def __init__(self, data_bytes: bytes):
        """
        Initialize bitstream reader.

        Args:
            data_bytes: Binary data to read from
        """
        self.data = data_bytes
        self.byte_ptr = 0
        self.bit_ptr = 0  # 0 to 7, current bit index (MSB=0)

    def read_bit(self) -> int:
        """Read a single bit."""
        if self.byte_ptr >= len(self.data):
            raise EOFError("End of bitstream")

        byte = self.data[self.byte_ptr]
        bit = (byte >> (7 - self.bit_ptr)) & 1

        self.bit_ptr += 1
        if self.bit_ptr == 8:
            self.bit_ptr = 0
            self.byte_ptr += 1

        return bit

    def read_bits(self, num_bits: int) -> int:
        """Read multiple bits and return as integer."""
        value = 0
        for _ in range(num_bits):
            value = (value << 1) | self.read_bit()
        return value

    def read_pair(self) -> RunLengthPair:
        """Read one pair written by BitstreamWriter.write_pair."""
        skip = self.read_bits(SKIP_BITS)
        raw = self.read_bits(VALUE_BITS)
        if raw >= 1 << (VALUE_BITS - 1):
            raw -= 1 << VALUE_BITS
        return RunLengthPair(skip, raw)

    def bytes_remaining(self) -> int:
        """Return number of full bytes remaining."""
        remaining = len(self.data) - self.byte_ptr
        if self.bit_ptr > 0:
            remaining -= 1
        return max(0, remaining)


def pack_header(width: int, height: int, data_len: int,
                max_skip: int = MAX_SKIP, round_nearest: bool = False) -> bytes:
    """
    Pack metadata into a 16-byte binary header.

    Args:
        width: Image width
        height: Image height
        data_len: Length of payload in bytes (CRC included)
        max_skip: Flush threshold the encoder used
        round_nearest: Whether quantization rounded instead of truncating

    Returns:
        16-byte header as bytes
    """
    if not (0 <= width <= 0xFFFF and 0 <= height <= 0xFFFF):
        raise ValueError(f"Image dimensions {width}x{height} exceed 65535")

    flags = FLAG_ROUND_NEAREST if round_nearest else 0x00

    return struct.pack(
        HEADER_FORMAT,
        MAGIC,          # Magic number
        VERSION,        # Version
        width,
        height,
        NUM_CHANNELS,
        flags,
        max_skip,
        data_len,
    )


def unpack_header(header_bytes: bytes) -> dict:
    """
    Unpack the 16-byte binary header.

    Args:
        header_bytes: 16-byte header data

    Returns:
        Dictionary with header fields

    Raises:
        ValueError: If header is invalid
    """
    if len(header_bytes) != HEADER_SIZE:
        raise ValueError(f"Header size mismatch. Expected {HEADER_SIZE}, got {len(header_bytes)}")

    magic, ver, w, h, channels, flags, max_skip, dlen = struct.unpack(HEADER_FORMAT, header_bytes)

    if magic != MAGIC:
        raise ValueError(f"Invalid file signature: {magic}. Expected {MAGIC}")

    if ver != VERSION:
        raise ValueError(f"Unsupported version: {ver}")

    if channels != NUM_CHANNELS:
        raise ValueError(f"Unsupported channel count: {channels}")

    return {
        'width': w,
        'height': h,
        'channels': channels,
        'round_nearest': bool(flags & FLAG_ROUND_NEAREST),
        'max_skip': max_skip,
        'data_len': dlen,
    }


def serialize_encoded_image(encoded, width: int, height: int,
                            max_skip: int = MAX_SKIP,
                            round_nearest: bool = False) -> bytes:
    """
    Serialize an EncodedImage into header + payload + CRC32.

    Tiles are written back to back in channel then raster order; each one
    ends with its EOB pair, which is how the reader finds tile boundaries.
    """
    buffer = io.BytesIO()
    writer = BitstreamWriter(buffer)

    for channel in encoded.channels:
        for tile in channel:
            for pair in tile:
                writer.write_pair(pair)
    writer.flush()

    payload = buffer.getvalue()
    crc = zlib.crc32(payload) & 0xFFFFFFFF

    header = pack_header(width, height, len(payload) + 4,  # +4 for CRC
                         max_skip=max_skip, round_nearest=round_nearest)
    return header + payload + crc.to_bytes(4, 'little')


def deserialize_encoded_image(data: bytes):
    """
    Parse a .dcc container.

    Returns:
        Tuple of (EncodedImage, header dict)

    Raises:
        ValueError: If data is truncated, corrupted or not a .dcc container
    """
    from ..codec.encoded_image import EncodedImage

    if len(data) < HEADER_SIZE:
        raise ValueError(f"Data too short: {len(data)} bytes, need at least {HEADER_SIZE}")

    header = unpack_header(data[:HEADER_SIZE])
    data_len = header['data_len']

    expected_len = HEADER_SIZE + data_len
    if data_len < 4 or len(data) < expected_len:
        raise ValueError(f"Data truncated: expected {expected_len} bytes, got {len(data)}")

    payload = data[HEADER_SIZE:HEADER_SIZE + data_len - 4]
    crc_received = int.from_bytes(data[HEADER_SIZE + data_len - 4:HEADER_SIZE + data_len], 'little')
    crc_computed = zlib.crc32(payload) & 0xFFFFFFFF
    if crc_computed != crc_received:
        raise ValueError(f"CRC mismatch: expected {crc_received:08X}, got {crc_computed:08X}")

    n_blocks_h, n_blocks_w = block_grid(header['width'], header['height'])
    num_blocks = n_blocks_h * n_blocks_w

    reader = BitstreamReader(payload)
    channels = []
    try:
        for _ in range(header['channels']):
            tiles = []
            for _ in range(num_blocks):
                tiles.append(_read_tile(reader))
            channels.append(tiles)
    except EOFError as e:
        raise ValueError(f"Payload ended before all {num_blocks} tiles were read") from e

    if reader.bytes_remaining():
        raise ValueError(
            f"{reader.bytes_remaining()} unexpected bytes after the last tile")

    return EncodedImage(*channels), header


def _read_tile(reader: BitstreamReader) -> List[RunLengthPair]:
    """Read pairs up to and including the tile's EOB."""
    pairs = []
    while True:
        pair = reader.read_pair()
        pairs.append(pair)
        if pair.is_eob:
            return pairs
