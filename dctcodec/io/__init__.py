"""I/O modules for the DCT block codec."""

from .image_reader import read_rgb_image, image_to_channels
from .image_writer import channels_to_image, write_rgb_image
from .bitstream import (
    BitstreamWriter,
    BitstreamReader,
    pack_header,
    unpack_header,
    serialize_encoded_image,
    deserialize_encoded_image,
)

__all__ = [
    'read_rgb_image',
    'image_to_channels',
    'channels_to_image',
    'write_rgb_image',
    'BitstreamWriter',
    'BitstreamReader',
    'pack_header',
    'unpack_header',
    'serialize_encoded_image',
    'deserialize_encoded_image',
]
