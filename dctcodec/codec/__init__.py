"""Codec modules for the DCT block codec."""

from .encoded_image import EncodedImage
from .encoder import ImageEncoder
from .decoder import ImageDecoder

__all__ = [
    'EncodedImage',
    'ImageEncoder',
    'ImageDecoder',
]
