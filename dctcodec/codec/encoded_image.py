"""Encoded image model: per-channel lists of run-length encoded tiles."""

from dataclasses import dataclass, field
from typing import List, Tuple

from ..entropy.rle import RunLengthPair

EncodedChannel = List[List[RunLengthPair]]


@dataclass
class EncodedImage:
    """
    Run-length encoded DCT coefficient tiles for the red, green and blue channels.

    Tiles are in raster order over the padded block grid. Width and height
    are not stored here and must travel alongside for decoding.
    """

    red: EncodedChannel = field(default_factory=list)
    green: EncodedChannel = field(default_factory=list)
    blue: EncodedChannel = field(default_factory=list)

    @property
    def channels(self) -> Tuple[EncodedChannel, EncodedChannel, EncodedChannel]:
        return (self.red, self.green, self.blue)

    @property
    def tile_count(self) -> int:
        """Tiles per channel."""
        return len(self.red)

    def pair_count(self) -> int:
        """Total number of pairs emitted across all tiles and channels."""
        return sum(len(tile) for channel in self.channels for tile in channel)
