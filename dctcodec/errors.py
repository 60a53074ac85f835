"""Error kinds raised by the codec.

All of them derive from ValueError: every failure here is a deterministic
function of the input, so the remedy is to fix the input, never to retry.
"""


class CodecError(ValueError):
    """Base class for codec errors."""


class DimensionMismatchError(CodecError):
    """Tile count or shape does not match the declared image dimensions."""


class ValueOutOfRangeError(CodecError):
    """A value does not fit the field it must be stored in."""


class RunOverflowError(CodecError):
    """A run-length pair moves the decode cursor past the end of the block."""
