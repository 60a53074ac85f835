"""Run-Length Encoding for flattened quantized blocks."""

from typing import Iterable, List, NamedTuple, Sequence

from ..constants import (
    BLOCK_AREA, MARKER_EOB, MAX_SKIP, SKIP_MIN, SKIP_MAX, VALUE_MIN, VALUE_MAX,
    OVERFLOW_CLAMP, OVERFLOW_RAISE,
)
from ..errors import RunOverflowError, ValueOutOfRangeError


class RunLengthPair(NamedTuple):
    """
    A (skip, value) pair: skip zeros, then write value.

    skip is an 8-bit unsigned count and value a 16-bit signed coefficient.
    (0, 0) is the End-Of-Block sentinel. A forced flush is (max_skip, 0): it
    skips max_skip zeros and writes one more explicit zero.
    """

    skip: int
    value: int

    @classmethod
    def checked(cls, skip: int, value: int) -> 'RunLengthPair':
        """Build a pair, verifying both fields fit their bit widths."""
        skip = int(skip)
        value = int(value)
        if not SKIP_MIN <= skip <= SKIP_MAX:
            raise ValueOutOfRangeError(
                f"Skip count {skip} outside 8-bit range [{SKIP_MIN}, {SKIP_MAX}]")
        if not VALUE_MIN <= value <= VALUE_MAX:
            raise ValueOutOfRangeError(
                f"Coefficient {value} outside 16-bit range [{VALUE_MIN}, {VALUE_MAX}]")
        return cls(skip, value)

    @property
    def is_eob(self) -> bool:
        return self.skip == 0 and self.value == 0


# Special markers
EOB = RunLengthPair(*MARKER_EOB)      # End of Block - remaining coefficients are all zeros


def flush_marker(max_skip: int = MAX_SKIP) -> RunLengthPair:
    """The pair emitted when a zero run outgrows max_skip."""
    return RunLengthPair(max_skip, 0)


def rle_encode(coeffs: Iterable[int], max_skip: int = MAX_SKIP,
               length: int = BLOCK_AREA) -> List[RunLengthPair]:
    """
    Apply Run-Length Encoding to a flattened quantized block.

    Each non-zero coefficient is encoded as (skip, value) where skip is the
    number of zeros preceding it. A run of max_skip zeros followed by yet
    another zero is flushed as (max_skip, 0), which accounts for
    max_skip + 1 positions. The output always ends with EOB, even when the
    block has trailing non-zeros.

    Args:
        coeffs: Flattened quantized coefficients (64 for an 8x8 block)
        max_skip: Longest run a single pair may skip (default: 62)
        length: Required number of coefficients (default: 64)

    Returns:
        List of RunLengthPair, terminated by EOB

    Raises:
        ValueOutOfRangeError: If a coefficient does not fit in 16 bits, or
            the block does not hold exactly `length` coefficients
    """
    if not 1 <= max_skip <= SKIP_MAX:
        raise ValueError(f"max_skip must be in range [1, {SKIP_MAX}], got {max_skip}")

    coeffs = [int(c) for c in coeffs]
    if len(coeffs) != length:
        raise ValueOutOfRangeError(
            f"Block has {len(coeffs)} coefficients, expected {length}")

    result = []
    zero_count = 0

    for coeff in coeffs:
        if coeff == 0:
            if zero_count == max_skip:
                result.append(flush_marker(max_skip))
                zero_count = 0
            else:
                zero_count += 1
        else:
            result.append(RunLengthPair.checked(zero_count, coeff))
            zero_count = 0

    result.append(EOB)
    return result


def rle_decode(rle_pairs: Sequence[Sequence[int]], length: int = BLOCK_AREA,
               overflow: str = OVERFLOW_CLAMP) -> List[int]:
    """
    Decode Run-Length Encoded pairs back into a flat block.

    Decoding stops at the first EOB; every position not written stays zero.
    When a skip would move the cursor past the end of the block, the
    'clamp' policy writes to the last position instead, while 'raise'
    raises RunOverflowError.

    Args:
        rle_pairs: (skip, value) pairs, typically ending with EOB
        length: Expected output length (default: 64)
        overflow: 'clamp' or 'raise'

    Returns:
        List of exactly `length` integers
    """
    if overflow not in (OVERFLOW_CLAMP, OVERFLOW_RAISE):
        raise ValueError(f"Unknown overflow policy: {overflow}")

    result = [0] * length
    if length == 0:
        return result

    last = length - 1
    cursor = 0

    for skip, value in rle_pairs:
        if skip == 0 and value == 0:
            break
        if not SKIP_MIN <= skip <= SKIP_MAX:
            raise ValueOutOfRangeError(
                f"Skip count {skip} outside 8-bit range [{SKIP_MIN}, {SKIP_MAX}]")

        cursor += skip
        if cursor > last:
            if overflow == OVERFLOW_RAISE:
                raise RunOverflowError(
                    f"Pair ({skip}, {value}) targets position {cursor} "
                    f"in a block of {length}")
            cursor = last

        result[cursor] = int(value)

        if cursor < last:
            cursor += 1
        elif overflow == OVERFLOW_RAISE:
            # Block is full; any further non-EOB pair overflows
            cursor = length

    return result
