"""Codec configuration shared by the encode and decode paths."""

from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from .constants import (
    BLOCK_SIZE, LUMINANCE_QUANT_TABLE, MAX_SKIP, SKIP_MAX,
    ROUND_TRUNCATE, ROUNDING_MODES, OVERFLOW_CLAMP, OVERFLOW_POLICIES,
)


@dataclass(frozen=True)
class CodecConfig:
    """Tunable codec parameters.

    The defaults reproduce the reference behavior: truncating quantization,
    silent cursor clamping on decode, and a forced flush after 62 skipped zeros.
    """

    rounding: str = ROUND_TRUNCATE
    overflow: str = OVERFLOW_CLAMP
    max_skip: int = MAX_SKIP
    quant_table: np.ndarray = field(default_factory=lambda: LUMINANCE_QUANT_TABLE)
    max_workers: Optional[int] = None

    def __post_init__(self):
        if self.rounding not in ROUNDING_MODES:
            raise ValueError(f"Rounding must be one of {ROUNDING_MODES}, got {self.rounding!r}")
        if self.overflow not in OVERFLOW_POLICIES:
            raise ValueError(f"Overflow policy must be one of {OVERFLOW_POLICIES}, got {self.overflow!r}")
        # skip 0 is reserved for the EOB sentinel
        if not 1 <= self.max_skip <= SKIP_MAX:
            raise ValueError(f"max_skip must be in range [1, {SKIP_MAX}], got {self.max_skip}")

        table = np.asarray(self.quant_table)
        if table.shape != (BLOCK_SIZE, BLOCK_SIZE):
            raise ValueError(f"Quantization table must be {BLOCK_SIZE}x{BLOCK_SIZE}, got {table.shape}")
        if np.any(table <= 0):
            raise ValueError("Quantization table entries must be positive")
        if table is not LUMINANCE_QUANT_TABLE:
            table = table.astype(np.int32)
            table.flags.writeable = False
        object.__setattr__(self, 'quant_table', table)

        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers must be positive, got {self.max_workers}")


DEFAULT_CONFIG = CodecConfig()
