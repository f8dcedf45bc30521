"""Format constants for the MS-Numpress codecs."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class NumpressConfig:
    """Constants shared by encoders and decoders.

    These are part of the wire format: changing any of them makes the
    output unreadable by other Numpress implementations.
    """

    # --- Linear prediction ---
    linear_fixed_point: float = 100000.0  # 5 decimals
    int32_min: int = -(1 << 31)
    int32_max: int = (1 << 31) - 1

    # --- Count ---
    max_count: int = 4294967294

    # --- Two-byte float ---
    float2_fixed_point: float = 3000.0
    float2_max: int = 0xFFFF

    # --- Dispatch ---
    codecs: Tuple[str, ...] = ("linear", "count", "float2")
    default_codec: str = "linear"


DEFAULT_CONFIG = NumpressConfig()

LINEAR_FIXED_POINT = DEFAULT_CONFIG.linear_fixed_point
TWO_BYTE_FLOAT_FIXED_POINT = DEFAULT_CONFIG.float2_fixed_point
