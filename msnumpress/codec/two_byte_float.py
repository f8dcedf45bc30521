"""Two-byte logarithmic float codec for intensities.

    fp = trunc(ln(value) * 3000 + 0.5)      stored as little-endian uint16
    value = exp(fp / 3000)

Fixed 2 bytes per value, no header, no padding. The relative error is at most
exp(1 / 6000) - 1 (about 1.7e-4). Representable values lie in
[exp(-0.5 / 3000), exp(65535.5 / 3000)), roughly [0.99983, 3.07e9).
"""

import logging

import numpy as np

from ..config import DEFAULT_CONFIG, TWO_BYTE_FLOAT_FIXED_POINT
from ..exceptions import NumpressDecodeError
from ._arrays import as_byte_buffer, as_value_array, check_in_range

logger = logging.getLogger(__name__)

_WIRE_DTYPE = np.dtype("<u2")


def encode_2byte_float(values) -> bytes:
    """Encode strictly positive doubles as 16-bit fixed-point logarithms.

    Args:
        values: 1D array-like of positive doubles.

    Returns:
        Exactly ``2 * len(values)`` bytes.

    Raises:
        NumpressRangeError: for non-positive or non-finite values, or values
            whose scaled logarithm does not fit an unsigned 16-bit integer.
    """
    arr = as_value_array(values)
    check_in_range(arr, np.isfinite(arr) & (arr > 0), "encode_2byte_float: logarithm domain")
    scaled = np.log(arr) * TWO_BYTE_FLOAT_FIXED_POINT + 0.5
    fp = np.trunc(scaled)
    # checked before truncation: trunc folds (-1, 0) into 0
    check_in_range(
        arr, (scaled >= 0) & (fp <= DEFAULT_CONFIG.float2_max),
        "encode_2byte_float: fixed-point overflow",
    )
    encoded = fp.astype(_WIRE_DTYPE).tobytes()
    logger.debug("encode_2byte_float: %d values -> %d bytes", len(arr), len(encoded))
    return encoded


def decode_2byte_float(data) -> np.ndarray:
    """Decode bytes produced by encode_2byte_float().

    Raises:
        NumpressDecodeError: if the buffer length is odd.
    """
    data = as_byte_buffer(data)
    if len(data) % 2:
        raise NumpressDecodeError(
            "Two-byte float buffer has odd length", offset=len(data) - 1,
            n_decoded=len(data) // 2, byte_count=len(data),
        )
    fp = np.frombuffer(data, dtype=_WIRE_DTYPE)
    return np.exp(fp / TWO_BYTE_FLOAT_FIXED_POINT)
