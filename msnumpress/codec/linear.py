"""Linear-prediction codec for smooth double arrays (m/z, retention time).

Values are converted to a 5-decimal fixed-point integer:

    fp = trunc(value * 100000 + 0.5)

which rounds half up for non-negative values and truncates toward zero for
negative ones. The first two fixed-point values are stored verbatim as
little-endian 32-bit words. Every later value is predicted from the previous
two,

    extrapol = v[i-1] + (v[i-1] - v[i-2])

and only the residual ``v[i] - extrapol`` is written with the nibble integer
codec. On typical m/z arrays most residuals fit in one to three nibbles.

Non-negative values round-trip to within 5e-6. The fixed-point value must fit
a signed 32-bit integer, which limits magnitudes to about 21474.8.
"""

import logging
import struct

import numpy as np

from ..config import DEFAULT_CONFIG, LINEAR_FIXED_POINT
from ..exceptions import NumpressDecodeError
from ._arrays import as_byte_buffer, as_value_array, check_finite, check_in_range
from .nibble import NibbleCursor, NibbleWriter, iter_ints, to_int32

logger = logging.getLogger(__name__)

HEADER_BYTES = 8


def to_fixed_point(values: np.ndarray) -> np.ndarray:
    """Scale values to the linear codec's fixed-point integers (int64)."""
    check_finite(values, "encode_linear")
    fp = np.trunc(values * LINEAR_FIXED_POINT + 0.5)
    check_in_range(
        values,
        (fp >= DEFAULT_CONFIG.int32_min) & (fp <= DEFAULT_CONFIG.int32_max),
        "encode_linear: fixed-point overflow",
    )
    return fp.astype(np.int64)


def encode_linear(values) -> bytes:
    """Encode doubles with fixed-point linear prediction.

    Args:
        values: 1D array-like of doubles.

    Returns:
        Encoded bytes; at most ``5 * len(values)`` long.

    Raises:
        NumpressRangeError: for non-finite values or values whose fixed-point
            form overflows a signed 32-bit integer.
    """
    arr = as_value_array(values)
    n = len(arr)
    if n == 0:
        return b""

    ints = to_fixed_point(arr).tolist()
    if n == 1:
        return struct.pack("<i", ints[0])

    writer = NibbleWriter(struct.pack("<ii", ints[0], ints[1]))
    for i in range(2, n):
        extrapol = ints[i - 1] + (ints[i - 1] - ints[i - 2])
        writer.write_int(ints[i] - extrapol)
    encoded = writer.flush()

    logger.debug("encode_linear: %d values -> %d bytes (%d residual nibbles)",
                 n, len(encoded), writer.nibble_count)
    return encoded


def decode_linear(data) -> np.ndarray:
    """Decode bytes produced by encode_linear().

    Args:
        data: Bytes-like encoded buffer.

    Returns:
        1D float64 array, at most ``2 * len(data)`` long.

    Raises:
        NumpressDecodeError: if the header is incomplete or the nibble
            stream ends inside an integer.
    """
    data = as_byte_buffer(data)
    byte_count = len(data)
    if byte_count == 0:
        return np.array([], dtype=np.float64)
    if byte_count == 4:
        first, = struct.unpack("<i", data)
        return np.array([first / LINEAR_FIXED_POINT], dtype=np.float64)
    if byte_count < HEADER_BYTES:
        raise NumpressDecodeError(
            "Incomplete linear header", offset=0, byte_count=byte_count,
        )

    prev2, prev1 = struct.unpack_from("<ii", data)
    ints = [prev2, prev1]
    try:
        for diff in iter_ints(data, NibbleCursor(HEADER_BYTES, 0)):
            y = to_int32(prev1 + (prev1 - prev2) + diff)
            ints.append(y)
            prev2, prev1 = prev1, y
    except NumpressDecodeError as exc:
        logger.debug("decode_linear failed after %d values: %s", len(ints), exc)
        raise NumpressDecodeError(
            "Truncated linear stream", offset=exc.offset, half=exc.half,
            n_decoded=len(ints), byte_count=byte_count,
        ) from exc

    logger.debug("decode_linear: %d bytes -> %d values", byte_count, len(ints))
    return np.asarray(ints, dtype=np.float64) / LINEAR_FIXED_POINT
