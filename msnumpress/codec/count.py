"""Count codec for ion counts.

Each value is rounded to the nearest non-negative integer,
``trunc(value + 0.5)``, and written directly with the nibble integer codec.
No prediction and no scaling. The handleable range is 0 to 4294967294; small
counts take a single byte or less.
"""

import logging

import numpy as np

from ..config import DEFAULT_CONFIG
from ..exceptions import NumpressDecodeError
from ._arrays import as_byte_buffer, as_value_array, check_finite, check_in_range
from .nibble import INT_MASK, NibbleWriter, iter_ints

logger = logging.getLogger(__name__)


def encode_count(values) -> bytes:
    """Encode doubles as rounded non-negative integers.

    Args:
        values: 1D array-like of counts.

    Returns:
        Encoded bytes; at most ``5 * len(values)`` long.

    Raises:
        NumpressRangeError: for non-finite values or counts that round
            outside 0..4294967294.
    """
    arr = as_value_array(values)
    check_finite(arr, "encode_count")
    counts = np.trunc(arr + 0.5)
    check_in_range(
        arr,
        (counts >= 0) & (counts <= DEFAULT_CONFIG.max_count),
        "encode_count: count out of range",
    )

    writer = NibbleWriter()
    for count in counts.astype(np.int64).tolist():
        writer.write_int(count)
    encoded = writer.flush()

    logger.debug("encode_count: %d values -> %d bytes (%d nibbles)",
                 len(arr), len(encoded), writer.nibble_count)
    return encoded


def decode_count(data) -> np.ndarray:
    """Decode bytes produced by encode_count().

    Returns:
        1D float64 array of counts, at most ``2 * len(data)`` long.

    Raises:
        NumpressDecodeError: if the nibble stream ends inside an integer.
    """
    data = as_byte_buffer(data)
    counts = []
    try:
        for value in iter_ints(data):
            counts.append(value & INT_MASK)
    except NumpressDecodeError as exc:
        logger.debug("decode_count failed after %d values: %s", len(counts), exc)
        raise NumpressDecodeError(
            "Truncated count stream", offset=exc.offset, half=exc.half,
            n_decoded=len(counts), byte_count=len(data),
        ) from exc

    logger.debug("decode_count: %d bytes -> %d values", len(data), len(counts))
    return np.asarray(counts, dtype=np.float64)
