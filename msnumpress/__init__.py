"""MS-Numpress: compression of mass-spectrometry double arrays.

    import msnumpress
    encoded = msnumpress.encode(mz_values, codec="linear")
    recovered = msnumpress.decode(encoded, codec="linear")

Codecs:
    linear  fixed-point linear prediction (m/z, retention time)
    count   rounded non-negative integers (ion counts)
    float2  two-byte fixed-point logarithm (intensities)
"""

__version__ = "0.1.0"

import logging
import time
from pathlib import Path

import numpy as np

from .codec import (
    decode_2byte_float,
    decode_count,
    decode_int,
    decode_linear,
    encode_2byte_float,
    encode_count,
    encode_int,
    encode_linear,
)
from .config import DEFAULT_CONFIG, NumpressConfig
from .exceptions import NumpressDecodeError, NumpressError, NumpressRangeError

logger = logging.getLogger(__name__)

CODECS = DEFAULT_CONFIG.codecs

_ENCODERS = {
    "linear": encode_linear,
    "count": encode_count,
    "float2": encode_2byte_float,
}

_DECODERS = {
    "linear": decode_linear,
    "count": decode_count,
    "float2": decode_2byte_float,
}

# Codecs built on the nibble integer encoding.
_NIBBLE_CODECS = ("linear", "count")


def _check_codec(codec: str):
    if codec not in _ENCODERS:
        raise ValueError(f"Unknown codec: {codec!r}. Use one of {list(CODECS)}")


def encode(values, codec: str = DEFAULT_CONFIG.default_codec) -> bytes:
    """Encode a 1D array of doubles with the named codec.

    Args:
        values: Array-like of doubles.
        codec: 'linear', 'count' or 'float2'.

    Returns:
        Encoded bytes.
    """
    _check_codec(codec)
    return _ENCODERS[codec](values)


def decode(data, codec: str = DEFAULT_CONFIG.default_codec) -> np.ndarray:
    """Decode bytes written by encode() with the same codec."""
    _check_codec(codec)
    return _DECODERS[codec](data)


def max_encoded_size(n_values: int, codec: str = DEFAULT_CONFIG.default_codec) -> int:
    """Upper bound on the encoded size of ``n_values`` doubles, in bytes.

    Exact for 'float2'.
    """
    _check_codec(codec)
    if n_values < 0:
        raise ValueError(f"n_values must be non-negative, got {n_values}")
    if codec in _NIBBLE_CODECS:
        return 5 * n_values
    return 2 * n_values


def max_decoded_size(byte_count: int, codec: str = DEFAULT_CONFIG.default_codec) -> int:
    """Upper bound on the number of values decoded from ``byte_count`` bytes.

    Exact for 'float2'.
    """
    _check_codec(codec)
    if byte_count < 0:
        raise ValueError(f"byte_count must be non-negative, got {byte_count}")
    if codec in _NIBBLE_CODECS:
        return 2 * byte_count
    return byte_count // 2


# ---- File helpers ----

def _load_values(path: Path) -> np.ndarray:
    suffix = path.suffix.lower()
    if suffix == ".npy":
        return np.load(str(path)).astype(np.float64).ravel()
    if suffix in (".txt", ".csv", ".tsv"):
        delimiter = "," if suffix == ".csv" else None
        return np.atleast_1d(np.loadtxt(str(path), delimiter=delimiter, dtype=np.float64)).ravel()
    raise ValueError(f"Unsupported input format: {suffix}. Use .npy, .txt or .csv")


def _save_values(path: Path, values: np.ndarray):
    suffix = path.suffix.lower()
    path.parent.mkdir(parents=True, exist_ok=True)
    if suffix == ".npy":
        np.save(str(path), values)
    elif suffix in (".txt", ".csv", ".tsv"):
        np.savetxt(str(path), values, fmt="%.10g")
    else:
        raise ValueError(f"Unsupported output format: {suffix}. Use .npy, .txt or .csv")


def encode_file(
    input_path: str,
    output_path: str,
    codec: str = DEFAULT_CONFIG.default_codec,
) -> dict:
    """Encode a file of numbers and write the raw codec bytes.

    Args:
        input_path: .npy array or .txt/.csv file of numbers (flattened).
        output_path: Destination for the encoded bytes.
        codec: Codec name (see encode()).

    Returns:
        Dict with encode stats (n_values, raw_bytes, encoded_bytes, ratio, ...).
    """
    _check_codec(codec)
    input_p = Path(input_path)
    values = _load_values(input_p)

    start = time.perf_counter()
    encoded = encode(values, codec=codec)
    elapsed = time.perf_counter() - start

    out_p = Path(output_path)
    out_p.parent.mkdir(parents=True, exist_ok=True)
    out_p.write_bytes(encoded)

    raw_bytes = values.nbytes
    logger.info("Encoded %d values from %s (%s): %d -> %d bytes",
                len(values), input_p, codec, raw_bytes, len(encoded))
    return {
        "input_path": str(input_p),
        "output_path": str(out_p),
        "codec": codec,
        "n_values": len(values),
        "raw_bytes": raw_bytes,
        "encoded_bytes": len(encoded),
        "ratio": raw_bytes / max(len(encoded), 1),
        "elapsed_sec": elapsed,
    }


def decode_file(
    input_path: str,
    output_path: str,
    codec: str = DEFAULT_CONFIG.default_codec,
) -> dict:
    """Decode a file of raw codec bytes to .npy or .txt/.csv."""
    _check_codec(codec)
    input_p = Path(input_path)
    data = input_p.read_bytes()

    start = time.perf_counter()
    values = decode(data, codec=codec)
    elapsed = time.perf_counter() - start

    out_p = Path(output_path)
    _save_values(out_p, values)

    logger.info("Decoded %d values from %s (%s)", len(values), input_p, codec)
    return {
        "input_path": str(input_p),
        "output_path": str(out_p),
        "codec": codec,
        "n_values": len(values),
        "encoded_bytes": len(data),
        "elapsed_sec": elapsed,
    }


__all__ = [
    "CODECS",
    "NumpressConfig",
    "NumpressError",
    "NumpressRangeError",
    "NumpressDecodeError",
    "encode",
    "decode",
    "encode_int",
    "decode_int",
    "encode_linear",
    "decode_linear",
    "encode_count",
    "decode_count",
    "encode_2byte_float",
    "decode_2byte_float",
    "max_encoded_size",
    "max_decoded_size",
    "encode_file",
    "decode_file",
]
