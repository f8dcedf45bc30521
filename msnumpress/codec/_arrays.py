"""Input coercion shared by the codecs."""

import warnings

import numpy as np

from ..exceptions import NumpressRangeError


def as_value_array(values) -> np.ndarray:
    """Coerce array-like input to a contiguous 1D float64 array."""
    arr = np.asarray(values, dtype=np.float64)
    if arr.ndim == 0:
        arr = arr.reshape(1)
    elif arr.ndim > 1:
        warnings.warn(f"Flattening {arr.ndim}D input of shape {arr.shape} before encoding")
        arr = arr.ravel()
    return np.ascontiguousarray(arr)


def as_byte_buffer(data) -> bytes:
    if isinstance(data, np.ndarray):
        return np.ascontiguousarray(data).tobytes()
    return bytes(data)


def check_in_range(values: np.ndarray, ok: np.ndarray, what: str):
    """Raise NumpressRangeError naming the first value where ``ok`` is False."""
    if ok.all():
        return
    index = int(np.flatnonzero(~ok)[0])
    value = float(values[index])
    raise NumpressRangeError(
        f"{what}: value {value!r} at index {index} cannot be encoded",
        index=index, value=value,
    )


def check_finite(values: np.ndarray, what: str):
    check_in_range(values, np.isfinite(values), what)
