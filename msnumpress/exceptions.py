"""Exception types raised by the MS-Numpress codecs."""

from typing import Optional


class NumpressError(Exception):
    """Base class for every error raised by msnumpress."""


class NumpressRangeError(NumpressError, ValueError):
    """A value cannot be represented by the requested encoding.

    Raised before any byte is produced, so no partial output escapes.
    """

    def __init__(self, message: str, index: Optional[int] = None,
                 value: Optional[float] = None):
        super().__init__(message)
        self.index = index
        self.value = value


class NumpressDecodeError(NumpressError, ValueError):
    """Encoded bytes are truncated or malformed.

    Attributes:
        offset: Byte position of the cursor when decoding failed.
        half: Nibble parity at that point (0 = high nibble, 1 = low nibble).
        n_decoded: Number of values successfully decoded before the failure.
        byte_count: Total length of the buffer being decoded.
    """

    def __init__(self, message: str, offset: int, half: int = 0,
                 n_decoded: int = 0, byte_count: Optional[int] = None):
        detail = f"{message} (offset={offset}, half={half}, decoded={n_decoded}"
        if byte_count is not None:
            detail += f", byte_count={byte_count}"
        super().__init__(detail + ")")
        self.offset = offset
        self.half = half
        self.n_decoded = n_decoded
        self.byte_count = byte_count
