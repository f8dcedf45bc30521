"""MS-Numpress codec subpackage.

All codecs are numpy-only and operate on one fully materialized array.
"""

from .nibble import NibbleCursor, NibbleWriter, decode_int, encode_int
from .linear import decode_linear, encode_linear
from .count import decode_count, encode_count
from .two_byte_float import decode_2byte_float, encode_2byte_float

__all__ = [
    "NibbleCursor",
    "NibbleWriter",
    "encode_int",
    "decode_int",
    "encode_linear",
    "decode_linear",
    "encode_count",
    "decode_count",
    "encode_2byte_float",
    "decode_2byte_float",
]
