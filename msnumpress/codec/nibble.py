"""Variable-length nibble (half-byte) integer encoding.

A 32-bit integer is written as a header nibble followed by its remaining
nibbles in little-endian order. The header counts the leading nibbles that
were dropped:

    0 <= head <= 8      head leading 0x0 nibbles
    9 <= head <= 15     (head - 8) leading 0xf nibbles

    int     head    rest
    0   =>  0x8
    -1  =>  0xf     0xf
    23  =>  0x6     0x7  0x1

Nibbles are packed two per byte, high nibble first. Integers are not
byte-aligned: a leftover nibble is shared with the next integer, so decoders
thread a NibbleCursor (byte position + parity) from one integer to the next.
"""

from typing import Iterator, NamedTuple, Tuple

from ..exceptions import NumpressDecodeError

INT_MASK = 0xFFFFFFFF
NIBBLES_PER_INT = 8
ZERO_HEADER = 0x8  # a complete encoding of the integer 0


def to_int32(u: int) -> int:
    """Reinterpret the low 32 bits of ``u`` as a signed integer."""
    u &= INT_MASK
    if u & 0x80000000:
        return u - (1 << 32)
    return u


def encode_int(x: int) -> Tuple[int, ...]:
    """Encode the 32-bit two's-complement pattern of ``x`` as 1 to 9 nibbles.

    Args:
        x: Integer; only its low 32 bits are encoded.

    Returns:
        Tuple of nibble values, header first.
    """
    u = x & INT_MASK
    nibbles = [(u >> (4 * i)) & 0xF for i in range(NIBBLES_PER_INT)]
    top = nibbles[-1]

    if top == 0x0:
        lead = 0
        while lead < 8 and nibbles[7 - lead] == 0x0:
            lead += 1
        return (lead,) + tuple(nibbles[:8 - lead])

    if top == 0xF:
        # capped at 7: the header alone cannot express 8 leading 0xf nibbles
        lead = 0
        while lead < 7 and nibbles[7 - lead] == 0xF:
            lead += 1
        return (lead + 8,) + tuple(nibbles[:8 - lead])

    return (0,) + tuple(nibbles)


class NibbleCursor(NamedTuple):
    """Read position in a nibble stream.

    ``half`` is 0 when the next nibble is the high nibble of ``data[pos]``
    and 1 when it is the low nibble.
    """

    pos: int = 0
    half: int = 0


def read_nibble(data: bytes, cursor: NibbleCursor) -> Tuple[int, NibbleCursor]:
    """Read one nibble and return it with the advanced cursor."""
    pos, half = cursor
    if pos >= len(data):
        raise NumpressDecodeError(
            "Unexpected end of nibble stream", offset=pos, half=half,
            byte_count=len(data),
        )
    if half == 0:
        return data[pos] >> 4, NibbleCursor(pos, 1)
    return data[pos] & 0xF, NibbleCursor(pos + 1, 0)


def decode_int(data: bytes, cursor: NibbleCursor = NibbleCursor()) -> Tuple[int, NibbleCursor]:
    """Decode one integer written by encode_int().

    Args:
        data: Packed nibble bytes.
        cursor: Where the integer's header nibble starts.

    Returns:
        (signed 32-bit value, cursor positioned after the integer).

    Raises:
        NumpressDecodeError: if the stream ends inside the integer.
    """
    head, cursor = read_nibble(data, cursor)

    if head <= 8:
        n = head
        res = 0
    else:
        n = head - 8
        res = (INT_MASK << (4 * (NIBBLES_PER_INT - n))) & INT_MASK

    for i in range(NIBBLES_PER_INT - n):
        hb, cursor = read_nibble(data, cursor)
        res |= hb << (4 * i)

    return to_int32(res), cursor


def is_trailing_padding(data: bytes, cursor: NibbleCursor) -> bool:
    """True if only the low nibble of the last byte is left and it is padding.

    Encoders pad an odd nibble count with a low 0x0 nibble. A lone trailing
    nibble can only hold a complete integer when it is the zero header 0x8,
    so any other value there is padding.
    """
    return (
        cursor.half == 1
        and cursor.pos == len(data) - 1
        and (data[cursor.pos] & 0xF) != ZERO_HEADER
    )


def iter_ints(data: bytes, cursor: NibbleCursor = NibbleCursor()) -> Iterator[int]:
    """Decode integers until the buffer is exhausted or only padding remains."""
    while cursor.pos < len(data):
        if is_trailing_padding(data, cursor):
            return
        value, cursor = decode_int(data, cursor)
        yield value


class NibbleWriter:
    """Pack nibbles into bytes, high nibble first."""

    def __init__(self, prefix: bytes = b""):
        self._bytes = bytearray(prefix)
        self._pending = None  # leftover high nibble waiting for a partner
        self._count = 0

    def write_nibble(self, nibble: int):
        nibble &= 0xF
        if self._pending is None:
            self._pending = nibble
        else:
            self._bytes.append((self._pending << 4) | nibble)
            self._pending = None
        self._count += 1

    def write_int(self, x: int):
        """Append encode_int(x)."""
        for nibble in encode_int(x):
            self.write_nibble(nibble)

    def flush(self) -> bytes:
        """Pad a leftover nibble with a low 0x0 and return all bytes."""
        if self._pending is not None:
            self._bytes.append(self._pending << 4)
            self._pending = None
        return bytes(self._bytes)

    @property
    def nibble_count(self) -> int:
        return self._count
