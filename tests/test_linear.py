"""Tests for the linear-prediction codec."""

import struct

import numpy as np
import pytest

from msnumpress.codec.linear import decode_linear, encode_linear, to_fixed_point
from msnumpress.exceptions import NumpressDecodeError, NumpressRangeError

# quantization bound plus float64 slack from the scaling multiply
TOLERANCE = 5e-6 + 1e-9


class TestEncodeLinear:
    """Test byte layout of encode_linear()."""

    def test_constant_slope(self):
        """[1, 2, 3]: two header words then one zero-residual nibble."""
        encoded = encode_linear([1.0, 2.0, 3.0])
        assert encoded == struct.pack("<ii", 100000, 200000) + b"\x80"

    def test_header_little_endian(self):
        encoded = encode_linear([0.00001, 0.00256])
        assert encoded == b"\x01\x00\x00\x00\x00\x01\x00\x00"

    def test_empty(self):
        assert encode_linear([]) == b""

    def test_single_value(self):
        """One value is its header word alone."""
        assert encode_linear([1.5]) == struct.pack("<i", 150000)

    def test_two_values(self):
        assert len(encode_linear([1.5, 2.5])) == 8

    def test_rounding_rule(self):
        """Round half up for positives, truncate toward zero for negatives."""
        fp = to_fixed_point(np.array([0.000014, 0.0000175, -0.000014, -0.000016]))
        assert fp.tolist() == [1, 2, 0, -1]

    def test_size_bound(self):
        """Output never exceeds 5 bytes per value, even for noisy data."""
        rng = np.random.RandomState(42)
        for n in (1, 2, 3, 10, 257):
            values = rng.uniform(-20000, 20000, size=n)
            assert len(encode_linear(values)) <= 5 * n

    def test_smooth_data_compresses(self):
        """Evenly spaced m/z values cost about a nibble each."""
        mz = 400.0 + np.arange(1000) * 0.0125
        encoded = encode_linear(mz)
        assert len(encoded) < mz.nbytes / 8

    def test_overflow_rejected(self):
        with pytest.raises(NumpressRangeError) as info:
            encode_linear([100.0, 200.0, 30000.0])
        assert info.value.index == 2
        assert info.value.value == 30000.0

    def test_non_finite_rejected(self):
        with pytest.raises(NumpressRangeError):
            encode_linear([1.0, np.nan])
        with pytest.raises(NumpressRangeError):
            encode_linear([np.inf])


class TestDecodeLinear:
    """Test decode_linear() and round trips."""

    def test_constant_slope_exact(self):
        decoded = decode_linear(encode_linear([1.0, 2.0, 3.0]))
        np.testing.assert_array_equal(decoded, [1.0, 2.0, 3.0])

    def test_padding_not_decoded(self):
        """A padded odd nibble count yields no extra value."""
        for n in range(2, 12):
            values = np.arange(n, dtype=np.float64)
            assert len(decode_linear(encode_linear(values))) == n

    def test_trailing_zero_residual_kept(self):
        """An even count of zero residuals ends in a real 0x8 nibble."""
        values = [1.0, 2.0, 3.0, 4.0]
        encoded = encode_linear(values)
        assert encoded[-1] == 0x88
        np.testing.assert_array_equal(decode_linear(encoded), values)

    def test_roundtrip_mz(self):
        """Sorted m/z-like values roundtrip within 5e-6."""
        rng = np.random.RandomState(42)
        mz = np.sort(rng.uniform(100.0, 2000.0, size=2000))
        decoded = decode_linear(encode_linear(mz))
        assert decoded.shape == mz.shape
        assert np.max(np.abs(decoded - mz)) <= TOLERANCE

    def test_roundtrip_random_order(self):
        """Unsorted values across the full range roundtrip."""
        rng = np.random.RandomState(3)
        values = rng.uniform(0.0, 21474.0, size=500)
        decoded = decode_linear(encode_linear(values))
        assert np.max(np.abs(decoded - values)) <= TOLERANCE

    def test_roundtrip_negative(self):
        """Negative values truncate toward zero, costing up to 1.5 steps."""
        rng = np.random.RandomState(5)
        values = rng.uniform(-1000.0, 0.0, size=500)
        decoded = decode_linear(encode_linear(values))
        assert np.max(np.abs(decoded - values)) < 1.5e-5 + 1e-9

    def test_wrapping_residuals(self):
        """Residuals larger than int32 wrap and still decode exactly."""
        values = [0.0, 20000.0, 0.0, 20000.0, 10000.0]
        np.testing.assert_allclose(decode_linear(encode_linear(values)), values, atol=TOLERANCE)

    def test_single_and_empty(self):
        np.testing.assert_array_equal(decode_linear(encode_linear([1.5])), [1.5])
        assert len(decode_linear(b"")) == 0

    def test_decoded_length_bound(self):
        rng = np.random.RandomState(1)
        encoded = encode_linear(np.cumsum(rng.randn(300)))
        assert len(decode_linear(encoded)) <= 2 * len(encoded)

    def test_accepts_bytearray(self):
        encoded = bytearray(encode_linear([1.0, 2.0, 3.0]))
        np.testing.assert_array_equal(decode_linear(encoded), [1.0, 2.0, 3.0])

    def test_short_header_raises(self):
        with pytest.raises(NumpressDecodeError) as info:
            decode_linear(b"\x00" * 5)
        assert info.value.offset == 0

    def test_truncated_stream_raises(self):
        """A header nibble 0 announces 8 more nibbles that are missing."""
        data = struct.pack("<ii", 100000, 200000) + b"\x07"
        with pytest.raises(NumpressDecodeError) as info:
            decode_linear(data)
        assert info.value.offset == 9
        assert info.value.n_decoded == 2
        assert info.value.byte_count == 9
