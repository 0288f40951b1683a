"""Property-based tests using hypothesis."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from bcdpack import (
    INT8,
    INT64,
    UINT16,
    UINT64,
    CodecConfig,
    EmptyInputPolicy,
    IntType,
    decode,
    encode,
    encoded_size,
)
from bcdpack.models.inttype import ALL_TYPES

PERMISSIVE = CodecConfig(empty_input=EmptyInputPolicy.PERMISSIVE)


class TestCodecProperties:
    """Property-based tests for the codec."""

    @given(value=st.integers(min_value=0, max_value=2**64 - 1))
    def test_unsigned_roundtrip(self, value: int) -> None:
        """Test encode/decode is invertible for non-negative values, zero included."""
        data = encode(value, UINT64)
        assert decode(data, UINT64, config=PERMISSIVE) == value

    @given(value=st.integers(min_value=1, max_value=2**64 - 1))
    def test_unsigned_roundtrip_strict(self, value: int) -> None:
        """Test the default strict policy round-trips every non-zero value."""
        assert decode(encode(value, UINT64), UINT64) == value

    @given(value=st.integers(min_value=-(2**63), max_value=2**63 - 1))
    def test_signed_roundtrip(self, value: int) -> None:
        """Test signed encode/decode is invertible over the Int64 range."""
        data = encode(value, INT64, include_sign=True)
        assert decode(data, INT64, signed_mode=True) == value

    @given(int_type=st.sampled_from(ALL_TYPES), data=st.data())
    def test_signed_roundtrip_every_type(self, int_type: IntType, data: st.DataObject) -> None:
        """Test signed round-trip for every type where it fits 10 bytes."""
        upper = min(int_type.max_value, 10**19 - 1)
        value = data.draw(st.integers(min_value=int_type.min_value, max_value=upper))

        encoded = encode(value, int_type, include_sign=True)
        assert decode(encoded, int_type, signed_mode=True) == value

    @given(
        value=st.integers(min_value=1, max_value=2**63 - 1),
        extra=st.integers(min_value=0, max_value=5),
    )
    def test_padding(self, value: int, extra: int) -> None:
        """Test padding yields exactly byte_count bytes ending in the natural form."""
        natural = encode(value)
        byte_count = len(natural) + extra
        padded = encode(value, byte_count=byte_count)

        assert len(padded) == byte_count
        assert padded[extra:] == natural
        assert padded[:extra] == bytes(extra)

    @given(value=st.integers(min_value=-(2**63), max_value=2**63 - 1), sign=st.booleans())
    def test_size_prediction(self, value: int, sign: bool) -> None:
        """Test encoded_size predicts the natural length."""
        if value < 0:
            sign = True
        assert encoded_size(value, include_sign=sign) == len(encode(value, include_sign=sign))

    @given(value=st.integers(min_value=0, max_value=65535))
    def test_nibbles_are_digits(self, value: int) -> None:
        """Test every nibble of an unsigned encoding is a decimal digit."""
        for byte in encode(value, UINT16):
            assert byte >> 4 <= 9
            assert byte & 0x0F <= 9

    @given(data=st.binary(min_size=1, max_size=10))
    def test_decode_never_misreports(self, data: bytes) -> None:
        """Test arbitrary bytes either decode consistently or raise a codec error."""
        from bcdpack import BCDError

        try:
            value = decode(data, UINT64)
        except BCDError:
            return
        assert encode(value, UINT64, byte_count=len(data)) == data

    @given(value=st.integers(min_value=-128, max_value=127))
    def test_int8_signed_fits_two_bytes(self, value: int) -> None:
        """Test Int8 values with a sign never need more than two bytes."""
        assert len(encode(value, INT8, include_sign=True)) <= 2
