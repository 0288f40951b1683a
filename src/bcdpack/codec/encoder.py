"""Packed BCD encoder.

This module provides the encode() function that converts an integer of a
given fixed-width type to big-endian packed BCD bytes, optionally with a
trailing sign nibble and left zero-padding.
"""

from __future__ import annotations

from ..exceptions import (
    NegativeInputError,
    NotRepresentableInByteCountError,
    OutOfRangeForTypeError,
)
from ..models.inttype import INT64, IntType
from .config import MAX_BCD_BYTES
from .sign import sign_nibble_for


def encode(
    value: int, int_type: IntType = INT64, byte_count: int = 0, include_sign: bool = False
) -> bytes:
    """Encode an integer to packed BCD.

    Two decimal digits are packed per byte, most significant first. With
    include_sign the low nibble of the final byte holds the sign: 0xD for
    negative values, 0xC for non-negative values of signed types and 0xF for
    unsigned types.

    Args:
        value: Integer to encode
        int_type: Integer type the value belongs to (default INT64)
        byte_count: Exact output length in bytes; 0 means no limit or padding
        include_sign: If True, append a sign nibble

    Returns:
        BCD bytes, left-padded with zero bytes to byte_count

    Raises:
        TypeError: If value is not an integer
        ValueError: If byte_count is negative
        NegativeInputError: If value is negative and include_sign is False
        OutOfRangeForTypeError: If value does not belong to int_type
        NotRepresentableInByteCountError: If the encoding needs more than
            byte_count bytes (or more than 10 bytes)

    Examples:
        ```python
        from bcdpack import UINT32, encode

        encode(1234)                                   # b"\\x12\\x34"
        encode(1234, byte_count=3)                     # b"\\x00\\x12\\x34"
        encode(-1234, include_sign=True)               # b"\\x01\\x23\\x4d"
        encode(12345, UINT32, 4, include_sign=True)    # b"\\x00\\x12\\x34\\x5f"
        ```
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"encode requires an int, got {type(value).__name__}")
    if byte_count < 0:
        raise ValueError(f"byte_count must be >= 0, got {byte_count}")

    if value < 0 and not include_sign:
        raise NegativeInputError(value)
    if not int_type.contains(value):
        raise OutOfRangeForTypeError(int_type, value)

    magnitude = abs(value)
    bcd = bytearray()

    # Sign byte: least significant digit in the high nibble, sign in the low
    if include_sign:
        bcd.append((magnitude % 10) << 4 | sign_nibble_for(value, int_type))
        magnitude //= 10

    while magnitude:
        byte = magnitude % 10
        magnitude //= 10
        byte |= (magnitude % 10) << 4
        magnitude //= 10
        bcd.insert(0, byte)

    if len(bcd) > MAX_BCD_BYTES:
        raise NotRepresentableInByteCountError(value, count=MAX_BCD_BYTES, required=len(bcd))

    if byte_count > 0:
        if len(bcd) > byte_count:
            raise NotRepresentableInByteCountError(value, count=byte_count, required=len(bcd))
        bcd[0:0] = bytes(byte_count - len(bcd))

    return bytes(bcd)
