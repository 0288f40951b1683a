"""Packed BCD decoder.

This module provides the decode() function that converts a big-endian packed
BCD byte sequence back to an integer of a given fixed-width type.
"""

from __future__ import annotations

from typing import Iterable

from ..exceptions import (
    DigitOutOfRangeError,
    EmptyInputError,
    NegativeIntoUnsignedError,
    OutOfRangeForTypeError,
    TooLongForTypeError,
)
from ..models.inttype import INT64, IntType
from .config import DEFAULT_CONFIG, MAX_BCD_BYTES, CodecConfig, EmptyInputPolicy
from .sign import SignCode, classify_sign_nibble

# Largest multiplier a 64-bit unsigned accumulator can carry
_UINT64_MAX = (1 << 64) - 1


def decode(
    data: bytes | bytearray | memoryview | Iterable[int],
    int_type: IntType = INT64,
    signed_mode: bool = False,
    *,
    config: CodecConfig | None = None,
) -> int:
    """Decode a packed BCD byte sequence to an integer.

    Bytes are big-endian: the first byte holds the most significant pair of
    digits and each byte's high nibble is the more significant digit. In
    signed mode the low nibble of the final byte may hold a sign code instead
    of a digit (0xA/0xC/0xE positive, 0xB/0xD negative, 0xF unsigned).

    Zero encodes to no bytes at all, so decode(encode(0)) only round-trips
    under the permissive empty-input policy; the default strict policy
    raises EmptyInputError for it.

    Args:
        data: BCD bytes to decode
        int_type: Target integer type the result must fit (default INT64)
        signed_mode: If True, interpret a trailing sign nibble
        config: Codec configuration (default: DEFAULT_CONFIG)

    Returns:
        Decoded integer within the range of int_type

    Raises:
        EmptyInputError: If data is empty and the empty-input policy is strict
        TooLongForTypeError: If data is longer than 10 bytes
        DigitOutOfRangeError: If any digit nibble is larger than 9
        NegativeIntoUnsignedError: If a negative sign is decoded into an unsigned type
        OutOfRangeForTypeError: If the value does not fit int_type

    Examples:
        ```python
        from bcdpack import UINT8, decode

        decode(b"\\x16\\x04")                           # 1604
        decode(b"\\x02\\x00", UINT8)                    # 200
        decode(b"\\x01\\x23\\x4d", signed_mode=True)     # -1234
        ```
    """
    # bytes(n) would silently build n zero bytes
    if isinstance(data, int):
        raise TypeError(f"decode requires bytes, got {type(data).__name__}")

    cfg = config or DEFAULT_CONFIG
    bcd = bytes(data)

    if not bcd:
        if cfg.empty_input is EmptyInputPolicy.PERMISSIVE:
            return 0
        raise EmptyInputError()

    # Anything longer can never fit a 64-bit integer; reject before doing arithmetic
    if len(bcd) > MAX_BCD_BYTES:
        raise TooLongForTypeError(len(bcd), int_type)

    result = 0
    multiplier = 1
    sign = SignCode.NONE
    digits = bcd

    if signed_mode:
        sign = classify_sign_nibble(bcd[-1] & 0x0F)

    if sign is not SignCode.NONE:
        if sign.is_negative and not int_type.signed:
            raise NegativeIntoUnsignedError(int_type)

        # High nibble of the sign byte is the least significant digit
        result = bcd[-1] >> 4
        multiplier = 10
        if result >= multiplier:
            raise DigitOutOfRangeError(bcd, uppercase=cfg.hex_uppercase)
        digits = bcd[:-1]

    # Invariant: result < multiplier before each byte
    for byte in reversed(digits):
        result += (byte & 0x0F) * multiplier
        if result >= multiplier * 10:
            raise DigitOutOfRangeError(bcd, uppercase=cfg.hex_uppercase)

        next_multiplier = multiplier * 100
        result += (byte >> 4) * multiplier * 10
        if result >= next_multiplier:
            raise DigitOutOfRangeError(bcd, uppercase=cfg.hex_uppercase)

        if next_multiplier > _UINT64_MAX:
            break
        multiplier = next_multiplier

    value = -result if sign.is_negative else result

    if not int_type.contains(value):
        raise OutOfRangeForTypeError(int_type, value)

    return value
