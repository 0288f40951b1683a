"""Sign nibble handling shared by the encoder and decoder.

A signed packed BCD value stores its sign in the low nibble of the final
byte. Only a handful of nibble values are sign codes; anything else is an
ordinary digit.
"""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models.inttype import IntType

# Preferred codes written by the encoder
POSITIVE_SIGN = 0xC
NEGATIVE_SIGN = 0xD
UNSIGNED_SIGN = 0xF

_POSITIVE_NIBBLES = frozenset({0xA, 0xC, 0xE})
_NEGATIVE_NIBBLES = frozenset({0xB, 0xD})


class SignCode(enum.Enum):
    """Meaning of the low nibble of the final byte."""

    NONE = "none"
    POSITIVE = "positive"
    NEGATIVE = "negative"
    UNSIGNED = "unsigned"

    @property
    def is_negative(self) -> bool:
        return self is SignCode.NEGATIVE


def classify_sign_nibble(nibble: int) -> SignCode:
    """Classify a nibble as a sign code.

    Args:
        nibble: Value 0-15 taken from the low half of the final byte

    Returns:
        SignCode.NONE if the nibble is not a sign code (it is then a digit)

    Raises:
        ValueError: If nibble is not in 0-15
    """
    if nibble < 0 or nibble > 0xF:
        raise ValueError(f"nibble must be 0-15, got {nibble}")

    if nibble in _POSITIVE_NIBBLES:
        return SignCode.POSITIVE
    if nibble in _NEGATIVE_NIBBLES:
        return SignCode.NEGATIVE
    if nibble == UNSIGNED_SIGN:
        return SignCode.UNSIGNED
    return SignCode.NONE


def sign_nibble_for(value: int, int_type: IntType) -> int:
    """Choose the sign nibble to encode for a value of the given type.

    Returns:
        0xD for negative values, 0xC for non-negative values of signed
        types, 0xF for unsigned types
    """
    if value < 0:
        return NEGATIVE_SIGN
    if int_type.signed:
        return POSITIVE_SIGN
    return UNSIGNED_SIGN
