"""BCD size calculation utilities.

This module provides functions to calculate the encoded size of values
without actually encoding them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models.inttype import IntType


def digit_count(value: int) -> int:
    """Count the decimal digits in the magnitude of value.

    Zero has no digits, matching the empty encoding of zero.

    Example:
        >>> digit_count(1234)
        4
        >>> digit_count(-7)
        1
        >>> digit_count(0)
        0
    """
    magnitude = abs(value)
    count = 0
    while magnitude:
        magnitude //= 10
        count += 1
    return count


def encoded_size(value: int, include_sign: bool = False) -> int:
    """Calculate the natural (unpadded) BCD size of a value in bytes.

    Args:
        value: Integer to size
        include_sign: Whether a sign nibble is appended

    Returns:
        Size in bytes, equal to ``len(encode(value, include_sign=include_sign))``

    Example:
        >>> encoded_size(1234)
        2
        >>> encoded_size(1234, include_sign=True)
        3
        >>> encoded_size(0)
        0
    """
    nibbles = digit_count(value)
    if include_sign:
        nibbles += 1
    return (nibbles + 1) // 2


def max_encoded_size(int_type: IntType, include_sign: bool = False) -> int:
    """Calculate the largest natural BCD size of any value of a type.

    Example:
        >>> max_encoded_size(UINT64)
        10
        >>> max_encoded_size(INT16, include_sign=True)
        3
    """
    return max(
        encoded_size(int_type.min_value, include_sign=include_sign),
        encoded_size(int_type.max_value, include_sign=include_sign),
    )
