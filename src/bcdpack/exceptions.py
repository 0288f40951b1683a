"""Exception hierarchy for bcdpack.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from BCDError for easy catching of any bcdpack-specific error.
Each exception keeps the values that caused it as attributes so callers can
inspect the failure without parsing the message.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .utils.hexfmt import format_hex

if TYPE_CHECKING:
    from .models.inttype import IntType


class BCDError(Exception):
    """Base exception for all bcdpack errors."""

    pass


class DecodeError(BCDError):
    """Raised when decoding a BCD byte sequence fails.

    Examples:
        - Empty input under the strict policy
        - Input longer than any 64-bit integer can need
        - A digit nibble larger than 9
        - A negative sign code decoded into an unsigned type
    """

    pass


class EncodeError(BCDError):
    """Raised when encoding an integer to BCD fails.

    Examples:
        - Negative value without a sign nibble
        - Value needs more bytes than the requested byte count
    """

    pass


class EmptyInputError(DecodeError):
    """Raised when decoding zero bytes with the strict empty-input policy."""

    def __init__(self) -> None:
        super().__init__("BCD input is empty.")


class TooLongForTypeError(DecodeError):
    """Raised when a BCD sequence is longer than any supported integer can hold."""

    def __init__(self, length: int, int_type: IntType) -> None:
        self.length = length
        self.int_type = int_type
        super().__init__(
            f"BCD representation of {length} bytes is too large to fit into {int_type}."
        )


class DigitOutOfRangeError(DecodeError):
    """Raised when a nibble used as a decimal digit is larger than 9."""

    def __init__(self, data: bytes, uppercase: bool = True) -> None:
        self.data = bytes(data)
        super().__init__(
            f"A hex digit in {format_hex(self.data, uppercase=uppercase)} is larger than 9."
        )


class NegativeIntoUnsignedError(DecodeError):
    """Raised when a negative sign code is decoded into an unsigned type."""

    def __init__(self, int_type: IntType) -> None:
        self.int_type = int_type
        super().__init__(f"Negative BCD value cannot be represented by unsigned type {int_type}.")


class OutOfRangeForTypeError(BCDError):
    """Raised when a value falls outside the range of its integer type.

    Decoding raises this when the decoded magnitude does not fit the target
    type; encoding raises it when the value does not belong to the source type.
    """

    def __init__(self, int_type: IntType, value: int) -> None:
        self.int_type = int_type
        self.value = value
        super().__init__(
            f"{value} is too large to fit into {int_type} "
            f"(range: {int_type.min_value} to {int_type.max_value})."
        )


class NegativeInputError(EncodeError):
    """Raised when encoding a negative value without a sign nibble."""

    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"{value} is negative.")


class NotRepresentableInByteCountError(EncodeError):
    """Raised when a value needs more BCD bytes than allowed."""

    def __init__(self, value: int, count: int, required: int) -> None:
        self.value = value
        self.count = count
        self.required = required
        super().__init__(
            f"{value} cannot be represented as BCD in {count} byte(s) "
            f"(requires at least {required} bytes)."
        )
