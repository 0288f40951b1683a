"""bcdpack: Packed Binary-Coded Decimal Codec

A Python library for converting between fixed-width integers and big-endian
packed BCD byte sequences, as used by meters, point-of-sale hardware, mainframe
COMP-3 fields and real-time clock chips.

Key Features:
- Encode and decode in both directions with digit validation
- Optional trailing sign nibble (0xC positive, 0xD negative, 0xF unsigned)
- Fixed-width output with zero-padding and length validation
- Range checking against 8/16/32/64-bit signed and unsigned types
- Pydantic field support for BCD-coded message fields

Quick Start:
    >>> from bcdpack import UINT16, decode, encode
    >>>
    >>> encode(1234)
    b'\\x124'
    >>> encode(1234, byte_count=3).hex()
    '001234'
    >>> decode(b"\\x01\\x23\\x4d", signed_mode=True)
    -1234
    >>> UINT16.decode(b"\\x99\\x99")
    9999
"""

from __future__ import annotations

from .codec import (
    DEFAULT_CONFIG,
    MAX_BCD_BYTES,
    CodecConfig,
    EmptyInputPolicy,
    SignCode,
    classify_sign_nibble,
    decode,
    encode,
    sign_nibble_for,
)
from .exceptions import (
    BCDError,
    DecodeError,
    DigitOutOfRangeError,
    EmptyInputError,
    EncodeError,
    NegativeInputError,
    NegativeIntoUnsignedError,
    NotRepresentableInByteCountError,
    OutOfRangeForTypeError,
    TooLongForTypeError,
)
from .models import (
    INT8,
    INT16,
    INT32,
    INT64,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    BCDCodec,
    IntType,
)
from .utils import digit_count, encoded_size, format_hex, max_encoded_size

# Descriptive aliases for the core operations
decode_bcd = decode
encode_bcd = encode


__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "decode",
    "encode_bcd",
    "decode_bcd",
    # Integer types
    "IntType",
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    # Field helpers
    "BCDCodec",
    # Configuration
    "CodecConfig",
    "EmptyInputPolicy",
    "DEFAULT_CONFIG",
    "MAX_BCD_BYTES",
    # Sign handling
    "SignCode",
    "classify_sign_nibble",
    "sign_nibble_for",
    # Exceptions
    "BCDError",
    "DecodeError",
    "EncodeError",
    "EmptyInputError",
    "TooLongForTypeError",
    "DigitOutOfRangeError",
    "NegativeIntoUnsignedError",
    "OutOfRangeForTypeError",
    "NegativeInputError",
    "NotRepresentableInByteCountError",
    # Utilities
    "format_hex",
    "digit_count",
    "encoded_size",
    "max_encoded_size",
    # Version
    "__version__",
]
