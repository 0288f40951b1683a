"""Packed BCD codec for bcdpack.

This module provides encoding and decoding between fixed-width integers and
big-endian packed binary-coded decimal.
"""

from __future__ import annotations

from .config import DEFAULT_CONFIG, MAX_BCD_BYTES, CodecConfig, EmptyInputPolicy
from .decoder import decode
from .encoder import encode
from .sign import SignCode, classify_sign_nibble, sign_nibble_for

__all__ = [
    "encode",
    "decode",
    "CodecConfig",
    "EmptyInputPolicy",
    "DEFAULT_CONFIG",
    "MAX_BCD_BYTES",
    "SignCode",
    "classify_sign_nibble",
    "sign_nibble_for",
]
