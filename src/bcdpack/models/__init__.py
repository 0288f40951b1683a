"""Integer type descriptors and pydantic field support."""

from __future__ import annotations

from .fields import BCDCodec
from .inttype import (
    ALL_TYPES,
    INT8,
    INT16,
    INT32,
    INT64,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    IntType,
)

__all__ = [
    "IntType",
    "BCDCodec",
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    "ALL_TYPES",
]
