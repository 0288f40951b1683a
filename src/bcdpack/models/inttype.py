"""Fixed-width integer type descriptors.

Python integers are unbounded, so the codec is told which fixed-width type a
value belongs to. An IntType carries the bit width and signedness and derives
the representable range from them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Literal

from pydantic import BaseModel, ConfigDict

from ..utils.sizing import max_encoded_size

if TYPE_CHECKING:
    from ..codec.config import CodecConfig


class IntType(BaseModel):
    """Descriptor for a fixed-width integer type.

    Besides describing a range, each descriptor binds the codec so that BCD
    conversions read naturally for a given type.

    Example:
        >>> UINT16.decode(b"\\x12\\x34")
        1234
        >>> INT32.encode(-42, include_sign=True).hex()
        '042d'
        >>> UINT8.max_value
        255
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    bit_width: Literal[8, 16, 32, 64]
    signed: bool

    @property
    def name(self) -> str:
        """Short type name such as ``Int16`` or ``UInt64``."""
        return f"{'Int' if self.signed else 'UInt'}{self.bit_width}"

    @property
    def min_value(self) -> int:
        if self.signed:
            return -(1 << (self.bit_width - 1))
        return 0

    @property
    def max_value(self) -> int:
        if self.signed:
            return (1 << (self.bit_width - 1)) - 1
        return (1 << self.bit_width) - 1

    def contains(self, value: int) -> bool:
        """Return True if value is representable by this type."""
        return self.min_value <= value <= self.max_value

    def max_bcd_bytes(self, include_sign: bool = False) -> int:
        """Number of BCD bytes needed for the widest value of this type."""
        return max_encoded_size(self, include_sign=include_sign)

    def decode(
        self,
        data: bytes | bytearray | memoryview | Iterable[int],
        signed_mode: bool = False,
        config: CodecConfig | None = None,
    ) -> int:
        """Decode BCD bytes into a value of this type. See bcdpack.codec.decode."""
        from ..codec.decoder import decode

        return decode(data, self, signed_mode=signed_mode, config=config)

    def encode(self, value: int, byte_count: int = 0, include_sign: bool = False) -> bytes:
        """Encode a value of this type as BCD bytes. See bcdpack.codec.encode."""
        from ..codec.encoder import encode

        return encode(value, self, byte_count=byte_count, include_sign=include_sign)

    def __str__(self) -> str:
        return self.name


INT8 = IntType(bit_width=8, signed=True)
INT16 = IntType(bit_width=16, signed=True)
INT32 = IntType(bit_width=32, signed=True)
INT64 = IntType(bit_width=64, signed=True)
UINT8 = IntType(bit_width=8, signed=False)
UINT16 = IntType(bit_width=16, signed=False)
UINT32 = IntType(bit_width=32, signed=False)
UINT64 = IntType(bit_width=64, signed=False)

ALL_TYPES = (INT8, INT16, INT32, INT64, UINT8, UINT16, UINT32, UINT64)
