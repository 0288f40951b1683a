"""Pydantic field support for BCD-coded integers.

This module lets message models declare integer fields that arrive and leave
as packed BCD bytes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from ..codec.config import CodecConfig, EmptyInputPolicy
from ..exceptions import BCDError
from .inttype import INT64, IntType


# Zero serializes to no bytes unless padded, so empty input must read back as 0
_FIELD_CONFIG = CodecConfig(empty_input=EmptyInputPolicy.PERMISSIVE)


@dataclass(frozen=True)
class BCDCodec:
    """Annotation that stores an integer field as packed BCD.

    Validation accepts either an int or BCD bytes (which are decoded, reading
    a trailing sign nibble when include_sign is set). The value is then
    range-checked against int_type. Serialization with model_dump() produces
    BCD bytes again.

    Ints are validated strictly, so bools and numeric strings are rejected,
    matching encode(). Empty bytes read back as 0, which is how an unpadded
    zero serializes.

    Attributes:
        int_type: Integer type of the field (default INT64)
        byte_count: Fixed BCD length when serialized; 0 means natural length
        include_sign: Whether the BCD form carries a sign nibble

    Example:
        >>> class MeterReading(BaseModel):
        ...     meter_id: Annotated[int, BCDCodec(UINT32, byte_count=4)]
        ...     delta: Annotated[int, BCDCodec(INT16, include_sign=True)]
        >>> reading = MeterReading(meter_id=b"\\x00\\x01\\x23\\x45", delta=-12)
        >>> reading.meter_id
        12345
        >>> reading.model_dump()["delta"]
        b'\\x01-'

    Note:
        Serialization yields raw bytes, so use model_dump() rather than
        model_dump_json() for these fields.
    """

    int_type: IntType = INT64
    byte_count: int = 0
    include_sign: bool = False

    def __post_init__(self) -> None:
        if self.byte_count < 0:
            raise ValueError(f"byte_count must be >= 0, got {self.byte_count}")

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_before_validator_function(
            self._validate,
            core_schema.int_schema(
                ge=self.int_type.min_value, le=self.int_type.max_value, strict=True
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                self._serialize, return_schema=core_schema.bytes_schema()
            ),
        )

    def _validate(self, value: Any) -> Any:
        if isinstance(value, (bytes, bytearray, memoryview)):
            from ..codec.decoder import decode

            try:
                return decode(
                    value, self.int_type, signed_mode=self.include_sign, config=_FIELD_CONFIG
                )
            except BCDError as e:
                # pydantic only wraps ValueError into a ValidationError
                raise ValueError(str(e)) from e
        return value

    def _serialize(self, value: int) -> bytes:
        from ..codec.encoder import encode

        return encode(
            value, self.int_type, byte_count=self.byte_count, include_sign=self.include_sign
        )
