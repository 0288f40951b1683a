"""End-to-end tests over realistic BCD payloads."""

from __future__ import annotations

from typing import Annotated

import pytest
from pydantic import BaseModel

from bcdpack import (
    INT32,
    UINT8,
    UINT16,
    UINT32,
    BCDCodec,
    BCDError,
    OutOfRangeForTypeError,
    decode,
    encode,
)


class RTCTimestamp(BaseModel):
    """Real-time clock registers, each stored as one BCD byte."""

    seconds: Annotated[int, BCDCodec(UINT8, byte_count=1)]
    minutes: Annotated[int, BCDCodec(UINT8, byte_count=1)]
    hours: Annotated[int, BCDCodec(UINT8, byte_count=1)]
    year: Annotated[int, BCDCodec(UINT16, byte_count=2)]


class LedgerEntry(BaseModel):
    """Packed decimal amount in cents with an account number."""

    account: Annotated[int, BCDCodec(UINT32, byte_count=5)]
    amount_cents: Annotated[int, BCDCodec(INT32, byte_count=6, include_sign=True)]


class TestRealWorldPayloads:
    """Test BCD layouts seen in the wild."""

    def test_rtc_registers(self) -> None:
        """Test decoding clock registers from a raw frame."""
        frame = b"\x59\x30\x23\x20\x26"

        timestamp = RTCTimestamp(
            seconds=frame[0:1], minutes=frame[1:2], hours=frame[2:3], year=frame[3:5]
        )

        assert (timestamp.hours, timestamp.minutes, timestamp.seconds) == (23, 30, 59)
        assert timestamp.year == 2026

        dumped = timestamp.model_dump()
        assert dumped["seconds"] + dumped["minutes"] + dumped["hours"] + dumped["year"] == frame

    def test_packed_decimal_amount(self) -> None:
        """Test a COMP-3 style signed amount."""
        entry = LedgerEntry(account=4_000_123, amount_cents=-199_995)

        dumped = entry.model_dump()
        assert dumped["account"] == b"\x00\x04\x00\x01\x23"
        assert dumped["amount_cents"] == b"\x00\x00\x01\x99\x99\x5d"

        restored = LedgerEntry.model_validate(dumped)
        assert restored == entry

    def test_fixed_width_record(self) -> None:
        """Test concatenated fixed-width fields split and decode independently."""
        values = [7, 42, 1234, 9999]
        record = b"".join(encode(v, UINT16, byte_count=2) for v in values)

        assert len(record) == 8
        decoded = [decode(record[i : i + 2], UINT16) for i in range(0, len(record), 2)]
        assert decoded == values

    def test_signed_stream_mixed_signs(self) -> None:
        """Test signed values of both signs through one width."""
        values = [-5, 0, 5, -12345, 12345]
        for value in values:
            data = encode(value, INT32, byte_count=4, include_sign=True)
            assert len(data) == 4
            assert decode(data, INT32, signed_mode=True) == value


class TestFailureIsolation:
    """Test failures never yield partial output."""

    def test_corrupt_byte_rejected(self) -> None:
        """Test a corrupted frame is rejected as a whole."""
        good = encode(2468, UINT16, byte_count=2)
        corrupt = bytes([good[0], good[1] | 0x0F])

        with pytest.raises(BCDError):
            decode(corrupt, UINT16)

    def test_widening_then_narrowing(self) -> None:
        """Test a value encoded for a wide type is range-checked when narrowed."""
        data = encode(70000, UINT32)

        assert decode(data, UINT32) == 70000
        with pytest.raises(OutOfRangeForTypeError):
            decode(data, UINT16)
