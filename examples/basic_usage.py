#!/usr/bin/env python3
"""Basic usage example for bcdpack.

This example demonstrates:
1. Encoding integers to packed BCD
2. Decoding BCD bytes back to integers
3. Signed values with a trailing sign nibble
4. Handling codec errors
"""

from __future__ import annotations

from bcdpack import INT32, UINT8, UINT16, BCDError, decode, encode, encoded_size, format_hex


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("bcdpack Basic Usage Example")
    print("=" * 60)
    print()

    # Unsigned encoding
    print("1. Encoding unsigned values...")
    for value in (7, 1234, 65535):
        data = encode(value, UINT16)
        print(f"   {value:>6} -> {format_hex(data)} ({encoded_size(value)} bytes)")
    padded = encode(1234, UINT16, byte_count=4)
    print(f"   1234 padded to 4 bytes -> {format_hex(padded)}")
    print()

    # Decoding
    print("2. Decoding BCD bytes...")
    for data in (b"\x22", b"\x02\x00", b"\x16\x04"):
        print(f"   {format_hex(data)} -> {decode(data)}")
    print()

    # Signed values
    print("3. Signed values (0xC positive, 0xD negative, 0xF unsigned)...")
    for value in (1234, -1234):
        data = encode(value, INT32, include_sign=True)
        print(f"   {value:>6} -> {format_hex(data)} -> {decode(data, INT32, signed_mode=True)}")
    print()

    # Errors
    print("4. Handling errors...")
    attempts = [
        ("decode [0x9A]", lambda: decode(b"\x9a")),
        ("decode [0x03, 0x00] as UInt8", lambda: decode(b"\x03\x00", UINT8)),
        ("encode -1 without sign", lambda: encode(-1)),
        ("encode 1234 in 1 byte", lambda: encode(1234, byte_count=1)),
    ]
    for label, attempt in attempts:
        try:
            attempt()
        except BCDError as e:
            print(f"   {label}: {type(e).__name__}: {e}")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
