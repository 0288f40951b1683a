"""Hexadecimal rendering of byte sequences for diagnostics."""

from __future__ import annotations

from typing import Iterable


def format_hex(data: Iterable[int], uppercase: bool = False) -> str:
    """Render a byte sequence as a bracketed list of hex values.

    Values are not zero-padded, so a single-digit byte renders as ``0x1``.

    Args:
        data: Bytes (or any iterable of small integers) to render
        uppercase: Whether hex digits A-F should be uppercased

    Returns:
        String such as ``"[0x64, 0xff]"``

    Example:
        >>> format_hex(b"\\x64\\xff")
        '[0x64, 0xff]'
        >>> format_hex([0x99, 0x1A], uppercase=True)
        '[0x99, 0x1A]'
    """
    fmt = "X" if uppercase else "x"
    return "[" + ", ".join(f"0x{byte:{fmt}}" for byte in data) + "]"
