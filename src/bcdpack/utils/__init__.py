"""Utility functions for bcdpack.

This module provides hex rendering for diagnostics and BCD size calculation.
"""

from __future__ import annotations

from .hexfmt import format_hex
from .sizing import digit_count, encoded_size, max_encoded_size

__all__ = [
    "format_hex",
    # Sizing functions
    "digit_count",
    "encoded_size",
    "max_encoded_size",
]
