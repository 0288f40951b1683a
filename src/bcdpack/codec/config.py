"""Configuration for the BCD codec.

This module provides the configuration dataclass that tunes policy decisions
the codec cannot infer from its input, such as how an empty byte sequence is
treated.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

# 10 bytes hold 20 digits, the most a 64-bit unsigned integer can need.
MAX_BCD_BYTES = 10


class EmptyInputPolicy(enum.Enum):
    """How decode() treats a zero-length byte sequence."""

    STRICT = "strict"
    PERMISSIVE = "permissive"


@dataclass(frozen=True)
class CodecConfig:
    """Configuration for BCD decoding and error reporting.

    Attributes:
        empty_input: Policy for zero-length input (default STRICT).
            - STRICT: raise EmptyInputError
            - PERMISSIVE: decode to 0
            Plain strings ("strict", "permissive") are accepted.

        hex_uppercase: Render hex digits A-F in uppercase in error
            messages (default True).

    Examples:
        ```python
        from bcdpack import CodecConfig, decode

        lenient = CodecConfig(empty_input="permissive")
        decode(b"", config=lenient)  # 0
        ```
    """

    empty_input: EmptyInputPolicy = EmptyInputPolicy.STRICT
    hex_uppercase: bool = True

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if not isinstance(self.empty_input, EmptyInputPolicy):
            try:
                policy = EmptyInputPolicy(self.empty_input)
            except ValueError as e:
                raise ValueError(
                    f"empty_input must be one of "
                    f"{[p.value for p in EmptyInputPolicy]}, got {self.empty_input!r}"
                ) from e
            object.__setattr__(self, "empty_input", policy)

        if not isinstance(self.hex_uppercase, bool):
            raise ValueError(f"hex_uppercase must be a bool, got {self.hex_uppercase!r}")


DEFAULT_CONFIG = CodecConfig()
