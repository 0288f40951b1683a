"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from bcdpack import CodecConfig, EmptyInputPolicy


@pytest.fixture
def sample_bcd() -> bytes:
    """BCD encoding of 1234."""
    return b"\x12\x34"


@pytest.fixture
def signed_bcd() -> bytes:
    """Signed BCD encoding of -1234."""
    return b"\x01\x23\x4d"


@pytest.fixture
def permissive_config() -> CodecConfig:
    """Config that decodes empty input to zero."""
    return CodecConfig(empty_input=EmptyInputPolicy.PERMISSIVE)
