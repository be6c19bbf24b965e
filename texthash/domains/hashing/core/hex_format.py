"""Lowercase hex rendering of digests."""

from __future__ import annotations

_HEX_DIGITS = "0123456789abcdef"


def to_hex(data: bytes) -> str:
    """Render bytes as two lowercase hex digits each, no prefix or separators."""
    return "".join(_HEX_DIGITS[byte >> 4] + _HEX_DIGITS[byte & 0x0F] for byte in data)
