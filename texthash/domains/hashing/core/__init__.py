"""Hashing domain core -- pure functions for encoding, digesting and formatting."""

from __future__ import annotations

from texthash.domains.hashing.core.format_validation import looks_like_hash, matching_algorithms
from texthash.domains.hashing.core.hex_format import to_hex
from texthash.domains.hashing.core.md5 import md5_digest, pad_message, rotate_left
from texthash.domains.hashing.core.utf8 import encode_text, encode_utf16_units, to_utf16_units

__all__ = [
    # format_validation
    "looks_like_hash",
    "matching_algorithms",
    # hex_format
    "to_hex",
    # md5
    "md5_digest",
    "pad_message",
    "rotate_left",
    # utf8
    "encode_text",
    "encode_utf16_units",
    "to_utf16_units",
]
