"""UTF-8 encoding of text seen as a sequence of UTF-16 code units.

Strings are walked unit by unit. A high surrogate immediately followed by a
low surrogate is combined into one supplementary code point; any other
surrogate is encoded on its own as a three-byte sequence. That leniency keeps
the encoder total: it never raises, even for text that is not well-formed
UTF-16, but its output for lone surrogates is not valid UTF-8.
"""

from __future__ import annotations

import struct
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

HIGH_SURROGATE_MIN = 0xD800
HIGH_SURROGATE_MAX = 0xDBFF
LOW_SURROGATE_MIN = 0xDC00
LOW_SURROGATE_MAX = 0xDFFF


def to_utf16_units(text: str) -> tuple[int, ...]:
    """Split text into UTF-16 code units, passing lone surrogates through."""
    raw = text.encode("utf-16-le", "surrogatepass")
    return struct.unpack(f"<{len(raw) // 2}H", raw)


def _is_high_surrogate(unit: int) -> bool:
    return HIGH_SURROGATE_MIN <= unit <= HIGH_SURROGATE_MAX


def _is_low_surrogate(unit: int) -> bool:
    return LOW_SURROGATE_MIN <= unit <= LOW_SURROGATE_MAX


def encode_utf16_units(units: Sequence[int]) -> bytes:
    """Encode UTF-16 code units as UTF-8 bytes.

    Values wider than 16 bits are truncated to their low 16 bits.
    """
    out = bytearray()
    index = 0
    count = len(units)
    while index < count:
        unit = units[index] & 0xFFFF
        index += 1

        if unit < 0x80:
            out.append(unit)
        elif unit < 0x800:
            out.append(0xC0 | (unit >> 6))
            out.append(0x80 | (unit & 0x3F))
        elif _is_high_surrogate(unit) and index < count and _is_low_surrogate(units[index] & 0xFFFF):
            low = units[index] & 0xFFFF
            index += 1
            code_point = 0x10000 + (((unit & 0x3FF) << 10) | (low & 0x3FF))
            out.append(0xF0 | (code_point >> 18))
            out.append(0x80 | ((code_point >> 12) & 0x3F))
            out.append(0x80 | ((code_point >> 6) & 0x3F))
            out.append(0x80 | (code_point & 0x3F))
        else:
            # BMP character, or a surrogate without its partner
            out.append(0xE0 | (unit >> 12))
            out.append(0x80 | ((unit >> 6) & 0x3F))
            out.append(0x80 | (unit & 0x3F))

    return bytes(out)


def encode_text(text: str) -> bytes:
    """Encode a string to the byte sequence that gets hashed."""
    return encode_utf16_units(to_utf16_units(text))
