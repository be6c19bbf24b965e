"""MD5 message digest (RFC 1321) computed from 32-bit word primitives.

Python integers do not overflow, so every sum and rotation is reduced with
``& MASK32`` to keep the unsigned 32-bit wraparound the algorithm depends on.
"""

from __future__ import annotations

import struct

MASK32 = 0xFFFFFFFF
BLOCK_SIZE = 64
DIGEST_SIZE = 16

INITIAL_STATE: tuple[int, int, int, int] = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

# K[j] = floor(|sin(j + 1)| * 2**32)
ROUND_CONSTANTS: tuple[int, ...] = (
    0xD76AA478, 0xE8C7B756, 0x242070DB, 0xC1BDCEEE,
    0xF57C0FAF, 0x4787C62A, 0xA8304613, 0xFD469501,
    0x698098D8, 0x8B44F7AF, 0xFFFF5BB1, 0x895CD7BE,
    0x6B901122, 0xFD987193, 0xA679438E, 0x49B40821,
    0xF61E2562, 0xC040B340, 0x265E5A51, 0xE9B6C7AA,
    0xD62F105D, 0x02441453, 0xD8A1E681, 0xE7D3FBC8,
    0x21E1CDE6, 0xC33707D6, 0xF4D50D87, 0x455A14ED,
    0xA9E3E905, 0xFCEFA3F8, 0x676F02D9, 0x8D2A4C8A,
    0xFFFA3942, 0x8771F681, 0x6D9D6122, 0xFDE5380C,
    0xA4BEEA44, 0x4BDECFA9, 0xF6BB4B60, 0xBEBFBC70,
    0x289B7EC6, 0xEAA127FA, 0xD4EF3085, 0x04881D05,
    0xD9D4D039, 0xE6DB99E5, 0x1FA27CF8, 0xC4AC5665,
    0xF4292244, 0x432AFF97, 0xAB9423A7, 0xFC93A039,
    0x655B59C3, 0x8F0CCC92, 0xFFEFF47D, 0x85845DD1,
    0x6FA87E4F, 0xFE2CE6E0, 0xA3014314, 0x4E0811A1,
    0xF7537E82, 0xBD3AF235, 0x2AD7D2BB, 0xEB86D391,
)

ROTATION_AMOUNTS: tuple[int, ...] = (
    (7, 12, 17, 22) * 4
    + (5, 9, 14, 20) * 4
    + (4, 11, 16, 23) * 4
    + (6, 10, 15, 21) * 4
)

# Message word consumed by each round
MESSAGE_INDEXES: tuple[int, ...] = tuple(
    j if j < 16 else (5 * j + 1) % 16 if j < 32 else (3 * j + 5) % 16 if j < 48 else (7 * j) % 16
    for j in range(64)
)


def rotate_left(value: int, amount: int) -> int:
    """Rotate a 32-bit word left by ``amount`` bits."""
    value &= MASK32
    return ((value << amount) | (value >> (32 - amount))) & MASK32


def pad_message(data: bytes) -> bytes:
    """Append the 0x80 marker, zero fill and the 64-bit little-endian bit length.

    The result is always a whole number of 64-byte blocks.
    """
    bit_length = (len(data) * 8) & 0xFFFFFFFFFFFFFFFF
    zero_fill = (55 - len(data)) % BLOCK_SIZE
    return data + b"\x80" + b"\x00" * zero_fill + struct.pack("<Q", bit_length)


def _mix(b: int, c: int, d: int, round_index: int) -> int:
    """Round function F, G, H or I depending on the round group."""
    if round_index < 16:
        return (b & c) | (~b & d)
    if round_index < 32:
        return (d & b) | (~d & c)
    if round_index < 48:
        return b ^ c ^ d
    return c ^ (b | (~d & MASK32))


def compress_block(
    state: tuple[int, int, int, int], block: bytes
) -> tuple[int, int, int, int]:
    """Run the 64 rounds over one 64-byte block and fold them into ``state``."""
    words = struct.unpack("<16I", block)
    a, b, c, d = state

    for j in range(64):
        f = _mix(b, c, d, j) & MASK32
        total = (a + f + ROUND_CONSTANTS[j] + words[MESSAGE_INDEXES[j]]) & MASK32
        a, d, c = d, c, b
        b = (b + rotate_left(total, ROTATION_AMOUNTS[j])) & MASK32

    return (
        (state[0] + a) & MASK32,
        (state[1] + b) & MASK32,
        (state[2] + c) & MASK32,
        (state[3] + d) & MASK32,
    )


def md5_digest(data: bytes) -> bytes:
    """Return the 16-byte MD5 digest of a complete in-memory message."""
    padded = pad_message(data)
    state = INITIAL_STATE
    for offset in range(0, len(padded), BLOCK_SIZE):
        state = compress_block(state, padded[offset : offset + BLOCK_SIZE])
    return struct.pack("<4I", *state)
