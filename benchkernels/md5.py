"""MD5 message digest over a byte buffer.

The benchmark hashes a message whose bytes count upwards from zero and
reports the sum of the four state words.
"""

from __future__ import annotations

import math
import struct

MSG_SIZE = 1000
EXPECTED_RESULT = 0x30C0DA225

_MASK32 = 0xFFFFFFFF
_BLOCK = 64

_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

_SHIFTS = (
    (7, 12, 17, 22) * 4
    + (5, 9, 14, 20) * 4
    + (4, 11, 16, 23) * 4
    + (6, 10, 15, 21) * 4
)

# Binary integer parts of the sines of 1..64, in radians.
_K = tuple(int(abs(math.sin(i + 1)) * 2**32) & _MASK32 for i in range(64))


def _rotate_left(x: int, c: int) -> int:
    return ((x << c) | (x >> (32 - c))) & _MASK32


def _pad(message: bytes) -> bytes:
    length = len(message)
    new_len = ((length + 8) // _BLOCK + 1) * _BLOCK - 8
    buffer = bytearray(new_len + 8)
    buffer[:length] = message
    buffer[length] = 0x80
    # Only the low 32 bits of the bit length are stored.
    buffer[new_len : new_len + 4] = ((8 * length) & _MASK32).to_bytes(4, "little")
    return bytes(buffer)


def _compress(state: tuple[int, int, int, int], chunk: bytes) -> tuple[int, int, int, int]:
    w = struct.unpack("<16I", chunk)
    a, b, c, d = state
    for i in range(64):
        if i < 16:
            f = (b & c) | (~b & d)
            g = i
        elif i < 32:
            f = (d & b) | (~d & c)
            g = (5 * i + 1) % 16
        elif i < 48:
            f = b ^ c ^ d
            g = (3 * i + 5) % 16
        else:
            f = c ^ (b | (~d & _MASK32))
            g = (7 * i) % 16
        f &= _MASK32
        rotated = _rotate_left((a + f + _K[i] + w[g]) & _MASK32, _SHIFTS[i])
        a, b, c, d = d, (b + rotated) & _MASK32, b, c
    h0, h1, h2, h3 = state
    return (
        (h0 + a) & _MASK32,
        (h1 + b) & _MASK32,
        (h2 + c) & _MASK32,
        (h3 + d) & _MASK32,
    )


def md5(message: bytes) -> tuple[int, int, int, int]:
    """Return the four 32-bit MD5 state words after hashing ``message``."""
    padded = _pad(bytes(message))
    state = _INITIAL_STATE
    for offset in range(0, len(padded) - 8, _BLOCK):
        state = _compress(state, padded[offset : offset + _BLOCK])
    return state


def hexdigest(state: tuple[int, int, int, int]) -> str:
    """Hexadecimal digest of a state, each word written in little-endian order."""
    return "".join((word & _MASK32).to_bytes(4, "little").hex() for word in state)


def run(repeat: int, length: int = MSG_SIZE) -> int:
    """Hash the counting message ``repeat`` times; return the sum of the state words."""
    if repeat < 1:
        raise ValueError("repeat must be at least 1")
    if length < 0:
        raise ValueError("length must not be negative")
    message = bytes(i & 0xFF for i in range(length))
    state = md5(message)
    for _ in range(repeat - 1):
        state = md5(message)
    return sum(state)


def verify(result: int) -> bool:
    """True when ``result`` is the known-good sum of the state words."""
    return result == EXPECTED_RESULT