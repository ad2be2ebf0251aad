"""
Bit-level helpers for randomness drawn as raw bitstreams:
hash mixing, conversion to uniform floats, and the theoretical entropy
of a generated password.
"""

from __future__ import annotations

import hashlib
import math
from typing import List

# Bits in a double's mantissa; enough for a uniform float in [0, 1).
FLOAT_BITS = 53

DIGEST_BITS = 256


def pack_bits(bits: List[int]) -> bytes:
    """
    Big-endian bytes holding `bits`, MSB first, after a 4-byte length
    prefix so that [0, 1] and [1] pack differently.
    """
    if not bits:
        return bytes(4)
    value = int("".join("1" if b else "0" for b in bits), 2)
    return len(bits).to_bytes(4, "big") + value.to_bytes((len(bits) + 7) // 8, "big")


def mix_bits(bits: List[int], rounds: int = 1, salt: bytes = b"") -> List[int]:
    """
    Hash `salt` + `bits` with SHA-256 `rounds` times and return the last
    digest as DIGEST_BITS bits. With rounds <= 0 the bits pass through.
    """
    if rounds <= 0:
        return list(bits)

    data = salt + pack_bits(bits)
    for _ in range(rounds):
        data = hashlib.sha256(data).digest()

    return [int(b) for b in format(int.from_bytes(data, "big"), f"0{DIGEST_BITS}b")]


def bits_to_unit_float(bits: List[int]) -> float:
    """
    Interpret exactly FLOAT_BITS bits as a float in [0, 1).
    """
    if len(bits) != FLOAT_BITS:
        raise ValueError(f"Expected {FLOAT_BITS} bits, got {len(bits)}")

    value = 0
    for bit in bits:
        value = (value << 1) | bit
    return value / (1 << FLOAT_BITS)


def estimate_entropy_bits(length: int, charset_length: int) -> float:
    """
    Theoretical entropy of a password of `length` characters drawn
    uniformly from `charset_length` symbols.
    """
    if length <= 0 or charset_length <= 1:
        return 0.0
    return length * math.log2(charset_length)
