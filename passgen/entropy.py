"""
Bit helpers for the quantum source: XOR-combine measured streams, mix them
with SHA-256 and pack the result into unsigned integers.
"""

from __future__ import annotations

import hashlib
from typing import List, Sequence


def bits_to_bytes(bits: Sequence[int]) -> bytes:
    """
    Pack bits [0,1,1,0,...] MSB-first into bytes, zero-padding the tail to a
    multiple of 8.
    """
    if not bits:
        return b""

    pad_len = (8 - (len(bits) % 8)) % 8
    padded = list(bits) + [0] * pad_len

    out = bytearray()
    for i in range(0, len(padded), 8):
        byte = 0
        for bit in padded[i : i + 8]:
            byte = (byte << 1) | bit
        out.append(byte)

    return bytes(out)


def bytes_to_bits(data: bytes) -> List[int]:
    return [(byte >> (7 - i)) & 1 for byte in data for i in range(8)]


def bits_to_int(bits: Sequence[int]) -> int:
    """Read bits MSB-first as one unsigned integer."""
    value = 0
    for bit in bits:
        value = (value << 1) | bit
    return value


def combine_streams(streams: Sequence[Sequence[int]]) -> List[int]:
    """
    XOR independent bitstreams of equal length into one.
    """
    if not streams:
        raise ValueError("at least one stream is required")

    combined = list(streams[0])
    for stream in streams[1:]:
        if len(stream) != len(combined):
            raise ValueError(
                "Quantum streams produced different bit-lengths; "
                "this should not happen."
            )
        combined = [b ^ c for b, c in zip(stream, combined)]
    return combined


def amplify_entropy(bits: List[int], rounds: int = 1) -> List[int]:
    """
    Hash the packed bits with SHA-256 ``rounds`` times and return the final
    digest as 256 bits. ``rounds <= 0`` returns the input unchanged.
    """
    if rounds <= 0:
        return bits

    data = bits_to_bytes(bits)
    for _ in range(rounds):
        data = hashlib.sha256(data).digest()

    return bytes_to_bits(data)
