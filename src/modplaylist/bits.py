"""
bits.py — pack booleans one per bit.

Byte i holds flags 8i..8i+7, least-significant bit first. Unused high bits of
the last byte are zero, so len(pack_flags(f)) == ceil(len(f) / 8).
"""

from __future__ import annotations

from typing import Iterable, Sequence


def flag_byte_count(count: int) -> int:
    """Number of bytes needed to hold count flags."""
    return (count + 7) // 8


def pack_flags(flags: Iterable[bool]) -> bytes:
    out = bytearray()
    for i, flag in enumerate(flags):
        if i % 8 == 0:
            out.append(0)
        if flag:
            out[-1] |= 1 << (i % 8)
    return bytes(out)


def unpack_flags(data: Sequence[int], count: int) -> list[bool]:
    """Inverse of pack_flags: return exactly count flags.

    Missing bytes read as zero (False); bits past count are ignored.
    """
    if count < 0:
        raise ValueError(f"Flag count must be >= 0, got {count}")
    flags: list[bool] = []
    for i in range(count):
        byte_index = i // 8
        byte = data[byte_index] if byte_index < len(data) else 0
        flags.append(bool(byte & (1 << (i % 8))))
    return flags
