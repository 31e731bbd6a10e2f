"""
transport.py — outer wrapping of a share code.

Two leaf steps, both symmetric:
  - compress / decompress: zlib (level 9) around the layout bytes.
  - encode_text / decode_text: Ascii85 around the version-tagged buffer.

Ascii85 output uses the characters '!'..'u' and 'z' only: no whitespace, no
quotes that need escaping, so one share code is always one line of
playlists.txt. zlib calls carry no state between calls, so both helpers are
safe to use from any thread.
"""

from __future__ import annotations

import base64
import zlib

from modplaylist.errors import CorruptPayload, MalformedInput

_COMPRESS_LEVEL = 9
# Largest layout a share code may inflate to
MAX_LAYOUT_BYTES = 64 * 1024 * 1024
_A85_FIRST = ord("!")
_A85_LAST = ord("u")


def compress(raw: bytes) -> bytes:
    return zlib.compress(raw, level=_COMPRESS_LEVEL)


def decompress(data: bytes, max_length: int = MAX_LAYOUT_BYTES) -> bytes:
    """Decompress a zlib stream written by compress().

    Raises CorruptPayload unless data is exactly one complete zlib stream
    inflating to at most max_length bytes.
    """
    d = zlib.decompressobj()
    try:
        raw = d.decompress(data, max_length + 1)
    except zlib.error as e:
        raise CorruptPayload(f"Playlist body is not valid zlib data: {e}") from e
    if len(raw) > max_length:
        raise CorruptPayload(f"Playlist body inflates past {max_length} bytes")
    if not d.eof:
        raise CorruptPayload("Playlist body ends in the middle of the compressed stream")
    if d.unused_data:
        raise CorruptPayload(
            f"{len(d.unused_data)} unexpected byte(s) after the compressed stream"
        )
    return raw


def encode_text(data: bytes) -> str:
    return base64.a85encode(data).decode("ascii")


def decode_text(text: str) -> bytes:
    """Decode an Ascii85 share code.

    Raises MalformedInput on any character outside the alphabet (whitespace
    included) or on a dangling one-character final group.
    """
    for ch in text:
        c = ord(ch)
        if not (_A85_FIRST <= c <= _A85_LAST or ch == "z"):
            raise MalformedInput(f"Invalid character {ch!r} in share code")
    # 'z' stands for a whole group; a final group of a single digit encodes nothing
    if (len(text) - text.count("z")) % 5 == 1:
        raise MalformedInput("Share code ends with an incomplete group")
    try:
        return base64.a85decode(text, ignorechars=b"")
    except ValueError as e:
        raise MalformedInput(f"Share code is not valid Ascii85: {e}") from e
