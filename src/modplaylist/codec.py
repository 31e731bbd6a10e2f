"""
codec.py — playlist <-> share code.

A share code is Ascii85 text of:
  - 1 byte: format version
  - N bytes: zlib-compressed layout for that version

Layout v1:
  - name: 7-bit varint byte length + UTF-8 bytes
  - per mod, until the end of the buffer:
      - 8 bytes: mod id (uint64 LE)
      - 1 byte:  enabled (0 / nonzero)

Layout v2:
  - name: as v1
  - 2 bytes: mod count n (uint16 LE)
  - ceil((n + 1) / 8) bytes: flag bits, LSB first
      bit 0    = wide ids (some id does not fit in uint32)
      bit 1..n = enabled flag of mod 0..n-1
  - n ids: uint32 LE each, or uint64 LE each when wide

The version byte always names the layout that was written. Decoders are
never removed: old codes and old playlists.txt lines must keep loading.
"""

from __future__ import annotations

import struct

from modplaylist.bits import flag_byte_count, pack_flags, unpack_flags
from modplaylist.errors import MalformedInput, TruncatedData, UnsupportedVersion
from modplaylist.models import Playlist, PlaylistMod
from modplaylist.transport import compress, decode_text, decompress, encode_text

FORMAT_V1 = 1
FORMAT_V2 = 2
LATEST_FORMAT = FORMAT_V2

_MAX_NARROW_ID = 0xFFFFFFFF
_MAX_V2_MODS = 0xFFFF
_MAX_VARINT_BYTES = 5
_MAX_NAME_BYTES = 0x7FFFFFFF
_V1_ENTRY = struct.Struct("<QB")


class _Reader:
    """Cursor over a layout buffer; every read is bounds-checked."""

    def __init__(self, data: bytes) -> None:
        self.data = data
        self.pos = 0

    @property
    def remaining(self) -> int:
        return len(self.data) - self.pos

    def take(self, n: int, what: str) -> bytes:
        if n > self.remaining:
            raise TruncatedData(what, n, self.remaining)
        chunk = self.data[self.pos:self.pos + n]
        self.pos += n
        return chunk

    def unpack(self, fmt: str, what: str) -> tuple:
        return struct.unpack(fmt, self.take(struct.calcsize(fmt), what))


# ---------------------------------------------------------------------------
# Name string
# ---------------------------------------------------------------------------

def _write_name(out: bytearray, name: str) -> None:
    raw = name.encode("utf-8")
    length = len(raw)
    if length > _MAX_NAME_BYTES:
        raise ValueError(f"Playlist name too long ({length} bytes)")
    while length >= 0x80:
        out.append((length & 0x7F) | 0x80)
        length >>= 7
    out.append(length)
    out += raw


def _read_name(reader: _Reader) -> str:
    length = 0
    for i in range(_MAX_VARINT_BYTES):
        (byte,) = reader.take(1, "name length")
        length |= (byte & 0x7F) << (7 * i)
        if not byte & 0x80:
            break
    else:
        raise MalformedInput("Playlist name length prefix is too long")
    raw = reader.take(length, "name")
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedInput(f"Playlist name is not valid UTF-8: {e}") from e


# ---------------------------------------------------------------------------
# Layout v1
# ---------------------------------------------------------------------------

def _encode_v1(playlist: Playlist) -> bytes:
    out = bytearray()
    _write_name(out, playlist.name)
    for mod in playlist.mods:
        out += _V1_ENTRY.pack(mod.id, 1 if mod.enabled else 0)
    return bytes(out)


def _decode_v1(data: bytes) -> Playlist:
    reader = _Reader(data)
    name = _read_name(reader)
    mods: list[PlaylistMod] = []
    while reader.remaining:
        mod_id, enabled = _V1_ENTRY.unpack(reader.take(_V1_ENTRY.size, "mod entry"))
        mods.append(PlaylistMod(id=mod_id, enabled=enabled != 0))
    return Playlist(name=name, mods=mods)


# ---------------------------------------------------------------------------
# Layout v2
# ---------------------------------------------------------------------------

def _encode_v2(playlist: Playlist) -> bytes:
    mods = playlist.mods
    if len(mods) > _MAX_V2_MODS:
        raise ValueError(
            f"Format v2 holds at most {_MAX_V2_MODS} mods, playlist has {len(mods)}"
        )
    wide = any(m.id > _MAX_NARROW_ID for m in mods)
    out = bytearray()
    _write_name(out, playlist.name)
    out += struct.pack("<H", len(mods))
    out += pack_flags([wide, *(m.enabled for m in mods)])
    out += struct.pack(f"<{len(mods)}{'Q' if wide else 'I'}", *(m.id for m in mods))
    return bytes(out)


def _decode_v2(data: bytes) -> Playlist:
    reader = _Reader(data)
    name = _read_name(reader)
    (count,) = reader.unpack("<H", "mod count")
    flags = unpack_flags(reader.take(flag_byte_count(count + 1), "flags"), count + 1)
    wide = flags[0]
    ids = reader.unpack(f"<{count}{'Q' if wide else 'I'}", "mod ids")
    if reader.remaining:
        raise MalformedInput(f"{reader.remaining} unexpected byte(s) after the mod list")
    return Playlist(
        name=name,
        mods=[PlaylistMod(id=mod_id, enabled=enabled) for mod_id, enabled in zip(ids, flags[1:])],
    )


_ENCODERS = {
    FORMAT_V1: _encode_v1,
    FORMAT_V2: _encode_v2,
}

_DECODERS = {
    FORMAT_V1: _decode_v1,
    FORMAT_V2: _decode_v2,
}

SUPPORTED_FORMATS = tuple(sorted(_ENCODERS))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def serialize(playlist: Playlist, version: int = LATEST_FORMAT) -> str:
    """Encode playlist as a single-line share code using layout `version`."""
    encoder = _ENCODERS.get(version)
    if encoder is None:
        raise UnsupportedVersion(version)
    body = compress(encoder(playlist))
    return encode_text(bytes([version]) + body)


def _split_version(text: str) -> tuple[int, bytes]:
    text = text.strip()
    if not text:
        raise MalformedInput("Share code is empty")
    raw = decode_text(text)
    if not raw:
        raise MalformedInput("Share code decodes to no data")
    return raw[0], raw[1:]


def deserialize(text: str) -> Playlist:
    """Decode a share code produced by serialize() (any supported version).

    Raises a PlaylistCodecError subclass; never returns a partial playlist.
    """
    version, body = _split_version(text)
    decoder = _DECODERS.get(version)
    if decoder is None:
        raise UnsupportedVersion(version)
    return decoder(decompress(body))


def format_version(text: str) -> int:
    """Return the format version byte of a share code without decoding its body."""
    version, _ = _split_version(text)
    return version
