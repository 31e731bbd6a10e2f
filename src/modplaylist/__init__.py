"""
modplaylist — mod playlists and their share codes.

A share code is one line of printable ASCII holding a versioned, compressed
playlist (name plus ordered mod ids with enabled flags).
"""

from modplaylist.codec import (
    FORMAT_V1,
    FORMAT_V2,
    LATEST_FORMAT,
    SUPPORTED_FORMATS,
    deserialize,
    format_version,
    serialize,
)
from modplaylist.errors import (
    CorruptPayload,
    MalformedInput,
    PlaylistCodecError,
    TruncatedData,
    UnsupportedVersion,
)
from modplaylist.models import Playlist, PlaylistMod
from modplaylist.store import PlaylistStore

__all__ = [
    "FORMAT_V1", "FORMAT_V2", "LATEST_FORMAT", "SUPPORTED_FORMATS",
    "serialize", "deserialize", "format_version",
    "PlaylistCodecError", "UnsupportedVersion", "MalformedInput",
    "CorruptPayload", "TruncatedData",
    "Playlist", "PlaylistMod", "PlaylistStore",
]
