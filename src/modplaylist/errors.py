"""
errors.py
Failure kinds raised while decoding (or asked to encode) a playlist share code.

Every kind is terminal for a single deserialize() call: no partial playlist is
ever returned. The playlist store catches PlaylistCodecError per line so one
bad line never blocks the rest of playlists.txt.
"""

from __future__ import annotations


class PlaylistCodecError(ValueError):
    """Base class for all share-code decoding failures."""


class UnsupportedVersion(PlaylistCodecError):
    """Requested or decoded format version has no known layout."""

    def __init__(self, version: int) -> None:
        super().__init__(f"Unsupported playlist format version '{version}'.")
        self.version = version


class MalformedInput(PlaylistCodecError):
    """Share code text could not be decoded, or decoded to nothing usable."""


class CorruptPayload(PlaylistCodecError):
    """Compressed body is not a valid, complete compressed stream."""


class TruncatedData(PlaylistCodecError):
    """Layout decoder ran out of bytes in the middle of a structure."""

    def __init__(self, what: str, needed: int, available: int) -> None:
        super().__init__(
            f"Truncated playlist data: {what} needs {needed} byte(s), "
            f"only {available} left"
        )
        self.what = what
        self.needed = needed
        self.available = available
