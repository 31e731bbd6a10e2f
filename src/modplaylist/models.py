"""
models.py
Playlist value types.

A Playlist is an ordered list of Workshop mod ids with an enabled flag each.
Order is load order and is kept exactly. Values are immutable: every edit
returns a new Playlist.

The playlist named "" is the current/default one (what the game will load);
it is never written to playlists.txt.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable

MAX_MOD_ID = 2**64 - 1


@dataclass(frozen=True)
class PlaylistMod:
    id: int
    enabled: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise ValueError(f"Mod id must be an int, got {type(self.id).__name__}")
        if not 0 <= self.id <= MAX_MOD_ID:
            raise ValueError(f"Mod id {self.id} is outside the unsigned 64-bit range")
        object.__setattr__(self, "enabled", bool(self.enabled))


@dataclass(frozen=True)
class Playlist:
    name: str
    mods: tuple[PlaylistMod, ...] = field(default=())

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise ValueError(f"Playlist name must be a str, got {type(self.name).__name__}")
        # Accept any iterable; store a tuple so the value stays hashable
        object.__setattr__(self, "mods", tuple(self.mods))

    @property
    def is_default(self) -> bool:
        return self.name == ""

    def with_name(self, name: str) -> Playlist:
        return replace(self, name=name)

    def with_mods(self, mods: Iterable[PlaylistMod]) -> Playlist:
        return replace(self, mods=tuple(mods))

    def with_mod_enabled(self, mod_id: int, enabled: bool) -> Playlist:
        """Return a copy with the enabled flag of mod_id set. Unknown ids raise KeyError."""
        if not any(m.id == mod_id for m in self.mods):
            raise KeyError(mod_id)
        return self.with_mods(
            replace(m, enabled=enabled) if m.id == mod_id else m for m in self.mods
        )

    def enabled_ids(self) -> list[int]:
        return [m.id for m in self.mods if m.enabled]

    def serialize(self, version: int | None = None) -> str:
        from modplaylist.codec import LATEST_FORMAT, serialize
        return serialize(self, LATEST_FORMAT if version is None else version)

    @staticmethod
    def deserialize(text: str) -> Playlist:
        from modplaylist.codec import deserialize
        return deserialize(text)
