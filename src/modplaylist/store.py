"""
store.py
Saved playlists, kept in a plain text file.

Format (one playlist per line, sorted by name):
  <share code>

The default playlist (name "") is never written here: it mirrors what the
game is currently set to load, so saving it is handed to on_default_saved.
A line that fails to decode is logged and skipped; the rest still load.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Callable

from modplaylist.codec import LATEST_FORMAT, deserialize, serialize
from modplaylist.errors import PlaylistCodecError
from modplaylist.models import Playlist

log = logging.getLogger(__name__)


class PlaylistStore:
    """In-memory map of playlists by name, backed by playlists.txt."""

    def __init__(
        self,
        path: Path | str,
        default_playlist: Callable[[], Playlist] | None = None,
        on_default_saved: Callable[[Playlist], None] | None = None,
        log_fn=None,
    ) -> None:
        self.path = Path(path)
        self._default_playlist = default_playlist or (lambda: Playlist(name=""))
        self._on_default_saved = on_default_saved
        self._log = log_fn or (lambda _: None)
        self._lock = threading.Lock()
        self._map: dict[str, Playlist] = {}
        self.load()

    def load(self) -> int:
        """(Re)read the file. Returns the number of lines skipped as unreadable."""
        with self._lock:
            default = self._default_playlist()
            loaded = {default.name: default}

            if not self.path.is_file():
                self._map = loaded
                return 0

            skipped = 0
            # Undecodable bytes become U+FFFD and fail that line only; a BOM is dropped
            text = self.path.read_text(encoding="utf-8-sig", errors="replace")
            lines = text.splitlines()
            for lineno, line in enumerate(lines, 1):
                line = line.strip()
                if not line:
                    continue
                try:
                    playlist = deserialize(line)
                except PlaylistCodecError as e:
                    skipped += 1
                    log.warning("%s:%d: skipping unreadable playlist: %s", self.path, lineno, e)
                    self._log(f"Skipped unreadable playlist on line {lineno}: {e}")
                    continue
                loaded[playlist.name] = playlist
            self._map = loaded
            return skipped

    def save(self, playlist: Playlist) -> None:
        with self._lock:
            updated = dict(self._map)
            updated[playlist.name] = playlist
            if not playlist.is_default:
                self._write(updated)
            self._map = updated
        # Outside the lock so the callback may read the store
        if playlist.is_default and self._on_default_saved is not None:
            self._on_default_saved(playlist)

    def delete(self, name: str) -> bool:
        """Remove a named playlist. Returns False if there was none."""
        if name == "":
            raise ValueError("The default playlist cannot be deleted")
        with self._lock:
            if name not in self._map:
                return False
            updated = {k: v for k, v in self._map.items() if k != name}
            self._write(updated)
            self._map = updated
            return True

    def get(self) -> list[Playlist]:
        with self._lock:
            return list(self._map.values())

    def get_by_name(self, name: str) -> Playlist | None:
        with self._lock:
            return self._map.get(name)

    def import_share_code(self, text: str, name: str | None = None) -> Playlist:
        """Decode a pasted share code and save it, optionally under a new name.

        Codec errors propagate unchanged and leave the store untouched.
        """
        playlist = deserialize(text)
        if name is not None:
            playlist = playlist.with_name(name)
        if playlist.is_default:
            raise ValueError("Imported playlist has no name")
        self.save(playlist)
        self._log(f"Imported playlist '{playlist.name}' ({len(playlist.mods)} mod(s))")
        return playlist

    def export_share_code(self, name: str, version: int = LATEST_FORMAT) -> str:
        playlist = self.get_by_name(name)
        if playlist is None:
            raise KeyError(name)
        return serialize(playlist, version)

    def _write(self, playlists: dict[str, Playlist]) -> None:
        # Caller holds self._lock and commits playlists to _map only if this returns
        named = sorted(
            (p for p in playlists.values() if not p.is_default),
            key=lambda p: p.name,
        )
        lines = [serialize(p) for p in named]
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text("\n".join(lines) + ("\n" if lines else ""),
                             encoding="utf-8")
