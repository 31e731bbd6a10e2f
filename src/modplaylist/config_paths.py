"""
config_paths.py
Where playlists.txt lives.

Lookup order:
  1. $MODPLAYLIST_FILE
  2. $XDG_CONFIG_HOME/ModPlaylist/playlists.txt
  3. ~/.config/ModPlaylist/playlists.txt

Nothing is created here; PlaylistStore makes the parent directory on first save.
"""

import os
from pathlib import Path

APP_NAME = "ModPlaylist"
PLAYLISTS_FILE_NAME = "playlists.txt"


def get_config_dir() -> Path:
    xdg = os.environ.get("XDG_CONFIG_HOME")
    return (Path(xdg) if xdg else Path.home() / ".config") / APP_NAME


def get_playlists_path() -> Path:
    env = os.environ.get("MODPLAYLIST_FILE")
    return Path(env) if env else get_config_dir() / PLAYLISTS_FILE_NAME
