"""Test configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Add src/ to path for imports when the package is not installed
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from modplaylist.models import Playlist, PlaylistMod


@pytest.fixture
def favorites():
    return Playlist(
        name="Favorites",
        mods=[PlaylistMod(id=3103731294, enabled=True), PlaylistMod(id=42, enabled=False)],
    )


@pytest.fixture
def wide_playlist():
    return Playlist(
        name="Wide",
        mods=[PlaylistMod(id=2**40 + 7, enabled=False), PlaylistMod(id=42, enabled=True)],
    )
