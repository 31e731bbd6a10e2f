from modplaylist.config_paths import APP_NAME, get_config_dir, get_playlists_path


def test_config_dir_follows_xdg(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    monkeypatch.delenv("MODPLAYLIST_FILE", raising=False)
    assert get_config_dir() == tmp_path / APP_NAME
    assert get_playlists_path() == tmp_path / APP_NAME / "playlists.txt"


def test_lookup_creates_nothing(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    monkeypatch.delenv("MODPLAYLIST_FILE", raising=False)
    get_playlists_path()
    assert not (tmp_path / APP_NAME).exists()


def test_home_fallback(tmp_path, monkeypatch):
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.delenv("MODPLAYLIST_FILE", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    assert get_playlists_path() == tmp_path / ".config" / APP_NAME / "playlists.txt"


def test_playlists_file_override(tmp_path, monkeypatch):
    target = tmp_path / "elsewhere" / "mine.txt"
    monkeypatch.setenv("MODPLAYLIST_FILE", str(target))
    assert get_playlists_path() == target
