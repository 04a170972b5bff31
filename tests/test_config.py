import json
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

import scrobbie.config as config_module
from scrobbie.config import Config, LastFmConfig, PlexConfig, get_config_dir


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    directory = tmp_path / "cfg" / "scrobbie"
    monkeypatch.setattr(config_module, "_DOCKER_MARKER", tmp_path / "no-marker")
    monkeypatch.setattr(config_module, "user_config_dir", lambda *a, **k: str(directory))
    return directory


def _sample_config():
    return Config(
        lastfm=LastFmConfig(api_key="placeholder", api_secret="secret", session_key="token"),
        plex=PlexConfig(
            server_url="http://localhost:32400",
            user_auth_token="token",
            server_auth_token="token",
            library_section_id=4,
            client_identifier="client-id",
        ),
        last_sync_date=datetime(2024, 5, 6, 7, 8, 9, tzinfo=timezone.utc),
    )


def test_get_config_dir_uses_user_dir(config_dir):
    assert get_config_dir() == config_dir


def test_get_config_dir_in_docker(tmp_path, monkeypatch):
    marker = tmp_path / ".dockerenv"
    marker.touch()
    monkeypatch.setattr(config_module, "_DOCKER_MARKER", marker)
    assert get_config_dir() == Path("/config")


def test_get_config_dir_falls_back_to_cwd(tmp_path, monkeypatch):
    def broken(*args, **kwargs):
        raise RuntimeError("no home")

    monkeypatch.setattr(config_module, "_DOCKER_MARKER", tmp_path / "no-marker")
    monkeypatch.setattr(config_module, "user_config_dir", broken)
    monkeypatch.chdir(tmp_path)
    assert get_config_dir().resolve() == tmp_path.resolve()


def test_create_config_directory(config_dir):
    result = Config().create_config_directory()
    assert result == config_dir
    assert config_dir.is_dir()


def test_read_missing_file_raises(config_dir):
    with pytest.raises(FileNotFoundError):
        Config().read()


def test_write_then_read_round_trip(config_dir):
    original = _sample_config()
    original.create_config_directory()
    original.write()
    loaded = Config()
    loaded.read()
    assert loaded == original


def test_written_file_layout(config_dir):
    config = _sample_config()
    config.create_config_directory()
    config.write()
    text = (config_dir / "config.json").read_text(encoding="utf-8")
    assert text.endswith("\n")
    assert '\n\t"lastfm": {' in text
    assert json.loads(text) == config.to_dict()


def test_read_ignores_invalid_json(config_dir):
    config_dir.mkdir(parents=True)
    (config_dir / "config.json").write_text("not json", encoding="utf-8")
    config = Config()
    config.read()
    assert config == Config()


def test_zero_date_serialisation():
    data = Config().to_dict()
    assert data["last_sync_date"] == "0001-01-01T00:00:00Z"
    assert Config.from_dict(data).last_sync_date is None


def test_utc_date_uses_z_suffix():
    config = Config(last_sync_date=datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc))
    assert config.to_dict()["last_sync_date"] == "2024-01-02T03:04:05Z"


def test_from_dict_handles_nanoseconds_and_offset():
    config = Config.from_dict({"last_sync_date": "2024-01-02T03:04:05.123456789+02:00"})
    expected = datetime(2024, 1, 2, 3, 4, 5, 123456, tzinfo=timezone(timedelta(hours=2)))
    assert config.last_sync_date == expected


def test_dict_round_trip():
    original = _sample_config()
    assert Config.from_dict(original.to_dict()) == original


def test_from_dict_null_sections_give_defaults():
    assert Config.from_dict({"lastfm": None, "plex": None}) == Config()


def test_to_dict_keys():
    data = Config().to_dict()
    assert set(data) == {"lastfm", "plex", "last_sync_date"}
    assert set(data["plex"]) == {
        "server_url",
        "user_auth_token",
        "server_auth_token",
        "library_section_id",
        "client_identifier",
    }
    assert set(data["lastfm"]) == {"api_key", "api_secret", "session_key"}