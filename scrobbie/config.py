"""Persistent configuration for the Plex and Last.fm connections."""

from __future__ import annotations

import json
import logging
import re
from dataclasses import asdict, dataclass, field, fields
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir

log = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"
_ZERO_TIME = "0001-01-01T00:00:00Z"
_FRACTION = re.compile(r"\.(\d+)")


def _parse_time(value: Any) -> datetime | None:
    if not value or value == _ZERO_TIME:
        return None
    text = re.sub(r"[Zz]$", "+00:00", str(value).strip())
    text = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)
    parsed = datetime.fromisoformat(text)
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)


def _format_time(value: datetime | None) -> str:
    if value is None:
        return _ZERO_TIME
    return value.astimezone().isoformat() if value.tzinfo is None else value.isoformat()


@dataclass
class LastFmConfig:
    api_key: str = ""
    api_secret: str = ""
    session_key: str = ""


@dataclass
class PlexConfig:
    server_url: str = ""
    user_auth_token: str = ""  # for plex.tv requests
    server_auth_token: str = ""  # for media server requests
    library_section_id: int = 0
    client_identifier: str = ""


def get_config_dir() -> Path:
    """Return the directory that holds the configuration file."""
    if Path("/.dockerenv").exists():
        log.debug("docker container environment detected!")
        return Path("/config")
    try:
        return Path(user_config_dir("scrobbie", appauthor=False, roaming=True))
    except Exception:  # noqa: BLE001
        log.warning("failed to get user config dir")
    return Path.cwd()


def _load(kind: type, data: Any) -> Any:
    data = data if isinstance(data, dict) else {}
    return kind(**{f.name: f.type == "int" and int(data.get(f.name) or 0)
                   or str(data.get(f.name) or "") if f.type != "int"
                   else int(data.get(f.name) or 0) for f in fields(kind)})


@dataclass
class Config:
    lastfm: LastFmConfig = field(default_factory=LastFmConfig)
    plex: PlexConfig = field(default_factory=PlexConfig)
    last_sync_date: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        return cls(
            lastfm=_load(LastFmConfig, data.get("lastfm")),
            plex=_load(PlexConfig, data.get("plex")),
            last_sync_date=_parse_time(data.get("last_sync_date")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "lastfm": asdict(self.lastfm),
            "plex": asdict(self.plex),
            "last_sync_date": _format_time(self.last_sync_date),
        }

    def create_config_directory(self) -> Path:
        """Create the configuration directory and return its path."""
        directory = get_config_dir()
        directory.mkdir(mode=0o755, parents=True, exist_ok=True)
        return directory

    def read(self) -> None:
        """Load settings from disk; raises FileNotFoundError if there is no file."""
        with (get_config_dir() / CONFIG_FILE_NAME).open(encoding="utf-8") as handle:
            try:
                data = json.load(handle)
            except ValueError:
                return
        if isinstance(data, dict):
            loaded = Config.from_dict(data)
            self.lastfm, self.plex = loaded.lastfm, loaded.plex
            self.last_sync_date = loaded.last_sync_date

    def write(self) -> None:
        """Save settings to the configuration file."""
        with (get_config_dir() / CONFIG_FILE_NAME).open("w", encoding="utf-8") as handle:
            json.dump(self.to_dict(), handle, indent="\t")
            handle.write("\n")