"""Request and response shapes of the Last.fm API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def _text(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value)


def _section(data: dict[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key)
    return value if isinstance(value, dict) else {}


@dataclass
class LastFmScrobbleRequest:
    artist: str = ""
    track: str = ""
    album: str = ""
    timestamp: str = ""
    method: str = ""
    session_key: str = ""
    api_key: str = ""
    format: str = ""

    def to_form(self) -> dict[str, str]:
        """Return the form fields sent to ``track.scrobble``."""
        return {
            "method": self.method,
            "artist": self.artist,
            "track": self.track,
            "album": self.album,
            "timestamp": self.timestamp,
            "sk": self.session_key,
            "api_key": self.api_key,
            "format": self.format,
        }


@dataclass
class Correction:
    """A name Last.fm may have corrected."""

    corrected: str = ""
    text: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Correction:
        return cls(_text(data, "corrected"), _text(data, "#text"))


@dataclass
class IgnoredMessage:
    code: str = ""
    text: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> IgnoredMessage:
        return cls(_text(data, "code"), _text(data, "#text"))


@dataclass
class Scrobble:
    artist: Correction = field(default_factory=Correction)
    album: Correction = field(default_factory=Correction)
    track: Correction = field(default_factory=Correction)
    ignored_message: IgnoredMessage = field(default_factory=IgnoredMessage)
    album_artist: Correction = field(default_factory=Correction)
    timestamp: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Scrobble:
        return cls(
            artist=Correction.from_dict(_section(data, "artist")),
            album=Correction.from_dict(_section(data, "album")),
            track=Correction.from_dict(_section(data, "track")),
            ignored_message=IgnoredMessage.from_dict(_section(data, "ignoredMessage")),
            album_artist=Correction.from_dict(_section(data, "albumArtist")),
            timestamp=_text(data, "timestamp"),
        )


@dataclass
class ScrobbleAttr:
    ignored: int = 0
    accepted: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ScrobbleAttr:
        return cls(int(data.get("ignored") or 0), int(data.get("accepted") or 0))


@dataclass
class LastFmScrobbleResponse:
    scrobble: Scrobble = field(default_factory=Scrobble)
    attr: ScrobbleAttr = field(default_factory=ScrobbleAttr)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LastFmScrobbleResponse:
        scrobbles = _section(data, "scrobbles")
        return cls(
            Scrobble.from_dict(_section(scrobbles, "scrobble")),
            ScrobbleAttr.from_dict(_section(scrobbles, "@attr")),
        )


@dataclass
class LastFmToken:
    token: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LastFmToken:
        return cls(_text(data, "token"))


@dataclass
class LastFmSession:
    name: str = ""
    key: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LastFmSession:
        session = _section(data, "session")
        return cls(_text(session, "name"), _text(session, "key"))