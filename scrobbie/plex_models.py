"""Response shapes of the Plex and plex.tv APIs."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from .util import from_unix_timestamp


def _text(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value)


def _int(data: dict[str, Any], key: str) -> int:
    value = data.get(key)
    return int(value) if value not in (None, "") else 0


def _parse_time(value: Any) -> datetime | None:
    if not value:
        return None
    parsed = datetime.fromisoformat(str(value).strip().replace("Z", "+00:00"))
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)


@dataclass
class PlexLibraryLocation:
    id: int = 0
    path: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PlexLibraryLocation:
        return cls(_int(data, "id"), _text(data, "path"))


@dataclass
class PlexLibrarySectionDirectory:
    key: str = ""
    type: str = ""
    title: str = ""
    agent: str = ""
    language: str = ""
    directory: bool = False
    hidden: int = 0
    locations: list[PlexLibraryLocation] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PlexLibrarySectionDirectory:
        return cls(
            *(_text(data, key) for key in ("key", "type", "title", "agent", "language")),
            directory=bool(data.get("directory", False)),
            hidden=_int(data, "hidden"),
            locations=[PlexLibraryLocation.from_dict(item) for item in data.get("Location") or []],
        )


@dataclass
class PlexLibrarySectionResponse:
    size: int = 0
    directories: list[PlexLibrarySectionDirectory] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PlexLibrarySectionResponse:
        container = data.get("MediaContainer") or {}
        return cls(
            _int(container, "size"),
            [PlexLibrarySectionDirectory.from_dict(d) for d in container.get("Directory") or []],
        )


@dataclass
class PlexPinResponse:
    id: int = 0
    code: str = ""
    client_identifier: str = ""
    expires_at: datetime | None = None
    auth_token: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PlexPinResponse:
        return cls(
            _int(data, "id"),
            _text(data, "code"),
            _text(data, "clientIdentifier"),
            _parse_time(data.get("expiresAt")),
            _text(data, "authToken"),
        )


@dataclass
class PlexResourceDeviceConnection:
    protocol: str = ""
    address: str = ""
    port: str = ""
    uri: str = ""
    local: str = ""

    @classmethod
    def from_xml(cls, element: ET.Element) -> PlexResourceDeviceConnection:
        return cls(*(element.get(key, "") for key in ("protocol", "address", "port", "uri", "local")))


@dataclass
class PlexResourceDevice:
    name: str = ""
    product: str = ""
    platform: str = ""
    provides: str = ""
    owned: str = ""
    public_address: str = ""
    access_token: str = ""
    connections: list[PlexResourceDeviceConnection] = field(default_factory=list)

    @classmethod
    def from_xml(cls, element: ET.Element) -> PlexResourceDevice:
        keys = ("name", "product", "platform", "provides", "owned", "publicAddress", "accessToken")
        return cls(
            *(element.get(key, "") for key in keys),
            connections=[PlexResourceDeviceConnection.from_xml(c) for c in element.findall("Connection")],
        )


@dataclass
class PlexResourcesResponse:
    size: str = ""
    devices: list[PlexResourceDevice] = field(default_factory=list)

    @classmethod
    def from_xml(cls, element: ET.Element) -> PlexResourcesResponse:
        if element.tag != "MediaContainer":
            raise ValueError(f"expected element <MediaContainer> but got <{element.tag}>")
        return cls(
            element.get("size", ""),
            [PlexResourceDevice.from_xml(child) for child in element.findall("Device")],
        )


@dataclass
class HistoryItem:
    """One entry of the playback history."""

    track: str = ""
    album: str = ""
    artist: str = ""
    type: str = ""
    viewed_at: datetime | None = None
    account_id: int = 0
    library_section_id: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> HistoryItem:
        viewed_at = data.get("viewedAt")
        return cls(
            _text(data, "title"),
            _text(data, "parentTitle"),
            _text(data, "grandparentTitle"),
            _text(data, "type"),
            None if viewed_at is None else from_unix_timestamp(viewed_at),
            _int(data, "accountID"),
            _text(data, "librarySectionID"),
        )


@dataclass
class PlexSessionHistoryResponse:
    size: int = 0
    metadata: list[HistoryItem] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PlexSessionHistoryResponse:
        container = data.get("MediaContainer") or {}
        return cls(
            _int(container, "size"),
            [HistoryItem.from_dict(item) for item in container.get("Metadata") or []],
        )