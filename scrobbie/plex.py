"""Client for plex.tv and a Plex Media Server."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from datetime import datetime
from typing import Any
from urllib.parse import urlsplit

from .config import PlexConfig
from .httpclient import add_query, run_request
from .plex_models import (
    PlexLibrarySectionResponse,
    PlexPinResponse,
    PlexResourcesResponse,
    PlexSessionHistoryResponse,
)

PLEX_URL = "https://plex.tv"

# The server owner's account always has ID 1.
_OWNER_ACCOUNT_ID = "1"


class PlexClient:
    """Calls to plex.tv and to the configured media server."""

    def __init__(self, config: PlexConfig, last_sync_date: datetime | None = None) -> None:
        self.config = config
        self.last_sync_date = last_sync_date

    def _request(self, method: str, url: str) -> Any:
        if self.config.user_auth_token and urlsplit(url).hostname == "plex.tv":
            url = add_query(url, "X-Plex-Token", self.config.user_auth_token)
        elif self.config.server_auth_token:
            url = add_query(url, "X-Plex-Token", self.config.server_auth_token)
        url = add_query(url, "X-Plex-Client-Identifier", self.config.client_identifier)
        return run_request(method, url)

    def get_pin(self) -> PlexPinResponse:
        """Request a PIN with which a user can link this client on plex.tv."""
        return PlexPinResponse.from_dict(self._request("POST", f"{PLEX_URL}/api/v2/pins"))

    def get_user(self, pin_id: int) -> PlexPinResponse:
        """Fetch the state of a PIN, including the auth token once it is linked."""
        return PlexPinResponse.from_dict(
            self._request("GET", f"{PLEX_URL}/api/v2/pins/{pin_id}")
        )

    def get_resources(self) -> PlexResourcesResponse:
        """List the devices available to the authenticated user."""
        url = add_query(f"{PLEX_URL}/api/resources", "includeHttps", "1")
        data = self._request("GET", url)
        if not isinstance(data, ET.Element):
            raise ValueError("expected an XML resources response")
        return PlexResourcesResponse.from_xml(data)

    def get_libraries(self) -> PlexLibrarySectionResponse:
        """List the library sections of the media server."""
        data = self._request("GET", f"{self.config.server_url}/library/sections")
        return PlexLibrarySectionResponse.from_dict(data)

    def get_playback_history(self) -> PlexSessionHistoryResponse:
        """Fetch the owner's playback history since the last sync."""
        url = f"{self.config.server_url}/status/sessions/history/all"
        if self.last_sync_date is not None:
            url = add_query(url, "viewedAt>", str(int(self.last_sync_date.timestamp())))
        url = add_query(url, "librarySectionID", str(self.config.library_section_id))
        url = add_query(url, "accountID", _OWNER_ACCOUNT_ID)
        return PlexSessionHistoryResponse.from_dict(self._request("GET", url))