"""Client for the Last.fm web service."""

from __future__ import annotations

import hashlib
from collections.abc import Mapping
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit

from .config import LastFmConfig
from .httpclient import add_query, run_request
from .lastfm_models import (
    LastFmScrobbleRequest,
    LastFmScrobbleResponse,
    LastFmSession,
    LastFmToken,
)

API_URL = "https://ws.audioscrobbler.com/2.0/"

_IGNORED_MESSAGES = {
    "1": "Artist was ignored",
    "2": "Track was ignored",
    "3": "Timestamp was too old",
    "4": "Timestamp was too new",
    "5": "Daily scrobble limit exceeded",
}


def create_signature(params: Mapping[str, str]) -> str:
    """Concatenate key/value pairs sorted by key, leaving out ``format``."""
    return "".join(key + params[key] for key in sorted(params) if key != "format")


def get_ignored_message(code: str) -> str:
    """Describe a Last.fm ignored-scrobble code; unknown codes give an empty string."""
    return _IGNORED_MESSAGES.get(code, "")


def _first_values(query: str) -> dict[str, str]:
    params: dict[str, str] = {}
    for key, value in parse_qsl(query, keep_blank_values=True):
        params.setdefault(key, value)
    return params


class LastFmClient:
    """Signed calls to the Last.fm API."""

    def __init__(self, config: LastFmConfig) -> None:
        self.config = config

    def signature_hex(self, signature: str) -> str:
        """Return the hex MD5 of ``signature`` followed by the API secret."""
        return hashlib.md5((signature + self.config.api_secret).encode("utf-8")).hexdigest()

    def _request(self, method: str, url: str, form: Mapping[str, str] | None = None) -> Any:
        if method == "GET":
            url = add_query(url, "format", "json")
            url = add_query(url, "api_key", self.config.api_key)
            if self.config.session_key:
                url = add_query(url, "sk", self.config.session_key)
            params = _first_values(urlsplit(url).query)
            url = add_query(url, "api_sig", self.signature_hex(create_signature(params)))
            return run_request("GET", url)

        params = dict(form or {})
        params["api_sig"] = self.signature_hex(create_signature(params))
        body = urlencode(sorted(params.items()))
        return run_request(
            method,
            url,
            data=body,
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )

    def get_request_token(self) -> LastFmToken:
        """Fetch an unauthorised request token."""
        url = add_query(API_URL, "method", "auth.gettoken")
        return LastFmToken.from_dict(self._request("GET", url))

    def get_session_key(self, token: str) -> LastFmSession:
        """Exchange an authorised request token for a session."""
        url = add_query(API_URL, "method", "auth.getSession")
        url = add_query(url, "token", token)
        return LastFmSession.from_dict(self._request("GET", url))

    def scrobble(self, track: LastFmScrobbleRequest) -> LastFmScrobbleResponse:
        """Submit one scrobble and describe why it was ignored, if it was."""
        track.method = "track.scrobble"
        track.session_key = self.config.session_key
        track.api_key = self.config.api_key
        track.format = "json"

        data = self._request("POST", API_URL, track.to_form())
        response = LastFmScrobbleResponse.from_dict(data)
        message = response.scrobble.ignored_message
        message.text = get_ignored_message(message.code)
        return response