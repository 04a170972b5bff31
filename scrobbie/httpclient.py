"""Shared HTTP plumbing: query building and response decoding."""

from __future__ import annotations

import logging
import time
import xml.etree.ElementTree as ET
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import requests

log = logging.getLogger(__name__)

USER_AGENT = "scrobbie/0.1"
TIMEOUT = 30
RATE_LIMIT_DELAY = 10

_session = requests.Session()


class HttpError(Exception):
    """Raised when a server answers with a 4xx or 5xx status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"HTTP {status_code}: {body}")
        self.status_code = status_code
        self.body = body


def add_query(url: str, key: str, value: str) -> str:
    """Return ``url`` with ``key=value`` added; parameters end up sorted by key."""
    parts = urlsplit(url)
    pairs = parse_qsl(parts.query, keep_blank_values=True)
    pairs.append((key, value))
    pairs.sort(key=lambda pair: pair[0])
    return urlunsplit(parts._replace(query=urlencode(pairs)))


def run_request(
    method: str,
    url: str,
    data: str | dict[str, str] | None = None,
    headers: dict[str, str] | None = None,
) -> Any:
    """Send a request, retrying on HTTP 429, and decode the JSON or XML reply."""
    request_headers = {"Accept": "application/json", **(headers or {}), "User-Agent": USER_AGENT}
    while True:
        response = _session.request(
            method, url, data=data, headers=request_headers, timeout=TIMEOUT
        )
        if response.status_code == 429:
            log.warning("HTTP 429 hit! Sleeping for %d seconds before retrying. url=%s",
                        RATE_LIMIT_DELAY, url)
            time.sleep(RATE_LIMIT_DELAY)
            continue
        if 400 <= response.status_code <= 599:
            raise HttpError(response.status_code, response.text)
        if "application/xml" in response.headers.get("Content-Type", ""):
            return ET.fromstring(response.content)
        return response.json()