"""Command that copies recent Plex plays to Last.fm."""

from __future__ import annotations

import argparse
import time
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from termcolor import cprint

from .config import Config
from .lastfm import LastFmClient
from .lastfm_models import LastFmScrobbleRequest
from .plex import PlexClient

_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)
_MAX_AGE = timedelta(days=14)
_SCROBBLE_DELAY = 1


def _format_rfc3339(moment: datetime) -> str:
    text = moment.astimezone().isoformat(timespec="seconds")
    return text[: -len("+00:00")] + "Z" if text.endswith("+00:00") else text


def sync(
    config: Config,
    plex_client: PlexClient,
    lastfm_client: LastFmClient,
    sleep: Callable[[float], object] = time.sleep,
) -> int:
    """Scrobble every track played since the last sync; return how many were sent."""
    print("Getting playback history from Plex...")
    try:
        history = plex_client.get_playback_history()
    except Exception as exc:
        cprint(f"Failed to get playback history from Plex: {exc}", "red")
        raise

    if not history.metadata:
        cprint("No new tracks found.", "yellow")
        return 0

    for item in history.metadata:
        viewed_at = item.viewed_at or _ZERO_TIME
        cprint(f"[{_format_rfc3339(viewed_at)}] {item.artist} - {item.track}", "magenta")

        request = LastFmScrobbleRequest(
            artist=item.artist,
            track=item.track,
            album=item.album,
            timestamp=str(int(viewed_at.timestamp())),
        )
        try:
            result = lastfm_client.scrobble(request)
        except Exception as exc:
            cprint(f"Failed to scrobble track: {exc}", "red")
            raise

        message = result.scrobble.ignored_message
        if message.code != "0":
            cprint(f"Scrobble ignored: {message.text}", "yellow")
        else:
            cprint("Scrobble success!", "green")
        print("-------------")
        config.last_sync_date = viewed_at + timedelta(seconds=1)
        sleep(_SCROBBLE_DELAY)

    return len(history.metadata)


def _write_config(config: Config) -> None:
    try:
        config.write()
    except OSError as exc:
        cprint(f"Failed to write config: {exc}", "red")


def main(argv: list[str] | None = None) -> int:
    """Run one sync from Plex to Last.fm."""
    parser = argparse.ArgumentParser(
        prog="scrobbie", description="Scrobble recent Plex music plays to Last.fm."
    )
    parser.parse_args(argv)

    config = Config()
    try:
        config.read()
    except FileNotFoundError:
        config.create_config_directory()

    _write_config(config)

    two_weeks_ago = datetime.now(timezone.utc) - _MAX_AGE
    if config.last_sync_date is None or config.last_sync_date < two_weeks_ago:
        print("Last.fm only supports tracks that were played 2 weeks ago or earlier.")
        print()
        print(f"Getting tracks from: {two_weeks_ago.astimezone().date().isoformat()}")
        config.last_sync_date = two_weeks_ago

    plex_client = PlexClient(config.plex, config.last_sync_date)
    lastfm_client = LastFmClient(config.lastfm)

    try:
        count = sync(config, plex_client, lastfm_client)
    except Exception:
        return 1

    if count:
        _write_config(config)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())