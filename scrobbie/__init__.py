"""Scrobble Plex music playback history to Last.fm."""

__version__ = "0.1.0"