# scrobbie

Scrobble the music you played on your Plex Media Server to Last.fm.

scrobbie reads your server's playback history for one music library and
sends each track to Last.fm with its original play time. It remembers the
time of the last track it sent, so the next run picks up from there.

## Installation

```
pip install .
```

## Usage

```
scrobbie
```

The command takes no options besides `--help`. On every run it:

1. Loads `config.json` (see below). If the file does not exist, it creates
   the configuration directory. It then writes the configuration back, so a
   first run leaves a file with empty settings for you to fill in.
2. Works out where to start. Last.fm only accepts tracks played within the
   last two weeks. If no sync has happened before, or the last sync is older
   than that, scrobbie starts from two weeks ago and prints that date.
3. Fetches the Plex playback history since that point, from the configured
   library section, for the server owner's account (account ID 1).
4. Scrobbles each track to Last.fm, printing it in colour, and reports
   whether it was accepted or ignored, with the reason it was ignored
   (artist or track ignored, timestamp too old or too new, daily limit
   exceeded).
5. Waits one second between tracks. When at least one track was sent, it
   saves the time just after the last one as the new sync point.

If fetching the history or sending a scrobble fails, the command prints the
error and exits with status 1 without saving a new sync point. Any request
answered with HTTP 429 is retried after ten seconds.

## Configuration file

`config.json` lives in your user configuration directory, under `scrobbie`
(as chosen by `platformdirs`). Inside a Docker container, indicated by a
`/.dockerenv` file, it lives in `/config` instead. It is JSON, indented with
tabs:

```json
{
	"lastfm": {
		"api_key": "placeholder",
		"api_secret": "secret",
		"session_key": "placeholder"
	},
	"plex": {
		"server_url": "http://localhost:32400",
		"user_auth_token": "token",
		"server_auth_token": "token",
		"library_section_id": 3,
		"client_identifier": "scrobbie-example"
	},
	"last_sync_date": "0001-01-01T00:00:00Z"
}
```

`last_sync_date` is an ISO 8601 time; the zero value above means no sync has
happened yet.

## What scrobbie does not do

The command has no interactive setup. It does not ask for your Plex server,
library section or Last.fm credentials, and it does not walk you through
linking either account. Fill in `config.json` yourself before running it.

The client classes can help with that from Python:

- `scrobbie.plex.PlexClient` has `get_pin()` and `get_user(pin_id)` for the
  plex.tv PIN flow, `get_resources()` to list your devices and their access
  tokens, and `get_libraries()` to list the server's library sections.
- `scrobbie.lastfm.LastFmClient` has `get_request_token()` and
  `get_session_key(token)` for obtaining a Last.fm session key, and
  `scrobble(track)` for sending one `LastFmScrobbleRequest`.

```python
from scrobbie.config import Config
from scrobbie.plex import PlexClient

config = Config()
config.read()
for section in PlexClient(config.plex).get_libraries().directories:
    print(section.key, section.type, section.title)
```

## Running the tests

```
pip install .[test]
pytest
```