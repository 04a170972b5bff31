from scrobbie.lastfm_models import (
    Correction,
    IgnoredMessage,
    LastFmScrobbleRequest,
    LastFmScrobbleResponse,
    LastFmSession,
    LastFmToken,
    ScrobbleAttr,
)

SAMPLE = {
    "scrobbles": {
        "scrobble": {
            "artist": {"corrected": "0", "#text": "The Band"},
            "album": {"corrected": "1", "#text": "First Album"},
            "track": {"corrected": "0", "#text": "Opening Song"},
            "ignoredMessage": {"code": "0", "#text": ""},
            "albumArtist": {"corrected": "0", "#text": ""},
            "timestamp": "1700000000",
        },
        "@attr": {"ignored": 0, "accepted": 1},
    }
}


def test_to_form_fields_in_order():
    request = LastFmScrobbleRequest(artist="A", track="T", album="B", timestamp="1")
    assert list(request.to_form()) == [
        "method",
        "artist",
        "track",
        "album",
        "timestamp",
        "sk",
        "api_key",
        "format",
    ]


def test_to_form_values():
    request = LastFmScrobbleRequest(
        artist="A",
        track="T",
        album="B",
        timestamp="1",
        method="track.scrobble",
        session_key="token",
        api_key="placeholder",
        format="json",
    )
    form = request.to_form()
    assert form["sk"] == "token"
    assert form["api_key"] == "placeholder"
    assert form["method"] == "track.scrobble"
    assert form["timestamp"] == "1"


def test_scrobble_response_from_dict():
    response = LastFmScrobbleResponse.from_dict(SAMPLE)
    assert response.scrobble.artist == Correction(corrected="0", text="The Band")
    assert response.scrobble.album.corrected == "1"
    assert response.scrobble.track.text == "Opening Song"
    assert response.scrobble.ignored_message == IgnoredMessage(code="0", text="")
    assert response.scrobble.timestamp == "1700000000"
    assert response.attr == ScrobbleAttr(ignored=0, accepted=1)


def test_scrobble_response_ignored():
    data = {"scrobbles": {"scrobble": {"ignoredMessage": {"code": "3", "#text": ""}}}}
    response = LastFmScrobbleResponse.from_dict(data)
    assert response.scrobble.ignored_message.code == "3"


def test_scrobble_response_list_takes_first():
    data = {"scrobbles": {"scrobble": [SAMPLE["scrobbles"]["scrobble"]]}}
    response = LastFmScrobbleResponse.from_dict(data)
    assert response.scrobble.artist.text == "The Band"


def test_scrobble_response_empty_gives_defaults():
    response = LastFmScrobbleResponse.from_dict({})
    assert response == LastFmScrobbleResponse()
    assert response.scrobble.ignored_message.code == ""


def test_correction_missing_fields():
    assert Correction.from_dict({}) == Correction()


def test_token_from_dict():
    assert LastFmToken.from_dict({"token": "token"}).token == "token"


def test_session_from_dict():
    session = LastFmSession.from_dict({"session": {"name": "listener", "key": "secret"}})
    assert session == LastFmSession(name="listener", key="secret")


def test_session_missing_gives_empty():
    assert LastFmSession.from_dict({}) == LastFmSession()