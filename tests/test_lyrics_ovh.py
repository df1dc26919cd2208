from __future__ import annotations

import json

import pytest
import requests

from lyric_finder.errors import ProviderError
from lyric_finder.sources.base import ProviderResponse
from lyric_finder.sources.lyrics_ovh import LyricsOvhSource
from lyric_finder.sources.service import LyricLookup
from lyric_finder.sources.types import FetchError, Found, NotFound, Query


def _response(status: int, body: bytes, url: str = "https://api.lyrics.ovh/v1/x/y") -> requests.Response:
    r = requests.Response()
    r.status_code = status
    r._content = body
    r.url = url
    r.reason = "OK" if status < 400 else "Error"
    return r


class FakeSession:
    def __init__(self, response: requests.Response | None = None, exc: Exception | None = None):
        self.response = response
        self.exc = exc
        self.urls: list[str] = []
        self.timeouts: list[float | None] = []

    def get(self, url, timeout=None):
        self.urls.append(url)
        self.timeouts.append(timeout)
        if self.exc is not None:
            raise self.exc
        return self.response


def _source(session: FakeSession, **kwargs) -> LyricsOvhSource:
    return LyricsOvhSource(session=session, **kwargs)  # type: ignore[arg-type]


def test_url_escapes_path_segments():
    src = _source(FakeSession())
    url = src.url_for(Query("AC/DC", "Rock & Roll Ain't Noise Pollution"))
    assert url == "https://api.lyrics.ovh/v1/AC%2FDC/Rock%20%26%20Roll%20Ain%27t%20Noise%20Pollution"


def test_custom_base_and_timeout():
    session = FakeSession(_response(200, b'{"lyrics": "x"}'))
    src = _source(session, base_url="http://localhost:8080/v1/", timeout_s=2.5)
    src.fetch(Query("Queen", "Bohemian Rhapsody"))
    assert session.urls == ["http://localhost:8080/v1/Queen/Bohemian%20Rhapsody"]
    assert session.timeouts == [2.5]


def test_fetch_lyrics():
    body = json.dumps({"lyrics": "La la la"}).encode()
    src = _source(FakeSession(_response(200, body)))
    resp = src.fetch(Query("Queen", "Bohemian Rhapsody"))
    assert resp == ProviderResponse(lyrics="La la la")
    assert resp.has_lyrics


@pytest.mark.parametrize("body", [b"{}", b'{"lyrics": ""}', b'{"lyrics": null}'])
def test_missing_or_empty_lyrics(body):
    resp = _source(FakeSession(_response(200, body))).fetch(Query("a", "b"))
    assert not resp.has_lyrics


def test_404_raises():
    with pytest.raises(ProviderError):
        _source(FakeSession(_response(404, b'{"error": "No lyrics found"}'))).fetch(Query("a", "b"))


def test_server_error_raises():
    with pytest.raises(ProviderError):
        _source(FakeSession(_response(503, b"unavailable"))).fetch(Query("a", "b"))


def test_transport_error_raises():
    session = FakeSession(exc=requests.ConnectionError("connection refused"))
    with pytest.raises(ProviderError, match="connection refused"):
        _source(session).fetch(Query("a", "b"))


@pytest.mark.parametrize("body", [b"<html>oops</html>", b'["lyrics"]', b'{"lyrics": 42}'])
def test_malformed_body_raises(body):
    with pytest.raises(ProviderError):
        _source(FakeSession(_response(200, body))).fetch(Query("a", "b"))


class TestLookupOverLyricsOvh:
    """LyricLookup wired to the real lyrics.ovh source, HTTP faked at the session."""

    @pytest.mark.parametrize(
        "status, body, expected",
        [
            (404, b'{"error": "No lyrics found"}', FetchError),
            (500, b"internal error", FetchError),
            (200, b"<html>oops</html>", FetchError),
            (200, b'{"lyrics": 42}', FetchError),
            (200, b"{}", NotFound),
            (200, b'{"lyrics": ""}', NotFound),
        ],
    )
    def test_unsuccessful_answers_are_not_cached(self, status, body, expected):
        session = FakeSession(_response(status, body))
        lookup = LyricLookup(_source(session))

        res = lookup.lookup("Queen", "Bohemian Rhapsody")
        assert isinstance(res, expected)
        assert len(lookup.cache) == 0

        lookup.lookup("Queen", "Bohemian Rhapsody")
        assert len(session.urls) == 2

    def test_connection_error_is_fetch_error(self):
        session = FakeSession(exc=requests.ConnectionError("connection refused"))
        lookup = LyricLookup(_source(session))
        res = lookup.lookup("Queen", "Bohemian Rhapsody")
        assert isinstance(res, FetchError)
        assert "connection refused" in res.message
        assert len(lookup.cache) == 0

    def test_found_is_cached(self):
        session = FakeSession(_response(200, b'{"lyrics": "La la la"}'))
        lookup = LyricLookup(_source(session))
        assert lookup.lookup("Queen", "Bohemian Rhapsody") == Found("La la la")
        assert lookup.lookup(" queen ", "BOHEMIAN RHAPSODY") == Found("La la la")
        assert len(session.urls) == 1
