from __future__ import annotations

import pytest

from lyric_finder.cache.memory import LyricsCache
from lyric_finder.errors import ProviderError
from lyric_finder.sources.base import LyricsSource, ProviderResponse
from lyric_finder.sources.service import LyricLookup
from lyric_finder.sources.types import Query


class FakeSource(LyricsSource):
    """
    Stub provider keyed by (artist, song) exactly as the lookup sends them.

    - lyrics: mapping of (artist, song) -> lyrics text or None
    - fail: when set, every fetch raises ProviderError with this message
    - calls: every Query passed to fetch(), in order
    """

    name = "fake"

    def __init__(self, lyrics: dict[tuple[str, str], str | None] | None = None, fail: str | None = None):
        self.lyrics = dict(lyrics or {})
        self.fail = fail
        self.calls: list[Query] = []

    def fetch(self, query: Query) -> ProviderResponse:
        self.calls.append(query)
        if self.fail:
            raise ProviderError(self.fail)
        return ProviderResponse(lyrics=self.lyrics.get((query.artist, query.song)))


@pytest.fixture
def source():
    return FakeSource({("Queen", "Bohemian Rhapsody"): "La la la", ("Adele", "Hello"): "Hello from the other side"})


@pytest.fixture
def lookup(source):
    return LyricLookup(source, LyricsCache())


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    for name in (
        "LYRIC_FINDER_API_BASE",
        "LYRIC_FINDER_API_TIMEOUT",
        "LYRIC_FINDER_RECENT_LIMIT",
        "LYRIC_FINDER_HOST",
        "LYRIC_FINDER_PORT",
        "LYRIC_FINDER_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_source():
    return FakeSource
