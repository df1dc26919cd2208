from __future__ import annotations

import logging
from typing import Callable

from lyric_finder.config import AppConfig
from lyric_finder.errors import ValidationError
from lyric_finder.recent import RecentSearches
from lyric_finder.render.ansi import LyricsRenderer
from lyric_finder.sources.service import LyricLookup
from lyric_finder.sources.types import FetchError, Found, LyricResult, NotFound

logger = logging.getLogger(__name__)

INVALID_INPUT = "Invalid format."
NO_LYRICS = "No lyrics found."
FETCH_FAILED = "Error fetching lyrics. Please try again."


class SearchSession:
    """
    One interactive user session: its own lookup cache plus recent searches.

    search() flattens the lookup outcome into a display string, while
    last_result keeps the tagged result (None after invalid input).
    """

    def __init__(
        self,
        lookup: LyricLookup,
        recent: RecentSearches | None = None,
        renderer: LyricsRenderer | None = None,
    ):
        self.lookup = lookup
        self.recent = recent or RecentSearches()
        self.renderer = renderer or LyricsRenderer()
        self.last_result: LyricResult | None = None

    @classmethod
    def from_config(cls, cfg: AppConfig, renderer: LyricsRenderer | None = None) -> "SearchSession":
        return cls(LyricLookup.from_config(cfg), RecentSearches(cfg.recent_limit), renderer)

    def search(self, artist: str, song: str) -> str:
        logger.debug("Searching for: %r %r", artist, song)
        self.recent.record(artist, song)
        try:
            self.last_result = self.lookup.lookup(artist, song)
        except ValidationError:
            logger.debug("Invalid input")
            self.last_result = None
            return INVALID_INPUT

        res = self.last_result
        if isinstance(res, Found):
            return res.text
        if isinstance(res, NotFound):
            return NO_LYRICS
        if isinstance(res, FetchError):
            logger.error("%s", res.message)
            return FETCH_FAILED
        raise TypeError(f"unexpected lookup result: {res!r}")

    def repeat(self, index: int) -> str:
        entry = self.recent.get(index)
        return self.search(entry.artist, entry.song)

    def show(self, title: str, text: str) -> None:
        if isinstance(self.last_result, Found):
            self.renderer.render_lyrics(title, text)
        else:
            self.renderer.render_status(text, error=isinstance(self.last_result, FetchError))
        self.renderer.render_recent(self.recent.entries())

    def run(self, prompt: Callable[[str], str]) -> int:
        """
        Prompt loop. A blank artist quits; "#n" re-runs recent search n.
        """
        while True:
            artist = prompt("Artist Name").strip()
            if not artist:
                return 0

            if artist.startswith("#") and artist[1:].isdigit():
                idx = int(artist[1:]) - 1
                try:
                    entry = self.recent.get(idx)
                except IndexError:
                    self.renderer.render_status(f"No recent search {artist}")
                    continue
                text = self.repeat(idx)
                self.show(entry.display, text)
                continue

            song = prompt("Song Title")
            text = self.search(artist, song)
            self.show(f"{artist} - {song.strip()}", text)
