from __future__ import annotations

import logging

from lyric_finder.cache.memory import LyricsCache
from lyric_finder.config import AppConfig
from lyric_finder.errors import ProviderError

from .base import LyricsSource
from .lyrics_ovh import LyricsOvhSource
from .types import FetchError, Found, LyricResult, NotFound, Query

logger = logging.getLogger(__name__)


class LyricLookup:
    def __init__(self, source: LyricsSource, cache: LyricsCache | None = None):
        self.source = source
        self.cache = cache if cache is not None else LyricsCache()

    @classmethod
    def from_config(cls, cfg: AppConfig) -> "LyricLookup":
        return cls(LyricsOvhSource(base_url=cfg.api_base_url, timeout_s=cfg.api_timeout_s))

    def lookup(self, artist: str | None, song: str | None) -> LyricResult:
        """
        Resolve lyrics for one artist/song pair.

        Raises ValidationError before touching the cache or the network when
        either value is blank. Only Found results are memoized.
        """
        query = Query.parse(artist, song)
        key = query.cache_key

        cached = self.cache.get(key)
        if cached is not None:
            logger.info("Serving from cache: %s", key)
            return Found(cached)

        logger.info("Fetching lyrics for: %s", query.display)
        try:
            resp = self.source.fetch(query)
        except ProviderError as e:
            return FetchError(f"Failed to fetch lyrics for {query.display}: {e}")

        if not resp.has_lyrics or resp.lyrics is None:
            logger.info("No lyrics for %s", query.display)
            return NotFound()

        self.cache.set(key, resp.lyrics)
        return Found(resp.lyrics)
