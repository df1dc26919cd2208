from __future__ import annotations

import logging

import requests

from lyric_finder.config import DEFAULT_API_BASE
from lyric_finder.errors import ProviderError

from .base import LyricsSource, ProviderResponse
from .types import Query

logger = logging.getLogger(__name__)


class LyricsOvhSource(LyricsSource):
    name = "lyrics_ovh"

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_API_BASE,
        timeout_s: float | None = 10.0,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s
        self.session = session or requests.Session()

    def url_for(self, query: Query) -> str:
        artist = requests.utils.quote(query.artist, safe="")
        song = requests.utils.quote(query.song, safe="")
        return f"{self.base_url}/{artist}/{song}"

    def fetch(self, query: Query) -> ProviderResponse:
        url = self.url_for(query)
        logger.debug("GET %s", url)
        try:
            r = self.session.get(url, timeout=self.timeout_s)
            # any non-2xx, 404 included, is a failed fetch
            r.raise_for_status()
            data = r.json()
        except requests.RequestException as e:
            logger.warning("lyrics.ovh error for %s: %s", query.display, e)
            raise ProviderError(str(e)) from e
        except ValueError as e:
            logger.warning("lyrics.ovh returned invalid JSON for %s: %s", query.display, e)
            raise ProviderError(f"invalid JSON: {e}") from e

        return ProviderResponse.from_json(data)
