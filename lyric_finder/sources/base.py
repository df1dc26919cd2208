from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from lyric_finder.errors import ProviderError

from .types import Query


@dataclass(frozen=True, slots=True)
class ProviderResponse:
    lyrics: str | None = None

    @property
    def has_lyrics(self) -> bool:
        return self.lyrics is not None and self.lyrics != ""

    @classmethod
    def from_json(cls, data: Any) -> "ProviderResponse":
        if not isinstance(data, dict):
            raise ProviderError(f"unexpected response body: {type(data).__name__}")
        lyrics = data.get("lyrics")
        if lyrics is not None and not isinstance(lyrics, str):
            raise ProviderError(f"unexpected 'lyrics' field: {type(lyrics).__name__}")
        return cls(lyrics=lyrics)


class LyricsSource:
    name: str

    def fetch(self, query: Query) -> ProviderResponse:
        """Raises ProviderError when the provider can't give a usable answer."""
        raise NotImplementedError
