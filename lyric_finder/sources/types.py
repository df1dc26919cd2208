from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union

from lyric_finder.errors import ValidationError

CACHE_KEY_SEPARATOR = "-"


@dataclass(frozen=True, slots=True)
class Query:
    artist: str
    song: str

    @classmethod
    def parse(cls, artist: str | None, song: str | None) -> "Query":
        """
        Build a query from raw user input.

        Surrounding whitespace is stripped but casing is kept, since the
        provider is asked with the text as typed.
        """
        artist = (artist or "").strip()
        song = (song or "").strip()
        if not artist or not song:
            raise ValidationError("Missing artist or song")
        return cls(artist=artist, song=song)

    @property
    def cache_key(self) -> str:
        # Query(...) built directly skips parse(), so trim here as well
        return f"{self.artist.strip().lower()}{CACHE_KEY_SEPARATOR}{self.song.strip().lower()}"

    @property
    def display(self) -> str:
        return f"{self.artist} - {self.song}"


@dataclass(frozen=True, slots=True)
class Found:
    text: str
    kind: Literal["found"] = "found"


@dataclass(frozen=True, slots=True)
class NotFound:
    kind: Literal["not_found"] = "not_found"


@dataclass(frozen=True, slots=True)
class FetchError:
    message: str
    kind: Literal["fetch_error"] = "fetch_error"


LyricResult = Union[Found, NotFound, FetchError]
