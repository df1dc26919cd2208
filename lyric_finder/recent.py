from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RecentSearch:
    artist: str
    song: str

    @property
    def display(self) -> str:
        return f"{self.artist} - {self.song}"


class RecentSearches:
    """
    Last few search attempts, newest first.

    Every attempt is recorded as typed, including invalid ones and repeats.
    """

    def __init__(self, limit: int = 5):
        if limit < 1:
            raise ValueError("limit must be positive")
        self.limit = limit
        self._items: list[RecentSearch] = []

    def record(self, artist: str, song: str) -> RecentSearch:
        item = RecentSearch(artist=artist, song=song)
        self._items = [item, *self._items[: self.limit - 1]]
        return item

    def entries(self) -> tuple[RecentSearch, ...]:
        return tuple(self._items)

    def get(self, index: int) -> RecentSearch:
        if index < 0:
            raise IndexError(index)
        return self._items[index]

    def clear(self) -> None:
        self._items = []

    def __len__(self) -> int:
        return len(self._items)
