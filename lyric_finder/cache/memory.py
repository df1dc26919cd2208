from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class LyricsCache:
    """
    In-process memo table: cache key -> lyric text.

    Lives as long as its owner (one per process for the server, one per
    interactive session). No eviction, no size bound, nothing on disk.
    """

    def __init__(self) -> None:
        self._entries: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._entries.get(key)

    def set(self, key: str, lyrics: str) -> None:
        if not lyrics:
            raise ValueError("refusing to cache empty lyrics")
        self._entries[key] = lyrics

    def clear(self) -> None:
        logger.debug("Dropping %s cached entries", len(self._entries))
        self._entries.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
