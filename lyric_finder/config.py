from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_API_BASE = "https://api.lyrics.ovh/v1"


@dataclass(frozen=True)
class AppConfig:
    # Provider
    api_base_url: str
    api_timeout_s: float | None

    # Session
    recent_limit: int

    # HTTP endpoint
    host: str
    port: int


def load_config() -> AppConfig:
    base_url = os.getenv("LYRIC_FINDER_API_BASE", DEFAULT_API_BASE).rstrip("/")

    # 0 means "let requests wait forever", which is the transport default
    timeout = float(os.getenv("LYRIC_FINDER_API_TIMEOUT", "10.0"))

    recent_limit = int(os.getenv("LYRIC_FINDER_RECENT_LIMIT", "5"))
    if recent_limit < 1:
        raise ValueError(f"LYRIC_FINDER_RECENT_LIMIT must be positive, got {recent_limit}")

    return AppConfig(
        api_base_url=base_url,
        api_timeout_s=timeout if timeout > 0 else None,
        recent_limit=recent_limit,
        host=os.getenv("LYRIC_FINDER_HOST", "127.0.0.1"),
        port=int(os.getenv("LYRIC_FINDER_PORT", "5000")),
    )
