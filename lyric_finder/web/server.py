from __future__ import annotations

import logging

from flask import Blueprint, Flask, current_app, jsonify, request

from lyric_finder.config import AppConfig, load_config
from lyric_finder.errors import ValidationError
from lyric_finder.sources.service import LyricLookup
from lyric_finder.sources.types import FetchError, Found, NotFound

logger = logging.getLogger(__name__)

lyrics_bp = Blueprint("lyrics_api", __name__)


def _lookup() -> LyricLookup:
    return current_app.extensions["lyric_lookup"]


@lyrics_bp.get("/api/lyrics")
def api_lyrics():
    artist = request.args.get("artist", "")
    song = request.args.get("song", "")

    try:
        res = _lookup().lookup(artist, song)
    except ValidationError as e:
        return jsonify({"error": str(e)}), 400

    if isinstance(res, Found):
        return jsonify({"lyrics": res.text})
    if isinstance(res, NotFound):
        return jsonify({"error": "Lyrics not found."}), 404
    if isinstance(res, FetchError):
        logger.error("%s", res.message)
        return jsonify({"error": "Failed to fetch lyrics."}), 500
    raise TypeError(f"unexpected lookup result: {res!r}")


@lyrics_bp.get("/healthz")
def healthz():
    return jsonify({"status": "ok", "cached": len(_lookup().cache)})


def create_app(lookup: LyricLookup | None = None, cfg: AppConfig | None = None) -> Flask:
    """
    Build the HTTP app. The app owns its lookup (and so its cache) for the
    lifetime of the process; it is never shared with terminal sessions.
    """
    app = Flask(__name__)
    if lookup is None:
        lookup = LyricLookup.from_config(cfg or load_config())
    app.extensions["lyric_lookup"] = lookup
    app.register_blueprint(lyrics_bp)
    return app
