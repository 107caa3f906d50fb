from __future__ import annotations

import logging
from typing import Optional

from flask import Flask, jsonify, request
from flask_cors import CORS

from . import config
from .cache import LyricsCache, MemoryLyricsCache
from .handlers import image_outcome, lyrics_outcome, search_outcome
from .logging_setup import setup_logging
from .outcomes import to_response
from .upstream import UpstreamClient

logger = logging.getLogger(__name__)


def create_app(cache: Optional[LyricsCache] = None, client: Optional[UpstreamClient] = None) -> Flask:
    app = Flask(__name__)
    CORS(app)

    # An empty cache is falsy, so compare against None.
    cache = cache if cache is not None else MemoryLyricsCache()
    client = client if client is not None else UpstreamClient()

    # ---------------- Lyrics ----------------
    @app.route("/lyrics", methods=["GET"])
    def lyrics():
        return to_response(lyrics_outcome(request.args.get("url"), cache, client))

    # ---------------- Proxies ----------------
    @app.route("/api/search", methods=["GET"])
    def api_search():
        return to_response(search_outcome(request.args.get("q"), config.genius_api_key(), client))

    @app.route("/image-proxy", methods=["GET"])
    def image_proxy():
        return to_response(image_outcome(request.args.get("url"), client))

    @app.route("/api/ping", methods=["GET"])
    def api_ping():
        return jsonify({"ok": True})

    return app


def main() -> None:
    setup_logging(config.DEBUG)
    app = create_app()
    logger.info("Server running on http://localhost:%s", config.PORT)
    app.run(host=config.HOST, port=config.PORT, threaded=True)


if __name__ == "__main__":
    main()
