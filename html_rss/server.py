from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from flask import Flask, Response, jsonify, request

from .config import ServerConfig
from .core import FeedGenerator
from .feed import GENERATOR
from .models import DEFAULT_SELECTORS, DEFAULT_URL, SelectorConfig

logger = logging.getLogger(__name__)

VERSION = "1.0.0"
RSS_MIMETYPE = "application/rss+xml; charset=utf-8"

_PARAM_HELP = {
    "url": "Target URL to scrape",
    "item": "CSS selector for post items",
    "title": "CSS selector for post titles",
    "description": "CSS selector for post descriptions",
    "link": "CSS selector for post links",
    "pubDate": "CSS selector for publish dates",
    "image": "CSS selector for featured images",
    "modified": "CSS selector for modified dates",
    "content": "CSS selector for full content",
    "creator": "CSS selector for authors",
}


def describe_endpoints() -> Dict[str, Any]:
    defaults = dict(DEFAULT_SELECTORS, url=DEFAULT_URL)
    parameters = {name: f"{text} (default: {defaults[name]})" for name, text in _PARAM_HELP.items()}
    parameters["fetchContent"] = 'Set to "true" to fetch full article content (default: false)'
    return {
        "name": GENERATOR,
        "description": "Transform any HTML page into an RSS feed",
        "version": VERSION,
        "endpoints": {
            "/rss": {
                "method": "GET",
                "description": "Generate RSS feed from HTML page",
                "parameters": parameters,
                "example": "/rss?url=https://example.com/blog&item=.article&title=h2&description=.excerpt",
            }
        },
    }


def create_app(
    config: Optional[ServerConfig] = None,
    generator: Optional[FeedGenerator] = None,
) -> Flask:
    app = Flask(__name__)
    app.config["SERVER"] = config or ServerConfig()
    feeds = generator or FeedGenerator()

    @app.get("/rss")
    def rss_route():
        try:
            selectors = SelectorConfig.from_params(request.args)
            xml_payload = feeds.render(selectors, request.url)
        except Exception as e:
            logger.exception("Error generating RSS feed")
            return jsonify(error="Failed to generate RSS feed", message=str(e) or "Unknown error"), 500
        return Response(xml_payload, content_type=RSS_MIMETYPE)

    @app.get("/health")
    def health_route():
        timestamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
        return jsonify(status="ok", timestamp=timestamp)

    @app.get("/")
    def index_route():
        return jsonify(describe_endpoints())

    return app


def run(config: ServerConfig) -> None:
    app = create_app(config)
    logger.info("%s server running on port %d", GENERATOR, config.port)
    logger.info("Visit http://localhost:%d for documentation", config.port)
    app.run(host=config.host, port=config.port)


def main() -> None:
    load_dotenv()
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run(ServerConfig.from_env())


if __name__ == "__main__":
    main()
