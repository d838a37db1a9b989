from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

from .augmenter import Fetch, augment
from .classifier import is_feed_entry
from .feed import Feed, build_feed
from .fetcher import PAGE_TIMEOUT, fetch_html
from .models import SelectorConfig
from .normalizer import to_feed_item
from .parser import ParsedDocument, extract_fields

logger = logging.getLogger(__name__)


class FeedGenerator:
    """
    High-level API: fetch an HTML page and turn its repeating items into a Feed.

    Pipeline: fetch → parse → locate items → extract fields → keep items with a
    title or description → (optional) fetch full content → append in page order.
    """

    def __init__(self, *, fetch: Fetch = fetch_html) -> None:
        self._fetch = fetch

    def generate(
        self,
        config: SelectorConfig,
        feed_url: str,
        *,
        now: Optional[datetime] = None,
    ) -> Feed:
        logger.info("Fetching: %s", config.url)
        html = self._fetch(config.url, PAGE_TIMEOUT)
        now = now or datetime.now(timezone.utc)

        with ParsedDocument(html) as document:
            feed = build_feed(document, config, feed_url, now=now)
            nodes = document.select_items(config.item)
            logger.info("Found %d items using selector: %s", len(nodes), config.item)

            for node in nodes:
                fields = extract_fields(node, config)
                if not is_feed_entry(fields):
                    continue
                fields.content = augment(fields, config, fetch=self._fetch)
                feed.add_item(to_feed_item(fields, config.site_url, now=now))

        return feed

    def render(self, config: SelectorConfig, feed_url: str) -> str:
        """Generate the feed and serialize it as indented RSS XML."""
        return self.generate(config, feed_url).to_xml(indent=True)
