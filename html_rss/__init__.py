"""
html_rss

Turns an HTML page that has no feed into an RSS 2.0 feed, driven by CSS selectors.

Core ideas:
- Input: a page URL plus selectors for the repeating item element and its fields
- Process: fetch → parse → locate items → extract fields → (optionally) fetch full content → assemble
- Output: Feed, serialized as RSS XML

Items keep page order. An item is published only if it has a title or a description;
missing links fall back to the site root and missing dates to the request time.

Example
-------
from html_rss import FeedGenerator, SelectorConfig

config = SelectorConfig.from_params({
    "url": "https://example.com/blog",
    "item": ".article",
    "title": "h2",
    "description": ".excerpt",
})

feed = FeedGenerator().generate(config, feed_url="http://localhost:3000/rss")
for item in feed.items:
    print(item.date, item.title, item.url)

print(feed.to_xml(indent=True))
"""
from .models import ExtractedFields, FeedItem, SelectorConfig
from .feed import Feed
from .core import FeedGenerator

__all__ = [
    "ExtractedFields",
    "Feed",
    "FeedGenerator",
    "FeedItem",
    "SelectorConfig",
]
