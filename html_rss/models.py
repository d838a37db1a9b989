from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Mapping, Optional
from urllib.parse import urlsplit

DEFAULT_URL = "https://install.doctor/blog"

# Query parameter name -> default selector.
DEFAULT_SELECTORS = {
    "item": ".post",
    "title": ".post-title",
    "description": ".paragraph-intro",
    "link": ".post-link",
    "pubDate": ".publish-date time",
    "image": ".featured-image",
    "modified": ".modified-date time",
    "content": ".post-content",
    "creator": ".author-date a",
}

_DEFAULT_PORTS = {"http": 80, "https": 443}


@dataclass(frozen=True)
class SelectorConfig:
    """
    Selectors and switches for one feed request.

    Built once per request from the query string and never mutated afterwards.
    """
    url: str = DEFAULT_URL
    item: str = DEFAULT_SELECTORS["item"]
    title: str = DEFAULT_SELECTORS["title"]
    description: str = DEFAULT_SELECTORS["description"]
    link: str = DEFAULT_SELECTORS["link"]
    pub_date: str = DEFAULT_SELECTORS["pubDate"]
    image: str = DEFAULT_SELECTORS["image"]
    modified: str = DEFAULT_SELECTORS["modified"]
    content: str = DEFAULT_SELECTORS["content"]
    creator: str = DEFAULT_SELECTORS["creator"]
    fetch_content: bool = False

    @classmethod
    def from_params(cls, params: Mapping[str, str]) -> "SelectorConfig":
        """
        Build a config from request parameters. Missing or empty values take the defaults;
        only the exact string "true" enables ``fetchContent``.
        """
        def pick(name: str, default: str) -> str:
            value = params.get(name)
            return value if value else default

        return cls(
            url=pick("url", DEFAULT_URL),
            item=pick("item", DEFAULT_SELECTORS["item"]),
            title=pick("title", DEFAULT_SELECTORS["title"]),
            description=pick("description", DEFAULT_SELECTORS["description"]),
            link=pick("link", DEFAULT_SELECTORS["link"]),
            pub_date=pick("pubDate", DEFAULT_SELECTORS["pubDate"]),
            image=pick("image", DEFAULT_SELECTORS["image"]),
            modified=pick("modified", DEFAULT_SELECTORS["modified"]),
            content=pick("content", DEFAULT_SELECTORS["content"]),
            creator=pick("creator", DEFAULT_SELECTORS["creator"]),
            fetch_content=params.get("fetchContent") == "true",
        )

    @property
    def site_url(self) -> str:
        """Origin (scheme://host[:port]) of the target page, or the raw url if it has none."""
        try:
            parts = urlsplit(self.url)
            port = parts.port
        except ValueError:
            return self.url
        host = parts.hostname
        if not parts.scheme or not host:
            return self.url
        if ":" in host:
            host = f"[{host}]"
        origin = f"{parts.scheme}://{host}"
        if port and _DEFAULT_PORTS.get(parts.scheme) != port:
            origin += f":{port}"
        return origin


@dataclass
class ExtractedFields:
    """Raw per-item values pulled out of one item node."""
    title: str = ""
    description: str = ""
    link: str = ""
    creator: str = ""
    pub_date: Optional[datetime] = None
    modified_date: Optional[datetime] = None
    image_url: str = ""
    content: str = ""


@dataclass(frozen=True)
class FeedItem:
    """
    A finalized feed entry.

    ``url`` and ``date`` are always set; see ``normalizer.to_feed_item`` for the fallbacks.
    """
    title: str
    description: str
    url: str
    date: datetime
    author: Optional[str] = None
    enclosure_url: Optional[str] = None
