from __future__ import annotations

import mimetypes
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from datetime import datetime, timezone
from email.utils import format_datetime
from typing import List, Optional
from xml.dom import minidom

from .models import FeedItem, SelectorConfig
from .parser import ParsedDocument, get_attr, get_text

GENERATOR = "VeryDirtyRSS"
DEFAULT_TITLE = "RSS Feed"
DEFAULT_DESCRIPTION = "Generated RSS feed from HTML page"
DEFAULT_LANGUAGE = "en"

NAMESPACES = {
    "xmlns:dc": "http://purl.org/dc/elements/1.1/",
    "xmlns:content": "http://purl.org/rss/1.0/modules/content/",
    "xmlns:atom": "http://www.w3.org/2005/Atom",
}

# Control characters XML 1.0 does not allow, even escaped.
_XML_ILLEGAL = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")


def _xml_safe(value: str) -> str:
    return _XML_ILLEGAL.sub("", value)


def _sub(parent: ET.Element, tag: str, text: Optional[str] = None, attrib: Optional[dict] = None) -> ET.Element:
    el = ET.SubElement(parent, tag, {k: _xml_safe(v) for k, v in (attrib or {}).items()})
    if text is not None:
        el.text = _xml_safe(text)
    return el


def _rfc822(dt: datetime) -> str:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return format_datetime(dt.astimezone(timezone.utc), usegmt=True)


@dataclass
class Feed:
    """Channel metadata plus the items in the order they were added."""
    title: str
    description: str
    site_url: str
    feed_url: str
    language: str = DEFAULT_LANGUAGE
    generator: str = GENERATOR
    pub_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    items: List[FeedItem] = field(default_factory=list)

    def add_item(self, item: FeedItem) -> None:
        self.items.append(item)

    def to_element(self) -> ET.Element:
        rss = ET.Element("rss", dict(NAMESPACES, version="2.0"))
        channel = ET.SubElement(rss, "channel")
        _sub(channel, "title", self.title)
        _sub(channel, "description", self.description)
        _sub(channel, "link", self.site_url)
        _sub(channel, "generator", self.generator)
        _sub(channel, "lastBuildDate", _rfc822(self.pub_date))
        _sub(
            channel,
            "atom:link",
            None,
            {"href": self.feed_url, "rel": "self", "type": "application/rss+xml"},
        )
        _sub(channel, "pubDate", _rfc822(self.pub_date))
        _sub(channel, "language", self.language)

        for it in self.items:
            item = ET.SubElement(channel, "item")
            _sub(item, "title", it.title)
            _sub(item, "description", it.description)
            _sub(item, "link", it.url)
            _sub(item, "guid", it.url, {"isPermaLink": "true"})
            if it.author:
                _sub(item, "dc:creator", it.author)
            _sub(item, "pubDate", _rfc822(it.date))
            if it.enclosure_url:
                mime, _ = mimetypes.guess_type(it.enclosure_url)
                _sub(
                    item,
                    "enclosure",
                    None,
                    {
                        "url": it.enclosure_url,
                        "length": "0",
                        "type": mime or "application/octet-stream",
                    },
                )
        return rss

    def to_xml(self, indent: bool = False) -> str:
        payload = ET.tostring(self.to_element(), encoding="utf-8", xml_declaration=True)
        if not indent:
            return payload.decode("utf-8")
        return minidom.parseString(payload).toprettyxml(indent="  ", encoding="utf-8").decode("utf-8")


def build_feed(
    document: ParsedDocument,
    config: SelectorConfig,
    feed_url: str,
    *,
    now: Optional[datetime] = None,
) -> Feed:
    """
    Derive channel metadata from the page.

    Title: <title>, else first <h1>. Description: meta description, else
    og:description. Language: <html lang>. Each falls back to a fixed default.
    """
    title = get_text(document.select_one("title")) or get_text(document.select_one("h1"))

    description = None
    for selector in ('meta[name="description"]', 'meta[property="og:description"]'):
        meta = document.select_one(selector)
        if meta is not None:
            description = get_attr(meta, "content")
        if description:
            break

    html = document.select_one("html")
    language = get_attr(html, "lang") if html is not None else None

    return Feed(
        title=title or DEFAULT_TITLE,
        description=description or DEFAULT_DESCRIPTION,
        site_url=config.site_url,
        feed_url=feed_url,
        language=language or DEFAULT_LANGUAGE,
        pub_date=now or datetime.now(timezone.utc),
    )
