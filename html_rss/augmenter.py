from __future__ import annotations

import logging
from typing import Callable

from soupsieve import SelectorSyntaxError

from .exceptions import HtmlRssError
from .fetcher import CONTENT_TIMEOUT, fetch_html
from .models import ExtractedFields, SelectorConfig
from .parser import ParsedDocument

logger = logging.getLogger(__name__)

Fetch = Callable[[str, float], str]


def should_augment(fields: ExtractedFields, config: SelectorConfig) -> bool:
    return bool(fields.link and config.content and config.fetch_content)


def augment(fields: ExtractedFields, config: SelectorConfig, fetch: Fetch = fetch_html) -> str:
    """
    Return the body to publish for an item.

    When enabled, the item's own page is fetched and the inner markup of the first
    element matching the content selector replaces the description. Any failure is
    logged and the original description is kept.
    """
    if not should_augment(fields, config):
        return fields.description

    try:
        markup = fetch(fields.link, CONTENT_TIMEOUT)
        with ParsedDocument(markup) as article:
            node = article.select_one(config.content)
            full_content = node.decode_contents() if node is not None else ""
    except (HtmlRssError, SelectorSyntaxError, NotImplementedError) as e:
        logger.warning("Failed to fetch full content for: %s (%s)", fields.link, e)
        return fields.description

    return full_content or fields.description
