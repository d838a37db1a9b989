from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from .models import ExtractedFields, FeedItem

UNTITLED = "Untitled"
NO_DESCRIPTION = "No description available"


def to_feed_item(
    fields: ExtractedFields,
    site_url: str,
    *,
    now: Optional[datetime] = None,
) -> FeedItem:
    """
    Convert extracted fields into a FeedItem, filling the gaps:
    - title: "Untitled" when empty
    - description: content, else description, else a placeholder
    - url: item link, else the site root
    - date: pubDate, else modified date, else ``now``
    - author / enclosure: None when empty
    """
    date = fields.pub_date or fields.modified_date or now or datetime.now(timezone.utc)
    return FeedItem(
        title=fields.title or UNTITLED,
        description=fields.content or fields.description or NO_DESCRIPTION,
        url=fields.link or site_url,
        date=date,
        author=fields.creator or None,
        enclosure_url=fields.image_url or None,
    )
