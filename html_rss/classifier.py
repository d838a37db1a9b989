from __future__ import annotations

from .models import ExtractedFields


def is_feed_entry(fields: ExtractedFields) -> bool:
    """An item is kept only if it yielded a title or a description."""
    return bool(fields.title or fields.description)
