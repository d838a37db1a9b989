from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from dateutil import parser as date_parser


def _as_utc_if_naive(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def parse_date(raw: Optional[str]) -> Optional[datetime]:
    """
    Turn a datetime attribute or free-text timestamp into an aware datetime.

    ISO-8601 is parsed exactly; anything else (RFC 822, "March 3, 2024",
    "2024/01/05", ...) goes through dateutil's general parser. Naive results
    are taken as UTC. Returns None for empty or unparseable input, never raises.
    """
    if raw is None:
        return None
    s = raw.strip()
    if not s:
        return None

    try:
        return _as_utc_if_naive(date_parser.isoparse(s))
    except (ValueError, OverflowError):
        pass

    try:
        return _as_utc_if_naive(date_parser.parse(s))
    except (ValueError, OverflowError):
        return None
