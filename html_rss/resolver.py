from __future__ import annotations

from urllib.parse import urljoin


def resolve_url(candidate: str, base: str) -> str:
    """
    Resolve ``candidate`` against ``base``.

    Absolute URLs come back unchanged and relative ones are joined onto the base.
    If resolution fails (malformed input, no base) the candidate is returned as-is,
    so callers must tolerate a possibly-relative URL.
    """
    if not base:
        return candidate
    try:
        return urljoin(base, candidate.strip())
    except ValueError:
        return candidate
