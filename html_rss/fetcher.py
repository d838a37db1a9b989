from __future__ import annotations

from typing import Dict

import requests

from .exceptions import PageFetchError

USER_AGENT = "Mozilla/5.0 (compatible; VeryDirtyRSS/1.0; +https://github.com/verydirtyrss)"
HEADERS: Dict[str, str] = {"User-Agent": USER_AGENT}

# Seconds. Detail pages get a shorter budget than the listing page.
PAGE_TIMEOUT = 10.0
CONTENT_TIMEOUT = 5.0


def fetch_html(url: str, timeout: float = PAGE_TIMEOUT) -> str:
    """
    Fetch ``url`` once and return the response body as text.

    Raises PageFetchError on connection errors, timeouts and non-2xx statuses.
    There is no retry.
    """
    try:
        resp = requests.get(url, headers=HEADERS, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as e:
        raise PageFetchError(f"Failed to fetch page: {url} ({e})") from e
    return resp.text
