from html_rss.exceptions import PageFetchError

BLOG_URL = "https://example.com/blog"


def make_page(body: str, head: str = "<title>Example Blog</title>", lang: str = "en") -> str:
    return f'<!DOCTYPE html><html lang="{lang}"><head>{head}</head><body>{body}</body></html>'


class FakeFetch:
    """Serves canned pages by URL and records every call; unknown URLs fail."""

    def __init__(self, pages):
        self.pages = dict(pages)
        self.calls = []

    def __call__(self, url, timeout):
        self.calls.append((url, timeout))
        if url not in self.pages:
            raise PageFetchError(f"Failed to fetch page: {url} (404)")
        return self.pages[url]
