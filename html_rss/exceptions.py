class HtmlRssError(Exception):
    """Base class for errors raised while turning an HTML page into a feed."""


class PageFetchError(HtmlRssError):
    """Raised when a page cannot be fetched (network error, bad status, timeout)."""


class ParseError(HtmlRssError):
    """Raised when a fetched body cannot be parsed into a queryable document."""
