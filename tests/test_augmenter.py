import logging
from unittest.mock import MagicMock

import pytest

from html_rss.augmenter import augment
from html_rss.fetcher import CONTENT_TIMEOUT
from html_rss.models import ExtractedFields, SelectorConfig

from conftest import BLOG_URL, FakeFetch, make_page

LINK = "https://example.com/posts/hello"
ARTICLE = make_page('<article><div class="post-content"><p>Full <b>body</b></p></div></article>')


def _fields(link=LINK):
    return ExtractedFields(title="Hello", description="Short intro", link=link, content="Short intro")


def test_disabled_never_fetches():
    fetch = MagicMock()
    config = SelectorConfig(url=BLOG_URL, fetch_content=False)

    assert augment(_fields(), config, fetch=fetch) == "Short intro"
    fetch.assert_not_called()


def test_no_link_never_fetches():
    fetch = MagicMock()
    config = SelectorConfig(url=BLOG_URL, fetch_content=True)

    assert augment(_fields(link=""), config, fetch=fetch) == "Short intro"
    fetch.assert_not_called()


def test_no_content_selector_never_fetches():
    fetch = MagicMock()
    config = SelectorConfig(url=BLOG_URL, content="", fetch_content=True)

    assert augment(_fields(), config, fetch=fetch) == "Short intro"
    fetch.assert_not_called()


def test_inner_markup_replaces_description():
    fetch = FakeFetch({LINK: ARTICLE})
    config = SelectorConfig(url=BLOG_URL, fetch_content=True)

    assert augment(_fields(), config, fetch=fetch) == "<p>Full <b>body</b></p>"
    assert fetch.calls == [(LINK, CONTENT_TIMEOUT)]


def test_no_match_keeps_description():
    fetch = FakeFetch({LINK: make_page("<p>nothing here</p>")})
    config = SelectorConfig(url=BLOG_URL, fetch_content=True)

    assert augment(_fields(), config, fetch=fetch) == "Short intro"


def test_empty_match_keeps_description():
    fetch = FakeFetch({LINK: make_page('<div class="post-content"></div>')})
    config = SelectorConfig(url=BLOG_URL, fetch_content=True)

    assert augment(_fields(), config, fetch=fetch) == "Short intro"


def test_fetch_failure_is_logged_and_swallowed(caplog):
    fetch = FakeFetch({})
    config = SelectorConfig(url=BLOG_URL, fetch_content=True)

    with caplog.at_level(logging.WARNING, logger="html_rss.augmenter"):
        assert augment(_fields(), config, fetch=fetch) == "Short intro"

    assert f"Failed to fetch full content for: {LINK}" in caplog.text


@pytest.mark.parametrize("selector", ["div[", "p::before"])
def test_invalid_content_selector_keeps_description(selector):
    fetch = FakeFetch({LINK: ARTICLE})
    config = SelectorConfig(url=BLOG_URL, content=selector, fetch_content=True)

    assert augment(_fields(), config, fetch=fetch) == "Short intro"
