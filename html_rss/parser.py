from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from .dates import parse_date
from .exceptions import ParseError
from .models import ExtractedFields, SelectorConfig
from .resolver import resolve_url


class ParsedDocument:
    """
    Queryable tree for one fetched page.

    Matched item elements are kept in an internal list and handed out as
    ``ItemNode`` indices into it. Closing the document (or leaving its ``with``
    block) drops the tree, after which every ItemNode resolves to nothing.
    """

    def __init__(self, markup: str) -> None:
        try:
            self._soup: Optional[BeautifulSoup] = BeautifulSoup(markup, "html.parser")
        except Exception as e:  # html.parser can choke on badly broken markup
            raise ParseError(f"Failed to parse HTML document ({e})") from e
        self._nodes: List[Tag] = []

    def __enter__(self) -> "ParsedDocument":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        self._soup = None
        self._nodes = []

    @property
    def closed(self) -> bool:
        return self._soup is None

    def _require(self) -> BeautifulSoup:
        if self._soup is None:
            raise ParseError("Document has been discarded")
        return self._soup

    def select_items(self, selector: str) -> List["ItemNode"]:
        """Match ``selector`` against the whole page; results are in document order."""
        soup = self._require()
        start = len(self._nodes)
        self._nodes.extend(soup.select(selector))
        return [ItemNode(self, i) for i in range(start, len(self._nodes))]

    def select_one(self, selector: str) -> Optional[Tag]:
        return self._require().select_one(selector)

    def resolve(self, index: int) -> Optional[Tag]:
        if self._soup is None or not 0 <= index < len(self._nodes):
            return None
        return self._nodes[index]


@dataclass(frozen=True)
class ItemNode:
    """View of one matched item element; valid only while its document is open."""
    document: ParsedDocument
    index: int

    @property
    def tag(self) -> Optional[Tag]:
        return self.document.resolve(self.index)


def _scope(node: Optional[ItemNode], selector: str) -> Optional[Tag]:
    # Empty selector means the item element itself; otherwise first matching descendant.
    if node is None:
        return None
    tag = node.tag
    if tag is None:
        return None
    if not selector:
        return tag
    return tag.select_one(selector)


def get_attr(tag: Tag, name: str) -> Optional[str]:
    """Attribute value, or None when missing or empty."""
    value = tag.get(name)
    if isinstance(value, list):
        value = " ".join(value)
    return value or None


def get_text(tag: Optional[Tag]) -> str:
    if tag is None:
        return ""
    return tag.get_text().strip()


def extract_text(node: Optional[ItemNode], selector: str) -> str:
    return get_text(_scope(node, selector))


def extract_link(node: Optional[ItemNode], selector: str, base_url: str) -> str:
    """
    ``href`` (else ``src``) of the selected element, resolved against ``base_url``.
    Returns "" when neither attribute is present.
    """
    target = _scope(node, selector)
    if target is None:
        return ""
    href = get_attr(target, "href") or get_attr(target, "src")
    if href is None:
        return ""
    return resolve_url(href, base_url)


def extract_date(node: Optional[ItemNode], selector: str) -> Optional[datetime]:
    """Prefer the machine-readable ``datetime`` attribute over the element text."""
    target = _scope(node, selector)
    if target is None:
        return None
    raw = get_attr(target, "datetime") or get_text(target)
    if not raw:
        return None
    return parse_date(raw)


def extract_fields(node: ItemNode, config: SelectorConfig) -> ExtractedFields:
    """Pull every configured field out of one item node."""
    site_url = config.site_url
    description = extract_text(node, config.description)
    return ExtractedFields(
        title=extract_text(node, config.title),
        description=description,
        link=extract_link(node, config.link, site_url),
        creator=extract_text(node, config.creator),
        pub_date=extract_date(node, config.pub_date),
        modified_date=extract_date(node, config.modified),
        image_url=extract_link(node, config.image, site_url),
        content=description,
    )
