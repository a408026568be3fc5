"""Thin document tree over BeautifulSoup used by the listing parser."""

import logging

from bs4 import BeautifulSoup, Tag

from cartelera.scrapers.errors import ListingParseError

logger = logging.getLogger(__name__)


class HtmlNode:
    """
    A node of a parsed listing page.

    Selector patterns are plain CSS strings so the locator and extractor can
    keep them as configuration data. Results always come back in document
    order.
    """

    __slots__ = ("_tag",)

    def __init__(self, tag: Tag) -> None:
        self._tag = tag

    def __repr__(self) -> str:
        return f"HtmlNode(<{self.tag_name}>)"

    @property
    def tag_name(self) -> str:
        """Lower-case tag name, e.g. ``"a"`` or ``"span"``."""
        return (self._tag.name or "").lower()

    @property
    def identity(self) -> int:
        """Identity of the underlying node (two equal-looking cards differ)."""
        return id(self._tag)

    def select_all(self, pattern: str) -> list["HtmlNode"]:
        return [HtmlNode(tag) for tag in self._tag.select(pattern)]

    def first_match(self, pattern: str) -> "HtmlNode | None":
        tag = self._tag.select_one(pattern)
        return HtmlNode(tag) if tag is not None else None

    def attribute(self, name: str, default: str = "") -> str:
        value = self._tag.get(name)
        if value is None:
            return default
        # Multi-valued attributes such as class come back as lists
        if isinstance(value, list):
            return " ".join(value)
        return str(value)

    def text(self) -> str:
        """Full text content of the node, whitespace and newlines preserved."""
        return self._tag.get_text()


def parse_document(markup: str) -> HtmlNode:
    """
    Parse raw listing markup into a document tree.

    Raises:
        ListingParseError: If the markup is not text or the parser rejects it
    """
    if not isinstance(markup, str):
        raise ListingParseError("Failed to parse HTML: markup is not text")

    try:
        soup = BeautifulSoup(markup, "html.parser")
    except Exception as e:
        raise ListingParseError(f"Failed to parse HTML: {e}") from e

    logger.debug(f"Parsed document of {len(markup)} characters")
    return HtmlNode(soup)
