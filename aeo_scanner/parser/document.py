"""Read-only HTML document wrapper used by the rule checks.

The checks only ever need a handful of operations on the parsed page, so the
BeautifulSoup tree is hidden behind ``HtmlDocument`` and ``Element``. Nothing
outside this module touches bs4 objects directly.
"""
from __future__ import annotations

from bs4 import BeautifulSoup
from bs4.element import Tag


class Element:
    """A single element of a parsed document."""

    __slots__ = ("_tag",)

    def __init__(self, tag: Tag):
        self._tag = tag

    @property
    def tag_name(self) -> str:
        """Lower-case tag name, e.g. ``"p"`` or ``"h1"``."""
        return self._tag.name.lower()

    @property
    def text(self) -> str:
        """Trimmed text content of the element and all its descendants."""
        text = self._tag.get_text()
        if not text and self._tag.string is not None:
            # <script> bodies are not "text" to get_text() on some bs4 versions
            text = str(self._tag.string)
        return text.strip()

    def get(self, attribute: str) -> str | None:
        """Return an attribute value, or None when the attribute is absent.

        Multi-valued attributes such as ``rel`` or ``class`` are joined with
        single spaces, the way they appear in the markup.
        """
        value = self._tag.get(attribute)
        if value is None:
            return None
        if isinstance(value, list):
            return " ".join(value)
        return value

    @property
    def next_element_sibling(self) -> Element | None:
        """Next sibling that is an element (text nodes are skipped)."""
        sibling = self._tag.find_next_sibling()
        return Element(sibling) if sibling is not None else None

    def select(self, selector: str) -> list[Element]:
        return [Element(tag) for tag in self._tag.select(selector)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        return self._tag is other._tag

    def __hash__(self) -> int:
        return id(self._tag)

    def __repr__(self) -> str:
        return f"<Element {self.tag_name}>"


class HtmlDocument:
    """Parsed HTML page exposing CSS-selector queries."""

    def __init__(self, soup: BeautifulSoup):
        self._soup = soup

    def select_one(self, selector: str) -> Element | None:
        tag = self._soup.select_one(selector)
        return Element(tag) if tag is not None else None

    def select(self, selector: str) -> list[Element]:
        return [Element(tag) for tag in self._soup.select(selector)]

    def count(self, selector: str) -> int:
        return len(self._soup.select(selector))


def parse_document(html: str) -> HtmlDocument:
    """Parse raw HTML into an ``HtmlDocument``.

    Raises:
        ValueError: If ``html`` is not a string
    """
    if not isinstance(html, str):
        raise ValueError(f"HTML must be a string, got {type(html).__name__}")
    return HtmlDocument(BeautifulSoup(html, "lxml"))
