"""Page type classification from URL and title text."""
from __future__ import annotations

import logging
from urllib.parse import urlparse

from aeo_scanner.audit.base import PageType
from aeo_scanner.parser.document import HtmlDocument

logger = logging.getLogger(__name__)

HOMEPAGE_PATHS = frozenset({"/", "/index.html", "/home"})
ARTICLE_URL_MARKERS = ("/blog/", "/article/", "/post/", "/news/")
RECIPE_URL_MARKERS = ("/recipe",)
PRODUCT_URL_MARKERS = ("/product", "/shop/")
FAQ_URL_MARKERS = ("/faq",)

_PRODUCT_MICRODATA = '[itemtype*="schema.org/Product" i]'


def _title_text(document: HtmlDocument) -> str:
    """Lower-cased text of the <title> and the first H1."""
    parts = []
    for selector in ("title", "h1"):
        element = document.select_one(selector)
        if element is not None:
            parts.append(element.text)
    return " ".join(parts).lower()


def _has_marker(url: str, markers: tuple[str, ...]) -> bool:
    return any(marker in url for marker in markers)


def classify_page(document: HtmlDocument, url: str) -> PageType:
    """Assign exactly one page type; the first matching rule wins.

    Rules, in priority order: homepage path, article URL, recipe URL or
    title, product URL or Product microdata, FAQ URL or title, otherwise
    generic content. The URL is assumed to be well formed.
    """
    url_lower = url.lower()
    path = urlparse(url).path or "/"
    text = _title_text(document)

    if path in HOMEPAGE_PATHS:
        page_type = PageType.HOMEPAGE
    elif _has_marker(url_lower, ARTICLE_URL_MARKERS):
        page_type = PageType.ARTICLE
    elif _has_marker(url_lower, RECIPE_URL_MARKERS) or "recipe" in text:
        page_type = PageType.RECIPE
    elif _has_marker(url_lower, PRODUCT_URL_MARKERS) or document.select_one(_PRODUCT_MICRODATA) is not None:
        page_type = PageType.PRODUCT
    elif _has_marker(url_lower, FAQ_URL_MARKERS) or "faq" in text:
        page_type = PageType.FAQ
    else:
        page_type = PageType.CONTENT

    logger.debug("Classified %s as %s", url, page_type.value)
    return page_type
