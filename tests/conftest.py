"""Shared test fixtures and configuration."""
from __future__ import annotations

from collections.abc import Callable

import pytest

from aeo_scanner.audit.base import AuditContext, PageType
from aeo_scanner.config.profiles import STRICT_PROFILE, ScoringProfile
from aeo_scanner.parser.document import HtmlDocument, parse_document


@pytest.fixture
def article_url() -> str:
    """Return a URL classified as an article."""
    return "https://example.com/blog/what-is-aeo"


@pytest.fixture
def article_html() -> str:
    """Return an article page that earns full marks on every check."""
    return """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>What is AEO? A Guide to Answer Engine Optimization</title>
    <link rel="canonical" href="https://example.com/blog/what-is-aeo">
    <meta name="robots" content="index, follow">
    <script type="application/ld+json">
        {"@context": "https://schema.org", "@type": "BlogPosting", "headline": "What is AEO?"}
    </script>
    <script type="application/ld+json">
        {"@context": "https://schema.org", "@type": "FAQPage", "mainEntity": []}
    </script>
</head>
<body>
    <h1>What is AEO?</h1>
    <p>AEO is a practice of structuring content so AI answer engines can quote it.</p>

    <h2>Why AEO matters</h2>
    <p>Answer engines summarize instead of listing links.</p>
    <ul>
        <li>Direct answers</li>
        <li>Citations</li>
    </ul>

    <h2>How it works</h2>
    <h3>Definitions</h3>
    <h3>Structure</h3>
    <ol>
        <li>Ask the question</li>
        <li>Answer it in one paragraph</li>
    </ol>

    <h2>Common mistakes</h2>
    <h2>Further reading</h2>

    <a href="/blog/seo-basics">SEO basics</a>
    <a href="/blog/geo">GEO</a>
    <a href="https://example.com/about">About us</a>
    <a href="https://other.example.org/">Elsewhere</a>
</body>
</html>"""


@pytest.fixture
def minimal_html() -> str:
    """Return minimal HTML for edge case testing."""
    return """<!DOCTYPE html>
<html>
<head><title>Minimal</title></head>
<body><p>Content</p></body>
</html>"""


@pytest.fixture
def make_context() -> Callable[..., AuditContext]:
    """Return a factory for AuditContext objects with sensible defaults."""

    def _make(
        page_type: PageType = PageType.CONTENT,
        url: str = "https://example.com/page",
        status_code: int = 200,
        headers: dict[str, str | None] | None = None,
        final_url: str | None = None,
        profile: ScoringProfile = STRICT_PROFILE,
    ) -> AuditContext:
        return AuditContext(
            url=url,
            final_url=final_url or url,
            status_code=status_code,
            headers=headers or {},
            page_type=page_type,
            profile=profile,
        )

    return _make


@pytest.fixture
def doc() -> Callable[[str], HtmlDocument]:
    """Return the document parser, for terse test bodies."""
    return parse_document
