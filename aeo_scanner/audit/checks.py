"""AEO rule check implementations."""
from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from urllib.parse import urljoin, urlparse

from aeo_scanner.audit.base import (
    AuditContext,
    BaseCheck,
    CheckResult,
    Findings,
    PageType,
)
from aeo_scanner.audit.registry import CheckRegistry
from aeo_scanner.parser.document import Element, HtmlDocument

logger = logging.getLogger(__name__)

# Plain substrings of the lower-cased text
_QUESTION_CUES = ("what", "how", "why", "?")
_EXPLANATORY_PHRASES = (" is a ", " are ", " refers to ", " means ")


def _truncate(text: str, limit: int) -> str:
    return text if len(text) <= limit else text[: limit - 3] + "..."


class AnswerExtractionCheck(BaseCheck):
    """Is the opening of the page quotable as a short, direct answer?"""

    @property
    def check_id(self) -> str:
        return "aeo.answer_extraction"

    @property
    def title(self) -> str:
        return "Answer Extraction"

    def run(self, document: HtmlDocument, context: AuditContext) -> CheckResult:
        cfg = context.profile.answer_extraction
        findings = Findings()

        h1 = document.select_one("h1")
        if h1 is not None:
            heading = h1.text
            findings.award(cfg.h1_points, f'H1 found: "{_truncate(heading, 60)}"')
            if any(cue in heading.lower() for cue in _QUESTION_CUES):
                findings.award(cfg.question_points, "H1 is formatted as a question")
        else:
            findings.recommend("Add a clear H1 heading, ideally formatted as a question")

        definition = find_definition_paragraph(document, h1) if h1 is not None else None
        text = definition.text if definition is not None else ""
        length = len(text)

        if length == 0:
            findings.recommend(
                f"Add a concise definition paragraph directly after the H1 "
                f"(under {cfg.definition_short_length} characters)"
            )
        elif length <= cfg.definition_short_length:
            findings.award(cfg.definition_full_points, f"Concise definition found ({length} chars)")
        elif length <= cfg.definition_long_length:
            findings.award(
                cfg.definition_partial_points,
                f"Definition paragraph is {length} chars (ideal: {cfg.definition_short_length} or fewer)",
            )
        else:
            findings.award(cfg.definition_minimal_points, f"Definition paragraph is too long ({length} chars)")
            findings.recommend(
                f"Shorten the definition paragraph to under {cfg.definition_short_length} "
                "characters so it can be quoted as a direct answer"
            )

        if length and any(phrase in text.lower() for phrase in _EXPLANATORY_PHRASES):
            findings.award(cfg.explanatory_points, 'Definition uses an explanatory pattern ("is a", "refers to")')

        return CheckResult(
            check_id=self.check_id,
            title=self.title,
            points=findings.points,
            max_points=cfg.max_points,
            passed=findings.points >= cfg.pass_threshold,
            details=findings.details,
            recommendations=findings.recommendations,
        )


def find_definition_paragraph(document: HtmlDocument, h1: Element) -> Element | None:
    """Locate the paragraph that should define the page topic.

    Walks forward through the H1's element siblings and returns the first
    ``<p>`` with non-empty text. Falls back to the first ``<p>`` anywhere in
    the document when the walk finds nothing. Pages without an H1 have no
    definition paragraph.
    """
    sibling = h1.next_element_sibling
    while sibling is not None:
        if sibling.tag_name == "p" and sibling.text:
            return sibling
        sibling = sibling.next_element_sibling
    return document.select_one("p")


class ContentStructureCheck(BaseCheck):
    """Does sectioning help machines split the page into answers?"""

    @property
    def check_id(self) -> str:
        return "aeo.content_structure"

    @property
    def title(self) -> str:
        return "Content Structure"

    def run(self, document: HtmlDocument, context: AuditContext) -> CheckResult:
        cfg = context.profile.content_structure
        findings = Findings()

        h2_count = document.count("h2")
        if h2_count >= cfg.h2_high_count:
            findings.award(cfg.h2_high_points, f"Good H2 structure ({h2_count} sections)")
        elif h2_count >= cfg.h2_medium_count:
            findings.award(cfg.h2_medium_points, f"Some H2 structure ({h2_count} sections)")
            findings.recommend("Add more H2 sections to improve content structure")
        elif h2_count >= 1:
            findings.award(cfg.h2_low_points, "Only one H2 section")
            findings.recommend(
                f"Break content into at least {cfg.h2_high_count} H2 sections for better AI comprehension"
            )
        else:
            findings.recommend(
                f"Break content into at least {cfg.h2_high_count} H2 sections for better AI comprehension"
            )

        h3_count = document.count("h3")
        if h3_count >= cfg.h3_bonus_count:
            findings.award(cfg.h3_bonus_points, f"H3 subsections present ({h3_count})")

        list_count = document.count("ul, ol")
        if list_count >= cfg.list_high_count:
            findings.award(cfg.list_high_points, f"Lists present ({list_count})")
        elif list_count == 1:
            findings.award(cfg.list_medium_points, "One list present")
        else:
            findings.recommend("Add bulleted or numbered lists to structure information for AI parsing")

        return CheckResult(
            check_id=self.check_id,
            title=self.title,
            points=findings.points,
            max_points=cfg.max_points,
            passed=findings.points >= cfg.pass_threshold,
            details=findings.details,
            recommendations=findings.recommendations,
        )


def parse_json_ld(raw: str) -> object | None:
    """Parse one JSON-LD block; None means the block is skipped."""
    try:
        return json.loads(raw)
    except ValueError:
        return None


def _declared_types(data: object) -> Iterator[str]:
    """Yield every ``@type`` declared at the top level or inside ``@graph``."""
    if isinstance(data, list):
        for item in data:
            yield from _declared_types(item)
        return
    if not isinstance(data, dict):
        return

    declared = data.get("@type")
    if isinstance(declared, str):
        declared = [declared]
    if isinstance(declared, list):
        for value in declared:
            if isinstance(value, str) and value.strip():
                # "https://schema.org/Recipe" -> "Recipe"
                yield value.strip().rstrip("/").rsplit("/", 1)[-1]

    graph = data.get("@graph")
    if isinstance(graph, list):
        yield from _declared_types(graph)


def collect_schema_types(document: HtmlDocument) -> tuple[set[str], int]:
    """Collect declared schema types from all JSON-LD blocks.

    Returns:
        (types found, number of blocks skipped because they did not parse)
    """
    types: set[str] = set()
    skipped = 0
    for script in document.select('script[type="application/ld+json"]'):
        data = parse_json_ld(script.text)
        if data is None:
            skipped += 1
            logger.debug("Skipping unparseable JSON-LD block")
            continue
        types.update(_declared_types(data))
    return types, skipped


def _is_article_type(schema_type: str) -> bool:
    return "Article" in schema_type or schema_type == "BlogPosting"


def _is_faq_type(schema_type: str) -> bool:
    return "faq" in schema_type.lower()


def _is_site_identity_type(schema_type: str) -> bool:
    return schema_type.lower() in {"organization", "website"}


class SchemaMarkupCheck(BaseCheck):
    """Is there structured data suited to this kind of page?"""

    @property
    def check_id(self) -> str:
        return "aeo.schema_markup"

    @property
    def title(self) -> str:
        return "Schema Markup"

    def run(self, document: HtmlDocument, context: AuditContext) -> CheckResult:
        cfg = context.profile.schema_markup
        findings = Findings()
        types, skipped = collect_schema_types(document)

        if types:
            findings.note(f"Schemas found: {', '.join(sorted(types))}")
        else:
            findings.note("No JSON-LD structured data found")
        if skipped:
            findings.note(f"Skipped {skipped} unparseable JSON-LD block(s)")

        page_type = context.page_type
        is_optional = page_type is PageType.HOMEPAGE

        if page_type is PageType.HOMEPAGE:
            if any(_is_site_identity_type(t) for t in types):
                findings.award(cfg.homepage_match_points, "Organization/WebSite schema present")
            else:
                findings.award(
                    cfg.homepage_default_points,
                    "Schema is optional on homepages; Organization or WebSite markup would still help",
                )
                findings.recommend("Consider adding Organization or WebSite schema to the homepage")

        elif page_type is PageType.ARTICLE:
            if any(_is_article_type(t) for t in types):
                findings.award(cfg.article_match_points, "Article schema present")
            else:
                findings.award(cfg.article_partial_points)
                findings.recommend("Add Article or BlogPosting schema markup using JSON-LD")
            if any(_is_faq_type(t) for t in types):
                findings.award(cfg.article_faq_points, "FAQ schema present")
            else:
                findings.award(cfg.article_faq_partial_points)

        elif page_type is PageType.RECIPE:
            if "Recipe" in types:
                findings.award(cfg.recipe_match_points, "Recipe schema present")
            else:
                findings.recommend("Add Recipe schema markup (ingredients, steps, timings) using JSON-LD")

        elif page_type is PageType.PRODUCT:
            if "Product" in types:
                findings.award(cfg.product_match_points, "Product schema present")
            else:
                findings.award(cfg.product_partial_points)
                findings.recommend("Add Product schema markup with offers and reviews using JSON-LD")

        else:
            if types:
                findings.award(cfg.generic_present_points)
            else:
                findings.award(cfg.generic_missing_points)
                if page_type is PageType.FAQ:
                    findings.recommend("Add FAQPage structured data using JSON-LD")
                else:
                    findings.recommend("Add structured data (JSON-LD) describing the page content")

        # Any structured data is worth more than none
        if types and findings.points < cfg.top_up_floor:
            bonus = min(cfg.top_up_points, cfg.max_points - findings.points)
            findings.award(bonus, "Partial credit for existing structured data")

        return CheckResult(
            check_id=self.check_id,
            title=self.title,
            points=findings.points,
            max_points=cfg.max_points,
            passed=findings.points >= cfg.pass_threshold,
            details=findings.details,
            recommendations=findings.recommendations,
            is_optional=is_optional,
        )


def link_hostname(href: str, base_url: str) -> str | None:
    """Hostname an href resolves to against ``base_url``.

    Returns None when the href is malformed or resolves to a URL without a
    hostname (``mailto:``, ``javascript:``); such links are skipped.
    """
    try:
        return urlparse(urljoin(base_url, href)).hostname
    except ValueError:
        return None


class InternalLinkingCheck(BaseCheck):
    """Does the page link to related pages on the same site?"""

    @property
    def check_id(self) -> str:
        return "aeo.internal_linking"

    @property
    def title(self) -> str:
        return "Internal Linking"

    def run(self, document: HtmlDocument, context: AuditContext) -> CheckResult:
        cfg = context.profile.internal_linking
        findings = Findings()

        page_host = urlparse(context.url).hostname
        internal_count = 0
        skipped = 0
        for link in document.select("a[href]"):
            href = link.get("href")
            if not href:
                continue
            host = link_hostname(href, context.url)
            if host is None:
                skipped += 1
                continue
            if host == page_host:
                internal_count += 1

        if skipped:
            logger.debug("Skipped %d links without a resolvable hostname", skipped)

        if internal_count >= cfg.full_count:
            findings.award(cfg.full_points, f"Good internal linking ({internal_count} links)")
        elif internal_count >= 1:
            findings.award(cfg.partial_points, f"Few internal links ({internal_count})")
            findings.recommend(f"Add at least {cfg.full_count} internal links to related content")
        else:
            findings.award(cfg.none_points, "No internal links found")
            findings.recommend(f"Add at least {cfg.full_count} internal links to related content")

        return CheckResult(
            check_id=self.check_id,
            title=self.title,
            points=findings.points,
            max_points=cfg.max_points,
            passed=findings.points >= cfg.pass_threshold,
            details=findings.details,
            recommendations=findings.recommendations,
        )


def _meta_robots_content(document: HtmlDocument) -> str:
    for meta in document.select("meta[name]"):
        if (meta.get("name") or "").strip().lower() == "robots":
            return meta.get("content") or ""
    return ""


class CrawlabilityCheck(BaseCheck):
    """Can automated fetchers reach and index the page?"""

    @property
    def check_id(self) -> str:
        return "aeo.crawlability"

    @property
    def title(self) -> str:
        return "Crawlability"

    def run(self, document: HtmlDocument, context: AuditContext) -> CheckResult:
        cfg = context.profile.crawlability
        findings = Findings()

        if context.status_code == 200:
            findings.award(cfg.status_points, "HTTP status 200")
        else:
            findings.note(f"HTTP status {context.status_code}")
            findings.recommend("Fix the HTTP status code so the page returns 200")

        if context.final_url and context.final_url != context.url:
            findings.note(f"Redirected to {context.final_url}")

        meta_noindex = "noindex" in _meta_robots_content(document).lower()
        header_noindex = "noindex" in (context.header("x-robots-tag") or "").lower()
        if meta_noindex or header_noindex:
            source = "robots meta tag" if meta_noindex else "X-Robots-Tag header"
            findings.note(f"noindex directive found in {source}")
            findings.recommend("Remove the noindex directive so answer engines can index the page")
        else:
            findings.award(cfg.indexable_points, "No noindex directive")

        if document.select_one('link[rel~="canonical"]') is not None:
            findings.award(cfg.canonical_points, "Canonical tag present")
        else:
            findings.recommend("Add a canonical tag")

        title = document.select_one("title")
        if title is not None and title.text:
            findings.award(cfg.title_points, f'Title: "{_truncate(title.text, 60)}"')
        else:
            findings.recommend("Add a descriptive title tag")

        return CheckResult(
            check_id=self.check_id,
            title=self.title,
            points=findings.points,
            max_points=cfg.max_points,
            passed=findings.points >= cfg.pass_threshold,
            details=findings.details,
            recommendations=findings.recommendations,
        )


def register_default_checks(registry: CheckRegistry) -> None:
    """Register the five AEO checks, in scoring order."""
    registry.register(AnswerExtractionCheck())
    registry.register(ContentStructureCheck())
    registry.register(SchemaMarkupCheck())
    registry.register(InternalLinkingCheck())
    registry.register(CrawlabilityCheck())
