"""Single-page AEO analysis pipeline."""
from __future__ import annotations

import logging
from collections.abc import Mapping

from aeo_scanner.audit.base import AuditContext
from aeo_scanner.audit.checks import register_default_checks
from aeo_scanner.audit.registry import CheckRegistry
from aeo_scanner.classifier.page_classifier import classify_page
from aeo_scanner.config.profiles import ScoringProfile
from aeo_scanner.config.settings import settings
from aeo_scanner.engine.aggregator import (
    AnalysisResult,
    aggregate_score,
    collect_recommendations,
)
from aeo_scanner.parser.document import parse_document

logger = logging.getLogger(__name__)


def build_registry() -> CheckRegistry:
    """Registry holding the five AEO checks in scoring order."""
    registry = CheckRegistry()
    register_default_checks(registry)
    return registry


def analyze_page(
    html: str,
    url: str,
    status_code: int = 200,
    headers: Mapping[str, str | None] | None = None,
    final_url: str | None = None,
    *,
    profile: ScoringProfile | None = None,
) -> AnalysisResult:
    """Score a fetched page for answer-engine extraction.

    Args:
        html: Page HTML as received
        url: Absolute http(s) URL that was requested
        status_code: HTTP status of the response; any value is scored, not raised
        headers: Response headers of interest (``x-robots-tag``)
        final_url: URL after redirects; defaults to ``url``
        profile: Scoring thresholds; defaults to the configured profile

    Returns:
        AnalysisResult with score, per-check breakdown and recommendations

    Raises:
        ValueError: If html is not a string or url is empty
    """
    if not url:
        raise ValueError("URL is required")
    document = parse_document(html)
    profile = profile or settings.scoring.profile

    context = AuditContext(
        url=url,
        final_url=final_url or url,
        status_code=status_code,
        headers=dict(headers or {}),
        page_type=classify_page(document, url),
        profile=profile,
    )

    checks = build_registry().run_all(document, context)
    score = aggregate_score(checks)
    logger.debug("Scored %s: %d/100 (%s profile)", url, score, profile.name)

    return AnalysisResult(
        score=score,
        checks=checks,
        recommendations=collect_recommendations(checks),
        page_type=context.page_type,
        profile=profile.name,
    )
