"""Score aggregation and recommendation collection."""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from aeo_scanner.audit.base import CheckResult, PageType


@dataclass
class AnalysisResult:
    """Complete result of analyzing one page."""
    score: int
    checks: list[CheckResult]
    recommendations: list[str]
    page_type: PageType
    profile: str = field(default="strict", compare=False)

    def to_dict(self) -> dict:
        """Convert to the flat structure returned by the API."""
        return {
            "score": self.score,
            "checks": [check.to_dict() for check in self.checks],
            "recommendations": list(self.recommendations),
            "pageType": self.page_type.value,
        }


def aggregate_score(checks: Sequence[CheckResult]) -> int:
    """Normalize earned points to 0-100, rounding halves up."""
    earned = sum(check.points for check in checks)
    possible = sum(check.max_points for check in checks)
    if possible <= 0:
        return 0
    # Integer arithmetic keeps x.5 rounding exact
    return (200 * earned + possible) // (2 * possible)


def collect_recommendations(checks: Sequence[CheckResult]) -> list[str]:
    """Recommendations of failing, non-optional checks, in check order."""
    recommendations: list[str] = []
    for check in checks:
        if check.passed or check.is_optional:
            continue
        recommendations.extend(check.recommendations)
    return recommendations
